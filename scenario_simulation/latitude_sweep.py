"""
Latitude Sweep of Baroclinic Cyclogenesis Scenarios.

This module runs the same pair of thermal anomalies at several latitudes.
Scenarios are independent: a latitude whose inputs fail validation is
logged and skipped, and the remaining latitudes still run.
"""

import uuid
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
from datetime import datetime

from common.exceptions import ConfigError, MeteoError
from common.logging_config import AuditLogger, get_logger
from common.types import DevelopmentResult
from cyclogenesis.simulation import BaroclinicCyclogenesis
from validation.physics_tests import DevelopmentConsistencyChecker, ValidationResult

logger = get_logger(__name__)

DEFAULT_LATITUDES: Tuple[float, ...] = (30.0, 45.0, 60.0)


@dataclass
class SweepConfig:
    """Configuration for a latitude sweep.

    Attributes
    ----------
    surface_temp : float
        Surface temperature perturbation in K.
    altitude_temp : float
        Upper-level (500 hPa) temperature perturbation in K.
    latitudes : tuple of float
        Latitudes to simulate, in degrees.
    time_steps : int
        Number of hourly steps per scenario.
    baroclinic_zone : bool
        Whether the interaction factor grows with time.
    strict_checks : bool
        Raise on a failed consistency check instead of logging it.
    audit_dir : Path, optional
        Directory for audit logs and JSON artifacts.
    """
    surface_temp: float = 5.0
    altitude_temp: float = -8.0
    latitudes: Tuple[float, ...] = field(default_factory=lambda: DEFAULT_LATITUDES)
    time_steps: int = 24
    baroclinic_zone: bool = True
    strict_checks: bool = False
    audit_dir: Optional[Path] = None

    def __post_init__(self):
        self.latitudes = tuple(float(lat) for lat in self.latitudes)
        if not self.latitudes:
            raise ConfigError("latitudes must contain at least one value")
        duplicates = sorted({lat for lat in self.latitudes if self.latitudes.count(lat) > 1})
        if duplicates:
            raise ConfigError(f"latitudes must be unique, repeated: {duplicates}")
        if isinstance(self.time_steps, bool) or not isinstance(self.time_steps, int):
            raise ConfigError(f"time_steps must be an integer, got {self.time_steps!r}")
        if self.time_steps < 0:
            raise ConfigError(f"time_steps must be non-negative, got {self.time_steps}")

    def to_dict(self) -> Dict[str, Any]:
        """Serializable view used for the audit config hash."""
        config = asdict(self)
        config["latitudes"] = list(self.latitudes)
        config["audit_dir"] = str(self.audit_dir) if self.audit_dir else None
        return config


@dataclass
class SweepResult:
    """Outcome of a latitude sweep.

    Attributes
    ----------
    results : dict
        Result sequences keyed by latitude, in sweep order.
    failures : dict
        Validation errors keyed by latitude.
    checks : dict
        Consistency check outcomes keyed by latitude.
    run_id : str
        Audit run identifier.
    """
    results: Dict[float, List[DevelopmentResult]] = field(default_factory=dict)
    failures: Dict[float, MeteoError] = field(default_factory=dict)
    checks: Dict[float, List[ValidationResult]] = field(default_factory=dict)
    run_id: str = ""

    @property
    def all_succeeded(self) -> bool:
        return not self.failures


class LatitudeSweep:
    """Runner for a set of latitude scenarios.

    Parameters
    ----------
    config : SweepConfig
        Sweep configuration.
    audit : AuditLogger, optional
        Audit facility; the global instance is used by default.
    """

    def __init__(self, config: SweepConfig, audit: Optional[AuditLogger] = None):
        self.config = config
        self.audit = audit or AuditLogger()
        self.checker = DevelopmentConsistencyChecker(strict_mode=config.strict_checks)

    def run_latitude(self, latitude: float) -> List[DevelopmentResult]:
        """Build and simulate the scenario at one latitude.

        Raises
        ------
        MeteoError
            If the scenario inputs are out of range.
        """
        scenario = BaroclinicCyclogenesis.create(
            self.config.surface_temp,
            self.config.altitude_temp,
            latitude,
            baroclinic_zone=self.config.baroclinic_zone
        )
        return scenario.simulate_interaction(self.config.time_steps)

    def run(self, run_id: Optional[str] = None) -> SweepResult:
        """Run every latitude of the configuration.

        Parameters
        ----------
        run_id : str, optional
            Audit run identifier. Generated from the clock when omitted.

        Returns
        -------
        SweepResult
            Results of the latitudes that ran and errors of those that did not.
        """
        run_id = run_id or f"sweep_{datetime.now().strftime('%Y%m%d_%H%M%S')}_{uuid.uuid4().hex[:8]}"
        outcome = SweepResult(run_id=run_id)

        audit_dir = Path(self.config.audit_dir) if self.config.audit_dir is not None else None

        with self.audit.run_context(run_id, self.config.to_dict(), output_dir=audit_dir) as run:
            for latitude in self.config.latitudes:
                logger.info(f"Simulating {self.config.time_steps} h at {latitude}°")
                try:
                    results = self.run_latitude(latitude)
                except MeteoError as e:
                    logger.error(f"Scenario at {latitude}° rejected: {e}")
                    self.audit.log_scenario(run, latitude, succeeded=False, time_steps=0, error=str(e))
                    outcome.failures[latitude] = e
                    continue

                self.audit.log_scenario(run, latitude, succeeded=True, time_steps=len(results))
                checks = self.checker.check_all(results)
                for check in checks:
                    self.audit.log_check(
                        run, check.test_name, check.passed, check.message,
                        context={"latitude": latitude}
                    )
                outcome.results[latitude] = results
                outcome.checks[latitude] = checks

        if audit_dir is not None:
            self.audit.export_run_artifacts(run_id, audit_dir / f"{run_id}.json")

        return outcome
