"""
Logging Configuration and Audit Trail Infrastructure.

This module provides logging for the cyclogenesis model and a small audit
trail so that a latitude sweep can be reproduced later.

Audit Contents
--------------
Every run records:
- Configuration hash
- One record per scenario (latitude, outcome, number of steps)
- Consistency check outcomes
"""

import hashlib
import json
import logging
import sys
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

_default_level = logging.INFO
AUDIT_FILE_LOGGER = "audit.file"


# Configure root logger for the package
def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Get a logger configured for the cyclogenesis model.

    Parameters
    ----------
    name : str
        Logger name (typically __name__).
    level : int, optional
        Logging level. Defaults to the level set by `set_log_level`
        (INFO unless changed).

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            '%(asctime)s | %(name)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(_default_level if level is None else level)
    return logger


def get_log_level() -> int:
    """Level given to new loggers by `get_logger`."""
    return _default_level


def set_log_level(level: int) -> None:
    """Apply a level to every logger created through `get_logger`.

    Loggers created afterwards start at this level as well.
    """
    global _default_level
    _default_level = level
    for logger in logging.root.manager.loggerDict.values():
        if (
            isinstance(logger, logging.Logger)
            and logger.handlers
            and not logger.name.startswith(AUDIT_FILE_LOGGER)
        ):
            logger.setLevel(level)


@dataclass
class ScenarioRecord:
    """Outcome of one latitude scenario.

    Attributes
    ----------
    timestamp : datetime
        When the scenario finished.
    latitude : float
        Latitude of the scenario in degrees.
    succeeded : bool
        Whether construction and simulation completed.
    time_steps : int
        Number of results produced (0 on failure).
    error : str, optional
        Error message when the scenario failed.
    """
    timestamp: datetime
    latitude: float
    succeeded: bool
    time_steps: int
    error: Optional[str] = None


@dataclass
class CheckRecord:
    """Outcome of one consistency check."""
    timestamp: datetime
    check_name: str
    passed: bool
    message: str
    context: Dict[str, Any] = field(default_factory=dict)


@dataclass
class RunMetadata:
    """Metadata for a simulation run."""
    run_id: str
    start_time: datetime
    end_time: Optional[datetime] = None
    config_hash: str = ""
    scenarios: List[ScenarioRecord] = field(default_factory=list)
    checks: List[CheckRecord] = field(default_factory=list)

    def compute_config_hash(self, config: Dict[str, Any]) -> str:
        """Compute a deterministic hash of the configuration.

        Parameters
        ----------
        config : dict
            The configuration dictionary.

        Returns
        -------
        str
            Truncated SHA-256 hash of the configuration.
        """
        config_str = json.dumps(config, sort_keys=True, default=str)
        self.config_hash = hashlib.sha256(config_str.encode()).hexdigest()[:16]
        return self.config_hash


class AuditLogger:
    """Central audit facility for simulation runs.

    Records are attached to the `RunMetadata` yielded by `run_context`, so
    runs that overlap in time never see each other's records.

    Thread Safety
    -------------
    The run registry is guarded by a lock, so sweeps may be run from
    several threads.

    Examples
    --------
    >>> audit = AuditLogger()
    >>> with audit.run_context("sweep_001") as run:
    ...     audit.log_scenario(run, latitude=45.0, succeeded=True, time_steps=24)
    >>> summary = audit.get_run_summary("sweep_001")
    """

    _instance: Optional['AuditLogger'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'AuditLogger':
        """Singleton pattern for global audit logger."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        """Initialize the audit logger."""
        if self._initialized:
            return

        self._runs: Dict[str, RunMetadata] = {}
        self._file_loggers: Dict[str, logging.Logger] = {}
        self._records_lock = threading.Lock()
        self._logger = get_logger("audit")
        self._initialized = True

    def _open_run_log(self, run_id: str, output_dir: Path) -> logging.Logger:
        """Attach a log file for one run.

        Parameters
        ----------
        run_id : str
            The run identifier, used in the file name.
        output_dir : Path
            Directory to write the audit log.
        """
        output_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(
            output_dir / f"audit_{run_id}_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
        )
        file_handler.setFormatter(
            logging.Formatter('%(asctime)s | %(levelname)s | %(message)s')
        )
        file_logger = logging.getLogger(f"{AUDIT_FILE_LOGGER}.{run_id}")
        file_logger.addHandler(file_handler)
        file_logger.setLevel(logging.DEBUG)
        file_logger.propagate = False
        return file_logger

    @staticmethod
    def _close_run_log(file_logger: logging.Logger) -> None:
        for handler in list(file_logger.handlers):
            file_logger.removeHandler(handler)
            handler.close()

    def _emit(self, run: Optional[RunMetadata], level: int, message: str) -> None:
        self._logger.log(level, message)
        if run is not None:
            file_logger = self._file_loggers.get(run.run_id)
            if file_logger is not None:
                file_logger.log(level, message)

    @contextmanager
    def run_context(
        self,
        run_id: str,
        config: Optional[Dict[str, Any]] = None,
        output_dir: Optional[Path] = None
    ):
        """Context manager for a simulation run.

        Parameters
        ----------
        run_id : str
            Unique identifier for this run.
        config : dict, optional
            Configuration to compute hash from.
        output_dir : Path, optional
            Directory for this run's log file. The file is closed when
            the run ends.

        Yields
        ------
        RunMetadata
            The metadata object for this run; pass it to `log_scenario`
            and `log_check`.
        """
        metadata = RunMetadata(
            run_id=run_id,
            start_time=datetime.now()
        )

        if config:
            metadata.compute_config_hash(config)

        with self._records_lock:
            if run_id in self._runs and self._runs[run_id].end_time is None:
                raise ValueError(f"Run {run_id} is already in progress")
            self._runs[run_id] = metadata
            if output_dir is not None:
                self._file_loggers[run_id] = self._open_run_log(run_id, Path(output_dir))

        self._emit(metadata, logging.INFO, f"Starting run {run_id} with config hash {metadata.config_hash}")

        try:
            yield metadata
        finally:
            metadata.end_time = datetime.now()
            failed = sum(1 for s in metadata.scenarios if not s.succeeded)
            self._emit(
                metadata,
                logging.INFO,
                f"Completed run {run_id}. "
                f"Scenarios: {len(metadata.scenarios)} ({failed} failed), "
                f"Checks: {len(metadata.checks)}"
            )
            with self._records_lock:
                file_logger = self._file_loggers.pop(run_id, None)
            if file_logger is not None:
                self._close_run_log(file_logger)

    def log_scenario(
        self,
        run: RunMetadata,
        latitude: float,
        succeeded: bool,
        time_steps: int,
        error: Optional[str] = None
    ) -> None:
        """Record the outcome of a latitude scenario.

        Parameters
        ----------
        run : RunMetadata
            The run yielded by `run_context`.
        latitude : float
            Latitude in degrees.
        succeeded : bool
            Whether the scenario produced results.
        time_steps : int
            Number of results produced.
        error : str, optional
            Error message on failure.
        """
        record = ScenarioRecord(
            timestamp=datetime.now(),
            latitude=latitude,
            succeeded=succeeded,
            time_steps=time_steps,
            error=error
        )

        with self._records_lock:
            run.scenarios.append(record)

        if succeeded:
            self._emit(run, logging.DEBUG, f"SCENARIO | lat={latitude} | OK | steps={time_steps}")
        else:
            self._emit(run, logging.ERROR, f"SCENARIO | lat={latitude} | FAILED | {error}")

    def log_check(
        self,
        run: RunMetadata,
        check_name: str,
        passed: bool,
        message: str,
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        """Record a consistency check outcome.

        Parameters
        ----------
        run : RunMetadata
            The run yielded by `run_context`.
        check_name : str
            Which check was run.
        passed : bool
            Whether it passed.
        message : str
            Description of the result.
        context : dict, optional
            Additional context (latitude, ...).
        """
        record = CheckRecord(
            timestamp=datetime.now(),
            check_name=check_name,
            passed=passed,
            message=message,
            context=context or {}
        )

        with self._records_lock:
            run.checks.append(record)

        status = "PASS" if passed else "FAIL"
        log_msg = f"CONSISTENCY CHECK | {check_name} | {status} | {message}"

        if passed:
            self._emit(run, logging.DEBUG, log_msg)
        else:
            self._emit(run, logging.WARNING, log_msg)

    def _get_run(self, run_id: str) -> RunMetadata:
        with self._records_lock:
            if run_id not in self._runs:
                raise KeyError(f"No run found with ID {run_id}")
            return self._runs[run_id]

    def clear_run(self, run_id: str) -> None:
        """Forget a finished run.

        Raises
        ------
        KeyError
            If the run is unknown.
        ValueError
            If the run is still in progress.
        """
        with self._records_lock:
            if run_id not in self._runs:
                raise KeyError(f"No run found with ID {run_id}")
            if self._runs[run_id].end_time is None:
                raise ValueError(f"Run {run_id} is still in progress")
            del self._runs[run_id]

    def get_run_summary(self, run_id: str) -> Dict[str, Any]:
        """Get a summary of a simulation run.

        Parameters
        ----------
        run_id : str
            The run identifier.

        Returns
        -------
        dict
            Summary including scenario and check counts.
        """
        metadata = self._get_run(run_id)

        failed_checks: Dict[str, int] = {}
        for c in metadata.checks:
            if not c.passed:
                failed_checks[c.check_name] = failed_checks.get(c.check_name, 0) + 1

        return {
            "run_id": run_id,
            "config_hash": metadata.config_hash,
            "start_time": metadata.start_time.isoformat(),
            "end_time": metadata.end_time.isoformat() if metadata.end_time else None,
            "total_scenarios": len(metadata.scenarios),
            "failed_latitudes": [s.latitude for s in metadata.scenarios if not s.succeeded],
            "total_checks": len(metadata.checks),
            "failed_checks_by_name": failed_checks,
        }

    def export_run_artifacts(self, run_id: str, output_path: Path) -> None:
        """Export all audit artifacts for a run to JSON.

        Parameters
        ----------
        run_id : str
            The run identifier.
        output_path : Path
            Path to write the JSON file.
        """
        metadata = self._get_run(run_id)

        artifacts = {
            "run_id": metadata.run_id,
            "config_hash": metadata.config_hash,
            "start_time": metadata.start_time.isoformat(),
            "end_time": metadata.end_time.isoformat() if metadata.end_time else None,
            "scenarios": [
                {
                    "timestamp": s.timestamp.isoformat(),
                    "latitude": s.latitude,
                    "succeeded": s.succeeded,
                    "time_steps": s.time_steps,
                    "error": s.error
                }
                for s in metadata.scenarios
            ],
            "checks": [
                {
                    "timestamp": c.timestamp.isoformat(),
                    "check_name": c.check_name,
                    "passed": c.passed,
                    "message": c.message,
                    "context": c.context
                }
                for c in metadata.checks
            ]
        }

        with open(output_path, 'w') as f:
            json.dump(artifacts, f, indent=2)

        self._emit(metadata, logging.INFO, f"Exported audit artifacts to {output_path}")
