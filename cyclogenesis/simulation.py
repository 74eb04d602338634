"""
Baroclinic Interaction of a Surface and an Upper-Level Anomaly.

A scenario places one anomaly at the surface (1013 hPa, sea level) and one
aloft (500 hPa, 5000 m) at the same latitude. Each evolves independently;
their vertical velocities and vorticities are summed every hour and scaled
by an interaction factor that grows with time inside a baroclinic zone.
"""

from dataclasses import replace
from typing import Final, List, Optional

import numpy as np

from common.constants import PhysicalConstants
from common.logging_config import get_logger
from common.types import DevelopmentResult, Position
from cyclogenesis.anomaly import ThermalAnomaly

logger = get_logger(__name__)

SURFACE_ALTITUDE_M: Final[float] = 0.0
SURFACE_PRESSURE_HPA: Final[float] = 1013.0
UPPER_ALTITUDE_M: Final[float] = 5000.0
UPPER_PRESSURE_HPA: Final[float] = 500.0

INTERACTION_BASE: Final[float] = 1.5
INTERACTION_GROWTH_HOURS: Final[float] = 24.0


class BaroclinicCyclogenesis:
    """Two thermal anomalies interacting across a baroclinic zone.

    Parameters
    ----------
    surface_anomaly : ThermalAnomaly
        Low-level anomaly.
    altitude_anomaly : ThermalAnomaly
        Upper-level anomaly.
    baroclinic_zone : bool
        Whether the interaction factor grows with time.

    Notes
    -----
    Use `create` to build a scenario from temperatures and a latitude.
    """

    def __init__(
        self,
        surface_anomaly: ThermalAnomaly,
        altitude_anomaly: ThermalAnomaly,
        baroclinic_zone: bool = True
    ):
        if surface_anomaly is altitude_anomaly:
            raise ValueError("surface and altitude anomalies must be distinct objects")
        self.surface_anomaly = surface_anomaly
        self.altitude_anomaly = altitude_anomaly
        self.baroclinic_zone = baroclinic_zone

    @classmethod
    def create(
        cls,
        surface_temp: float,
        altitude_temp: float,
        latitude: float,
        constants: Optional[PhysicalConstants] = None,
        baroclinic_zone: bool = True
    ) -> 'BaroclinicCyclogenesis':
        """Build a scenario at one latitude.

        Parameters
        ----------
        surface_temp : float
            Surface temperature perturbation in K.
        altitude_temp : float
            Upper-level temperature perturbation in K.
        latitude : float
            Latitude in degrees.
        constants : PhysicalConstants, optional
            Defaults to `PhysicalConstants.default()`.
        baroclinic_zone : bool
            Defaults to True.

        Returns
        -------
        BaroclinicCyclogenesis
            A ready-to-run scenario.

        Raises
        ------
        MeteoError
            The first validation failure, checked in the order surface
            position, altitude position, surface anomaly, altitude anomaly.
        """
        if constants is None:
            constants = PhysicalConstants.default()

        surface_position = Position.create(latitude, SURFACE_ALTITUDE_M, SURFACE_PRESSURE_HPA)
        altitude_position = Position.create(latitude, UPPER_ALTITUDE_M, UPPER_PRESSURE_HPA)

        surface_anomaly = ThermalAnomaly(surface_temp, surface_position, replace(constants))
        altitude_anomaly = ThermalAnomaly(altitude_temp, altitude_position, replace(constants))

        logger.debug(
            f"Scenario at {latitude}°: surface dT={surface_temp} K, "
            f"upper dT={altitude_temp} K, baroclinic_zone={baroclinic_zone}"
        )

        return cls(surface_anomaly, altitude_anomaly, baroclinic_zone=baroclinic_zone)

    @property
    def latitude(self) -> float:
        return self.surface_anomaly.position.latitude

    def interaction_factor(self, hour: int) -> float:
        """Scaling applied to the summed anomaly signals at `hour`.

        Returns 1.5 × (1 + hour / 24) inside a baroclinic zone and 1.0 outside.
        """
        if not self.baroclinic_zone:
            return 1.0
        return INTERACTION_BASE * (1.0 + hour / INTERACTION_GROWTH_HOURS)

    def step(self, hour: int) -> DevelopmentResult:
        """Combined result of both anomalies at `hour`."""
        surface_result = self.surface_anomaly.develop(hour)
        altitude_result = self.altitude_anomaly.develop(hour)

        factor = self.interaction_factor(hour)

        return DevelopmentResult(
            vertical_velocity=(
                surface_result.vertical_velocity + altitude_result.vertical_velocity
            ) * factor,
            relative_vorticity=(
                surface_result.relative_vorticity + altitude_result.relative_vorticity
            ) * factor,
            hour=surface_result.hour
        )

    def simulate_interaction(self, time_steps: int) -> List[DevelopmentResult]:
        """Run the scenario for `time_steps` hours.

        Parameters
        ----------
        time_steps : int
            Number of hourly steps. Zero yields an empty list.

        Returns
        -------
        List[DevelopmentResult]
            One combined result per hour, for hours 0 .. time_steps - 1.
        """
        if (
            isinstance(time_steps, bool)
            or not isinstance(time_steps, (int, np.integer))
            or time_steps < 0
        ):
            raise ValueError(f"time_steps must be a non-negative integer, got {time_steps!r}")

        results = [self.step(hour) for hour in range(int(time_steps))]

        logger.debug(f"Simulated {len(results)} steps at {self.latitude}°")
        return results
