"""
Thermal Anomaly Physics for the Baroclinic Cyclogenesis Model.

A thermal anomaly is a temperature perturbation sitting at one pressure
level. Each hourly step derives, in closed form, the thermal wind it
induces and from it a vertical velocity and a relative vorticity.

Sign Policy
-----------
All sign choices of the model are kept in the two tables below:
- `CYCLONIC_SIGN`, keyed by `is_cyclonic`, orients the thermal wind and
  the relative vorticity (warm anomalies spin up cyclonically).
- `LEVEL_SIGN`, keyed by `pressure > UPPER_LEVEL_PRESSURE`, orients the
  vertical velocity. Anomalies at 500 hPa or above it are upper level and
  induce motion opposite to surface anomalies.

References
----------
- Holton, J.R. & Hakim, G.J. (2013). An Introduction to Dynamic Meteorology,
  Sections 3.4 (thermal wind) and 6.3 (baroclinic development).
"""

from typing import Dict, Final, Optional

import numpy as np

from common.constants import PhysicalConstants
from common.exceptions import InvalidTemperature
from common.logging_config import get_logger
from common.types import DevelopmentResult, Position

logger = get_logger(__name__)

TEMPERATURE_DELTA_RANGE = (-50.0, 50.0)  # K

# Fixed model parameters
VORTEX_RADIUS_M: Final[float] = 5.0e5
VORTICITY_AMPLIFICATION: Final[float] = 1.0e3
WIND_SCALE: Final[float] = 1.0e3
VERTICAL_VELOCITY_COEFF: Final[float] = 0.1
REFERENCE_PRESSURE_HPA: Final[float] = 1000.0
SCALE_HEIGHT_M: Final[float] = 8000.0
UPPER_LEVEL_PRESSURE_HPA: Final[float] = 500.0
INTENSITY_GROWTH_HOURS: Final[float] = 12.0

CYCLONIC_SIGN: Final[Dict[bool, float]] = {True: 1.0, False: -1.0}
LEVEL_SIGN: Final[Dict[bool, float]] = {True: 1.0, False: -1.0}
UPPER_LEVEL_VORTICITY_FACTOR: Final[Dict[bool, float]] = {True: 2.0, False: 1.0}


def intensity_at(hour: int) -> float:
    """Intensity of an anomaly after `hour` hours: 1 + hour / 12."""
    return 1.0 + hour / INTENSITY_GROWTH_HOURS


def _check_hour(hour: int) -> None:
    if isinstance(hour, bool) or not isinstance(hour, (int, np.integer)) or hour < 0:
        raise ValueError(f"hour must be a non-negative integer, got {hour!r}")


class ThermalAnomaly:
    """A temperature perturbation at a fixed position.

    Parameters
    ----------
    temperature_delta : float
        Perturbation in K. Range: [-50, 50].
    position : Position
        Where the anomaly sits.
    constants : PhysicalConstants
        Constants of the run.

    Attributes
    ----------
    is_cyclonic : bool
        True for warm anomalies (temperature_delta > 0). Zero is anticyclonic.
    intensity : float
        Intensity used by the latest step; 1.0 before the first step.

    Raises
    ------
    InvalidTemperature
        If temperature_delta is outside [-50, 50].
    """

    def __init__(
        self,
        temperature_delta: float,
        position: Position,
        constants: PhysicalConstants
    ):
        lo, hi = TEMPERATURE_DELTA_RANGE
        if not lo <= temperature_delta <= hi:
            raise InvalidTemperature(temperature_delta)

        self.temperature_delta = float(temperature_delta)
        self.position = position
        self.constants = constants
        self.is_cyclonic = self.temperature_delta > 0.0
        self.intensity = 1.0

        logger.debug(
            f"ThermalAnomaly dT={self.temperature_delta} K at "
            f"{position.pressure} hPa, cyclonic={self.is_cyclonic}"
        )

    @classmethod
    def create(
        cls,
        temperature_delta: float,
        position: Position,
        constants: Optional[PhysicalConstants] = None
    ) -> 'ThermalAnomaly':
        """Create an anomaly, using default constants when none are given."""
        return cls(temperature_delta, position, constants or PhysicalConstants.default())

    @property
    def cyclonic_sign(self) -> float:
        return CYCLONIC_SIGN[self.is_cyclonic]

    @property
    def level_sign(self) -> float:
        return LEVEL_SIGN[self.position.pressure > UPPER_LEVEL_PRESSURE_HPA]

    def coriolis_term(self) -> float:
        """Coriolis term at the anomaly's latitude.

        Returns
        -------
        float
            f = Ω sin(φ) in s⁻¹.

        Notes
        -----
        The model uses Ω sin(φ) rather than the textbook 2Ω sin(φ).
        """
        return float(self.constants.earth_omega * np.sin(self.position.latitude_rad))

    def thermal_wind(self) -> float:
        """Signed thermal-wind proxy of the anomaly.

        Notes
        -----
        base_wind = ΔT / T₀ × g × 1000, oriented by the cyclonic sign and
        scaled by the Coriolis term.
        """
        base_wind = (
            self.temperature_delta / self.constants.base_temp
            * self.constants.gravity * WIND_SCALE
        )
        return self.cyclonic_sign * base_wind * self.coriolis_term()

    def relative_vorticity(self, thermal_wind: float, intensity: Optional[float] = None) -> float:
        """Relative vorticity induced by a thermal wind.

        Parameters
        ----------
        thermal_wind : float
            Thermal-wind value from `thermal_wind()`.
        intensity : float, optional
            Intensity to apply. Defaults to the current intensity.

        Returns
        -------
        float
            Relative vorticity in s⁻¹.

        Notes
        -----
        ζ = ±(w / R) × intensity × level factor × 1000 with R = 500 km.
        The level factor is 2 strictly above the 500 hPa surface and 1
        elsewhere, including 500 hPa itself.
        """
        if intensity is None:
            intensity = self.intensity
        base_vorticity = thermal_wind / VORTEX_RADIUS_M
        altitude_factor = UPPER_LEVEL_VORTICITY_FACTOR[
            self.position.pressure < UPPER_LEVEL_PRESSURE_HPA
        ]
        return (
            self.cyclonic_sign * base_vorticity * intensity
            * altitude_factor * VORTICITY_AMPLIFICATION
        )

    def vertical_velocity(self, thermal_wind: float, intensity: float) -> float:
        """Vertical velocity in m/s induced by a thermal wind at a given intensity."""
        pressure_factor = np.sqrt(REFERENCE_PRESSURE_HPA / self.position.pressure)
        altitude_factor = np.exp(-self.position.altitude / SCALE_HEIGHT_M)
        return float(
            self.level_sign * thermal_wind * VERTICAL_VELOCITY_COEFF
            * pressure_factor * altitude_factor * intensity
        )

    def develop(self, hour: int) -> DevelopmentResult:
        """Advance the anomaly to `hour` and derive its induced motion.

        Parameters
        ----------
        hour : int
            Hours since the start of the run.

        Returns
        -------
        DevelopmentResult
            Vertical velocity and relative vorticity at this hour.

        Notes
        -----
        Intensity is recomputed from `hour` alone, so steps may be
        evaluated in any order and give the same values.
        """
        _check_hour(hour)
        intensity = intensity_at(hour)
        self.intensity = intensity

        wind = self.thermal_wind()

        return DevelopmentResult(
            vertical_velocity=self.vertical_velocity(wind, intensity),
            relative_vorticity=float(self.relative_vorticity(wind, intensity)),
            hour=int(hour)
        )

    def __repr__(self) -> str:
        return (
            f"ThermalAnomaly(temperature_delta={self.temperature_delta}, "
            f"position={self.position!r}, intensity={self.intensity})"
        )
