"""
Physical Constants for the Baroclinic Cyclogenesis Model.

This module provides the constants shared by every thermal anomaly of a
simulation run, together with their units and sources. The values are the
rounded figures used by the toy model; they are kept as-is so that results
stay reproducible across releases.

References
----------
- Earth rotation: IERS Conventions (2010), rounded
- Gravity: ISO 80000-3:2006, rounded
- Reference temperature: ISO 2533:1975 standard atmosphere
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class Constant:
    """A physical constant with provenance.

    Attributes
    ----------
    value : float
        The nominal value of the constant.
    unit : str
        The SI unit of the constant.
    source : str
        Reference for the constant value.
    description : str
        Human-readable description of the constant.
    """
    value: float
    unit: str
    source: str
    description: str


# =========================================================================
# Default constants
# =========================================================================

EARTH_ANGULAR_VELOCITY: Final[Constant] = Constant(
    value=7.2921e-5,
    unit="rad/s",
    source="IERS Conventions (2010), rounded",
    description="Earth's angular velocity of rotation"
)

GRAVITY: Final[Constant] = Constant(
    value=9.81,
    unit="m/s²",
    source="ISO 80000-3:2006, rounded",
    description="Acceleration due to gravity"
)

REFERENCE_TEMPERATURE: Final[Constant] = Constant(
    value=288.15,
    unit="K",
    source="ISO 2533:1975",
    description="Standard temperature at sea level (15°C)"
)


@dataclass(frozen=True)
class PhysicalConstants:
    """Constants shared by the anomalies of one simulation run.

    Instances are immutable, so handing the same value to the surface and
    the upper-level anomaly cannot couple them.

    Attributes
    ----------
    earth_omega : float
        Earth rotation rate in rad/s.
    gravity : float
        Gravitational acceleration in m/s².
    base_temp : float
        Reference temperature in K.
    """
    earth_omega: float = EARTH_ANGULAR_VELOCITY.value
    gravity: float = GRAVITY.value
    base_temp: float = REFERENCE_TEMPERATURE.value

    @classmethod
    def default(cls) -> 'PhysicalConstants':
        """Return the standard constants of the model."""
        return cls()

    @staticmethod
    def describe() -> dict:
        """Map each field name to its provenance record."""
        return {
            "earth_omega": EARTH_ANGULAR_VELOCITY,
            "gravity": GRAVITY,
            "base_temp": REFERENCE_TEMPERATURE,
        }
