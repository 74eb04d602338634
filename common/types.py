"""
Type Definitions with Physical Units for the Cyclogenesis Model.

This module defines the value types exchanged between the anomaly physics,
the scenario driver and the presentation layer. Both types are frozen
dataclasses: a Position is fixed once an anomaly is placed, and a
DevelopmentResult is a snapshot of one hourly step.

Units
-----
Fields are stored in the model's internal units (degrees, meters, hPa,
m/s, s⁻¹). Conversion to display units is done in `common.units`.
"""

from dataclasses import dataclass
from typing import List, Sequence

import numpy as np
from numpy.typing import NDArray

from common.exceptions import InvalidAltitude, InvalidLatitude, InvalidPressure

LATITUDE_RANGE = (-90.0, 90.0)  # degrees
ALTITUDE_RANGE = (-400.0, 20000.0)  # m
PRESSURE_RANGE = (100.0, 1100.0)  # hPa


def _within(value: float, bounds: Sequence[float]) -> bool:
    # NaN compares False on both sides and is rejected
    return bounds[0] <= value <= bounds[1]


@dataclass(frozen=True)
class Position:
    """Location and pressure level of a thermal anomaly.

    Attributes
    ----------
    latitude : float
        Latitude in DEGREES. Range: [-90, 90].
    altitude : float
        Height above sea level in METERS. Range: [-400, 20000].
    pressure : float
        Pressure level in HECTOPASCALS. Range: [100, 1100].

    Notes
    -----
    Checks run in the order latitude, altitude, pressure and only the first
    violated one is reported.

    Examples
    --------
    >>> Position.create(45.0, 5000.0, 500.0)
    Position(latitude=45.0, altitude=5000.0, pressure=500.0)
    """
    latitude: float  # degrees
    altitude: float  # m
    pressure: float  # hPa

    def __post_init__(self):
        """Validate ranges."""
        if not _within(self.latitude, LATITUDE_RANGE):
            raise InvalidLatitude(self.latitude)
        if not _within(self.altitude, ALTITUDE_RANGE):
            raise InvalidAltitude(self.altitude)
        if not _within(self.pressure, PRESSURE_RANGE):
            raise InvalidPressure(self.pressure)

    @classmethod
    def create(cls, latitude: float, altitude: float, pressure: float) -> 'Position':
        """Create a validated position.

        Parameters
        ----------
        latitude : float
            Latitude in degrees.
        altitude : float
            Altitude in meters.
        pressure : float
            Pressure in hPa.

        Returns
        -------
        Position
            The immutable position.

        Raises
        ------
        InvalidLatitude, InvalidAltitude, InvalidPressure
            For the first field found out of range.
        """
        return cls(latitude=float(latitude), altitude=float(altitude), pressure=float(pressure))

    @property
    def latitude_rad(self) -> float:
        """Latitude in radians."""
        return float(np.radians(self.latitude))


@dataclass(frozen=True)
class DevelopmentResult:
    """State of the perturbation after one hourly step.

    Attributes
    ----------
    vertical_velocity : float
        Vertical velocity in M/S.
    relative_vorticity : float
        Relative vorticity in 1/S.
    hour : int
        Step index, starting at 0.
    """
    vertical_velocity: float  # m/s
    relative_vorticity: float  # 1/s
    hour: int


def results_to_array(results: Sequence[DevelopmentResult]) -> NDArray[np.float64]:
    """Stack results into an array of shape (N, 3).

    Columns are hour, vertical velocity (m/s), relative vorticity (1/s).
    """
    rows: List[List[float]] = [
        [float(r.hour), r.vertical_velocity, r.relative_vorticity] for r in results
    ]
    return np.asarray(rows, dtype=np.float64).reshape(len(rows), 3)
