"""
Unit Registry and Display Conversions for the Cyclogenesis Model.

The model computes in SI units (m/s, s⁻¹). Tables are printed in the units
forecasters read: vertical velocity in cm/s and relative vorticity in
10⁻⁵ s⁻¹. Conversions go through `pint` so that a mismatched unit raises
instead of silently scaling by the wrong factor.

Example Usage
-------------
>>> from common.units import Q_
>>> Q_(0.05, 'm/s').to('cm/s')
<Quantity(5.0, 'centimeter / second')>
"""

from typing import Tuple, Union

import pint
from pint import UnitRegistry as PintUnitRegistry

from common.types import DevelopmentResult

# Create the global unit registry
ureg = PintUnitRegistry()

try:
    ureg.define("vorticity_display = 1e-5 / second")
except pint.errors.RedefinitionError:
    # Already defined, skip
    pass

# Convenience alias for creating quantities
Q_ = ureg.Quantity


# Internal units of the model and the units used for printing
INTERNAL_UNITS = {
    "latitude": "degree",
    "altitude": "meter",
    "pressure": "hectopascal",
    "temperature_delta": "kelvin",
    "vertical_velocity": "meter/second",
    "relative_vorticity": "1/second",
}

DISPLAY_UNITS = {
    "vertical_velocity": "centimeter/second",
    "relative_vorticity": "vorticity_display",
}


def quantity(value: float, field_name: str) -> pint.Quantity:
    """Attach the internal unit of a model field to a bare number.

    Parameters
    ----------
    value : float
        The numerical value.
    field_name : str
        Key of `INTERNAL_UNITS`.

    Returns
    -------
    pint.Quantity
        A quantity object with associated units.
    """
    if field_name not in INTERNAL_UNITS:
        raise KeyError(f"No internal unit registered for '{field_name}'")
    return ureg.Quantity(value, INTERNAL_UNITS[field_name])


def convert(value: Union[float, pint.Quantity], field_name: str) -> float:
    """Convert an internal value to its display unit and return the magnitude."""
    if not isinstance(value, pint.Quantity):
        value = quantity(value, field_name)
    return float(value.to(DISPLAY_UNITS[field_name]).magnitude)


def to_display_units(result: DevelopmentResult) -> Tuple[float, float]:
    """Convert a result to display units.

    Parameters
    ----------
    result : DevelopmentResult
        A result in internal units.

    Returns
    -------
    Tuple[float, float]
        (vertical velocity in cm/s, relative vorticity in 10⁻⁵ s⁻¹)
    """
    return (
        convert(result.vertical_velocity, "vertical_velocity"),
        convert(result.relative_vorticity, "relative_vorticity"),
    )
