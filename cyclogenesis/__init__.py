"""
Baroclinic Cyclogenesis Model.

Closed-form toy model of a surface and an upper-level thermal anomaly
interacting across a baroclinic zone.
"""

from cyclogenesis.anomaly import (
    ThermalAnomaly,
    intensity_at,
    CYCLONIC_SIGN,
    LEVEL_SIGN,
)
from cyclogenesis.simulation import BaroclinicCyclogenesis

__all__ = [
    "ThermalAnomaly",
    "intensity_at",
    "CYCLONIC_SIGN",
    "LEVEL_SIGN",
    "BaroclinicCyclogenesis",
]
