"""
Common utilities and infrastructure for the Baroclinic Cyclogenesis Model.

This package provides foundational components used across all modules:
- Physical constants with provenance
- Validated value types (Position, DevelopmentResult)
- Exception hierarchy for out-of-range inputs
- Unit registry for display conversions
- Logging and audit trail infrastructure
"""

from common.constants import PhysicalConstants
from common.exceptions import (
    CyclogenesisError,
    MeteoError,
    InvalidLatitude,
    InvalidAltitude,
    InvalidPressure,
    InvalidTemperature,
)
from common.types import Position, DevelopmentResult, results_to_array
from common.units import to_display_units
from common.logging_config import get_logger, AuditLogger

__all__ = [
    "PhysicalConstants",
    "CyclogenesisError",
    "MeteoError",
    "InvalidLatitude",
    "InvalidAltitude",
    "InvalidPressure",
    "InvalidTemperature",
    "Position",
    "DevelopmentResult",
    "results_to_array",
    "to_display_units",
    "get_logger",
    "AuditLogger",
]
