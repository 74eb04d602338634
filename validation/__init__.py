"""
Validation Framework for the Cyclogenesis Model.

This module provides consistency checks on simulation output.
"""

from validation.physics_tests import (
    DevelopmentConsistencyChecker,
    ValidationResult,
)

__all__ = [
    "DevelopmentConsistencyChecker",
    "ValidationResult",
]
