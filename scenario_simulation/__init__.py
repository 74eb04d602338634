"""
Scenario Simulation Module for the Cyclogenesis Model.

This module runs scenarios over several latitudes and renders the results.
"""

from scenario_simulation.latitude_sweep import (
    LatitudeSweep,
    SweepConfig,
    SweepResult,
)

from scenario_simulation.report import (
    format_result_row,
    format_table,
)

__all__ = [
    "LatitudeSweep",
    "SweepConfig",
    "SweepResult",
    "format_result_row",
    "format_table",
]
