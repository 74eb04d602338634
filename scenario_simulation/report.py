"""Console tables for simulation results, in display units."""

from typing import List, Sequence

from common.types import DevelopmentResult
from common.units import to_display_units

TITLE = "BAROCLINIC CYCLOGENESIS SIMULATION"
HEADER = "Hour | Vertical velocity (cm/s) | Relative vorticity (10⁻⁵ s⁻¹)"
RULE = "------|----------------------|----------------------"


def format_result_row(result: DevelopmentResult) -> str:
    """One table row: hour, w in cm/s, ζ in 10⁻⁵ s⁻¹."""
    w_cm_s, zeta = to_display_units(result)
    return f"{result.hour:4} | {w_cm_s:20.2f} | {zeta:20.2f}"


def format_latitude(latitude: float) -> str:
    hemisphere = "N" if latitude >= 0 else "S"
    return f"{abs(latitude)}°{hemisphere}"


def format_table(latitude: float, results: Sequence[DevelopmentResult]) -> str:
    """Render the results of one latitude as a text table."""
    lines: List[str] = [
        f"Simulation at {format_latitude(latitude)}:",
        HEADER,
        RULE,
    ]
    lines.extend(format_result_row(r) for r in results)
    return "\n".join(lines)


def format_banner() -> str:
    return f"{TITLE}\n{'=' * len(TITLE)}"
