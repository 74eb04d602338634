import pint
import pytest

from common.types import DevelopmentResult
from common.units import Q_, convert, quantity, to_display_units
from scenario_simulation.report import (
    HEADER,
    format_banner,
    format_latitude,
    format_result_row,
    format_table,
)


def test_display_units() -> None:
    w_cm_s, zeta = to_display_units(DevelopmentResult(0.05, 3e-5, 0))
    assert w_cm_s == pytest.approx(5.0)
    assert zeta == pytest.approx(3.0)


def test_convert_accepts_quantities() -> None:
    assert convert(Q_(2.0, "mm/s"), "vertical_velocity") == pytest.approx(0.2)


def test_convert_rejects_wrong_dimension() -> None:
    with pytest.raises(pint.DimensionalityError):
        convert(Q_(1.0, "meter"), "vertical_velocity")


def test_quantity_unknown_field() -> None:
    with pytest.raises(KeyError):
        quantity(1.0, "humidity")


def test_row_layout() -> None:
    row = format_result_row(DevelopmentResult(0.0123, -4.5e-5, 7))
    assert row == "   7 | " + " " * 16 + "1.23" + " | " + " " * 15 + "-4.50"


def test_table_has_header_and_one_row_per_result() -> None:
    results = [DevelopmentResult(0.01 * h, 1e-5 * h, h) for h in range(3)]
    lines = format_table(45.0, results).splitlines()
    assert lines[0] == "Simulation at 45.0°N:"
    assert lines[1] == HEADER
    assert len(lines) == 3 + len(results)


def test_southern_latitude_label() -> None:
    assert format_latitude(-30.0) == "30.0°S"


def test_banner() -> None:
    title, rule = format_banner().splitlines()
    assert len(rule) == len(title)
    assert set(rule) == {"="}
