import pytest

from common.exceptions import ConsistencyError
from common.types import DevelopmentResult, results_to_array
from cyclogenesis.simulation import BaroclinicCyclogenesis
from validation.physics_tests import DevelopmentConsistencyChecker


def test_simulated_output_passes_all_checks() -> None:
    results = BaroclinicCyclogenesis.create(5.0, -8.0, 45.0).simulate_interaction(24)
    checks = DevelopmentConsistencyChecker().check_all(results)
    assert [c.test_name for c in checks] == ["finite_values", "hour_sequence", "monotonic_growth"]
    assert all(c.passed for c in checks)


def test_empty_output_passes() -> None:
    checks = DevelopmentConsistencyChecker().check_all([])
    assert all(c.passed for c in checks)


def test_detects_non_finite_values() -> None:
    results = [
        DevelopmentResult(0.1, 1e-5, 0),
        DevelopmentResult(float("nan"), 1e-5, 1),
    ]
    check = DevelopmentConsistencyChecker().check_finite_values(results_to_array(results))
    assert not check.passed
    assert check.details["bad_hours"] == [1]


def test_detects_hour_gap() -> None:
    results = [DevelopmentResult(0.1, 1e-5, 0), DevelopmentResult(0.2, 2e-5, 2)]
    check = DevelopmentConsistencyChecker().check_hour_sequence(results_to_array(results))
    assert not check.passed
    assert check.details["num_mismatches"] == 1


def test_detects_decay() -> None:
    results = [DevelopmentResult(0.2, 2e-5, 0), DevelopmentResult(0.1, 2e-5, 1)]
    check = DevelopmentConsistencyChecker().check_monotonic_growth(results_to_array(results))
    assert not check.passed
    assert check.details["vertical_velocity_decreases"] == 1
    assert check.details["relative_vorticity_decreases"] == 0


def test_strict_mode_raises() -> None:
    results = [DevelopmentResult(0.1, 1e-5, 1)]
    with pytest.raises(ConsistencyError):
        DevelopmentConsistencyChecker(strict_mode=True).check_all(results)
