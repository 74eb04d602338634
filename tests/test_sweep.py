import json
import logging
import uuid
from concurrent.futures import ThreadPoolExecutor

import pytest

from common.exceptions import ConfigError, InvalidLatitude
from common.logging_config import AuditLogger, get_log_level
from cyclogenesis.simulation import BaroclinicCyclogenesis
from scenario_simulation.cli import main
from scenario_simulation.latitude_sweep import LatitudeSweep, SweepConfig


def _run_id() -> str:
    return f"test_{uuid.uuid4().hex}"


def test_default_config() -> None:
    config = SweepConfig()
    assert config.latitudes == (30.0, 45.0, 60.0)
    assert config.time_steps == 24
    assert config.to_dict()["latitudes"] == [30.0, 45.0, 60.0]


@pytest.mark.parametrize(
    "kwargs",
    [{"latitudes": ()}, {"latitudes": (45.0, 30.0, 45)}, {"time_steps": -1}, {"time_steps": 2.5}],
)
def test_config_validation(kwargs) -> None:
    with pytest.raises(ConfigError):
        SweepConfig(**kwargs)


def test_sweep_matches_direct_scenarios() -> None:
    outcome = LatitudeSweep(SweepConfig(time_steps=6)).run(run_id=_run_id())
    assert outcome.all_succeeded
    assert list(outcome.results) == [30.0, 45.0, 60.0]
    for latitude, results in outcome.results.items():
        direct = BaroclinicCyclogenesis.create(5.0, -8.0, latitude).simulate_interaction(6)
        assert results == direct
        assert all(c.passed for c in outcome.checks[latitude])


def test_failed_latitude_does_not_abort_others() -> None:
    run_id = _run_id()
    audit = AuditLogger()
    outcome = LatitudeSweep(SweepConfig(latitudes=(45.0, 120.0, 60.0), time_steps=3), audit).run(run_id)

    assert set(outcome.results) == {45.0, 60.0}
    assert isinstance(outcome.failures[120.0], InvalidLatitude)
    assert not outcome.all_succeeded

    summary = audit.get_run_summary(run_id)
    assert summary["total_scenarios"] == 3
    assert summary["failed_latitudes"] == [120.0]
    assert summary["total_checks"] == 6
    assert summary["end_time"] is not None


def test_audit_artifacts_exported(tmp_path) -> None:
    run_id = _run_id()
    LatitudeSweep(SweepConfig(latitudes=(45.0,), time_steps=2, audit_dir=tmp_path)).run(run_id)

    artifact = json.loads((tmp_path / f"{run_id}.json").read_text())
    assert artifact["run_id"] == run_id
    assert len(artifact["config_hash"]) == 16
    assert artifact["scenarios"][0]["latitude"] == 45.0
    assert {c["check_name"] for c in artifact["checks"]} == {
        "finite_values", "hour_sequence", "monotonic_growth"
    }
    assert list(tmp_path.glob("audit_*.log"))


def test_config_hash_is_deterministic() -> None:
    audit = AuditLogger()
    first, second = _run_id(), _run_id()
    LatitudeSweep(SweepConfig(time_steps=1), audit).run(first)
    LatitudeSweep(SweepConfig(time_steps=1), audit).run(second)
    assert audit.get_run_summary(first)["config_hash"] == audit.get_run_summary(second)["config_hash"]


def test_unknown_run_id() -> None:
    with pytest.raises(KeyError):
        AuditLogger().get_run_summary("no_such_run")


def test_cli_prints_tables(capsys) -> None:
    code = main(["--latitudes", "30", "45", "--hours", "3"])
    out = capsys.readouterr().out

    assert code == 0
    assert "BAROCLINIC CYCLOGENESIS SIMULATION" in out
    assert "Simulation at 30.0°N:" in out
    assert "Simulation at 45.0°N:" in out
    assert "\n   2 | " in out


def test_cli_reports_rejected_latitude(capsys) -> None:
    code = main(["--latitudes", "45", "95", "--hours", "2"])
    out = capsys.readouterr().out

    assert code == 1
    assert "Simulation at 45.0°N:" in out
    assert "skipped: Invalid latitude: 95.0°" in out


def test_cli_rejects_negative_hours() -> None:
    assert main(["--hours", "-3"]) == 2


def test_concurrent_sweeps_keep_their_own_records() -> None:
    audit = AuditLogger()
    latitudes = (10.0, 20.0, 30.0, 40.0, 50.0)
    run_ids = [_run_id() for _ in range(8)]

    def sweep(run_id: str) -> None:
        LatitudeSweep(SweepConfig(latitudes=latitudes, time_steps=200), audit).run(run_id)

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(sweep, run_ids))

    for run_id in run_ids:
        summary = audit.get_run_summary(run_id)
        assert summary["total_scenarios"] == len(latitudes)
        assert summary["total_checks"] == 3 * len(latitudes)


def test_audit_file_is_scoped_to_its_run(tmp_path) -> None:
    audited, plain = _run_id(), _run_id()
    LatitudeSweep(SweepConfig(latitudes=(45.0,), time_steps=2, audit_dir=tmp_path)).run(audited)
    LatitudeSweep(SweepConfig(latitudes=(45.0,), time_steps=2)).run(plain)

    (log_file,) = tmp_path.glob(f"audit_{audited}_*.log")
    text = log_file.read_text()
    assert f"Completed run {audited}" in text
    assert plain not in text
    assert logging.getLogger(f"audit.file.{audited}").handlers == []


def test_clear_run() -> None:
    audit = AuditLogger()
    run_id = _run_id()
    LatitudeSweep(SweepConfig(latitudes=(45.0,), time_steps=1), audit).run(run_id)

    audit.clear_run(run_id)
    with pytest.raises(KeyError):
        audit.get_run_summary(run_id)


def test_clear_run_refuses_active_run() -> None:
    audit = AuditLogger()
    run_id = _run_id()
    with audit.run_context(run_id):
        with pytest.raises(ValueError):
            audit.clear_run(run_id)
    audit.clear_run(run_id)


def test_cli_rejects_duplicate_latitudes() -> None:
    assert main(["--latitudes", "45", "45", "--hours", "2"]) == 2


def test_cli_keeps_info_logs_out_by_default(caplog) -> None:
    before = get_log_level()
    with caplog.at_level(logging.DEBUG):
        assert main(["--latitudes", "45", "--hours", "2"]) == 0
    ours = ("audit", "scenario_simulation", "cyclogenesis", "validation", "DevelopmentConsistencyChecker")
    assert not [
        r for r in caplog.records
        if r.name.startswith(ours) and r.levelno < logging.WARNING
    ]
    assert get_log_level() == before


def test_cli_verbose_emits_info_logs(caplog) -> None:
    with caplog.at_level(logging.DEBUG):
        assert main(["--latitudes", "45", "--hours", "2", "--verbose"]) == 0
    messages = [r.getMessage() for r in caplog.records]
    assert any(m.startswith("Simulating 2 h at 45.0°") for m in messages)
