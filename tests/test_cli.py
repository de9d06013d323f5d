from __future__ import annotations

import io
from datetime import datetime
from pathlib import Path

import pytest

from parkassist import cli
from parkassist.config import ParkAssistConfig
from parkassist.dataio.log_loader import load_distances, load_readings


def _run(tmp_path: Path, clock, text: str, **kwargs) -> tuple[int, str, str, Path]:
    path = tmp_path / "parking_log.csv"
    out, err = io.StringIO(), io.StringIO()
    status = cli.run(
        ParkAssistConfig(log_file=str(path), interval_ms=800),
        stdin=io.StringIO(text),
        out=out,
        err=err,
        clock=clock,
        **kwargs,
    )
    return status, out.getvalue(), err.getvalue(), path


def test_manual_mode_scenario(tmp_path: Path, fake_clock) -> None:
    status, out, _, path = _run(tmp_path, fake_clock, "1\nabc\n30\n-1\n")

    assert status == 0
    assert "PARKING ASSISTANCE SIMULATOR" in out
    assert "Manual mode selected." in out
    assert "Distance: 30.00 cm -> STOP" in out
    assert f"Simulation ended. Log file: {path}" in out
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "timestamp,distance_cm"
    assert len(lines) == 2


def test_second_run_appends_without_new_header(tmp_path: Path, fake_clock) -> None:
    _run(tmp_path, fake_clock, "1\n10\n-1\n")
    _, _, _, path = _run(tmp_path, fake_clock, "1\n20\n-1\n")

    text = path.read_text(encoding="utf-8")
    assert text.count("timestamp,distance_cm") == 1
    assert [r.distance_cm for r in load_readings(path)] == [10.0, 20.0]


@pytest.mark.parametrize("choice", ["3\n", "0\n", "-1\n"])
def test_out_of_range_choice_exits_with_error(tmp_path: Path, fake_clock, choice: str) -> None:
    status, out, _, path = _run(tmp_path, fake_clock, choice)

    assert status == 1
    assert "Invalid choice. Exiting." in out
    assert load_readings(path) == []


@pytest.mark.parametrize("choice", ["abc\n", "", "\n\n", "x 1\n"])
def test_unparseable_choice_exits_with_error(tmp_path: Path, fake_clock, choice: str) -> None:
    status, out, err, _ = _run(tmp_path, fake_clock, choice)

    assert status == 1
    assert "Invalid input. Exiting." in err
    assert "Simulation ended" not in out


def test_blank_lines_before_choice_are_skipped(tmp_path: Path, fake_clock) -> None:
    status, out, _, path = _run(tmp_path, fake_clock, "\n\n1\n30\n-1\n")

    assert status == 0
    assert "Manual mode selected." in out
    assert [r.distance_cm for r in load_readings(path)] == [30.0]


def test_values_after_choice_on_same_line_are_used(tmp_path: Path, fake_clock) -> None:
    status, _, _, path = _run(tmp_path, fake_clock, "1 30\n-1\n")

    assert status == 0
    assert [r.distance_cm for r in load_readings(path)] == [30.0]


def test_undecodable_store_does_not_spoil_exit_status(
    tmp_path: Path, fake_clock, caplog: pytest.LogCaptureFixture
) -> None:
    path = tmp_path / "parking_log.csv"
    path.write_bytes(b"timestamp,distance_cm\n2024-01-01 00:00:00,12.00 \xe9\n")

    with caplog.at_level("WARNING", logger="parkassist.cli"):
        status, out, _, _ = _run(tmp_path, fake_clock, "1\n30\n-1\n")

    assert status == 0
    assert f"Simulation ended. Log file: {path}" in out
    assert path.read_bytes().endswith(b"30.00\n")
    assert any("Could not summarize log file" in r.getMessage() for r in caplog.records)


def test_automatic_mode_stops_after_max_readings(tmp_path: Path, fake_clock) -> None:
    status, out, _, path = _run(tmp_path, fake_clock, "2\n", max_readings=5)

    assert status == 0
    assert "Automatic simulation mode. Press Ctrl+C to stop." in out
    assert load_distances(path).shape == (5,)
    assert fake_clock.sleeps == [0.8] * 4


def test_automatic_runs_in_same_second_repeat_sequence(tmp_path: Path, clock_factory) -> None:
    first_dir = tmp_path / "a"
    second_dir = tmp_path / "b"
    first_dir.mkdir()
    second_dir.mkdir()

    _, _, _, first = _run(first_dir, clock_factory(datetime(2024, 5, 1, 9, 0, 0)), "2\n", max_readings=20)
    _, _, _, second = _run(second_dir, clock_factory(datetime(2024, 5, 1, 9, 0, 0)), "2\n", max_readings=20)

    assert list(load_distances(first)) == list(load_distances(second))


def test_automatic_mode_interrupt_reaches_cleanup(tmp_path: Path, fake_clock) -> None:
    fake_clock.interrupt_after = 3

    status, out, _, path = _run(tmp_path, fake_clock, "2\n")

    assert status == 0
    assert "Stopping simulation." in out
    assert "Simulation ended." in out
    assert len(load_readings(path)) == 3


def test_main_uses_log_file_flag(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "garage.csv"
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n150\n-5\n"))

    assert cli.main(["--log-file", str(path)]) == 0
    assert [r.distance_cm for r in load_readings(path)] == [150.0]


def test_main_rejects_malformed_config(tmp_path: Path) -> None:
    cfg = tmp_path / "parkassist.yaml"
    cfg.write_text("- not\n- a mapping\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--config", str(cfg)])
    assert excinfo.value.code == 2
