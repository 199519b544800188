from __future__ import annotations

import json
from pathlib import Path
from typing import List

import pytest
from typer.testing import CliRunner

from tablebench.main import app

STAT_PREFIXES = ("Table with", "Min:", "Max:", "Average:")

runner = CliRunner()


@pytest.fixture(autouse=True)
def quiet_logs(monkeypatch, reset_logging) -> None:
    monkeypatch.setenv("LOG_LEVEL", "WARNING")


def _stat_lines(output: str) -> List[str]:
    return [line for line in output.splitlines() if line.startswith(STAT_PREFIXES)]


def test_run_prints_four_statistics_lines(trivial_template: Path) -> None:
    result = runner.invoke(
        app, ["run", "--template", str(trivial_template), "--items", "3", "--runs", "5"]
    )

    assert result.exit_code == 0, result.output
    lines = _stat_lines(result.output)
    assert len(lines) == 4
    assert lines[0] == "Table with 3 items, 5 runs:"
    assert all(line.endswith("(micros)") for line in lines[1:])


def test_flat_variant_omits_micros_suffix(trivial_template: Path) -> None:
    result = runner.invoke(
        app, ["run", "-v", "table-flat", "-t", str(trivial_template), "-r", "2", "-n", "2"]
    )

    assert result.exit_code == 0, result.output
    lines = _stat_lines(result.output)
    assert len(lines) == 4
    assert not any("(micros)" in line for line in lines)


def test_no_micros_flag_overrides_variant(trivial_template: Path) -> None:
    result = runner.invoke(
        app, ["run", "-t", str(trivial_template), "-r", "2", "-n", "1", "--no-micros"]
    )

    assert result.exit_code == 0, result.output
    assert not any("(micros)" in line for line in _stat_lines(result.output))


def test_missing_template_prints_error_and_no_statistics(tmp_path: Path) -> None:
    missing = tmp_path / "List.html"

    result = runner.invoke(app, ["run", "--template", str(missing), "--runs", "3"])

    assert result.exit_code == 1
    assert "not found" in result.output
    assert _stat_lines(result.output) == []


def test_malformed_template_prints_error_and_no_statistics(malformed_template: Path) -> None:
    result = runner.invoke(app, ["run", "--template", str(malformed_template), "--runs", "3"])

    assert result.exit_code == 1
    assert _stat_lines(result.output) == []


def test_runs_from_environment(monkeypatch, trivial_template: Path) -> None:
    monkeypatch.setenv("BENCHMARK_RUNS", "4")
    monkeypatch.setenv("BENCHMARK_ITEMS", "2")
    monkeypatch.setenv("BENCHMARK_TEMPLATE_PATH", str(trivial_template))

    result = runner.invoke(app, ["run"])

    assert result.exit_code == 0, result.output
    assert _stat_lines(result.output)[0] == "Table with 2 items, 4 runs:"


def test_save_persists_results(monkeypatch, tmp_path: Path, trivial_template: Path) -> None:
    results_dir = tmp_path / "out"
    monkeypatch.setenv("BENCHMARK_RESULTS_DIR", str(results_dir))

    result = runner.invoke(
        app, ["run", "-t", str(trivial_template), "-r", "2", "-n", "1", "--save", "--details"]
    )

    assert result.exit_code == 0, result.output
    assert (results_dir / "latest.json").exists()


def test_variant_list() -> None:
    result = runner.invoke(app, ["run", "--variant", "list"])

    assert result.exit_code == 0
    assert "table-flat" in result.output


def test_unknown_variant_is_usage_error(trivial_template: Path) -> None:
    result = runner.invoke(app, ["run", "--variant", "chart", "-t", str(trivial_template)])

    assert result.exit_code == 2


def test_unknown_shape_is_usage_error(trivial_template: Path) -> None:
    result = runner.invoke(app, ["run", "--shape", "nested", "-t", str(trivial_template)])

    assert result.exit_code == 2


def test_generate_emits_json_lines() -> None:
    result = runner.invoke(app, ["generate", "--items", "2", "--shape", "flat"])

    assert result.exit_code == 0, result.output
    rows = [json.loads(line) for line in result.output.splitlines() if line.startswith("{")]
    assert [row["id"] for row in rows] == [0, 1]
    assert rows[1]["count"] == 1
    assert rows[0]["customer"] is None


def test_info_shows_configuration() -> None:
    result = runner.invoke(app, ["info"])

    assert result.exit_code == 0
    assert "sub_template=table" in result.output
    assert "Available variants" in result.output


def test_flat_variant_generates_one_item_per_run(trivial_template: Path) -> None:
    result = runner.invoke(app, ["run", "-v", "table-flat", "-t", str(trivial_template), "-r", "5"])

    assert result.exit_code == 0, result.output
    assert _stat_lines(result.output)[0] == "Table with 5 items, 5 runs:"
