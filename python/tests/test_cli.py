"""CLI tests via Typer's runner."""

from __future__ import annotations

from typer.testing import CliRunner

from main import app

runner = CliRunner()


def _deal(*args: str) -> list[list[int]]:
    result = runner.invoke(app, ["deal", *args])
    assert result.exit_code == 0, result.output
    return [[int(v) for v in line.split()] for line in result.output.splitlines() if line.strip()]


def test_deal_prints_grid() -> None:
    grid = _deal("-r", "3", "-c", "5", "--seed", "11")

    assert len(grid) == 3
    assert all(len(row) == 5 for row in grid)
    assert sorted(v for row in grid for v in row) == list(range(15))


def test_deal_is_seeded() -> None:
    assert _deal("--seed", "5") == _deal("--seed", "5")


def test_deal_rejects_out_of_range_size() -> None:
    result = runner.invoke(app, ["deal", "-r", "9"])
    assert result.exit_code != 0


def test_check_solvable() -> None:
    result = runner.invoke(app, ["check", "1", "2", "3", "4", "5", "6", "7", "8", "0", "-r", "3", "-c", "3"])

    assert result.exit_code == 0
    assert "Solvable" in result.output
    assert "Not" not in result.output


def test_check_not_solvable() -> None:
    result = runner.invoke(app, ["check", "1", "2", "3", "4", "5", "6", "8", "7", "0", "-r", "3", "-c", "3"])

    assert result.exit_code == 0
    assert "Not solvable" in result.output
    assert "1 inversions" in result.output


def test_check_bad_values_is_usage_error() -> None:
    result = runner.invoke(app, ["check", "1", "1", "0", "-r", "3", "-c", "3"])
    assert result.exit_code == 2
