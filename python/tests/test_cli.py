"""Command line entry point."""

from __future__ import annotations

from typer.testing import CliRunner

from main import app

runner = CliRunner()


def test_vanilla_prints_trace_and_summary() -> None:
    result = runner.invoke(app, ["1,2,3,4,5,6,0,7,8", "-f", "vanilla"])
    assert result.exit_code == 0, result.output
    assert "2 moves (right, right)" in result.output
    assert "1 2 3\n4 5 6\n7 8  " in result.output


def test_rich_frontend_renders_stats() -> None:
    result = runner.invoke(app, ["123456708", "-f", "rich"])
    assert result.exit_code == 0, result.output
    assert "Moves" in result.output


def test_frontend_from_environment() -> None:
    result = runner.invoke(
        app, ["123456708"], env={"EIGHTPUZZLE_FRONTEND": "vanilla"}
    )
    assert result.exit_code == 0, result.output
    assert "1 moves (right)" in result.output


def test_letters_with_custom_goal_and_blank() -> None:
    result = runner.invoke(
        app,
        ["abcdefg_h", "--goal", "abcdefgh_", "--blank", "_", "-f", "vanilla",
         "--forward", "--check-on-dequeue"],
    )
    assert result.exit_code == 0, result.output
    assert "1 moves" in result.output


def test_scramble_with_seed() -> None:
    result = runner.invoke(
        app, ["--scramble", "10", "--seed", "3", "-f", "vanilla", "-v"]
    )
    assert result.exit_code == 0, result.output
    assert "moves" in result.output


def test_unsolvable_exits_with_error() -> None:
    result = runner.invoke(app, ["2,1,3,4,5,6,7,8,0"])
    assert result.exit_code == 1
    assert "Unsolvable" in result.output


def test_alphabet_mismatch_exits_with_error() -> None:
    result = runner.invoke(app, ["abcdefghi", "--goal", "abcdefghx", "--blank", "e"])
    assert result.exit_code == 1
    assert "AlphabetMismatch" in result.output


def test_missing_start_is_usage_error() -> None:
    result = runner.invoke(app, [])
    assert result.exit_code == 2
