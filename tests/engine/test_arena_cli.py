"""Tests for the arena command line."""

import pytest

from hexaclear.engine.arena_cli import main


def test_cli_runs_and_prints_summary(monkeypatch, capsys):
    monkeypatch.setattr(
        "sys.argv",
        ["hexaclear-arena", "--strategy", "random", "--strategy", "greedy",
         "--games", "1", "--max-moves", "3", "--log-level", "warning"],
    )
    main()
    out = capsys.readouterr().out
    assert "Arena: random, greedy, 1 endless games each" in out
    assert "Arena Results (1 endless games per strategy)" in out


def test_cli_daily_mode(monkeypatch, capsys):
    monkeypatch.setattr(
        "sys.argv",
        ["hexaclear-arena", "--mode", "daily", "--games", "1", "--max-moves", "2",
         "--start-date", "2024-03-05"],
    )
    main()
    assert "solved=" in capsys.readouterr().out


def test_cli_rejects_unknown_strategy(monkeypatch):
    monkeypatch.setattr("sys.argv", ["hexaclear-arena", "--strategy", "mcts"])
    with pytest.raises(SystemExit):
        main()
