from contextlib import nullcontext

import pytest

from checkers import main as main_mod
from checkers.ui.keys import KeyReadError


@pytest.fixture(autouse=True)
def no_terminal(monkeypatch):
    monkeypatch.setattr(main_mod, "terminal_session", nullcontext)


def test_main_exits_zero_on_escape(monkeypatch):
    monkeypatch.setattr(main_mod, "run_game", lambda read_key: 0)
    assert main_mod.main() == 0


def test_main_reports_key_read_failure(monkeypatch, caplog):
    def broken(read_key):
        raise KeyReadError("stdin closed")

    monkeypatch.setattr(main_mod, "run_game", broken)
    assert main_mod.main() == 1
    assert "stdin closed" in caplog.text


def test_main_handles_ctrl_c(monkeypatch):
    def interrupted(read_key):
        raise KeyboardInterrupt

    monkeypatch.setattr(main_mod, "run_game", interrupted)
    assert main_mod.main() == 130


def test_main_fails_when_terminal_cannot_be_set_up(monkeypatch):
    def no_tty():
        raise KeyReadError("Standard input is not a terminal")

    monkeypatch.setattr(main_mod, "terminal_session", no_tty)
    monkeypatch.setattr(main_mod, "run_game", lambda read_key: 0)
    assert main_mod.main() == 1


def test_main_runs_game_inside_terminal_session(monkeypatch):
    events = []

    class Session:
        def __enter__(self):
            events.append("enter")

        def __exit__(self, *exc):
            events.append("exit")
            return False

    def game(read_key):
        events.append("game")
        return 0

    monkeypatch.setattr(main_mod, "terminal_session", Session)
    monkeypatch.setattr(main_mod, "run_game", game)
    assert main_mod.main() == 0
    assert events == ["enter", "game", "exit"]
