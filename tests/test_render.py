from checkers.core.board import Board, CellView
from checkers.types import FocusState
from checkers.ui import render as render_mod
from checkers.ui.colors import BG_BRIGHT_CYAN, BG_BRIGHT_GREEN, BG_BRIGHT_MAGENTA, BOLD, FG_BLACK, RESET


def view(focus, playable=True, glyph=" O "):
    return CellView(glyph=glyph, focus=focus, playable=playable)


def test_background_by_focus():
    assert render_mod.background(view(FocusState.FOCUSED, playable=False)) == BG_BRIGHT_GREEN
    assert render_mod.background(view(FocusState.PENDING_MOVE)) == BG_BRIGHT_MAGENTA
    assert render_mod.background(view(FocusState.UNFOCUSED)) == BG_BRIGHT_CYAN
    assert render_mod.background(view(FocusState.UNFOCUSED, playable=False)) is None


def test_render_cell_is_bold_black():
    out = render_mod.render_cell(view(FocusState.UNFOCUSED, playable=False, glyph=" X "))
    assert out == f"{BOLD}{FG_BLACK} X {RESET}"


def test_render_cell_with_background():
    out = render_mod.render_cell(view(FocusState.FOCUSED, glyph="   "))
    assert out == f"{BOLD}{FG_BLACK}{BG_BRIGHT_GREEN}   {RESET}"


def test_render_prints_every_row(capsys):
    board = Board()
    board.focus(7, 0)
    render_mod.render(board.snapshot(), "Pick a marker.")
    out = capsys.readouterr().out

    assert out.startswith("\033[2J\033[H")
    assert out.count(" O ") == 8
    assert out.count(" X ") == 8
    assert "Pick a marker." in out


def test_render_without_color(monkeypatch, capsys):
    monkeypatch.setattr("checkers.ui.colors.USE_COLOR", False)
    monkeypatch.setattr(render_mod, "CLEAR_SCREEN", False)
    monkeypatch.setattr(render_mod, "SHOW_STATUS", False)
    board = Board()
    render_mod.render(board.snapshot())
    lines = capsys.readouterr().out.splitlines()

    assert len(lines) == 8
    assert lines[0] == (" O " + "   ") * 4
    assert lines[1] == ("   " + " O ") * 4
    assert lines[3] == " " * 24
