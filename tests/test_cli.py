from __future__ import annotations

import io
import os
import shutil

import pytest

from braillecanvas.cli import display_points, display_shape, draw_shape, parse_points_line


def test_draw_shape():
    assert draw_shape("box", 4, 4).frame() == "⣏⣹"
    assert set(draw_shape("line", 4, 4).pixels()) == {(0, 0), (1, 1), (2, 2), (3, 3)}
    assert len(draw_shape("triangle", 9, 9)) > 0
    assert len(draw_shape("turtle", 100, 100)) > 0

    star = draw_shape("star", 20, 20)
    assert star.col_range()[1] <= 9
    assert star.row_range()[1] <= 4

    with pytest.raises(ValueError):
        draw_shape("hexagon", 4, 4)
    with pytest.raises(ValueError):
        draw_shape("box", 0, 4)


def test_display_shape(capsys):
    display_shape(["box", "-s", "4", "4"])
    captured = capsys.readouterr()
    assert captured.out == "⣏⣹\n"
    assert captured.err == ""


def test_display_shape_verbose(capsys):
    display_shape(["line", "--size", "4", "4", "-v"])
    captured = capsys.readouterr()
    assert "Drawing line with size 4x4" in captured.err
    assert "Drew 4 dots" in captured.err


def test_display_shape_uses_terminal_size(capsys, monkeypatch):
    monkeypatch.setattr(shutil, "get_terminal_size", lambda: os.terminal_size((10, 3)))
    display_shape(["line"])
    rows = capsys.readouterr().out.splitlines()
    assert len(rows) == 2
    assert all(len(row) == 10 for row in rows)


def test_display_shape_invalid_size(capsys):
    with pytest.raises(SystemExit) as exc_info:
        display_shape(["box", "-s", "0", "4"])
    assert exc_info.value.code == 1
    assert "Invalid size" in capsys.readouterr().err


def test_parse_points_line():
    assert parse_points_line("1 2\n") == (1, 2)
    assert parse_points_line("  0 0   4 0") == (0, 0, 4, 0)
    with pytest.raises(ValueError, match="Expected 2 or 4"):
        parse_points_line("1 2 3")
    with pytest.raises(ValueError, match="Invalid coordinates"):
        parse_points_line("a b")
    with pytest.raises(ValueError, match="non-negative"):
        parse_points_line("-1 0")


def test_display_points(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("0 0\n# a comment\n\n0 0 4 0\n"))
    display_points([])
    assert capsys.readouterr().out == "⠉⠉⠁\n"


def test_display_points_dotting(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("0 0 4 0\n"))
    display_points(["--dotting", "2"])
    assert capsys.readouterr().out == "⠁⠁⠁\n"


def test_display_points_empty_input(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    display_points([])
    assert capsys.readouterr().out == "\n"


def test_display_points_invalid_line(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("0 0\n1 2 3\n"))
    with pytest.raises(SystemExit) as exc_info:
        display_points([])
    assert exc_info.value.code == 1
    assert "line 2: Expected 2 or 4 coordinates" in capsys.readouterr().err


def test_display_points_invalid_dotting(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("0 0 4 0\n"))
    with pytest.raises(SystemExit) as exc_info:
        display_points(["-d", "0"])
    assert exc_info.value.code == 1
