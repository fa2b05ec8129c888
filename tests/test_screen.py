import re

import pytest

from asciistorm.screen import Cell, ScreenBuffer, TerminalSession
from asciistorm.vector2 import Color, Vector2

ANSI = re.compile(r"\x1b\[[0-9;]*m")


def plain(text):
    return ANSI.sub("", text)


def test_cleared_buffer_is_blank():
    buf = ScreenBuffer(Vector2(4, 3))
    buf.clear()
    assert plain(buf.render()).split("\n") == [" " * 4] * 3


def test_draw_then_render_text():
    size = Vector2(3, 2)
    buf = ScreenBuffer(size)
    cells = [Cell(c, Color.WHITE) for c in "abcdef"]
    buf.draw(cells)
    assert plain(buf.render()).split("\n") == ["abc", "def"]


def test_render_uses_colour_code():
    buf = ScreenBuffer(Vector2(1, 1))
    buf.draw([Cell("x", Color.RED)])
    assert "\x1b[31m" in buf.render()


def test_clear_keeps_colour_blanks_chars():
    buf = ScreenBuffer(Vector2(2, 1))
    buf.draw([Cell("a", Color.GREEN), Cell("b", Color.GREEN)])
    buf.clear()
    rendered = buf.render()
    assert plain(rendered) == "  "
    assert "\x1b[32m" in rendered


def test_draw_wrong_length():
    buf = ScreenBuffer(Vector2(2, 2))
    with pytest.raises(ValueError):
        buf.draw([Cell()] * 3)


def test_invalid_size():
    with pytest.raises(ValueError):
        ScreenBuffer(Vector2(0, 5))


def test_session_without_keyboard_reads_nothing():
    with TerminalSession() as session:
        assert session.read_events() == []