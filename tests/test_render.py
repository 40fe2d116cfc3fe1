from __future__ import annotations

from bytedit.core.buffer import ByteStore
from bytedit.core.render import HELP_LINES, Marker, render
from bytedit.core.syntax import SyntaxHighlighter
from bytedit.core.view import Mode, ViewState


def make_view(mode: Mode = Mode.HEX, cursor: int = 0) -> ViewState:
    view = ViewState(cursor_offset=cursor)
    view.set_mode(mode)
    return view


def test_header_lines() -> None:
    store = ByteStore(b"abc")
    store.filename = "notes.txt"
    frame = render(store, make_view())
    lines = frame.text_lines()
    assert lines[0] == "File: notes.txt"
    assert lines[1] == "Mode: [HEX]"
    assert lines[2] == "-" * 56
    assert frame.markers == (Marker.CLEAR_SCREEN, Marker.HOME)


def test_header_marks_dirty_and_unnamed_store() -> None:
    store = ByteStore()
    store.set(0, 1)
    lines = render(store, make_view(Mode.BINARY)).text_lines()
    assert lines[0] == "File: [No Name] [Modified]"
    assert lines[1] == "Mode: [BINARY]"


def test_hex_grid_rows() -> None:
    store = ByteStore(bytes(range(20)))
    frame = render(store, make_view(), offsets=False)
    body = [''.join(s.text for s in line) for line in frame.body]
    assert body == [
        "00 01 02 03 04 05 06 07 08 09 0A 0B 0C 0D 0E 0F",
        "10 11 12 13",
    ]


def test_hex_grid_offset_gutter() -> None:
    store = ByteStore(bytes(range(20)))
    frame = render(store, make_view())
    body = [''.join(s.text for s in line) for line in frame.body]
    assert body[0].startswith("00000000  00 01")
    assert body[1] == "00000010  10 11 12 13"


def test_binary_grid_sanitizes_high_bytes() -> None:
    store = ByteStore(bytes([0x41, 0xFF]))
    frame = render(store, make_view(Mode.BINARY), offsets=False)
    assert [''.join(s.text for s in line) for line in frame.body] == ["01000001 00101110"]


def test_cursor_cell_highlighted() -> None:
    store = ByteStore(bytes(range(40)))
    frame = render(store, make_view(cursor=17))
    assert frame.highlighted() == ["11"]
    assert frame.cursor_line == 1


def test_grid_shows_only_visible_rows_from_window() -> None:
    store = ByteStore(bytes(1000))
    view = make_view()
    for _ in range(25):
        view.move_down(store)

    frame = render(store, view)
    assert len(frame.body) == 20
    assert frame.body[0][0].text.startswith(f"{view.window_start:08X}")
    assert frame.cursor_line == 19


def test_empty_store_renders_header_and_details_only() -> None:
    store = ByteStore()
    for mode in Mode:
        frame = render(store, make_view(mode))
        assert frame.body == []
        assert frame.cursor_line is None
        assert "Selected Offset (Dec): 0" in frame.text_lines()


def test_details_panel() -> None:
    store = ByteStore(b"xyA")
    lines = render(store, make_view(cursor=2)).text_lines()
    assert "Selected Offset (Dec): 2" in lines
    assert any("Hex: 41 | Bin: 01000001 | Char: A" in line for line in lines)
    assert lines[-len(HELP_LINES):] == HELP_LINES


def test_details_panel_escapes_control_and_sanitizes_high_bytes() -> None:
    store = ByteStore(b"\n\xfe")
    lines = render(store, make_view()).text_lines()
    assert any("Hex: 0A | Bin: 00001010 | Char: \\n" in line for line in lines)

    lines = render(store, make_view(cursor=1)).text_lines()
    assert any("Hex: 2E | Bin: 00101110 | Char: ." in line for line in lines)


def test_char_mode_renders_whole_buffer_by_lines() -> None:
    store = ByteStore(b"one\ntwo\n\xe9x")
    frame = render(store, make_view(Mode.CHAR))
    body = [''.join(s.text for s in line) for line in frame.body]
    assert body == ["one", "two", ".x"]
    assert frame.highlighted() == ["o"]


def test_char_mode_is_not_windowed() -> None:
    store = ByteStore(b"line\n" * 100)
    frame = render(store, make_view(Mode.CHAR, cursor=496))
    assert len(frame.body) == 101
    assert frame.cursor_line == 99


def test_char_mode_cursor_on_line_feed() -> None:
    store = ByteStore(b"ab\ncd")
    frame = render(store, make_view(Mode.CHAR, cursor=2))
    assert frame.cursor_line == 0
    assert frame.highlighted() == [" "]
    assert ''.join(s.text for s in frame.body[0]) == "ab "


def test_char_mode_styles_from_highlighter() -> None:
    store = ByteStore(b"import os\n")
    highlighter = SyntaxHighlighter()
    assert highlighter.detect_language("script.py") is not None

    frame = render(store, make_view(Mode.CHAR, cursor=9), highlighter)
    first = frame.body[0]
    assert ''.join(s.text for s in first) == "import os"
    assert first[0].text == "import"
    assert first[0].style == "keyword"
