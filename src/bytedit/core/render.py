"""
Render module turning the store and view state into a text frame.

The frame is a structured description of the screen: lines made of
segments, where a segment may be highlighted (the cursor cell) or carry a
syntax style name. Output sinks translate it into terminal calls.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, TYPE_CHECKING

from ..utils.hex_utils import format_offset, to_binary, to_char, to_hex
from .view import Mode, ViewState

if TYPE_CHECKING:
    from .buffer import ByteStore
    from .syntax import SyntaxHighlighter

SEPARATOR = '-' * 56
MODIFIED_TAG = ' [Modified]'
NO_NAME = '[No Name]'

HELP_LINES = [
    "Commands: [Arrows] Navigate",
    "    View Mode   [1] Hex  [2] Bin  [3] Char",
    "    Edit Mode   [H] Hex  [B] Bin  [C] Char",
    "    [S] Save    [Q] Quit",
]


class Marker(Enum):
    """Control markers an output sink applies before drawing lines."""

    CLEAR_SCREEN = 'clear'
    HOME = 'home'


@dataclass(frozen=True)
class Segment:
    text: str
    highlight: bool = False
    style: Optional[str] = None


Line = List[Segment]


@dataclass
class Frame:
    """One rendered screen."""

    header: List[Line] = field(default_factory=list)
    body: List[Line] = field(default_factory=list)
    footer: List[Line] = field(default_factory=list)
    cursor_line: Optional[int] = None
    markers: Tuple[Marker, ...] = (Marker.CLEAR_SCREEN, Marker.HOME)

    @property
    def lines(self) -> List[Line]:
        return self.header + self.body + self.footer

    def text_lines(self) -> List[str]:
        """Get the frame as plain strings, one per line."""

        return [''.join(segment.text for segment in line) for line in self.lines]

    def to_text(self) -> str:
        return '\n'.join(self.text_lines())

    def highlighted(self) -> List[str]:
        """Get the text of every highlighted segment in drawing order."""

        return [segment.text for line in self.lines for segment in line if segment.highlight]


def _append(line: Line, text: str, highlight: bool = False, style: Optional[str] = None) -> None:
    """Append text to a line, merging it into the last segment when alike."""

    if line and not highlight:
        last = line[-1]
        if not last.highlight and last.style == style:
            line[-1] = Segment(last.text + text, False, style)
            return

    line.append(Segment(text, highlight, style))


def render_header(store: 'ByteStore', view: ViewState) -> List[Line]:
    name = store.filename or NO_NAME
    title = f"File: {name}" + (MODIFIED_TAG if store.is_dirty() else "")

    return [
        [Segment(title)],
        [Segment(f"Mode: [{view.mode.label}]")],
        [Segment(SEPARATOR)],
    ]


def render_grid(store: 'ByteStore', view: ViewState, offsets: bool = True) -> Tuple[List[Line], Optional[int]]:
    """
    Render the visible rows of the hex or binary grid.

    Args:
        store: Bytes to display
        view: Cursor and window to display
        offsets: Whether to prefix each row with its offset

    Returns:
        The body lines and the index of the line holding the cursor
    """

    cell_format = to_binary if view.mode is Mode.BINARY else to_hex
    size = store.size()
    lines: List[Line] = []
    cursor_line = None

    for row in range(view.visible_rows):
        row_start = view.window_start + row * view.row_width
        if row_start >= size:
            break

        line: Line = []
        if offsets:
            _append(line, format_offset(row_start) + "  ")

        for column in range(view.row_width):
            offset = row_start + column
            if offset >= size:
                break

            if column > 0:
                _append(line, " ")

            is_cursor = offset == view.cursor_offset
            if is_cursor:
                cursor_line = len(lines)
            _append(line, cell_format(store.get(offset)), is_cursor)

        lines.append(line)

    return lines, cursor_line


def render_chars(store: 'ByteStore', view: ViewState,
                 highlighter: Optional['SyntaxHighlighter'] = None) -> Tuple[List[Line], Optional[int]]:
    """
    Render the whole buffer as raw characters, breaking lines at line feeds.

    Args:
        store: Bytes to display
        view: Cursor to display
        highlighter: Optional highlighter supplying style names

    Returns:
        The body lines and the index of the line holding the cursor
    """

    size = store.size()
    if size == 0:
        return [], None

    text = ''.join(to_char(store.get(offset)) for offset in range(size))
    styles = highlighter.styles(text) if highlighter else [None] * size

    lines: List[Line] = []
    line: Line = []
    cursor_line = None

    for offset, char in enumerate(text):
        is_cursor = offset == view.cursor_offset
        if is_cursor:
            cursor_line = len(lines)

        if char == '\n':
            if is_cursor:
                _append(line, " ", True)
            lines.append(line)
            line = []
            continue

        _append(line, char, is_cursor, styles[offset])

    lines.append(line)
    return lines, cursor_line


def render_details(store: 'ByteStore', view: ViewState) -> List[Line]:
    selected = store.get(view.cursor_offset)
    char = to_char(selected)
    if not char.isprintable():
        char = repr(char)[1:-1]

    lines = [
        "",
        f"Selected Offset (Dec): {view.cursor_offset}",
        f"Current Value   Hex: {to_hex(selected)} | Bin: {to_binary(selected)} | Char: {char}",
    ] + HELP_LINES

    return [[Segment(text)] for text in lines]


def render(store: 'ByteStore', view: ViewState,
           highlighter: Optional['SyntaxHighlighter'] = None, offsets: bool = True) -> Frame:
    """Produce the frame for the current store and view state."""

    if view.mode.is_grid:
        body, cursor_line = render_grid(store, view, offsets)
    else:
        body, cursor_line = render_chars(store, view, highlighter)

    return Frame(
        header=render_header(store, view),
        body=body,
        footer=render_details(store, view),
        cursor_line=cursor_line,
    )
