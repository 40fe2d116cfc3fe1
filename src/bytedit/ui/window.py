"""
Window management module drawing rendered frames with curses.
"""

import curses
import os
import time
from typing import Dict, List, Optional, Tuple, TYPE_CHECKING

from ..core.render import Frame, Line, Marker, Segment
from ..core.syntax import SYNTAX_STYLES
from ..utils.hex_utils import format_offset

if TYPE_CHECKING:
    from ..core.session import EditorSession
    from .input_handler import InputHandler

STYLE_COLORS: Dict[str, int] = {
    'keyword': curses.COLOR_CYAN,
    'string': curses.COLOR_YELLOW,
    'comment': curses.COLOR_GREEN,
    'function': curses.COLOR_CYAN,
    'class': curses.COLOR_MAGENTA,
    'number': curses.COLOR_RED,
    'operator': curses.COLOR_WHITE,
    'variable': curses.COLOR_WHITE,
}


def safe_addstr(window: 'curses.window', y: int, x: int, string: str, attr: int = 0) -> None:
    """Safely add a string to a window, truncating if necessary."""

    height, width = window.getmaxyx()
    if y >= height or x >= width:
        return

    available = width - x
    if available <= 0:
        return

    if len(string) > available:
        string = string[:available]

    try:
        window.addstr(y, x, string, attr)
    except curses.error:
        pass


def printable(text: str) -> str:
    """Replace characters curses cannot draw in place with '.'."""

    return ''.join(char if char.isprintable() else '.' for char in text)


def wrap_line(line: Line, width: int) -> List[Line]:
    """Split a line into rows no wider than width, keeping segment attributes."""

    if width <= 0:
        return [line]

    rows: List[Line] = [[]]
    used = 0
    for segment in line:
        text = segment.text
        while text:
            if used == width:
                rows.append([])
                used = 0

            chunk = text[:width - used]
            rows[-1].append(Segment(chunk, segment.highlight, segment.style))
            used += len(chunk)
            text = text[len(chunk):]

    return rows


def wrap_body(frame: Frame, width: int) -> Tuple[List[Line], Optional[int]]:
    """Wrap the frame body to width and find the row holding the cursor cell."""

    rows: List[Line] = []
    cursor_row = None
    for index, line in enumerate(frame.body):
        wrapped = wrap_line(line, width)
        if index == frame.cursor_line:
            offset = next((i for i, row in enumerate(wrapped) if any(s.highlight for s in row)), 0)
            cursor_row = len(rows) + offset
        rows.extend(wrapped)

    return rows, cursor_row


def scroll_start(cursor_line: Optional[int], line_count: int, visible: int) -> int:
    """Get the first body line to draw so the cursor line stays visible."""

    if visible <= 0 or line_count <= visible or cursor_line is None:
        return 0

    start = max(0, cursor_line - (visible // 2))
    return min(start, line_count - visible)


class WindowManager:
    """Draws frames on the curses screen and keeps the status bar."""

    STATUS_MESSAGE_DURATION = 3
    STATUS_COLOR = 1
    ERROR_COLOR = 7
    STYLE_COLOR_BASE = 11

    def __init__(self, stdscr: 'curses.window', session: 'EditorSession') -> None:
        self.stdscr = stdscr
        self.session = session
        self.height, self.width = stdscr.getmaxyx()

        if self.height < 10 or self.width < 40:
            raise ValueError(f"Terminal too small. Minimum size: 40x10, Current size: {self.width}x{self.height}")

        self.input_handler: Optional['InputHandler'] = None
        self.status_message = None
        self.style_pairs: Dict[str, int] = {}

        self.init_colors()

    @property
    def status_message(self) -> Optional[str]:
        return self._status_message

    @status_message.setter
    def status_message(self, message: Optional[str]) -> None:
        # A new message restarts the display timer
        self._status_message = message
        self.status_message_time = 0.0

    def init_colors(self) -> None:
        """Initialize color pairs for the status bar and syntax styles."""

        if not curses.has_colors():
            return

        curses.start_color()
        curses.init_pair(self.STATUS_COLOR, curses.COLOR_WHITE, -1)
        curses.init_pair(self.ERROR_COLOR, curses.COLOR_RED, -1)

        for index, style in enumerate(SYNTAX_STYLES):
            pair = self.STYLE_COLOR_BASE + index
            curses.init_pair(pair, STYLE_COLORS[style], -1)
            self.style_pairs[style] = pair

    def segment_attr(self, highlight: bool, style: Optional[str]) -> int:
        if highlight:
            return curses.A_REVERSE | curses.A_BOLD

        if style in self.style_pairs:
            return curses.color_pair(self.style_pairs[style])

        return curses.A_NORMAL

    def draw_line(self, y: int, line: Line) -> None:
        x = 0
        for segment in line:
            text = printable(segment.text)
            safe_addstr(self.stdscr, y, x, text, self.segment_attr(segment.highlight, segment.style))
            x += len(text)
            if x >= self.width:
                break

    def draw(self, frame: Frame) -> None:
        """Draw a frame, wrapping wide rows and scrolling the body to keep the cursor in view."""

        for marker in frame.markers:
            if marker is Marker.CLEAR_SCREEN:
                self.stdscr.erase()
            elif marker is Marker.HOME:
                self.stdscr.move(0, 0)

        y = 0
        for line in frame.header:
            self.draw_line(y, line)
            y += 1

        rows, cursor_row = wrap_body(frame, self.width)
        visible = max(0, self.height - 1 - len(frame.header) - len(frame.footer))
        start = scroll_start(cursor_row, len(rows), visible)
        for line in rows[start:start + visible]:
            self.draw_line(y, line)
            y += 1

        for line in frame.footer:
            if y >= self.height - 1:
                break
            self.draw_line(y, line)
            y += 1

        self.draw_status()
        self.stdscr.noutrefresh()
        curses.doupdate()

    def status_text(self) -> List[str]:
        """Get the default status bar: left part and position part."""

        store = self.session.store
        view = self.session.view

        name = os.path.basename(store.filename) if store.filename else '[No Name]'
        status = f" {name} [{store.size()} bytes] [{view.mode.label}] "
        if store.is_dirty():
            status += "[Modified] "

        pos_info = f"Offset: 0x{format_offset(view.cursor_offset)} ({view.cursor_offset})"
        return [status, pos_info]

    def draw_status(self) -> None:
        """Draw the status bar, a prompt or a transient message."""

        y = self.height - 1
        attr = curses.color_pair(self.STATUS_COLOR) | curses.A_BOLD | curses.A_REVERSE

        prompt = self.input_handler.prompt if self.input_handler else None
        if prompt is not None:
            safe_addstr(self.stdscr, y, 0, " " + prompt + " ", attr)
            return

        if self.status_message:
            if self.status_message_time == 0:
                self.status_message_time = time.time()
            elif time.time() - self.status_message_time > self.STATUS_MESSAGE_DURATION:
                self.status_message = None
            else:
                if self.status_message.startswith("Error:"):
                    attr = curses.color_pair(self.ERROR_COLOR) | curses.A_BOLD
                safe_addstr(self.stdscr, y, 0, " " + self.status_message, attr)
                return

        status, pos_info = self.status_text()
        available_width = self.width - len(pos_info) - 1
        if len(status) > available_width:
            status = status[:max(0, available_width - 4)] + "... "
        else:
            status += " " * (available_width - len(status))

        safe_addstr(self.stdscr, y, 0, status + pos_info, attr)

    def resize(self) -> None:
        """Handle terminal resize events."""

        self.height, self.width = self.stdscr.getmaxyx()

        if self.height < 10 or self.width < 40:
            self.status_message = "Error: Terminal too small"
