"""
View state module tracking the cursor, scroll window and display mode.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final, TYPE_CHECKING

if TYPE_CHECKING:
    from .buffer import ByteStore

ROW_WIDTH: Final[int] = 16
VISIBLE_ROWS: Final[int] = 20
LINE_FEED: Final[int] = 0x0A


class Mode(Enum):
    """Representation used to display and edit bytes."""

    HEX = 'hex'
    BINARY = 'binary'
    CHAR = 'char'

    @property
    def label(self) -> str:
        return self.name

    @property
    def is_grid(self) -> bool:
        return self is not Mode.CHAR


@dataclass
class ViewState:
    """
    Cursor and window state for one editing session.

    In the grid modes the window starts on a row boundary and always
    contains the cursor. Char mode renders the whole buffer, so the
    window is pinned to offset 0 there.
    """

    cursor_offset: int = 0
    window_start: int = 0
    mode: Mode = Mode.HEX
    row_width: int = ROW_WIDTH
    visible_rows: int = VISIBLE_ROWS

    @property
    def window_size(self) -> int:
        return self.visible_rows * self.row_width

    @property
    def cursor_row(self) -> int:
        return self.cursor_offset // self.row_width

    def set_mode(self, mode: Mode) -> None:
        """Switch display mode and realign the window for it."""

        self.mode = mode
        if mode.is_grid:
            self.window_start = self.cursor_row * self.row_width
        else:
            self.window_start = 0

    def move_cursor(self, delta: int, store: 'ByteStore') -> bool:
        """
        Move the cursor by delta bytes, or by lines in char mode.

        Args:
            delta: +-1 for horizontal moves, +-row_width for vertical ones
            store: Byte store bounding the movement

        Returns:
            bool: True if the cursor moved
        """

        old_offset = self.cursor_offset

        if self.mode.is_grid:
            self._move_grid(delta, store.size())
        elif delta in (1, -1):
            self._move_linear(delta, store.size())
        elif delta > 0:
            self._move_next_line(store)
        elif delta < 0:
            self._move_previous_line(store)

        return self.cursor_offset != old_offset

    def move_left(self, store: 'ByteStore') -> bool:
        return self.move_cursor(-1, store)

    def move_right(self, store: 'ByteStore') -> bool:
        return self.move_cursor(1, store)

    def move_up(self, store: 'ByteStore') -> bool:
        return self.move_cursor(-self.row_width, store)

    def move_down(self, store: 'ByteStore') -> bool:
        return self.move_cursor(self.row_width, store)

    def _move_linear(self, delta: int, size: int) -> bool:
        new_offset = self.cursor_offset + delta
        if not 0 <= new_offset < size:
            return False

        self.cursor_offset = new_offset
        return True

    def _move_grid(self, delta: int, size: int) -> None:
        if not self._move_linear(delta, size):
            return

        if self.cursor_offset < self.window_start:
            self.window_start = self.cursor_row * self.row_width
        elif self.cursor_offset >= self.window_start + self.window_size:
            self.window_start = (self.cursor_row - self.visible_rows + 1) * self.row_width

    def _move_next_line(self, store: 'ByteStore') -> None:
        size = store.size()
        for offset in range(self.cursor_offset, size):
            if store.get(offset) == LINE_FEED:
                if offset + 1 < size:
                    self.cursor_offset = offset + 1
                return

    def _move_previous_line(self, store: 'ByteStore') -> None:
        if self.cursor_offset == 0:
            return

        search = self.cursor_offset - 1
        # Step over the line feed ending the previous line when at a line start
        if search > 0 and store.get(search) == LINE_FEED:
            search -= 1

        while search > 0 and store.get(search) != LINE_FEED:
            search -= 1

        self.cursor_offset = search + 1 if store.get(search) == LINE_FEED else 0
