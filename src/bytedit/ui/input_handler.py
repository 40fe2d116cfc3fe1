"""
Input handler module for turning keyboard events into editor commands.
"""

import curses
from typing import Dict, Final, Optional, TYPE_CHECKING

from ..core.commands import Command, EDIT_COMMANDS
from ..core.session import EditorSession, EDIT_PROMPTS
from ..core.view import Mode

if TYPE_CHECKING:
    from .window import WindowManager

KEY_COMMANDS: Final[Dict[int, Command]] = {
    curses.KEY_UP: Command.MOVE_UP,
    curses.KEY_DOWN: Command.MOVE_DOWN,
    curses.KEY_LEFT: Command.MOVE_LEFT,
    curses.KEY_RIGHT: Command.MOVE_RIGHT,

    ord('1'): Command.SET_MODE_HEX,
    ord('2'): Command.SET_MODE_BINARY,
    ord('3'): Command.SET_MODE_CHAR,

    ord('h'): Command.EDIT_HEX,
    ord('H'): Command.EDIT_HEX,
    ord('b'): Command.EDIT_BINARY,
    ord('B'): Command.EDIT_BINARY,
    ord('c'): Command.EDIT_CHAR,
    ord('C'): Command.EDIT_CHAR,

    ord('s'): Command.SAVE,
    ord('S'): Command.SAVE,
    ord('q'): Command.QUIT,
    ord('Q'): Command.QUIT,
}

ENTER_KEYS: Final = (ord('\n'), ord('\r'), curses.KEY_ENTER)
BACKSPACE_KEYS: Final = (curses.KEY_BACKSPACE, 127, 8)
ESCAPE: Final[int] = 27

SAVE_AS_PROMPT: Final[str] = "Save as:"
CANCELLED_STATUS_MESSAGE: Final[str] = "Cancelled"


def command_for_key(ch: int) -> Command:
    """Map a curses key code to a command."""

    return KEY_COMMANDS.get(ch, Command.UNRECOGNIZED)


class InputHandler:
    """Handles keyboard input and executes corresponding commands."""

    def __init__(self, session: EditorSession, window_manager: 'WindowManager') -> None:
        self.session = session
        self.window_manager = window_manager
        self.window_manager.input_handler = self
        self.edit_mode: Optional[Mode] = None
        self.save_mode = False
        self.query = ""

    @property
    def prompt(self) -> Optional[str]:
        """Get the prompt line to draw, if a prompt is open."""

        if self.edit_mode is not None:
            return f"{EDIT_PROMPTS[self.edit_mode]} {self.query}"

        if self.save_mode:
            return f"{SAVE_AS_PROMPT} {self.query}"

        return None

    def handle_input(self, ch: int) -> bool:
        """Handle a single keyboard input. Returns False if should quit."""

        if self.edit_mode is not None or self.save_mode:
            self._handle_prompt_input(ch)
            return self.session.running

        command = command_for_key(ch)

        if command in EDIT_COMMANDS:
            self._start_edit(command)
            return self.session.running

        if command is Command.SAVE and not self.session.store.filename:
            self._start_save_as()
            return self.session.running

        outcome = self.session.apply(command)
        if outcome.message:
            self.window_manager.status_message = outcome.message

        return self.session.running

    def _start_edit(self, command: Command) -> None:
        """Switch to the edit's mode and open its prompt."""

        outcome = self.session.apply(command)
        self.edit_mode = self.session.view.mode
        self.query = ""
        self.window_manager.status_message = outcome.message

    def _start_save_as(self) -> None:
        outcome = self.session.begin_save_as()
        self.save_mode = True
        self.query = ""
        self.window_manager.status_message = outcome.message

    def _close_prompt(self) -> None:
        self.edit_mode = None
        self.save_mode = False
        self.query = ""

    def _handle_prompt_input(self, ch: int) -> None:
        """Handle a key while the edit or save-as prompt is open."""

        if ch == ESCAPE:
            self._close_prompt()
            self.window_manager.status_message = CANCELLED_STATUS_MESSAGE
            return

        # A char edit takes the very next printable key
        if self.edit_mode is Mode.CHAR:
            if 32 <= ch <= 126:
                self._commit(chr(ch))
            return

        if ch in ENTER_KEYS:
            self._commit(self.query)
            return

        if ch in BACKSPACE_KEYS:
            self.query = self.query[:-1]
            return

        if 32 <= ch <= 126:
            self.query += chr(ch)

    def _commit(self, text: str) -> None:
        """Apply the prompt's text and close the prompt."""

        edit_mode, save_mode = self.edit_mode, self.save_mode
        self._close_prompt()

        if edit_mode is not None:
            outcome = self.session.edit(edit_mode, text)
        elif save_mode and text:
            outcome = self.session.save(text)
        else:
            self.window_manager.status_message = CANCELLED_STATUS_MESSAGE
            return

        self.window_manager.status_message = outcome.message
