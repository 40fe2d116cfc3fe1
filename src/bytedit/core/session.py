"""
Editing session applying commands to the view state and byte store.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Final, Optional

from ..utils.hex_utils import bin_to_byte, char_to_byte, hex_to_byte
from .buffer import ByteStore, SaveFailed
from .commands import Command, EDIT_COMMANDS, MODE_COMMANDS
from .render import Frame, render
from .syntax import SyntaxHighlighter
from .view import Mode, ViewState

logger = logging.getLogger(__name__)

UNSAVED_CHANGES_MESSAGE: Final[str] = "Buffer has unsaved changes. Press Q again to discard them or S to save."
SAVE_AS_MESSAGE: Final[str] = "Enter filename to save"

EDIT_PROMPTS: Final[Dict[Mode, str]] = {
    Mode.HEX: "Enter a 2-digit hex value:",
    Mode.BINARY: "Enter an 8-bit binary value:",
    Mode.CHAR: "Enter an ASCII character:",
}


@dataclass(frozen=True)
class Outcome:
    """Result of a session operation, with a message for the status bar."""

    ok: bool
    message: str = ""


class EditorSession:
    """Owns the store and view of one file and applies commands to them."""

    def __init__(self, store: ByteStore, view: Optional[ViewState] = None,
                 highlighter: Optional[SyntaxHighlighter] = None, offsets: bool = True) -> None:
        self.store = store
        self.view = view or ViewState()
        self.highlighter = highlighter
        self.offsets = offsets
        self.running = True
        self._quit_warning_shown = False

    def apply(self, command: Command) -> Outcome:
        """
        Apply a command that needs no further input.

        Edit commands only switch to the matching mode here; the value is
        supplied afterwards through edit().
        """

        if command is not Command.QUIT:
            self._quit_warning_shown = False

        if command is Command.MOVE_UP:
            return Outcome(self.view.move_up(self.store))
        if command is Command.MOVE_DOWN:
            return Outcome(self.view.move_down(self.store))
        if command is Command.MOVE_LEFT:
            return Outcome(self.view.move_left(self.store))
        if command is Command.MOVE_RIGHT:
            return Outcome(self.view.move_right(self.store))

        if command in MODE_COMMANDS:
            return self.set_mode(MODE_COMMANDS[command])

        if command in EDIT_COMMANDS:
            return self.begin_edit(EDIT_COMMANDS[command])

        if command is Command.SAVE:
            return self.save()

        if command is Command.QUIT:
            return self.quit()

        return Outcome(False)

    def set_mode(self, mode: Mode) -> Outcome:
        self.view.set_mode(mode)
        logger.debug("Switched to %s mode", mode.label)
        return Outcome(True, f"{mode.label} mode")

    def begin_edit(self, mode: Mode) -> Outcome:
        """Switch to the mode of an edit and return its prompt."""

        self.view.set_mode(mode)
        return Outcome(True, EDIT_PROMPTS[mode])

    def edit(self, mode: Mode, text: str) -> Outcome:
        """
        Write the byte parsed from text at the cursor.

        Args:
            mode: Representation the text is written in
            text: Hex digits, binary digits or a character

        Returns:
            Outcome: Failed with the byte unchanged if text does not parse
        """

        if mode is Mode.HEX:
            value = hex_to_byte(text)
        elif mode is Mode.BINARY:
            value = bin_to_byte(text)
        else:
            value = char_to_byte(text[0]) if text else None

        if value is None:
            logger.debug("Discarded invalid %s input %r", mode.label, text)
            return Outcome(False, f"Error: Invalid {mode.label.lower()} value '{text}'")

        offset = self.view.cursor_offset
        self.store.set(offset, value)
        logger.debug("Set offset %d to 0x%02X", offset, value)
        return Outcome(True, f"Offset {offset} set to 0x{value:02X}")

    def begin_save_as(self) -> Outcome:
        """Start naming an unnamed buffer before it is saved."""

        self._quit_warning_shown = False
        return Outcome(True, SAVE_AS_MESSAGE)

    def save(self, filename: Optional[str] = None) -> Outcome:
        try:
            if self.store.save(filename):
                if self.highlighter is not None and filename:
                    self.highlighter.detect_language(filename)
                return Outcome(True, f"Saved: {self.store.filename}")
        except SaveFailed as e:
            logger.error("%s", e)
            return Outcome(False, f"Error saving: {e}")

        return Outcome(False, "Error: No filename specified")

    def quit(self) -> Outcome:
        """Stop the session, asking for a second quit on unsaved changes."""

        if self.store.is_dirty() and not self._quit_warning_shown:
            self._quit_warning_shown = True
            return Outcome(False, UNSAVED_CHANGES_MESSAGE)

        self.running = False
        return Outcome(True)

    def render(self) -> Frame:
        return render(self.store, self.view, self.highlighter, self.offsets)
