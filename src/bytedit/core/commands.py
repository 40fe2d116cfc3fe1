"""
Abstract editor commands produced by the input layer.
"""

from enum import Enum, auto
from typing import Dict, Final

from .view import Mode


class Command(Enum):
    """A single user request, independent of how it was typed."""

    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    SET_MODE_HEX = auto()
    SET_MODE_BINARY = auto()
    SET_MODE_CHAR = auto()
    EDIT_HEX = auto()
    EDIT_BINARY = auto()
    EDIT_CHAR = auto()
    SAVE = auto()
    QUIT = auto()
    UNRECOGNIZED = auto()


MODE_COMMANDS: Final[Dict[Command, Mode]] = {
    Command.SET_MODE_HEX: Mode.HEX,
    Command.SET_MODE_BINARY: Mode.BINARY,
    Command.SET_MODE_CHAR: Mode.CHAR,
}

EDIT_COMMANDS: Final[Dict[Command, Mode]] = {
    Command.EDIT_HEX: Mode.HEX,
    Command.EDIT_BINARY: Mode.BINARY,
    Command.EDIT_CHAR: Mode.CHAR,
}
