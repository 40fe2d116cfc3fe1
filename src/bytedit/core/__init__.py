"""
Core package for the byte editor.

This package implements the editing model: the ByteStore holding file
bytes, the ViewState tracking cursor, window and mode, the renderer that
turns both into a Frame, and the EditorSession applying commands.
"""

from .buffer import ByteStore, LoadFailed, SaveFailed
from .commands import Command
from .render import Frame, Marker, Segment, render
from .session import EditorSession, Outcome
from .view import Mode, ViewState

__all__ = [
    'ByteStore',
    'LoadFailed',
    'SaveFailed',
    'Command',
    'Frame',
    'Marker',
    'Segment',
    'render',
    'EditorSession',
    'Outcome',
    'Mode',
    'ViewState'
]
