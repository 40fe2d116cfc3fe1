"""
UI package for the curses front end of the byte editor.

This package implements the terminal side of the editor: the WindowManager
drawing rendered frames and the status bar, and the InputHandler turning
key presses into editor commands and prompts.
"""

from .window import WindowManager
from .input_handler import InputHandler

__all__ = ['WindowManager', 'InputHandler']
