#!/usr/bin/python3

"""
Entry point for bytedit.
"""

import argparse
import curses
import logging
import os
import sys
from typing import Callable, List, Optional

from .core.buffer import ByteStore, LoadFailed
from .core.render import Frame
from .core.session import EditorSession
from .core.syntax import SyntaxHighlighter
from .core.view import Mode
from .ui.input_handler import InputHandler
from .ui.window import WindowManager

logger = logging.getLogger("bytedit")

LOG_ENV_VAR = "BYTEDIT_LOG"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
FRESH_BUFFER_PROMPT = "No file found. Create a new buffer? (y/n): "
PATH_PROMPT = "Enter a file path: "


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""

    parser = argparse.ArgumentParser(
        description="bytedit - Terminal Hex, Binary and Character Byte Editor"
    )
    parser.add_argument(
        "file",
        nargs="?",
        type=str,
        help="File to open"
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in Mode],
        default=Mode.HEX.value,
        help="Initial view mode"
    )
    parser.add_argument(
        "--no-offsets",
        action="store_true",
        help="Hide the row offset column in the hex and binary views"
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=os.environ.get(LOG_ENV_VAR),
        help=f"Write a debug log to this file (default: ${LOG_ENV_VAR})"
    )
    return parser.parse_args(argv)


def configure_logging(log_file: Optional[str]) -> None:
    """Send log records to a file; the terminal belongs to curses."""

    if not log_file:
        logger.addHandler(logging.NullHandler())
        return

    file_handler = logging.FileHandler(log_file)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(file_handler)
    logger.setLevel(logging.DEBUG)


def open_store(path: str, ask: Optional[Callable[[str], str]] = None) -> Optional[ByteStore]:
    """
    Load a file, offering a fresh A-Z buffer when it cannot be read.

    Args:
        path: File to load
        ask: Prompt function returning the user's answer

    Returns:
        The loaded or fresh store, or None if the user declined
    """

    ask = ask or input
    store = ByteStore()
    try:
        store.load(path)
        return store
    except LoadFailed as e:
        logger.warning("%s", e)

    try:
        answer = ask(FRESH_BUFFER_PROMPT)
    except EOFError:
        return None

    if answer.strip().lower().startswith('y'):
        return ByteStore.alphabet()

    return None


def run(stdscr: 'curses.window', session: EditorSession) -> None:
    """Main loop: draw, read a key, apply it."""

    curses.use_default_colors()
    curses.curs_set(0)
    stdscr.keypad(True)
    stdscr.timeout(100)

    window_manager = WindowManager(stdscr, session)
    input_handler = InputHandler(session, window_manager)

    frame: Optional[Frame] = None
    while session.running:
        current_height, current_width = stdscr.getmaxyx()
        if (current_height, current_width) != (window_manager.height, window_manager.width):
            window_manager.resize()

        if frame is None:
            frame = session.render()
        window_manager.draw(frame)

        try:
            ch = stdscr.getch()
        except KeyboardInterrupt:
            break
        except curses.error:
            continue

        if ch == -1:
            continue

        input_handler.handle_input(ch)
        frame = None


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the application."""

    args = parse_args(argv)
    configure_logging(args.log_file)

    path = args.file
    if not path:
        try:
            path = input(PATH_PROMPT).strip()
        except EOFError:
            path = ""

    store = open_store(path)
    if store is None:
        return 1

    highlighter = SyntaxHighlighter()
    highlighter.detect_language(store.filename)

    session = EditorSession(store, highlighter=highlighter, offsets=not args.no_offsets)
    session.set_mode(Mode(args.mode))

    try:
        curses.wrapper(run, session)
    except Exception as e:
        logger.exception("Editor crashed")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
