"""
Syntax highlighting module for the char view using Pygments.
"""

import logging
from typing import Any, Dict, Final, List, Optional

from pygments.lexers import get_lexer_for_filename
from pygments.token import Token
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)

SYNTAX_STYLES: Final[List[str]] = [
    'keyword',
    'string',
    'comment',
    'function',
    'class',
    'number',
    'operator',
    'variable',
]

TOKEN_STYLE_MAP: Final[Dict[Any, str]] = {
    Token.Keyword: 'keyword',
    Token.Name.Builtin: 'keyword',
    Token.Name.Class: 'class',
    Token.Name.Function: 'function',
    Token.Name.Decorator: 'function',
    Token.Name.Variable: 'variable',
    Token.Name.Tag: 'keyword',
    Token.Name.Attribute: 'variable',
    Token.String: 'string',
    Token.Comment: 'comment',
    Token.Number: 'number',
    Token.Operator: 'operator',
}


class SyntaxHighlighter:
    """Maps characters of a text view to style names using Pygments."""

    def __init__(self) -> None:
        self.lexer = None
        self.language: Optional[str] = None

    def detect_language(self, filename: Optional[str]) -> Optional[str]:
        """
        Detect the language of a file from its name.

        Args:
            filename: The name of the file

        Returns:
            The detected language or None if not detected
        """

        self.lexer = None
        self.language = None
        if not filename:
            return None

        try:
            self.lexer = get_lexer_for_filename(filename, stripnl=False, ensurenl=False)
        except ClassNotFound:
            return None

        self.language = self.lexer.name
        logger.debug("Detected %s for %s", self.language, filename)
        return self.language

    def styles(self, text: str) -> List[Optional[str]]:
        """
        Get the style name of every character in text.

        Args:
            text: The text to tokenize

        Returns:
            A list the length of text holding a style name or None
        """

        result: List[Optional[str]] = [None] * len(text)
        if not self.lexer or not text:
            return result

        for index, token_type, value in self.lexer.get_tokens_unprocessed(text):
            style = self._get_token_style(token_type)
            if style is None:
                continue

            end = min(index + len(value), len(text))
            for position in range(index, end):
                result[position] = style

        return result

    def _get_token_style(self, token_type: Any) -> Optional[str]:
        """Walk up the token hierarchy until a mapped type is found."""

        while token_type is not None:
            if token_type in TOKEN_STYLE_MAP:
                return TOKEN_STYLE_MAP[token_type]
            token_type = token_type.parent

        return None
