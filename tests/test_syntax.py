from __future__ import annotations

from bytedit.core.syntax import SyntaxHighlighter


def test_detect_language_from_filename() -> None:
    highlighter = SyntaxHighlighter()
    assert highlighter.detect_language("main.c") == "C"
    assert highlighter.lexer is not None


def test_unknown_or_missing_filename() -> None:
    highlighter = SyntaxHighlighter()
    assert highlighter.detect_language("blob.unknownext") is None
    assert highlighter.detect_language(None) is None
    assert highlighter.lexer is None


def test_styles_without_lexer_are_empty() -> None:
    assert SyntaxHighlighter().styles("abc") == [None, None, None]


def test_styles_cover_every_character() -> None:
    highlighter = SyntaxHighlighter()
    highlighter.detect_language("x.py")
    text = "x = 1  # note\n"
    styles = highlighter.styles(text)

    assert len(styles) == len(text)
    assert styles[text.index("1")] == "number"
    assert styles[text.index("#")] == "comment"
    assert styles[text.index("=")] == "operator"
