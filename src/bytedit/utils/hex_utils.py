"""
Utility functions for converting bytes to and from their text forms.
"""

from typing import Final, Optional

DISPLAY_LIMIT: Final[int] = 127
SUBSTITUTE_BYTE: Final[int] = ord('.')
HEX_DIGITS: Final[str] = '0123456789abcdefABCDEF'
UINT_MAX: Final[int] = 0xFFFFFFFF


def sanitize(byte: int) -> int:
    """Replace bytes outside the 7-bit range with '.' for display."""

    if byte > DISPLAY_LIMIT:
        return SUBSTITUTE_BYTE

    return byte


def to_hex(byte: int) -> str:
    """
    Format a byte as two uppercase hex digits.

    Args:
        byte (int): Byte value to format

    Returns:
        str: Zero-padded hex string of the sanitized byte
    """

    return f"{sanitize(byte):02X}"


def to_binary(byte: int) -> str:
    """
    Format a byte as eight binary digits.

    Args:
        byte (int): Byte value to format

    Returns:
        str: Zero-padded binary string of the sanitized byte
    """

    return f"{sanitize(byte):08b}"


def to_char(byte: int) -> str:
    """Get the sanitized byte as a single character."""

    return chr(sanitize(byte))


def hex_to_byte(hex_str: str) -> Optional[int]:
    """
    Parse a hex string into a byte.

    Leading whitespace, one sign and a 0x prefix are accepted, parsing
    stops at the first non-hex character and the value is truncated to
    8 bits. A minus sign negates modulo 2**32, as an unsigned read does.

    Args:
        hex_str (str): Hex text such as "A0", "0x7f" or "-1"

    Returns:
        int: Parsed byte or None if invalid
    """

    text = hex_str.lstrip()
    negative = text[:1] == '-'
    if text[:1] in ('+', '-'):
        text = text[1:]

    if text[:2] in ('0x', '0X'):
        text = text[2:]
        if not text[:1] or text[0] not in HEX_DIGITS:
            return None

    end = 0
    while end < len(text) and text[end] in HEX_DIGITS:
        end += 1

    if end == 0:
        return None

    value = int(text[:end], 16)
    if value > UINT_MAX:
        return None

    if negative:
        value = -value % (UINT_MAX + 1)

    return value & 0xFF


def bin_to_byte(bin_str: str) -> Optional[int]:
    """
    Parse an 8-digit binary string into a byte.

    Args:
        bin_str (str): Exactly eight '0'/'1' characters

    Returns:
        int: Parsed byte or None if invalid
    """

    if len(bin_str) != 8 or not all(c in '01' for c in bin_str):
        return None

    return int(bin_str, 2)


def char_to_byte(char: str) -> int:
    """Get the byte value of a character, truncated to 8 bits."""

    return ord(char) & 0xFF


def format_offset(offset: int, width: int = 8) -> str:
    """
    Format a byte offset as a hex string.

    Args:
        offset (int): Byte offset to format
        width (int): Number of hex digits to use

    Returns:
        str: Formatted hex string
    """

    return f"{offset:0{width}X}"
