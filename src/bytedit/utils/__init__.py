"""
Utility package for byte conversion support functions.
"""

from .hex_utils import (
    sanitize,
    to_hex,
    to_binary,
    to_char,
    hex_to_byte,
    bin_to_byte,
    char_to_byte,
    format_offset
)

__all__ = [
    'sanitize',
    'to_hex',
    'to_binary',
    'to_char',
    'hex_to_byte',
    'bin_to_byte',
    'char_to_byte',
    'format_offset'
]
