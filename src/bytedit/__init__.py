"""
Terminal byte editor with hex, binary and character views.
"""

__version__ = "0.1.0"
