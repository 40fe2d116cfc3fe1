"""
Buffer module for holding file bytes in memory and persisting them.
"""

import logging
from typing import Optional

logger = logging.getLogger(__name__)


class LoadFailed(IOError):
    """Raised when a file cannot be read into the store."""


class SaveFailed(IOError):
    """Raised when the store cannot be written back to disk."""


class ByteStore:
    """In-memory byte sequence with random access and a dirty flag."""

    FRESH_SIZE = 1024

    def __init__(self, initial_data: bytes = b'') -> None:
        self.data = bytearray(initial_data)
        self.modified = False
        self.filename: Optional[str] = None

    @classmethod
    def alphabet(cls, length: int = FRESH_SIZE) -> 'ByteStore':
        """Create an unsaved store filled with a repeating A-Z pattern."""

        store = cls()
        for offset in range(length):
            store.set(offset, ord('A') + offset % 26)

        return store

    def size(self) -> int:
        """Get the number of bytes held."""

        return len(self.data)

    def get(self, offset: int) -> int:
        """Get the byte at offset, or 0 when offset is out of range."""

        if not 0 <= offset < len(self.data):
            return 0

        return self.data[offset]

    def set(self, offset: int, value: int) -> None:
        """
        Store a byte, growing the buffer with zero bytes if needed.

        Args:
            offset: Position to write, may be past the current end
            value: Byte value between 0 and 255
        """

        if not 0 <= value <= 255:
            raise ValueError("Byte value must be between 0 and 255")

        if offset < 0:
            raise ValueError("Offset must not be negative")

        if offset >= len(self.data):
            self.data.extend(bytes(offset + 1 - len(self.data)))

        self.data[offset] = value
        self.modified = True

    def is_dirty(self) -> bool:
        """Check whether there are unsaved changes."""

        return self.modified

    def load(self, filename: str) -> None:
        """Load data from a file, replacing the current contents."""

        try:
            with open(filename, 'rb') as f:
                data = f.read()
        except OSError as e:
            raise LoadFailed(f"Failed to load file: {e}") from e

        self.data = bytearray(data)
        self.filename = filename
        self.modified = False
        logger.info("Loaded %d bytes from %s", len(self.data), filename)

    def save(self, filename: Optional[str] = None) -> bool:
        """
        Save data to a file.

        Args:
            filename: Optional filename to save to. If None, uses current filename.

        Returns:
            bool: True if save was successful, False if there is no filename
        """

        save_filename = filename or self.filename
        if not save_filename:
            return False

        try:
            with open(save_filename, 'wb') as f:
                f.write(bytes(self.data))
        except OSError as e:
            raise SaveFailed(f"Failed to save file: {e}") from e

        self.filename = save_filename
        self.modified = False
        logger.info("Saved %d bytes to %s", len(self.data), save_filename)
        return True
