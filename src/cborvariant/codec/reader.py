"""Byte-level reading primitives.

This module provides the cursor used by the decoder. Every multi-byte field
in CBOR is big-endian; conversion to native integers and floats is done with
struct formats selected by field size.
"""

from __future__ import annotations

import struct

from ..exceptions import TruncatedInputError

_UINT_FORMATS = {1: ">B", 2: ">H", 4: ">I"}
_FLOAT_FORMATS = {4: ">f", 8: ">d"}


class ByteReader:
    """Reads bytes from a buffer, advancing a cursor.

    The cursor only moves forward. Reads that would run past the end of the
    buffer raise TruncatedInputError and leave the cursor where it was.

    Example:
        >>> reader = ByteReader(b"\\x19\\x01\\x00")
        >>> reader.read_byte()
        25
        >>> reader.read_uint(2)
        256
        >>> reader.at_end()
        True
    """

    def __init__(self, data: bytes | bytearray | memoryview, offset: int = 0) -> None:
        """Initialize a reader over data, starting at offset.

        Args:
            data: Buffer to read from
            offset: Initial cursor position (0 <= offset <= len(data))

        Raises:
            ValueError: If offset is outside the buffer
        """
        self._data = bytes(data)
        if offset < 0 or offset > len(self._data):
            raise ValueError(f"offset must be 0-{len(self._data)}, got {offset}")
        self._position = offset

    def _take(self, num_bytes: int, what: str) -> bytes:
        end = self._position + num_bytes
        if end > len(self._data):
            raise TruncatedInputError(
                f"Truncated input: need {num_bytes} byte(s) for {what}, "
                f"have {len(self._data) - self._position}",
                offset=self._position,
            )
        chunk = self._data[self._position : end]
        self._position = end
        return chunk

    def read_byte(self) -> int:
        """Read a single byte as an unsigned integer.

        Raises:
            TruncatedInputError: If the buffer is exhausted
        """
        return self._take(1, "header byte")[0]

    def read_bytes(self, num_bytes: int) -> bytes:
        """Read exactly num_bytes raw bytes.

        Raises:
            TruncatedInputError: If fewer than num_bytes remain
        """
        if num_bytes < 0:
            raise ValueError(f"num_bytes must be >= 0, got {num_bytes}")
        return self._take(num_bytes, "payload")

    def read_uint(self, size: int) -> int:
        """Read a big-endian unsigned integer of 1, 2 or 4 bytes."""
        try:
            fmt = _UINT_FORMATS[size]
        except KeyError:
            raise ValueError(f"size must be one of {sorted(_UINT_FORMATS)}, got {size}") from None
        return struct.unpack(fmt, self._take(size, f"{size}-byte integer"))[0]

    def read_float(self, size: int) -> float:
        """Read a big-endian IEEE-754 float of 4 or 8 bytes as a Python float."""
        try:
            fmt = _FLOAT_FORMATS[size]
        except KeyError:
            raise ValueError(f"size must be one of {sorted(_FLOAT_FORMATS)}, got {size}") from None
        return struct.unpack(fmt, self._take(size, f"{size}-byte float"))[0]

    def remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._data) - self._position

    def at_end(self) -> bool:
        """Return True if every byte has been consumed."""
        return self._position >= len(self._data)

    def position(self) -> int:
        """Return the current read position in bytes."""
        return self._position
