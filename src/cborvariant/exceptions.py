"""Exception hierarchy for cborvariant.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from CborError for easy catching of any cborvariant-specific error.
"""

from __future__ import annotations


class CborError(Exception):
    """Base exception for all cborvariant errors."""

    pass


class EncodeError(CborError):
    """Raised when encoding a value fails.

    Examples:
        - Integer magnitude does not fit in 32 bits
        - Object passed to the encoder is not a Value
        - Python type with no CBOR counterpart (e.g. bool, set)
    """

    pass


class DecodeError(CborError):
    """Raised when decoding binary data fails.

    Decoding is all-or-nothing: when this is raised no partial value is returned.

    Attributes:
        offset: Byte offset at which the problem was detected (None if unknown)
    """

    def __init__(self, message: str, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset


class TruncatedInputError(DecodeError):
    """Raised when the input ends before the item does.

    Examples:
        - Header byte missing
        - Fewer trailing bytes than the additional info announces
        - Declared string length or item count exceeds remaining bytes
    """

    pass


class UnsupportedFeatureError(DecodeError):
    """Raised when the input uses a CBOR feature this codec does not implement.

    Examples:
        - 64-bit integer magnitudes (additional info 27 on majors 0-6)
        - Indefinite-length items (additional info 31)
        - Map keys that are not text or byte strings
        - Major type 7 values other than null, single and double floats
    """

    pass


class UnknownMajorTypeError(DecodeError):
    """Raised when a header carries a major type outside 0-7."""

    pass


class FileReadError(CborError):
    """Raised when read_file() cannot open or read a file."""

    pass
