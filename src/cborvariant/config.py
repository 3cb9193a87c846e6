"""Codec configuration.

This module provides the configuration dataclass accepted by every decode
entry point.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for decoding CBOR data.

    Attributes:
        max_depth: Maximum container nesting (arrays, maps and tags) accepted
            while decoding (default 512). Deeper input raises DecodeError
            instead of exhausting the interpreter stack.

        allow_trailing_data: Whether decode() accepts bytes left over after
            the first item (default True). Set to False to require that the
            buffer holds exactly one item. decode_from() and iter_decode()
            are unaffected since they report where decoding stopped.

    Examples:
        ```python
        from cborvariant import CodecConfig, decode

        strict = CodecConfig(allow_trailing_data=False)
        value = decode(data, config=strict)

        shallow = CodecConfig(max_depth=8)
        value = decode(untrusted, config=shallow)
        ```
    """

    max_depth: int = 512
    allow_trailing_data: bool = True

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {self.max_depth}")


DEFAULT_CONFIG = CodecConfig()
