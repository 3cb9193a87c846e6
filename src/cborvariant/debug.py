"""Human-readable rendering of values.

The output reads like a Python literal, which makes it convenient to paste
into a REPL when inspecting captured data. It is for diagnostics only and is
not part of the wire format.
"""

from __future__ import annotations

from .exceptions import CborError
from .models.value import Array, Bytes, CborValue, Float, Integer, Map, Null, Text


def to_debug_string(value: CborValue) -> str:
    """Render a value as a Python-style literal.

    Args:
        value: Value to render

    Returns:
        Rendering such as ``{"ids": [1, 2], "raw": bytes([0x1, 0xff]), "x": None}``

    Raises:
        CborError: If value is not a CborValue
    """
    if isinstance(value, Integer):
        return str(value.value)
    if isinstance(value, Float):
        return repr(value.value)
    if isinstance(value, Text):
        return _quote(value.value)
    if isinstance(value, Bytes):
        return _render_bytes(value.value)
    if isinstance(value, Array):
        return "[" + ", ".join(to_debug_string(item) for item in value.items) + "]"
    if isinstance(value, Map):
        pairs = (
            f"{to_debug_string(key)}: {to_debug_string(item)}"
            for key, item in value.entries.items()
        )
        return "{" + ", ".join(pairs) + "}"
    if isinstance(value, Null):
        return "None"
    raise CborError(f"Cannot render {type(value).__name__}: not a CBOR value")


def _quote(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _render_bytes(data: bytes) -> str:
    return "bytes([" + ", ".join(hex(byte) for byte in data) + "])"
