"""The CBOR value model.

Every CBOR item decodes to exactly one of seven frozen Pydantic models. They
share the CborValue base and carry a ``kind`` literal, so ``Value`` works as a
discriminated union both for validation and for exhaustive ``match`` blocks.

Example:
    >>> from cborvariant.models import Array, Integer, Map, Text
    >>> doc = Map(entries={Text(value="ids"): Array(items=[Integer(value=1)])})
    >>> doc.to_python()
    {'ids': [1]}
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Annotated, Any, Literal, Union

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    StrictBytes,
    StrictFloat,
    StrictInt,
    StrictStr,
)

from ..exceptions import EncodeError


def _as_float(value: float | int) -> float:
    try:
        return float(value)
    except OverflowError as e:
        raise ValueError(f"Integer too large for a double: {e}") from e


def _read_only(entries: dict[Any, Any]) -> MappingProxyType[Any, Any]:
    return MappingProxyType(entries)


class CborValue(BaseModel):
    """Base class for all CBOR value variants.

    Values are immutable once built. Containers own their children; there are
    no shared or back references, so every value is a finite tree.
    """

    model_config = ConfigDict(
        # Values never change after construction
        frozen=True,
        # Reject unknown fields
        extra="forbid",
    )

    def to_python(self) -> Any:
        """Convert this value to the equivalent plain Python object."""
        raise NotImplementedError

    def __str__(self) -> str:
        # Import here to avoid circular dependency
        from ..debug import to_debug_string

        return to_debug_string(self)


class Integer(CborValue):
    """Signed integer, from major type 0 (unsigned) or 1 (negative)."""

    kind: Literal["integer"] = "integer"
    value: StrictInt

    def to_python(self) -> int:
        return self.value


class Float(CborValue):
    """IEEE-754 double. Single-precision input is widened on decode."""

    kind: Literal["float"] = "float"
    # Integers are widened; strings and bools are rejected
    value: Annotated[Union[StrictFloat, StrictInt], AfterValidator(_as_float)]

    def to_python(self) -> float:
        return self.value


class Text(CborValue):
    """Text string (major type 3).

    The content is not validated as UTF-8. Bytes that are not valid UTF-8 are
    carried as lone surrogates (the ``surrogateescape`` convention) so that a
    decode/encode cycle reproduces the input bytes exactly.
    """

    kind: Literal["text"] = "text"
    value: StrictStr

    def to_python(self) -> str:
        return self.value


class Bytes(CborValue):
    """Byte string (major type 2)."""

    kind: Literal["bytes"] = "bytes"
    value: StrictBytes

    def to_python(self) -> bytes:
        return self.value


class Array(CborValue):
    """Ordered sequence of values (major type 4)."""

    kind: Literal["array"] = "array"
    items: tuple[Value, ...] = ()

    def to_python(self) -> list[Any]:
        return [item.to_python() for item in self.items]


class Map(CborValue):
    """Mapping from text or byte-string keys to values (major type 5).

    Keys are unique and kept in insertion order. Entries are held in a
    read-only mapping proxy, so a built map cannot gain or lose entries.
    """

    kind: Literal["map"] = "map"
    entries: Annotated[dict[MapKey, Value], AfterValidator(_read_only)] = Field(
        default_factory=lambda: MappingProxyType({})
    )

    def to_python(self) -> dict[Any, Any]:
        return {key.to_python(): value.to_python() for key, value in self.entries.items()}


class Null(CborValue):
    """The absence-of-value marker (major type 7, simple value 22)."""

    kind: Literal["null"] = "null"

    def to_python(self) -> None:
        return None


Value = Annotated[
    Union[Integer, Float, Text, Bytes, Array, Map, Null],
    Field(discriminator="kind"),
]

MapKey = Annotated[Union[Text, Bytes], Field(discriminator="kind")]

Array.model_rebuild()
Map.model_rebuild()


def from_python(obj: Any) -> CborValue:
    """Build a Value tree from plain Python objects.

    Args:
        obj: int, float, str, bytes-like, list/tuple, dict, None, or an
            existing CborValue (returned unchanged)

    Returns:
        The equivalent CborValue

    Raises:
        EncodeError: If obj (or anything nested in it) has no CBOR counterpart
            in this value model, or a dict key is not str/bytes

    Example:
        >>> value = from_python({"a": [1, 2.5, None]})
        >>> value.entries[Text(value="a")]
        Array(kind='array', items=(Integer(kind='integer', value=1), ...))
    """
    if isinstance(obj, CborValue):
        return obj

    # bool is an int subclass but has no place in the value model
    if isinstance(obj, bool):
        raise EncodeError("Booleans are not supported by this value model")

    if obj is None:
        return Null()
    if isinstance(obj, int):
        return Integer(value=obj)
    if isinstance(obj, float):
        return Float(value=obj)
    if isinstance(obj, str):
        return Text(value=obj)
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return Bytes(value=bytes(obj))
    if isinstance(obj, (list, tuple)):
        return Array(items=tuple(from_python(item) for item in obj))
    if isinstance(obj, dict):
        entries: dict[Any, CborValue] = {}
        for key, value in obj.items():
            cbor_key = from_python(key)
            if not isinstance(cbor_key, (Text, Bytes)):
                raise EncodeError(
                    f"Map keys must be str or bytes, got {type(key).__name__}"
                )
            entries[cbor_key] = from_python(value)
        return Map(entries=entries)

    raise EncodeError(f"Unsupported type for CBOR value: {type(obj).__name__}")
