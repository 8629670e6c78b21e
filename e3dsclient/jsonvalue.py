"""A typed wrapper around a single JSON value."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any, Iterable

if TYPE_CHECKING:
    from .jsonobject import JsonObject

logger = logging.getLogger("e3dsclient")


class _Missing:
    """Marks a wrapper that holds no value at all."""

    def __repr__(self) -> str:
        return "<missing>"


_MISSING: Any = _Missing()


class JsonType(Enum):
    """The kinds of value a JSON value can be; the value is its display name."""

    NONE = "None"
    NULL = "Null"
    STRING = "String"
    NUMBER = "Number"
    BOOLEAN = "Boolean"
    ARRAY = "Array"
    OBJECT = "Object"


def _classify(raw: Any) -> JsonType:
    if raw is _MISSING:
        return JsonType.NONE
    if raw is None:
        return JsonType.NULL
    if isinstance(raw, bool):
        return JsonType.BOOLEAN
    if isinstance(raw, (int, float)):
        return JsonType.NUMBER
    if isinstance(raw, str):
        return JsonType.STRING
    if isinstance(raw, list):
        return JsonType.ARRAY
    if isinstance(raw, dict):
        return JsonType.OBJECT
    raise TypeError(f"unsupported JSON value type: {type(raw).__name__}")


class JsonValue:
    """Holds one JSON value, or nothing at all.

    The value is kept as plain Python data (dict, list, str, number, bool or
    None). A wrapper created without a value has type ``JsonType.NONE``.
    """

    __slots__ = ("value",)

    def __init__(self, value: Any = _MISSING) -> None:
        if isinstance(value, tuple):
            value = list(value)
        _classify(value)
        self.value = value

    # Construction -----------------------------------------------------

    @classmethod
    def from_number(cls, number: float) -> JsonValue:
        """Wrap a number."""
        return cls(float(number))

    @classmethod
    def from_string(cls, string_value: str) -> JsonValue:
        """Wrap a string."""
        return cls(str(string_value))

    @classmethod
    def from_bool(cls, value: bool) -> JsonValue:
        """Wrap a boolean."""
        return cls(bool(value))

    @classmethod
    def from_array(cls, values: Iterable[JsonValue]) -> JsonValue:
        """Wrap the given values as an array; empty wrappers become null."""
        return cls([None if item.value is _MISSING else item.value for item in values])

    @classmethod
    def from_object(cls, json_object: JsonObject) -> JsonValue:
        """Wrap the data of a JSON object, sharing it with that object."""
        root = json_object.root
        return cls(root if root is not None else {})

    # Inspection -------------------------------------------------------

    @property
    def type(self) -> JsonType:
        """The kind of value held."""
        return _classify(self.value)

    @property
    def type_string(self) -> str:
        """The kind of value held, as a display name."""
        return self.type.value

    @property
    def is_null(self) -> bool:
        """True for JSON null and for a wrapper that holds nothing."""
        return self.value is _MISSING or self.value is None

    # Conversion -------------------------------------------------------

    def _misuse(self, wanted: str) -> str:
        message = f"Json Value of type '{self.type_string}' used as a '{wanted}'."
        logger.error(message)
        return message

    def _require(self, kind: JsonType) -> bool:
        """Return False when empty; raise TypeError when of another kind."""
        if self.value is _MISSING:
            self._misuse(kind.value)
            return False
        if self.type is not kind:
            raise TypeError(self._misuse(kind.value))
        return True

    def as_number(self) -> float:
        """The value as a number; 0.0 when empty."""
        if not self._require(JsonType.NUMBER):
            return 0.0
        return float(self.value)

    def as_string(self) -> str:
        """The value as a string; an empty string when empty."""
        if not self._require(JsonType.STRING):
            return ""
        return self.value

    def as_bool(self) -> bool:
        """The value as a boolean; False when empty."""
        if not self._require(JsonType.BOOLEAN):
            return False
        return self.value

    def as_array(self) -> list[JsonValue]:
        """The elements of an array value, each wrapped; [] when empty."""
        if not self._require(JsonType.ARRAY):
            return []
        return [JsonValue(item) for item in self.value]

    def as_object(self) -> JsonObject | None:
        """The value as a JSON object sharing its data; None when empty."""
        if not self._require(JsonType.OBJECT):
            return None
        from .jsonobject import JsonObject

        return JsonObject(self.value)

    # Dunder -----------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonValue):
            return NotImplemented
        return self.type is other.type and self.value == other.value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"JsonValue({self.value!r})"