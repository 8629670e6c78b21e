"""A mutable JSON object with typed field accessors."""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable

from .jsonvalue import JsonType, JsonValue

logger = logging.getLogger("e3dsclient")


def _condense(value: Any) -> Any:
    """Write whole-valued floats as integers, as a condensed writer does."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, dict):
        return {key: _condense(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_condense(item) for item in value]
    return value


class JsonObject:
    """A JSON object whose data is a plain ``dict`` kept in ``root``.

    Objects handed out by the field getters share their data with this one,
    so changes made through them are seen here as well.
    """

    __slots__ = ("root",)

    def __init__(self, root: dict[str, Any] | None = None) -> None:
        if root is None:
            root = {}
        if not isinstance(root, dict):
            raise TypeError(f"a JSON object needs a dict, not {type(root).__name__}")
        self.root = root

    def reset(self) -> None:
        """Drop all fields."""
        self.root = {}

    # Serialization ----------------------------------------------------

    def encode_json(self) -> str:
        """Serialize to a condensed JSON string."""
        return json.dumps(_condense(self.root), separators=(",", ":"), ensure_ascii=False)

    def decode_json(self, json_string: str) -> None:
        """Replace the contents with the object parsed from ``json_string``.

        Raises ValueError, after clearing all fields, when the text is not a
        JSON object.
        """
        try:
            parsed = json.loads(json_string)
        except ValueError as exc:
            self.reset()
            logger.error("Json decoding failed for: %s", json_string)
            raise ValueError(f"Json decoding failed for: {json_string}") from exc
        if not isinstance(parsed, dict):
            self.reset()
            logger.error("Json decoding failed for: %s", json_string)
            raise ValueError(f"Json decoding failed for: {json_string}")
        self.root = parsed

    # Generic fields ---------------------------------------------------

    def field_names(self) -> list[str]:
        """The names of the fields, in insertion order."""
        return list(self.root)

    def has_field(self, field_name: str) -> bool:
        return field_name in self.root

    def remove_field(self, field_name: str) -> None:
        """Remove a field; a missing field is ignored."""
        self.root.pop(field_name, None)

    def get_field(self, field_name: str) -> JsonValue:
        """The field as a value; an empty value when the field is missing."""
        if field_name not in self.root:
            return JsonValue()
        return JsonValue(self.root[field_name])

    def set_field(self, field_name: str, json_value: JsonValue) -> None:
        """Set a field; an empty value is stored as null."""
        self.root[field_name] = None if json_value.type is JsonType.NONE else json_value.value

    def set_field_null(self, field_name: str) -> None:
        self.root[field_name] = None

    def _present(self, field_name: str) -> JsonValue:
        if field_name not in self.root:
            raise KeyError(field_name)
        return JsonValue(self.root[field_name])

    # Simple fields ----------------------------------------------------

    def get_number_field(self, field_name: str) -> float:
        """The field as a number; KeyError if missing, TypeError if not a number."""
        return self._present(field_name).as_number()

    def set_number_field(self, field_name: str, number: float) -> None:
        self.root[field_name] = float(number)

    def get_integer_field(self, field_name: str) -> int:
        """The field truncated to an integer; 0 when it is missing or not a number."""
        if self.get_field(field_name).type is not JsonType.NUMBER:
            logger.warning("No field with name %s of type Number", field_name)
            return 0
        return int(self.root[field_name])

    def get_string_field(self, field_name: str) -> str:
        """The field as a string; KeyError if missing, TypeError if not a string."""
        return self._present(field_name).as_string()

    def set_string_field(self, field_name: str, string_value: str) -> None:
        self.root[field_name] = str(string_value)

    def get_bool_field(self, field_name: str) -> bool:
        """The field as a boolean; KeyError if missing, TypeError if not a boolean."""
        return self._present(field_name).as_bool()

    def set_bool_field(self, field_name: str, value: bool) -> None:
        self.root[field_name] = bool(value)

    def get_array_field(self, field_name: str) -> list[JsonValue]:
        """The elements of an array field, each wrapped."""
        return self._present(field_name).as_array()

    def set_array_field(self, field_name: str, values: Iterable[JsonValue]) -> None:
        """Set an array field; empty values are left out."""
        self.root[field_name] = [item.value for item in values if item.type is not JsonType.NONE]

    def merge_json_object(self, other: JsonObject, overwrite: bool) -> None:
        """Copy the fields of ``other`` in, keeping existing ones unless ``overwrite``."""
        for key in other.field_names():
            if not overwrite and self.has_field(key):
                continue
            self.set_field(key, other.get_field(key))

    def get_object_field(self, field_name: str) -> JsonObject:
        """The field as an object sharing its data."""
        result = self._present(field_name).as_object()
        assert result is not None
        return result

    def set_object_field(self, field_name: str, json_object: JsonObject) -> None:
        self.root[field_name] = json_object.root

    # Uniform arrays ---------------------------------------------------

    def get_number_array_field(self, field_name: str) -> list[float]:
        return [item.as_number() for item in self.get_array_field(field_name)]

    def set_number_array_field(self, field_name: str, numbers: Iterable[float]) -> None:
        self.root[field_name] = [float(number) for number in numbers]

    def get_string_array_field(self, field_name: str) -> list[str]:
        return [item.as_string() for item in self.get_array_field(field_name)]

    def set_string_array_field(self, field_name: str, strings: Iterable[str]) -> None:
        self.root[field_name] = [str(text) for text in strings]

    def get_bool_array_field(self, field_name: str) -> list[bool]:
        return [item.as_bool() for item in self.get_array_field(field_name)]

    def set_bool_array_field(self, field_name: str, values: Iterable[bool]) -> None:
        self.root[field_name] = [bool(value) for value in values]

    def get_object_array_field(self, field_name: str) -> list[JsonObject]:
        objects = []
        for item in self.get_array_field(field_name):
            obj = item.as_object()
            assert obj is not None
            objects.append(obj)
        return objects

    def set_object_array_field(self, field_name: str, objects: Iterable[JsonObject]) -> None:
        self.root[field_name] = [obj.root for obj in objects]

    # Dunder -----------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonObject):
            return NotImplemented
        return self.root == other.root

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"JsonObject({self.root!r})"