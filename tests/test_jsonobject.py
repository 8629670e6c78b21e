import json

import pytest

from e3dsclient.jsonobject import JsonObject
from e3dsclient.jsonvalue import JsonType, JsonValue


def test_new_object_has_no_fields():
    assert JsonObject().field_names() == []


def test_reset_clears_fields():
    obj = JsonObject({"a": 1})
    obj.reset()
    assert obj.field_names() == []


def test_constructor_rejects_non_dict():
    with pytest.raises(TypeError):
        JsonObject([1, 2])


def test_encode_is_condensed():
    obj = JsonObject()
    obj.set_number_field("n", 3)
    obj.set_string_field("s", "x")
    assert obj.encode_json() == '{"n":3,"s":"x"}'


def test_encode_decode_round_trip():
    obj = JsonObject()
    obj.set_string_field("name", "map")
    obj.set_bool_field("ok", True)
    obj.set_number_array_field("nums", [1.5, 2.5])
    other = JsonObject()
    other.decode_json(obj.encode_json())
    assert other == obj


def test_decode_invalid_raises_and_clears():
    obj = JsonObject({"keep": 1})
    with pytest.raises(ValueError):
        obj.decode_json("{not json")
    assert obj.field_names() == []


def test_decode_non_object_raises():
    obj = JsonObject({"keep": 1})
    with pytest.raises(ValueError):
        obj.decode_json("[1, 2]")
    assert not obj.has_field("keep")


def test_has_and_remove_field():
    obj = JsonObject({"a": 1})
    assert obj.has_field("a")
    obj.remove_field("a")
    obj.remove_field("missing")
    assert not obj.has_field("a")


def test_get_field_missing_is_none_type():
    assert JsonObject().get_field("x").type is JsonType.NONE


def test_set_field_and_get_field():
    obj = JsonObject()
    obj.set_field("s", JsonValue.from_string("hi"))
    assert obj.get_field("s").as_string() == "hi"


def test_set_field_with_empty_value_stores_null():
    obj = JsonObject()
    obj.set_field("x", JsonValue())
    assert obj.get_field("x").type is JsonType.NULL


def test_set_field_null():
    obj = JsonObject()
    obj.set_field_null("x")
    assert obj.get_field("x").is_null
    assert obj.has_field("x")


def test_number_field_round_trip():
    obj = JsonObject()
    obj.set_number_field("n", 2.5)
    assert obj.get_number_field("n") == 2.5


def test_number_field_missing_raises():
    with pytest.raises(KeyError):
        JsonObject().get_number_field("n")


def test_number_field_wrong_type_raises():
    with pytest.raises(TypeError):
        JsonObject({"n": "text"}).get_number_field("n")


def test_integer_field_truncates():
    obj = JsonObject()
    obj.set_number_field("port", 7777.9)
    assert obj.get_integer_field("port") == 7777


@pytest.mark.parametrize("root", [{}, {"port": "7777"}, {"port": True}])
def test_integer_field_defaults_to_zero(root):
    assert JsonObject(root).get_integer_field("port") == 0


def test_string_and_bool_fields():
    obj = JsonObject()
    obj.set_string_field("s", "value")
    obj.set_bool_field("b", False)
    assert obj.get_string_field("s") == "value"
    assert obj.get_bool_field("b") is False


def test_string_field_wrong_type_raises():
    with pytest.raises(TypeError):
        JsonObject({"s": 1}).get_string_field("s")


def test_array_field_skips_empty_values():
    obj = JsonObject()
    obj.set_array_field(
        "arr", [JsonValue.from_string("a"), JsonValue(), JsonValue.from_bool(True)]
    )
    values = obj.get_array_field("arr")
    assert [v.type for v in values] == [JsonType.STRING, JsonType.BOOLEAN]


def test_merge_without_overwrite_keeps_existing():
    target = JsonObject({"a": 1, "b": 2})
    target.merge_json_object(JsonObject({"b": 20, "c": 30}), False)
    assert target.root == {"a": 1, "b": 2, "c": 30}


def test_merge_with_overwrite_replaces():
    target = JsonObject({"a": 1, "b": 2})
    target.merge_json_object(JsonObject({"b": 20}), True)
    assert target.root == {"a": 1, "b": 20}


def test_object_field_shares_data():
    obj = JsonObject()
    child = JsonObject()
    obj.set_object_field("child", child)
    child.set_string_field("k", "v")
    assert obj.get_object_field("child").get_string_field("k") == "v"


def test_object_field_wrong_type_raises():
    with pytest.raises(TypeError):
        JsonObject({"o": [1]}).get_object_field("o")


def test_uniform_arrays_round_trip():
    obj = JsonObject()
    obj.set_number_array_field("n", [1, 2.5])
    obj.set_string_array_field("s", ["a", "b"])
    obj.set_bool_array_field("b", [True, False])
    assert obj.get_number_array_field("n") == [1.0, 2.5]
    assert obj.get_string_array_field("s") == ["a", "b"]
    assert obj.get_bool_array_field("b") == [True, False]


def test_object_array_round_trip():
    first = JsonObject({"id": "one"})
    second = JsonObject({"id": "two"})
    obj = JsonObject()
    obj.set_object_array_field("list", [first, second])
    result = obj.get_object_array_field("list")
    assert [o.get_string_field("id") for o in result] == ["one", "two"]


def test_encoded_output_is_valid_json():
    obj = JsonObject({"a": [1.0, {"b": None}]})
    assert json.loads(obj.encode_json()) == {"a": [1, {"b": None}]}