import pytest

from attrcast.exceptions import CoercionError
from attrcast.types import Boolean, Json


@pytest.mark.parametrize("raw", [False, 0, "0", "f", "F", "false", "FALSE", "off", "OFF", "no", "n", " false "])
def test_boolean_false_values(raw):
    assert Boolean().cast(raw) is False


@pytest.mark.parametrize("raw", [True, 1, "1", "t", "true", "on", "yes", "anything", [0], {}])
def test_boolean_true_values(raw):
    assert Boolean().cast(raw) is True


def test_boolean_blank():
    assert Boolean().cast("") is None
    assert Boolean().cast(None) is None


def test_json_cast():
    json_type = Json()
    assert json_type.cast('{"a": [1, 2]}') == {"a": [1, 2]}
    assert json_type.cast({"a": (1, 2), 3: "b"}) == {"a": [1, 2], "3": "b"}
    with pytest.raises(CoercionError):
        json_type.cast("{not json")
    with pytest.raises(CoercionError):
        json_type.cast({"a": object()})


def test_json_storage():
    json_type = Json()
    value = {"b": 1, "a": [True, None]}
    stored = json_type.serialize(value)
    assert stored == '{"a": [true, null], "b": 1}'
    assert json_type.deserialize(stored) == value
    assert json_type.serialize(None) is None


def test_json_changed_in_place():
    json_type = Json()
    stored = '{"tags": ["a"]}'
    value = json_type.deserialize(stored)
    assert not json_type.changed_in_place(stored, value)
    value["tags"].append("b")
    assert json_type.changed_in_place(stored, value)
