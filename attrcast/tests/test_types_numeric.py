import decimal
import math

import pytest

from attrcast.exceptions import CoercionError
from attrcast.types import Integer, Float, Decimal


@pytest.mark.parametrize("raw, expected", [
    ("27.43", 27),
    ("-27.9", -27),
    ("42", 42),
    (" 7 ", 7),
    ("1e3", 1000),
    (3.99, 3),
    (decimal.Decimal("8.5"), 8),
    (True, 1),
    (False, 0),
    (12, 12),
    (b"5", 5),
    ("", None),
    ("   ", None),
    (None, None),
])
def test_integer_cast(raw, expected):
    assert Integer().cast(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "12abc", "1.2.3", float('nan'), float('inf'), [1]])
def test_integer_cast_rejects(raw):
    with pytest.raises(CoercionError) as exc:
        Integer().cast(raw)
    assert exc.value.type == 'integer'


def test_integer_serialize_range():
    small = Integer(limit=1)
    assert small.serialize(127) == 127
    assert small.serialize(-128) == -128
    with pytest.raises(CoercionError):
        small.serialize(128)
    # default limit is 4 bytes
    assert Integer().serialize(2**31 - 1) == 2**31 - 1
    with pytest.raises(CoercionError):
        Integer().serialize(2**31)
    assert Integer(limit=8).serialize(2**31) == 2**31


def test_integer_deserialize_keeps_ints():
    assert Integer().deserialize(5) == 5
    assert Integer().deserialize("5") == 5
    assert Integer().deserialize(None) is None


@pytest.mark.parametrize("raw, expected", [
    ("1.5", 1.5),
    (2, 2.0),
    (True, 1.0),
    ("Infinity", math.inf),
    ("-Infinity", -math.inf),
    ("", None),
])
def test_float_cast(raw, expected):
    assert Float().cast(raw) == expected


def test_float_nan():
    float_type = Float()
    assert math.isnan(float_type.cast("NaN"))
    assert not float_type.changed(float('nan'), float('nan'))
    assert float_type.changed(1.0, float('nan'))


def test_float_cast_rejects():
    with pytest.raises(CoercionError):
        Float().cast("one")


@pytest.mark.parametrize("raw, expected", [
    ("9.90", decimal.Decimal("9.90")),
    (0.1, decimal.Decimal("0.1")),
    (3, decimal.Decimal(3)),
    ("", None),
])
def test_decimal_cast(raw, expected):
    assert Decimal().cast(raw) == expected


def test_decimal_scale_and_precision():
    assert Decimal(scale=2).cast("1.005") == decimal.Decimal("1.01")
    assert str(Decimal(scale=2).cast(3)) == "3.00"
    assert Decimal(precision=3).cast("123.456") == decimal.Decimal("123")
    with pytest.raises(ValueError):
        Decimal(precision=2, scale=3)


def test_decimal_cast_rejects():
    with pytest.raises(CoercionError):
        Decimal().cast("twelve")


def test_numeric_round_trip():
    for type_object, raw in [(Integer(), "27.43"), (Float(), "1.25"), (Decimal(scale=2), "4.5")]:
        value = type_object.cast(raw)
        assert type_object.deserialize(type_object.serialize(value)) == value


@pytest.mark.parametrize("raw", ["1e1000000", "1e20000000", "9" * 5000, decimal.Decimal("1e1000000")])
def test_integer_cast_rejects_huge_numbers(raw):
    with pytest.raises(CoercionError):
        Integer().cast(raw)
    # still fine below the cap
    assert Integer().cast("1e30") == 10 ** 30
