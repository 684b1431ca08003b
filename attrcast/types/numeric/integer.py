from __future__ import annotations
import decimal
import math

from attrcast.config import config
from ..type import Type
from ..utils import is_blank, NUMERIC_RE

MAX_DIGITS = 4300
"""Integers with more digits are rejected by the cast"""


class Integer(Type[int]):
    """ Encapsulates an :class:`int`.

        Decimal values are truncated toward zero, so ``"27.43"`` casts to
        ``27``. Booleans cast to 0 and 1 and blank strings to ``None``.
        Strings that are not numbers are rejected, as well as numbers of
        more than ``MAX_DIGITS`` digits (``"1e1000000"``).

        :param int limit: storage size in bytes, the range of serialized
            values is checked against it (defaults to the ``integer_limit``
            option).
    """
    type = 'integer'
    _options = ('limit',)

    def __init__(self, limit: int | None = None, **options):
        super().__init__(limit=limit, **options)

    @property
    def range(self) -> range:
        limit = self.limit or config['integer_limit']
        max_value = 1 << (limit * 8 - 1)
        return range(-max_value, max_value)

    def cast_value(self, value):
        if value is True:
            return 1
        if value is False:
            return 0
        if isinstance(value, int):
            return value
        if isinstance(value, bytes):
            value = value.decode()
        if isinstance(value, str):
            if is_blank(value):
                return None
            value = value.strip()
            if not NUMERIC_RE.match(value):
                raise self._coercion_error(value, "not a number")
            value = decimal.Decimal(value)
        if isinstance(value, float):
            if not math.isfinite(value):
                raise self._coercion_error(value, "not a finite number")
            return int(value)
        if isinstance(value, decimal.Decimal):
            if not value.is_finite():
                raise self._coercion_error(value, "not a finite number")
            if value.adjusted() >= MAX_DIGITS:
                raise self._coercion_error(value, "more than %d digits" % MAX_DIGITS)
            return int(value)
        try:
            return int(value)
        except (TypeError, ValueError) as e:
            raise self._coercion_error(value, str(e)) from e

    def deserialize(self, value):
        # storage gives back integers, or numeric strings for some drivers
        if value is None or isinstance(value, int) and not isinstance(value, bool):
            return value
        return self.cast(value)

    def serialize(self, value):
        value = self.cast(value)
        if value is not None and value not in self.range:
            raise self._coercion_error(
                value, "out of range for a %d-byte integer" % (self.limit or config['integer_limit']))
        return value
