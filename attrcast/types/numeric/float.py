from __future__ import annotations
import decimal

from ..type import Type
from ..utils import is_blank

SPECIAL_FLOATS = {
    'nan': float('nan'),
    'infinity': float('inf'),
    '+infinity': float('inf'),
    '-infinity': float('-inf'),
}


class Float(Type[float]):
    """ Encapsulates a :class:`float`.

        Besides numbers and numeric strings, the strings ``"NaN"``,
        ``"Infinity"`` and ``"-Infinity"`` are accepted.
    """
    type = 'float'

    def cast_value(self, value):
        if value is True:
            return 1.0
        if value is False:
            return 0.0
        if isinstance(value, bytes):
            value = value.decode()
        if isinstance(value, str):
            if is_blank(value):
                return None
            value = value.strip()
            special = SPECIAL_FLOATS.get(value.lower())
            if special is not None:
                return special
        try:
            return float(value)
        except (TypeError, ValueError, decimal.InvalidOperation) as e:
            raise self._coercion_error(value, str(e)) from e

    def changed(self, old_value, new_value):
        # NaN never equals itself
        if old_value != old_value and new_value != new_value:
            return False
        return super().changed(old_value, new_value)
