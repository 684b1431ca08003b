from __future__ import annotations

from ..type import Type
from ..utils import is_blank

FALSE_VALUES = frozenset([
    False, 0,
    '0', 'f', 'false', 'off', 'n', 'no',
])


class Boolean(Type[bool]):
    """ Encapsulates a :class:`bool`.

        Blank strings cast to ``None``. The values of ``FALSE_VALUES``
        (strings are compared case-insensitively) cast to ``False``, any
        other value to ``True``.
    """
    type = 'boolean'

    def cast_value(self, value):
        if isinstance(value, bytes):
            value = value.decode()
        if isinstance(value, str):
            if is_blank(value):
                return None
            value = value.strip().lower()
        try:
            return value not in FALSE_VALUES
        except TypeError:
            # unhashable values are never false values
            return True
