from __future__ import annotations
import logging
import typing as t

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from ..type import Type
from ..utils import is_blank

T = t.TypeVar("T")

_logger = logging.getLogger("attrcast.types")


class BaseDate(Type[T], t.Generic[T]):
    """ Common properties of Date and Datetime.

        Casting is lenient: strings that cannot be parsed give ``None``.
    """

    @staticmethod
    def add(value: T, *args, **kwargs) -> T:
        """ Return the sum of ``value`` and a :class:`relativedelta`.

            :param value: initial date or datetime.
            :param args: positional args to pass directly to :class:`relativedelta`.
            :param kwargs: keyword args to pass directly to :class:`relativedelta`.
        """
        return value + relativedelta(*args, **kwargs)

    @staticmethod
    def subtract(value: T, *args, **kwargs) -> T:
        """ Return the difference between ``value`` and a :class:`relativedelta`. """
        return value - relativedelta(*args, **kwargs)

    def cast_value(self, value):
        if isinstance(value, bytes):
            value = value.decode()
        if isinstance(value, str):
            if is_blank(value):
                return None
            return self._cast_string(value.strip())
        return self._cast_other(value)

    def _cast_string(self, value: str):
        fast = self._fast_parse(value)
        if fast is not None:
            return fast
        try:
            parsed = date_parser.parse(value)
        except (ValueError, OverflowError):
            _logger.debug("%s: cannot parse %r, value dropped", self.type, value)
            return None
        return self._cast_other(parsed)

    def _fast_parse(self, value: str):
        """ Parse the ISO format without going through dateutil. """
        return None

    def _cast_other(self, value):
        raise NotImplementedError
