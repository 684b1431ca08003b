from __future__ import annotations
import logging

from datetime import date, datetime

from attrcast.config import config
from .basedate import BaseDate
from .utils import ISO_DATE_RE

_logger = logging.getLogger("attrcast.types")


class Date(BaseDate[date]):
    """ Encapsulates a python :class:`date <datetime.date>` object. """
    type = 'date'

    @staticmethod
    def today(*args) -> date:
        """ Return the current day.

            .. note:: This function may be used as a default value producer.
        """
        return date.today()

    @staticmethod
    def to_string(value: date | None) -> str | None:
        """ Convert a :class:`date` or :class:`datetime` object to a string,
            in the format of the ``date_format`` option.
        """
        return value.strftime(config['date_format']) if value else None

    def _fast_parse(self, value):
        match = ISO_DATE_RE.match(value)
        if not match:
            return None
        try:
            return date(*map(int, match.groups()))
        except ValueError:
            _logger.debug("date: invalid date %r, value dropped", value)
            return None

    def _cast_string(self, value):
        if ISO_DATE_RE.match(value):
            # well-formed but out of range (2023-02-30), dateutil would also fail
            return self._fast_parse(value)
        return super()._cast_string(value)

    def _cast_other(self, value):
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        _logger.debug("date: unsupported value %r, value dropped", value)
        return None
