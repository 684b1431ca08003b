from __future__ import annotations
import logging
import pytz

from datetime import date, datetime, time

from attrcast.config import config
from .basedate import BaseDate
from .utils import ISO_DATETIME_RE

_logger = logging.getLogger("attrcast.types")


class Datetime(BaseDate[datetime]):
    """ Encapsulates a python :class:`datetime <datetime.datetime>` object.

        Values are held as timezone-aware datetimes in UTC. Naive values
        given to :meth:`cast` are expressed in the timezone of the
        ``timezone`` option; naive values read from storage are in UTC.
        Values are stored as naive UTC datetimes.
    """
    type = 'datetime'

    @staticmethod
    def now(*args) -> datetime:
        """ Return the current time in UTC, without microseconds.

            .. note:: This function may be used as a default value producer.
        """
        return datetime.now(pytz.utc).replace(microsecond=0)

    @staticmethod
    def to_string(value: datetime | None, tz: str | None = None) -> str | None:
        """ Convert a :class:`datetime` to a string in the format of the
            ``datetime_format`` option, expressed in ``tz`` (the ``timezone``
            option by default).
        """
        if not value:
            return None
        timezone = pytz.timezone(tz) if tz else config.tz
        if value.tzinfo is None:
            value = pytz.utc.localize(value)
        return value.astimezone(timezone).strftime(config['datetime_format'])

    @staticmethod
    def _parse_iso(value: str) -> datetime | None:
        if not ISO_DATETIME_RE.match(value):
            return None
        try:
            return datetime.fromisoformat(value.replace('Z', '+00:00'))
        except ValueError:
            # offsets without colon before python 3.11
            return None

    def _fast_parse(self, value):
        parsed = self._parse_iso(value)
        return None if parsed is None else self._cast_other(parsed)

    def _cast_other(self, value):
        if isinstance(value, datetime):
            if value.tzinfo is None:
                value = config.tz.localize(value, is_dst=False)
            return value.astimezone(pytz.utc)
        if isinstance(value, date):
            return self._cast_other(datetime.combine(value, time.min))
        _logger.debug("datetime: unsupported value %r, value dropped", value)
        return None

    def deserialize(self, value):
        if value is None:
            return None
        if isinstance(value, datetime) and value.tzinfo is None:
            return pytz.utc.localize(value)
        if isinstance(value, str) and (parsed := self._parse_iso(value.strip())) is not None:
            if parsed.tzinfo is None:
                return pytz.utc.localize(parsed)
            return parsed.astimezone(pytz.utc)
        return self.cast(value)

    def serialize(self, value):
        if not (isinstance(value, datetime) and value.tzinfo is not None):
            value = self.cast(value)
        if value is None:
            return None
        return value.astimezone(pytz.utc).replace(tzinfo=None)
