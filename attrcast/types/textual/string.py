from __future__ import annotations

from ..type import Type


class String(Type[str]):
    """ Encapsulates a :class:`str`.

        Booleans cast to ``"t"`` and ``"f"``, bytes are decoded as UTF-8 and
        any other value goes through :func:`str`.

        :param int limit: maximum size of values, longer values are truncated
    """
    type = 'string'
    _options = ('limit',)

    true_value = 't'
    false_value = 'f'

    def __init__(self, limit: int | None = None, **options):
        assert limit is None or isinstance(limit, int), \
            "String type with non-integer limit %r" % (limit,)
        super().__init__(limit=limit, **options)

    def cast_value(self, value):
        if value is True:
            s = self.true_value
        elif value is False:
            s = self.false_value
        elif isinstance(value, bytes):
            s = value.decode()
        else:
            s = str(value)
        return s[:self.limit] if self.limit else s

    def serialize(self, value):
        return self.cast(value)
