from __future__ import annotations
import copy
import json

from ..type import Type


class Json(Type):
    """ JSON document, stored as text.

        Strings given to :meth:`cast` are decoded, other values are
        normalized to what a JSON round-trip gives back (tuples become
        lists, keys become strings).
    """
    type = 'json'

    def cast_value(self, value):
        if isinstance(value, (str, bytes, bytearray)):
            return self._decode(value)
        try:
            return json.loads(json.dumps(value))
        except (TypeError, ValueError) as e:
            raise self._coercion_error(value, str(e)) from e

    def deserialize(self, value):
        if value is None:
            return None
        if isinstance(value, (str, bytes, bytearray)):
            return self._decode(value)
        # drivers decoding json columns already give python objects
        return copy.deepcopy(value)

    def serialize(self, value):
        if value is None:
            return None
        try:
            return json.dumps(value, sort_keys=True)
        except (TypeError, ValueError) as e:
            raise self._coercion_error(value, str(e)) from e

    def changed_in_place(self, stored_value, value):
        return self.deserialize(stored_value) != value

    def _decode(self, value):
        try:
            return json.loads(value)
        except ValueError as e:
            raise self._coercion_error(value, "invalid JSON") from e
