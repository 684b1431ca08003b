from __future__ import annotations
import decimal

from ..type import Type
from ..utils import is_blank


class Decimal(Type[decimal.Decimal]):
    """ Encapsulates a :class:`decimal.Decimal`.

        Floats are converted through their shortest representation, so
        ``0.1`` gives ``Decimal('0.1')`` rather than the exact binary value.

        :param int precision: maximum number of significant digits
        :param int scale: number of digits after the decimal point, values
            are rounded half-up to it
    """
    type = 'decimal'
    _options = ('precision', 'scale')

    def __init__(self, precision: int | None = None, scale: int | None = None, **options):
        if scale is not None and precision is not None and scale > precision:
            raise ValueError("scale %d is greater than precision %d" % (scale, precision))
        super().__init__(precision=precision, scale=scale, **options)

    def cast_value(self, value):
        if isinstance(value, decimal.Decimal):
            result = value
        elif isinstance(value, bool):
            result = decimal.Decimal(int(value))
        elif isinstance(value, int):
            result = decimal.Decimal(value)
        elif isinstance(value, float):
            result = decimal.Decimal(repr(value))
        else:
            if isinstance(value, bytes):
                value = value.decode()
            if isinstance(value, str) and is_blank(value):
                return None
            try:
                result = decimal.Decimal(str(value).strip())
            except decimal.InvalidOperation as e:
                raise self._coercion_error(value, "not a decimal number") from e
        return self._apply_scale_and_precision(result)

    def _apply_scale_and_precision(self, value: decimal.Decimal) -> decimal.Decimal:
        if not value.is_finite():
            return value
        if self.scale is not None:
            value = value.quantize(decimal.Decimal(1).scaleb(-self.scale), rounding=decimal.ROUND_HALF_UP)
        if self.precision is not None:
            context = decimal.Context(prec=self.precision, rounding=decimal.ROUND_HALF_UP)
            value = context.plus(value)
        return value

    def serialize(self, value):
        return self.cast(value)
