# ruff: noqa
from .type import Type, Value, lookup_type, register_type

from .numeric import Integer, Float, Decimal
from .misc import Boolean, Json
from .textual import String, Text
from .date import Date, Datetime

from .utils import is_blank
