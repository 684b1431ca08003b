# ruff: noqa
""" Attribute typing for record objects.

    Types cast application values, deserialize stored values and serialize
    values back for storage; registries map attribute names to their type
    and default; containers hold the values of one record.
"""
from . import release
from .release import VERSION as __version__

from .config import config
from .exceptions import AttrCastError, UnknownAttribute, UnknownType, CoercionError
from .tools import NO_DEFAULT
from . import types
from .types import Type, Value, lookup_type, register_type
from .models import TypeRegistry, AttributeDescriptor, AttributeContainer, Model, Attribute
