# ruff: noqa
from .registry import TypeRegistry, AttributeDescriptor
from .container import AttributeContainer
from .model import Model, MetaModel, Attribute
