from __future__ import annotations
import logging
import typing as t

from attrcast.exceptions import UnknownAttribute
from attrcast.tools import NO_DEFAULT
from .container import AttributeContainer
from .registry import TypeRegistry

if t.TYPE_CHECKING:
    from collections.abc import Mapping
    from attrcast.types import Type
    from .registry import TypeSpec, DefaultSpec

_logger = logging.getLogger("attrcast.models")


class Attribute:
    """ Declaration of a typed attribute on a :class:`Model` class::

            class Product(Model):
                name = Attribute('string', limit=64)
                price = Attribute('decimal', scale=2, default=0)
                created = Attribute('datetime', default=Datetime.now)

        Reading the attribute on a record returns its current value,
        assigning it casts the new value.

        :param type_object: a type tag, a :class:`Type` subclass or instance
        :param default: a literal or a producer called for each new record
        :param bool user_provided_default: whether the default is cast like
            an application value (``True``) or deserialized like a stored one
        :param options: options of the type, when given by tag or class
    """
    name: str | None = None

    def __init__(self, type_object: TypeSpec = None, default: DefaultSpec = NO_DEFAULT,
                 user_provided_default: bool = True, **options):
        self.args = dict(type_object=type_object, default=default,
                         user_provided_default=user_provided_default, **options)

    def __repr__(self):
        return f"Attribute({self.name!r}, {self.args['type_object']!r})"

    def __set_name__(self, owner, name):
        self.name = name
        # collected by MetaModel when the class is complete
        owner.__dict__['_attribute_definitions'].append(self)

    def __get__(self, record, owner=None):
        if record is None:
            return self         # the attribute is accessed through the class
        return record._attributes.get(self.name)

    def __set__(self, record, value):
        record._attributes.set(self.name, value)


class MetaModel(type):
    """ The metaclass of models. It builds the :class:`TypeRegistry` of
        each model class from the attributes declared on the class and on
        its parent models.
    """
    _registry: TypeRegistry
    _attribute_definitions: list[Attribute]

    def __new__(meta, name, bases, attrs):
        # this collects the attributes defined on the class (via Attribute.__set_name__())
        attrs.setdefault('_attribute_definitions', [])
        attrs.setdefault('_name', name)
        return super().__new__(meta, name, bases, attrs)

    def __init__(self, name, bases, attrs):
        super().__init__(name, bases, attrs)
        registry = TypeRegistry(self._name)
        # parents first, so that the definitions of the class win
        for base in reversed(self.__mro__[1:]):
            parent_registry = base.__dict__.get('_registry')
            if isinstance(parent_registry, TypeRegistry):
                for descr in parent_registry.values():
                    registry.register(descr.name, descr.type_object, descr.default,
                                      descr.user_provided_default)
                # deferred declarations apply to the schema of the subclass
                for attr_name, kwargs in parent_registry.declarations():
                    registry.attribute(attr_name, **kwargs)
        for attribute in self._attribute_definitions:
            registry.register(attribute.name, **attribute.args)
            _logger.debug("model %s: attribute %s declared", self._name, attribute.name)
        self._registry = registry


class Model(metaclass=MetaModel):
    """ Base class of records with typed attributes.

        Keyword arguments given to the constructor are cast and assigned::

            product = Product(name="Widget", price="9.90")
            product.price       # Decimal('9.90')

        Records read from storage are built with :meth:`from_storage`, and
        :meth:`values_for_storage` gives back what should be written.
    """
    _name = 'model'
    __slots__ = ('_attributes', '__weakref__')

    _attributes: AttributeContainer

    def __init__(self, **values):
        self._attributes = AttributeContainer(self._registry)
        for name, value in values.items():
            self._attributes.set(name, value)

    def __repr__(self):
        return f"{type(self).__name__}({', '.join(f'{k}={v!r}' for k, v in self._attributes._values.items())})"

    def __getattr__(self, name):
        # attributes registered after the class creation have no descriptor
        if name.startswith('_'):
            raise AttributeError(name)
        try:
            return self._attributes.get(name)
        except UnknownAttribute:
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}") from None

    def __setattr__(self, name, value):
        if name.startswith('_') or hasattr(type(self), name) or name not in self._registry:
            super().__setattr__(name, value)
        else:
            self._attributes.set(name, value)

    # region: CLASS API

    @classmethod
    def attribute(cls, name: str, type_object: TypeSpec = None, default: DefaultSpec = NO_DEFAULT,
                  user_provided_default: bool = True, **options) -> None:
        """ Declare attribute ``name`` once the schema is loaded, see
            :meth:`TypeRegistry.attribute`.
        """
        cls._registry.attribute(name, type_object, default, user_provided_default, **options)

    @classmethod
    def define_attribute(cls, name: str, type_object: TypeSpec = None, default: DefaultSpec = NO_DEFAULT,
                         user_provided_default: bool = True, **options) -> None:
        """ Declare attribute ``name`` at once, see :meth:`TypeRegistry.register`. """
        cls._registry.register(name, type_object, default, user_provided_default, **options)

    @classmethod
    def load_schema(cls, columns: Mapping[str, TypeSpec]) -> None:
        """ Load the columns of the storage schema of the model. """
        cls._registry.load_schema(columns)

    @classmethod
    def type_for_attribute(cls, name: str) -> Type:
        return cls._registry.lookup(name).type_object

    @classmethod
    def from_storage(cls, row: Mapping[str, t.Any]):
        """ Return a record holding the values of ``row``, as read from
            storage.
        """
        record = cls.__new__(cls)
        record._attributes = AttributeContainer(cls._registry)
        for name, value in row.items():
            record._attributes.load_from_storage(name, value)
        return record

    # endregion

    def read_attribute(self, name: str) -> t.Any:
        return self._attributes.get(name)

    def write_attribute(self, name: str, value: t.Any) -> None:
        self._attributes.set(name, value)

    def value_before_type_cast(self, name: str) -> t.Any:
        return self._attributes.value_before_type_cast(name)

    def values_for_storage(self) -> dict[str, t.Any]:
        return self._attributes.values_for_storage()

    def is_changed(self, name: str) -> bool:
        return self._attributes.is_changed(name)

    def changed(self) -> list[str]:
        return self._attributes.changed()

    def changes(self) -> dict[str, tuple[t.Any, t.Any]]:
        return self._attributes.changes()

    def changes_applied(self) -> None:
        self._attributes.changes_applied()
