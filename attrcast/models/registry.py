from __future__ import annotations
import copy
import logging
import threading
import typing as t

from collections.abc import Mapping

from attrcast.exceptions import UnknownAttribute
from attrcast.tools import NO_DEFAULT, NoDefault, locked
from attrcast.types import Type, lookup_type

if t.TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    TypeSpec = str | Type | type[Type] | None
    DefaultSpec = t.Any | NoDefault | Callable[[], t.Any]

_logger = logging.getLogger("attrcast.models")


class AttributeDescriptor(t.NamedTuple):
    """ Declaration of one attribute in a :class:`TypeRegistry`. """
    name: str
    type_object: Type
    default: DefaultSpec = NO_DEFAULT
    user_provided_default: bool = True
    virtual: bool = False

    @property
    def has_default(self) -> bool:
        return self.default is not NO_DEFAULT

    def raw_default(self) -> t.Any:
        """ Evaluate the default: call it when it is a producer, copy it
            otherwise so that mutable literals are never shared.
            ``NO_DEFAULT`` gives ``None``.
        """
        default = self.default
        if default is NO_DEFAULT:
            return None
        if callable(default):
            return default()
        return copy.deepcopy(default)

    def default_value(self) -> t.Any:
        """ Return the canonical default value: the raw default goes through
            ``cast`` when it is provided by the application, and through
            ``deserialize`` when it stands for a value coming from storage.
        """
        raw = self.raw_default()
        if self.user_provided_default:
            return self.type_object.cast(raw)
        return self.type_object.deserialize(raw)


class TypeRegistry(Mapping[str, AttributeDescriptor]):
    """ Mapping from attribute names to their :class:`AttributeDescriptor`.

        The registry is meant to be filled once, then shared by all the
        containers of a kind of record. Lookups take no lock; registrations
        are serialized.

        There are two ways to declare an attribute:

        * :meth:`register` applies at once;
        * :meth:`attribute` waits for the schema to be loaded by
          :meth:`load_schema`, so that it overrides the type of a column of
          the same name. Declared attributes without a column are virtual.
    """

    def __init__(self, name: str = 'registry'):
        self.name = name
        self._descriptors: dict[str, AttributeDescriptor] = {}
        self._declarations: list[tuple[str, dict[str, t.Any]]] = []
        self._columns: frozenset[str] | None = None
        self._lock = threading.RLock()

    def __repr__(self):
        return f"<TypeRegistry {self.name} {list(self._descriptors)}>"

    # region: MAPPING

    def __getitem__(self, name: str) -> AttributeDescriptor:
        return self.lookup(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __contains__(self, name) -> bool:
        return name in self._descriptors

    # endregion

    @property
    def schema_loaded(self) -> bool:
        return self._columns is not None

    def lookup(self, name: str) -> AttributeDescriptor:
        """ Return the descriptor of attribute ``name``.

            :raise UnknownAttribute: if ``name`` was never registered
        """
        try:
            return self._descriptors[name]
        except KeyError:
            raise UnknownAttribute(name, self.name) from None

    def names(self) -> list[str]:
        return list(self._descriptors)

    def is_virtual(self, name: str) -> bool:
        return self.lookup(name).virtual

    def storage_names(self) -> list[str]:
        """ Return the names of the registered attributes backed by a column. """
        return [name for name, descr in self._descriptors.items() if not descr.virtual]

    @locked
    def register(self, name: str, type_object: TypeSpec, default: DefaultSpec = NO_DEFAULT,
                 user_provided_default: bool = True, **options) -> AttributeDescriptor:
        """ Declare attribute ``name`` with the given type, replacing any
            previous declaration of that name.

            :param type_object: a type tag, a :class:`Type` subclass or
                instance, ``None`` for the identity type
            :param default: a literal, a producer (called without argument
                for every new record) or ``NO_DEFAULT``
            :param user_provided_default: whether the default is cast like an
                application value (``True``) or deserialized like a stored one
            :param options: options of the type, when it is given by tag or
                class
        """
        if not isinstance(name, str) or not name:
            raise ValueError("Invalid attribute name %r" % (name,))
        descr = AttributeDescriptor(
            name=name,
            type_object=lookup_type(type_object, **options),
            default=default,
            user_provided_default=bool(user_provided_default),
            virtual=self._columns is not None and name not in self._columns,
        )
        if name in self._descriptors:
            _logger.debug("%s: attribute %r redefined as %r", self.name, name, descr.type_object)
        self._descriptors[name] = descr
        return descr

    define_attribute = register

    @locked
    def attribute(self, name: str, type_object: TypeSpec = None, default: DefaultSpec = NO_DEFAULT,
                  user_provided_default: bool = True, **options) -> None:
        """ Declare attribute ``name``, once the schema is loaded. See
            :meth:`register` for the parameters. The declaration is kept and
            applied again each time the schema is loaded.
        """
        kwargs = dict(type_object=type_object, default=default,
                      user_provided_default=user_provided_default, **options)
        self._declarations.append((name, kwargs))
        if self._columns is not None:
            self._apply_declaration(name, kwargs)

    def declarations(self) -> list[tuple[str, dict[str, t.Any]]]:
        """ Return a copy of the declarations made by :meth:`attribute`, in
            order.
        """
        return [(name, dict(kwargs)) for name, kwargs in self._declarations]

    def _apply_declaration(self, name: str, kwargs: dict[str, t.Any]) -> None:
        if kwargs['type_object'] is None and name in self._descriptors:
            # declared without a type: keep the type of the column
            kwargs = dict(kwargs, type_object=self._descriptors[name].type_object)
        self.register(name, **kwargs)

    @locked
    def load_schema(self, columns: Mapping[str, TypeSpec]) -> None:
        """ Register the columns of the storage schema, then apply the
            declarations made by :meth:`attribute`. Registered attributes
            that are not columns become virtual.

            :param columns: mapping from column names to their type
        """
        self._columns = frozenset(columns)
        for name, type_spec in columns.items():
            previous = self._descriptors.get(name)
            if previous is None:
                self.register(name, type_spec)
            else:
                self.register(name, type_spec, previous.default, previous.user_provided_default)
        for name, descr in list(self._descriptors.items()):
            if name not in self._columns and not descr.virtual:
                self._descriptors[name] = descr._replace(virtual=True)
        for name, kwargs in self._declarations:
            self._apply_declaration(name, kwargs)
        _logger.debug("%s: schema loaded, %d columns, %d attributes",
                      self.name, len(self._columns), len(self._descriptors))

    @locked
    def copy(self, name: str | None = None) -> TypeRegistry:
        """ Return a new registry with the same declarations. """
        registry = TypeRegistry(name or self.name)
        registry._descriptors.update(self._descriptors)
        registry._declarations.extend(self.declarations())
        registry._columns = self._columns
        return registry
