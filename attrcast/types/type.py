from __future__ import annotations
import logging
import typing as t

from attrcast.exceptions import CoercionError, UnknownType

T = t.TypeVar("T")

_logger = logging.getLogger("attrcast.types")


class Type(t.Generic[T]):
    """ Base of all attribute types.

        A type converts values between three representations:

        * the raw value given by the application (:meth:`cast`),
        * the value stored by the persistence layer (:meth:`deserialize`
          and :meth:`serialize`),
        * the canonical in-memory value held by a record.

        Types are stateless: their only state are the options given to the
        constructor, which are not meant to change afterwards. Two types are
        equal when they share their class and options.

        Subclasses setting the class attribute ``type`` are available by
        that tag through :func:`lookup_type`::

            class Money(Type[Decimal]):
                type = 'money'

                def cast_value(self, value):
                    ...

        :param options: type-specific options (``limit``, ``precision``,
            ``scale``...). Only the names declared in ``_options`` are
            accepted.
    """

    type: str | None = None
    """ Tag of the type, ``None`` for abstract types. """

    _options: tuple[str, ...] = ()
    """ Names of the options accepted by the constructor. """

    by_type: t.ClassVar[dict[str, type[Type]]] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        tag = cls.__dict__.get('type')
        if tag:
            previous = Type.by_type.get(tag)
            if previous is not None and previous is not cls:
                _logger.debug("type %r: %s replaces %s", tag, cls.__qualname__, previous.__qualname__)
            Type.by_type[tag] = cls

    def __init__(self, **options):
        unknown = set(options) - set(self._options)
        if unknown:
            raise TypeError("%s got unexpected options: %s" % (type(self).__name__, ", ".join(sorted(unknown))))
        for name in self._options:
            setattr(self, name, options.get(name, getattr(type(self), name, None)))

    @property
    def options(self) -> dict[str, t.Any]:
        return {name: getattr(self, name) for name in self._options}

    def __eq__(self, other):
        return type(self) is type(other) and self.options == other.options

    def __hash__(self):
        return hash((type(self), tuple(self.options.items())))

    def __repr__(self):
        args = ", ".join("%s=%r" % item for item in self.options.items() if item[1] is not None)
        return "%s(%s)" % (type(self).__name__, args)

    def cast(self, value: t.Any) -> T | None:
        """ Convert a value given by the application (user input, a
            constructor argument, an assignment) to its canonical form.
            ``None`` is always kept as is; the conversion of other values is
            delegated to :meth:`cast_value`.
        """
        if value is None:
            return None
        return self.cast_value(value)

    def cast_value(self, value: t.Any) -> T | None:
        """ Convert a value that is not ``None``. Subclasses override this
            rather than :meth:`cast` to keep the ``None`` handling.
        """
        return value

    def deserialize(self, value: t.Any) -> T | None:
        """ Convert a value read from storage to its canonical form. """
        return self.cast(value)

    def serialize(self, value: T | None) -> t.Any:
        """ Convert a canonical value to the form sent to storage. The result
            must give ``value`` back through :meth:`deserialize`.
        """
        return value

    def changed(self, old_value: T | None, new_value: T | None) -> bool:
        """ Return whether replacing ``old_value`` by ``new_value`` is a change. """
        return old_value != new_value

    def changed_in_place(self, stored_value: t.Any, value: T | None) -> bool:
        """ Return whether ``value``, deserialized from ``stored_value``, was
            mutated since.
        """
        return False

    def _coercion_error(self, value, reason=None) -> CoercionError:
        return CoercionError(value, self.type or type(self).__name__, reason)


class Value(Type[t.Any]):
    """ Identity type, used for attributes declared without a type. """
    type = 'value'


def register_type(tag: str, type_class: type[Type]) -> None:
    """ Make ``type_class`` available under ``tag``, in addition to its own
        ``type``.
    """
    if not (isinstance(type_class, type) and issubclass(type_class, Type)):
        raise TypeError("%r is not a Type subclass" % (type_class,))
    _logger.debug("type %r registered as %s", tag, type_class.__qualname__)
    Type.by_type[tag] = type_class


def lookup_type(spec: str | Type | type[Type] | None, **options) -> Type:
    """ Return a type instance for ``spec``: a tag, a :class:`Type` subclass
        or an instance (returned as is, options must then be empty).
        ``None`` gives the identity :class:`Value` type.
    """
    if spec is None:
        spec = Value
    if isinstance(spec, Type):
        if options:
            raise TypeError("options %s given with a type instance %r" % (sorted(options), spec))
        return spec
    if isinstance(spec, str):
        try:
            spec = Type.by_type[spec]
        except KeyError:
            raise UnknownType(spec) from None
    if isinstance(spec, type) and issubclass(spec, Type):
        return spec(**options)
    raise TypeError("Invalid type specification %r" % (spec,))
