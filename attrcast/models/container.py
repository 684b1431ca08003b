from __future__ import annotations
import typing as t

from collections.abc import Mapping

from attrcast.tools import SENTINEL

if t.TYPE_CHECKING:
    from collections.abc import Iterator
    from .registry import TypeRegistry, AttributeDescriptor


class AttributeContainer(Mapping[str, t.Any]):
    """ The attribute values of one record.

        Values given by the application go through the ``cast`` of their
        type, values read from storage through its ``deserialize``, and
        values written back to storage through its ``serialize``. Each hook
        is applied once per value: a deserialized value is never cast again.

        Attributes that were never assigned nor loaded take their default
        value on first read. The default is evaluated for this container
        only and kept as the current value.
    """
    __slots__ = ('_registry', '_values', '_raw', '_originals', '_assigned', '_defaults')

    def __init__(self, registry: TypeRegistry):
        self._registry = registry
        self._values: dict[str, t.Any] = {}         # canonical values
        self._raw: dict[str, t.Any] = {}            # values before type cast
        self._originals: dict[str, t.Any] = {}      # values as last loaded or applied
        self._assigned: set[str] = set()            # names set since last loaded or applied
        self._defaults: dict[str, tuple] = {}       # evaluated defaults, as (raw, value)

    def __repr__(self):
        values = ", ".join(f"{name}={value!r}" for name, value in self._values.items())
        return f"<AttributeContainer {self._registry.name}({values})>"

    @property
    def registry(self) -> TypeRegistry:
        return self._registry

    # region: MAPPING

    def __getitem__(self, name: str) -> t.Any:
        return self.get(name)

    def __iter__(self) -> Iterator[str]:
        """ Iterate over the registered attribute names. """
        return iter(self._registry)

    def __len__(self) -> int:
        return len(self._registry)

    def __contains__(self, name) -> bool:
        return name in self._registry

    # endregion

    def is_set(self, name: str) -> bool:
        """ Return whether attribute ``name`` has a current value (assigned,
            loaded or defaulted).
        """
        self._registry.lookup(name)
        return name in self._values

    def get(self, name: str, default=SENTINEL) -> t.Any:
        """ Return the current value of attribute ``name``, evaluating its
            default when it has none yet.

            :raise UnknownAttribute: if ``name`` is not registered, unless
                ``default`` is given
        """
        if name in self._values:
            return self._values[name]
        if default is not SENTINEL and name not in self._registry:
            return default
        descr = self._registry.lookup(name)
        return self._init_default(descr)

    def _default(self, descr: AttributeDescriptor) -> tuple[t.Any, t.Any]:
        # evaluated at most once per container
        if descr.name not in self._defaults:
            raw = descr.raw_default()
            type_object = descr.type_object
            value = type_object.cast(raw) if descr.user_provided_default else type_object.deserialize(raw)
            self._defaults[descr.name] = (raw, value)
        return self._defaults[descr.name]

    def _init_default(self, descr: AttributeDescriptor) -> t.Any:
        raw, value = self._default(descr)
        self._raw[descr.name] = raw
        self._values[descr.name] = value
        return value

    def set(self, name: str, value: t.Any) -> None:
        """ Assign ``value``, as given by the application, to ``name``.

            :raise UnknownAttribute: if ``name`` is not registered
            :raise CoercionError: if the type rejects ``value``
        """
        descr = self._registry.lookup(name)
        cast_value = descr.type_object.cast(value)
        self._raw[name] = value
        self._values[name] = cast_value
        self._assigned.add(name)

    __setitem__ = set

    def update(self, values: Mapping[str, t.Any] | None = None, /, **kwargs) -> None:
        for name, value in dict(values or (), **kwargs).items():
            self.set(name, value)

    def load_from_storage(self, name: str, value: t.Any) -> None:
        """ Assign ``value``, as read from storage, to ``name``. The value
            becomes the reference for change tracking.

            :raise UnknownAttribute: if ``name`` is not registered
            :raise CoercionError: if the type rejects ``value``
        """
        descr = self._registry.lookup(name)
        self._values[name] = descr.type_object.deserialize(value)
        self._raw[name] = value
        self._originals[name] = value
        self._assigned.discard(name)

    def export_for_storage(self, name: str) -> t.Any:
        """ Return the value of ``name`` in the form expected by storage. """
        descr = self._registry.lookup(name)
        return descr.type_object.serialize(self.get(name))

    def values_for_storage(self) -> dict[str, t.Any]:
        """ Return the storage form of every attribute that is not virtual. """
        return {name: self.export_for_storage(name) for name in self._registry.storage_names()}

    def value_before_type_cast(self, name: str) -> t.Any:
        """ Return the value of ``name`` as it was given to :meth:`set` or
            :meth:`load_from_storage`, or the raw default.
        """
        self.get(name)
        return self._raw[name]

    # region: CHANGES

    def _original_value(self, descr: AttributeDescriptor) -> t.Any:
        if descr.name in self._originals:
            return descr.type_object.deserialize(self._originals[descr.name])
        return self._default(descr)[1]

    def is_changed(self, name: str) -> bool:
        """ Return whether ``name`` differs from the value it was loaded with
            (or from its default, for a new record).
        """
        descr = self._registry.lookup(name)
        type_object = descr.type_object
        if name in self._originals:
            stored = self._originals[name]
            value = self._values[name]
            return (type_object.changed(type_object.deserialize(stored), value)
                    or type_object.changed_in_place(stored, value))
        if name in self._assigned:
            return type_object.changed(self._default(descr)[1], self._values[name])
        return False

    def changed(self) -> list[str]:
        """ Return the sorted names of the changed attributes. """
        return sorted(name for name in self._values if self.is_changed(name))

    def changes(self) -> dict[str, tuple[t.Any, t.Any]]:
        """ Return ``{name: (old value, new value)}`` for the changed attributes. """
        registry = self._registry
        return {name: (self._original_value(registry.lookup(name)), self._values[name])
                for name in self.changed()}

    def changes_applied(self) -> None:
        """ Make the current values the reference for change tracking, as
            after they have been written to storage.
        """
        # nothing is applied when one of the values cannot be serialized
        exported = {name: self.export_for_storage(name) for name in self._values}
        self._originals.update(exported)
        self._assigned.clear()

    # endregion
