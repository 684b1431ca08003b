import threading

import pytest

from attrcast.exceptions import UnknownAttribute
from attrcast.models import TypeRegistry
from attrcast.tools import NO_DEFAULT, mute_logger
from attrcast.types import Integer, String, Value


def test_register_and_lookup():
    registry = TypeRegistry('partner')
    descr = registry.register('age', 'integer', default=18)
    assert registry.lookup('age') is descr
    assert descr.type_object == Integer()
    assert descr.default == 18
    assert descr.user_provided_default
    assert not descr.virtual
    assert 'age' in registry
    assert list(registry) == ['age']
    assert len(registry) == 1


def test_lookup_unknown():
    registry = TypeRegistry('partner')
    with pytest.raises(UnknownAttribute) as exc:
        registry.lookup('age')
    assert exc.value.name == 'age'
    assert str(exc.value) == "Unknown attribute 'age' on partner"
    # still a KeyError for mapping code
    assert registry.get('age') is None


@mute_logger('attrcast.models')
def test_last_registration_wins():
    registry = TypeRegistry()
    registry.register('code', 'integer', default=1)
    registry.register('code', String(limit=4))
    descr = registry.lookup('code')
    assert descr.type_object == String(limit=4)
    assert descr.default is NO_DEFAULT


def test_register_options_and_invalid_name():
    registry = TypeRegistry()
    assert registry.register('ref', 'string', limit=3).type_object == String(limit=3)
    assert registry.register('anything', None).type_object == Value()
    with pytest.raises(ValueError):
        registry.register('', 'string')


def test_attribute_waits_for_schema():
    registry = TypeRegistry()
    registry.attribute('price', 'decimal', scale=2)
    registry.attribute('nickname', 'string')
    assert 'price' not in registry
    assert not registry.schema_loaded

    registry.load_schema({'price': 'float', 'quantity': 'integer'})
    assert registry.schema_loaded
    # the declaration overrides the type of the column
    assert registry.lookup('price').type_object.type == 'decimal'
    assert registry.lookup('quantity').type_object == Integer()
    assert registry.is_virtual('nickname')
    assert not registry.is_virtual('price')
    assert registry.storage_names() == ['price', 'quantity']

    # once the schema is loaded, declarations apply at once
    registry.attribute('note', 'text')
    assert registry.is_virtual('note')


def test_attribute_without_type_keeps_column_type():
    registry = TypeRegistry()
    registry.attribute('quantity', default=1)
    registry.load_schema({'quantity': 'integer'})
    descr = registry.lookup('quantity')
    assert descr.type_object == Integer()
    assert descr.default == 1


def test_register_before_schema():
    registry = TypeRegistry()
    registry.register('flag', 'boolean', default=True)
    registry.register('token', 'string')
    registry.load_schema({'flag': 'boolean'})
    assert registry.lookup('flag').default is True
    assert not registry.is_virtual('flag')
    assert registry.is_virtual('token')


def test_copy():
    registry = TypeRegistry('a')
    registry.register('x', 'integer')
    other = registry.copy('b')
    other.register('y', 'integer')
    assert 'y' not in registry
    assert other.lookup('x') is registry.lookup('x')


def test_concurrent_registrations():
    registry = TypeRegistry()

    def register(start):
        for i in range(start, start + 50):
            registry.register(f'attr_{i}', 'integer')

    threads = [threading.Thread(target=register, args=(n * 50,)) for n in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert len(registry) == 200


def test_copy_does_not_share_declarations():
    registry = TypeRegistry('parent')
    registry.attribute('x')
    other = registry.copy('child')
    other.load_schema({'x': 'integer'})
    registry.load_schema({'x': 'string'})
    assert registry.lookup('x').type_object == String()
    assert other.lookup('x').type_object == Integer()
    assert registry.declarations() == [('x', {'type_object': None, 'default': NO_DEFAULT,
                                              'user_provided_default': True})]


@mute_logger('attrcast.models')
def test_declarations_survive_schema_reload():
    registry = TypeRegistry()
    registry.attribute('price', 'integer')
    registry.load_schema({'price': 'string'})
    registry.load_schema({'price': 'string'})
    assert registry.lookup('price').type_object == Integer()

    # declared after the first load, kept for the next one
    registry.attribute('note', 'text')
    registry.load_schema({'price': 'string', 'note': 'string'})
    assert registry.lookup('note').type_object.type == 'text'
    assert not registry.is_virtual('note')
