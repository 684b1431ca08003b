from __future__ import annotations


class AttrCastError(Exception):
    """ Base class of the errors raised by attrcast. """


class UnknownAttribute(AttrCastError, KeyError):
    """ Access to an attribute name that was never registered.
    """

    def __init__(self, name, owner=None):
        self.name = name
        self.owner = owner
        if owner is None:
            super().__init__("Unknown attribute %r" % (name,))
        else:
            super().__init__("Unknown attribute %r on %s" % (name, owner))

    def __str__(self):
        # KeyError.__str__ would repr() the message
        return self.args[0]


class UnknownType(AttrCastError, LookupError):
    """ A type tag that no type class was registered for.
    """

    def __init__(self, tag):
        self.tag = tag
        super().__init__("Unknown type %r" % (tag,))


class CoercionError(AttrCastError, ValueError):
    """ Value outside of the domain accepted by a type.
    """

    def __init__(self, value, type_tag, reason=None):
        self.value = value
        self.type = type_tag
        message = "Cannot coerce %r to %s" % (value, type_tag)
        if reason:
            message = "%s: %s" % (message, reason)
        super().__init__(message)
