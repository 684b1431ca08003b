from __future__ import annotations
import re

NUMERIC_RE = re.compile(r'^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$')
"""Numbers accepted in strings by the numeric types"""


def is_blank(value) -> bool:
    """ Return whether ``value`` is a string made of whitespace only. """
    return isinstance(value, str) and not value.strip()
