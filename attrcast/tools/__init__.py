# ruff: noqa

from .classutils import *
from .sentinel import *
from .logging import *
