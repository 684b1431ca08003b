from .string import String
from .text import Text
