from .boolean import Boolean
from .json import Json
