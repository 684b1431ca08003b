from .integer import Integer
from .float import Float
from .decimal import Decimal
