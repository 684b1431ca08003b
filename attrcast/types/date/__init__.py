from .basedate import BaseDate
from .date import Date
from .datetime import Datetime
