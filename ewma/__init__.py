# __init__.py
from .base import EwmaFilter
from .errors import EwmaError, InvalidParameter, InvalidInput, ArithmeticOverflow
from .rounding import Rounding
from .float_filter import FloatFilter
from .int_filter import IntFilter
from .parser import parse_filter_string
from .factory import create_filter, create_filter_from_string

__all__ = [
    "EwmaFilter",
    "FloatFilter",
    "IntFilter",
    "Rounding",
    "EwmaError",
    "InvalidParameter",
    "InvalidInput",
    "ArithmeticOverflow",
    "parse_filter_string",
    "create_filter",
    "create_filter_from_string",
]
