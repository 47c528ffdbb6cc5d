# parser.py

from typing import Any, Dict, Tuple

from .config import FLOAT_DTYPES, INT_DTYPES
from .errors import InvalidParameter
from .rounding import Rounding


def _width(val: str):
    if val in INT_DTYPES:
        return INT_DTYPES[val]
    if val in FLOAT_DTYPES:
        return FLOAT_DTYPES[val]
    raise InvalidParameter(f"unknown width '{val}'")


def _rounding(val: str) -> Rounding:
    try:
        return Rounding(val)
    except ValueError as e:
        raise InvalidParameter(f"unknown rounding '{val}'") from e


# key in the filter string -> (parameter name, converter)
_KEYS = {
    "alpha": ("alpha", float),
    "num": ("numerator", int),
    "numerator": ("numerator", int),
    "den": ("denominator", int),
    "denominator": ("denominator", int),
    "rounding": ("rounding", _rounding),
    "width": ("dtype", _width),
}


def parse_filter_string(filter_str: str) -> Tuple[str, Dict[str, Any]]:
    """
    Parses a filter config string into a filter type and a parameter dict.

    Examples:
        "float:alpha=0.25"
        "float:alpha=0.1,width=float32"
        "int:num=1,den=8,rounding=nearest,width=int16"

    Returns:
        filter_type (str)
        params (dict of keyword arguments for create_filter)

    Raises:
        InvalidParameter: a pair is malformed, a key is unknown or a value does not convert.
    """
    filter_str = filter_str.strip()
    if ":" not in filter_str:
        return filter_str.lower(), {}

    filter_type, param_str = filter_str.split(":", 1)
    params: Dict[str, Any] = {}

    for pair in param_str.split(","):
        if not pair.strip():
            continue
        if pair.count("=") != 1:
            raise InvalidParameter(f"malformed parameter '{pair}' in '{filter_str}'")
        key, val = (s.strip() for s in pair.split("="))
        if key not in _KEYS:
            raise InvalidParameter(f"unknown parameter '{key}' in '{filter_str}'")
        name, convert = _KEYS[key]
        if name in params:
            raise InvalidParameter(f"parameter '{name}' given twice in '{filter_str}'")
        try:
            params[name] = convert(val)
        except ValueError as e:
            raise InvalidParameter(f"bad value for '{key}': '{val}'") from e

    return filter_type.strip().lower(), params
