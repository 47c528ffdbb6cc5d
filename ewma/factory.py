# factory.py

import logging
from typing import Any, Dict, Optional

from .base import EwmaFilter
from .config import (DEFAULT_ALPHA, DEFAULT_FLOAT_DTYPE, DEFAULT_INT_DTYPE,
                     DEFAULT_RATIO, DEFAULT_ROUNDING)
from .errors import InvalidParameter
from .float_filter import FloatFilter
from .int_filter import IntFilter
from .parser import parse_filter_string

log = logging.getLogger(__name__)

FLOAT_PARAMS = {"alpha", "dtype"}
INT_PARAMS = {"numerator", "denominator", "rounding", "dtype"}


def _check_params(filter_type: str, params: Dict[str, Any], allowed: set):
    unexpected = set(params) - allowed
    if unexpected:
        raise InvalidParameter(f"{filter_type} filter does not take {sorted(unexpected)}")


def create_filter(filter_type: str, params: Optional[Dict[str, Any]] = None) -> Optional[EwmaFilter]:
    """
    Build a filter from its type name and parameters, falling back to the
    defaults in config for anything not given. "none" returns None.
    """
    params = params or {}
    kind = filter_type.lower()

    if kind in ("none", "no_filter"):
        return None

    if kind == "float":
        _check_params(kind, params, FLOAT_PARAMS)
        return FloatFilter(params.get("alpha", DEFAULT_ALPHA),
                           dtype=params.get("dtype", DEFAULT_FLOAT_DTYPE))

    if kind == "int":
        _check_params(kind, params, INT_PARAMS)
        numerator, denominator = DEFAULT_RATIO
        return IntFilter(params.get("numerator", numerator),
                         params.get("denominator", denominator),
                         rounding=params.get("rounding", DEFAULT_ROUNDING),
                         dtype=params.get("dtype", DEFAULT_INT_DTYPE))

    log.warning(f"unknown filter type '{filter_type}'")
    raise InvalidParameter(f"unknown filter type '{filter_type}'")


def create_filter_from_string(filter_str: str) -> Optional[EwmaFilter]:
    """Parse a filter string (see parse_filter_string) and build the filter."""
    filter_type, params = parse_filter_string(filter_str)
    return create_filter(filter_type, params)
