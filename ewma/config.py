# config.py - defaults used when a filter is built without explicit parameters

from typing import Dict, Optional, Tuple

import numpy as np

from .rounding import Rounding

DEFAULT_ALPHA: float = 0.01
DEFAULT_RATIO: Tuple[int, int] = (1, 100)  # numerator, denominator
DEFAULT_ROUNDING = Rounding.TRUNCATE

DEFAULT_FLOAT_DTYPE = np.float64
DEFAULT_INT_DTYPE = np.int64

# width names accepted in filter strings
FLOAT_DTYPES: Dict[str, type] = {
    "float32": np.float32,
    "float64": np.float64,
}

INT_DTYPES: Dict[str, Optional[type]] = {
    "int8": np.int8,
    "int16": np.int16,
    "int32": np.int32,
    "int64": np.int64,
    "uint8": np.uint8,
    "uint16": np.uint16,
    "uint32": np.uint32,
    "uint64": np.uint64,
    "unbounded": None,  # python ints, overflow cannot occur
}
