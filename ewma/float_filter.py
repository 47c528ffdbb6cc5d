# float_filter.py

import logging
import numbers

import numpy as np

from .base import EwmaFilter
from .config import DEFAULT_ALPHA, DEFAULT_FLOAT_DTYPE
from .errors import InvalidInput, InvalidParameter

log = logging.getLogger(__name__)


class FloatFilter(EwmaFilter):
    def __init__(self, alpha: float, dtype=DEFAULT_FLOAT_DTYPE):
        """
        Single pole IIR low-pass filter on floating point samples.

        Args:
            alpha (float): Weight of the newest sample, in (0, 1].
                Close to 1 tracks the input quickly, close to 0 smooths heavily.
            dtype: numpy floating type the arithmetic is carried out in.

        Raises:
            InvalidParameter: alpha is NaN, not a real number or outside (0, 1],
                or dtype is not a floating type.
        """
        super().__init__()
        if dtype is None:
            raise InvalidParameter("dtype must be a floating type, got None")
        try:
            dt = np.dtype(dtype)
        except TypeError as e:
            raise InvalidParameter(f"unknown float dtype {dtype!r}") from e
        if not np.issubdtype(dt, np.floating):
            raise InvalidParameter(f"dtype must be a floating type, got {dt}")
        if not isinstance(alpha, numbers.Real) or isinstance(alpha, bool):
            raise InvalidParameter(f"alpha must be a real number, got {alpha!r}")
        if not 0.0 < alpha <= 1.0:  # also rejects NaN
            raise InvalidParameter(f"alpha must be in (0, 1], got {alpha}")

        self._dtype = dt.type
        self._alpha = self._dtype(alpha)
        if self._alpha <= 0:
            raise InvalidParameter(f"alpha {alpha} underflows to zero as {dt}")
        self._retain = self._dtype(1) - self._alpha
        log.debug(f"FloatFilter created, alpha={alpha}, dtype={dt}")

    @classmethod
    def default(cls):
        return cls(DEFAULT_ALPHA)

    @property
    def alpha(self) -> float:
        return float(self._alpha)

    @property
    def dtype(self):
        return self._dtype

    def _export(self, value):
        return float(value)

    def _blend(self, sample, previous):
        return self._alpha * sample + self._retain * previous

    def _to_sample(self, sample):
        if not isinstance(sample, numbers.Real) or isinstance(sample, bool):
            raise InvalidInput(f"sample must be a real number, got {sample!r}")
        try:
            with np.errstate(over="ignore"):
                value = self._dtype(sample)
        except OverflowError as e:
            raise InvalidInput(f"sample {sample} is not representable as {np.dtype(self._dtype)}") from e
        if not np.isfinite(value):
            raise InvalidInput(f"sample must be finite, got {sample}")
        return value

    def update(self, sample: float) -> float:
        """
        Apply one step of exponential smoothing.
        :param sample: The new input value, must be finite.
        :return: The new smoothed value.
        :raises InvalidInput: The sample is rejected and the filter state is left unchanged.
        """
        try:
            x = self._to_sample(sample)
        except InvalidInput as e:
            log.warning(f"FloatFilter rejected sample: {e}")
            raise

        if not self.is_seeded:
            return self._commit(x, x, x)

        average = self._blend(x, self._average)

        # extrema fade toward the average
        local_max = self._local_max
        if x > local_max:
            local_max = x
        elif x > average:
            local_max = self._blend(x, local_max)

        local_min = self._local_min
        if x < local_min:
            local_min = x
        elif x < average:
            local_min = self._blend(x, local_min)

        return self._commit(average, local_min, local_max)
