# int_filter.py

import logging
import numbers

import numpy as np

from .base import EwmaFilter
from .config import DEFAULT_INT_DTYPE, DEFAULT_RATIO, DEFAULT_ROUNDING
from .errors import ArithmeticOverflow, InvalidInput, InvalidParameter
from .rounding import Rounding, divide

log = logging.getLogger(__name__)


def _is_int(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


class IntFilter(EwmaFilter):
    """
    Exponentially weighted moving average using integer arithmetic only.

    Alpha is the exact ratio numerator/denominator and each step is

        average += divide(numerator * (sample - average), denominator)

    with the division policy chosen by `rounding`:

      - Rounding.TRUNCATE (default) rounds toward zero. A constant input can
        stall short of its target once numerator * |difference| < denominator,
        and changes smaller than that are filtered out entirely.
      - Rounding.NEAREST rounds to nearest, halves away from zero. Stalls
        once numerator * |difference| < denominator / 2.
      - Rounding.AWAY_FROM_ZERO moves at least one unit for any non-zero
        difference and never past the sample, so a constant input is always
        reached exactly. Small ratios then pass unit-sized noise through.

    The integer width is emulated from a numpy integer dtype. The difference
    and the product must fit that width (their magnitudes for unsigned
    widths) or ArithmeticOverflow is raised. Pass dtype=None for unbounded
    python ints, where overflow cannot happen and inputs have no magnitude limit.
    """

    def __init__(self, numerator: int, denominator: int,
                 rounding: Rounding = DEFAULT_ROUNDING, dtype=DEFAULT_INT_DTYPE):
        super().__init__()
        if dtype is None:
            self._bounds = None
            self._unsigned = False
        else:
            try:
                dt = np.dtype(dtype)
            except TypeError as e:
                raise InvalidParameter(f"unknown integer dtype {dtype!r}") from e
            if not np.issubdtype(dt, np.integer):
                raise InvalidParameter(f"dtype must be an integer type, got {dt}")
            info = np.iinfo(dt)
            self._bounds = (int(info.min), int(info.max))
            self._unsigned = info.min == 0
            dtype = dt.type

        if not _is_int(numerator) or not _is_int(denominator):
            raise InvalidParameter(f"alpha ratio must be integers, got {numerator!r}/{denominator!r}")
        numerator, denominator = int(numerator), int(denominator)
        if not 0 < numerator <= denominator:
            raise InvalidParameter(f"alpha ratio must satisfy 0 < numerator <= denominator, got {numerator}/{denominator}")
        if self._bounds is not None and denominator > self._bounds[1]:
            raise InvalidParameter(f"denominator {denominator} does not fit {np.dtype(dtype)}")
        if not isinstance(rounding, Rounding):
            raise InvalidParameter(f"rounding must be a Rounding, got {rounding!r}")

        self._numerator = numerator
        self._denominator = denominator
        self._rounding = rounding
        self._dtype = dtype
        log.debug(f"IntFilter created, alpha={numerator}/{denominator}, "
                  f"rounding={rounding.value}, dtype={'unbounded' if dtype is None else np.dtype(dtype)}")

    @classmethod
    def default(cls):
        return cls(*DEFAULT_RATIO)

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    @property
    def rounding(self) -> Rounding:
        return self._rounding

    @property
    def dtype(self):
        return self._dtype

    def _fits(self, quantity: int) -> bool:
        if self._bounds is None:
            return True
        low, high = self._bounds
        if self._unsigned:
            quantity = abs(quantity)
        return low <= quantity <= high

    def _step(self, target: int, origin: int) -> int:
        """Move origin toward target by alpha, checking every intermediate for overflow."""
        difference = target - origin
        if not self._fits(difference):
            raise ArithmeticOverflow(f"difference {target} - {origin} overflows {np.dtype(self._dtype)}")
        product = self._numerator * difference
        if not self._fits(product):
            raise ArithmeticOverflow(f"product {self._numerator} * {difference} overflows {np.dtype(self._dtype)}")
        return origin + divide(product, self._denominator, self._rounding)

    def _to_sample(self, sample) -> int:
        if not _is_int(sample):
            raise InvalidInput(f"sample must be an integer, got {sample!r}")
        sample = int(sample)
        if self._bounds is not None and not self._bounds[0] <= sample <= self._bounds[1]:
            raise InvalidInput(f"sample {sample} does not fit {np.dtype(self._dtype)}")
        return sample

    def update(self, sample: int) -> int:
        """
        Apply one integer smoothing step.

        Args:
            sample (int): New input value, must fit the filter's width.

        Returns:
            int: The new smoothed value.

        Raises:
            InvalidInput: sample is not an integer or out of range.
            ArithmeticOverflow: an intermediate result overflows the width.
            In both cases the filter state is unchanged.
        """
        try:
            x = self._to_sample(sample)
            if not self.is_seeded:
                return self._commit(x, x, x)

            average = self._step(x, self._average)

            # extrema fade toward the average
            local_max = self._local_max
            if x > local_max:
                local_max = x
            elif x > average:
                local_max = self._step(x, local_max)

            local_min = self._local_min
            if x < local_min:
                local_min = x
            elif x < average:
                local_min = self._step(x, local_min)
        except (InvalidInput, ArithmeticOverflow) as e:
            log.warning(f"IntFilter rejected sample: {e}")
            raise

        return self._commit(average, local_min, local_max)
