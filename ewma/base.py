# base.py

import logging
from typing import Optional, Tuple

log = logging.getLogger(__name__)


class EwmaFilter:
    """
    Shared state and accessors of the exponentially weighted moving average filters.

    The first accepted sample seeds the average and both fading extrema.
    Until then value() and local_range() return None.
    Subclasses implement update() and hand the new state to _commit().
    """

    def __init__(self):
        self._sample_count = 0
        self._average = None
        self._local_min = None
        self._local_max = None

    def update(self, sample):
        """
        Push the next sample into the filter.
        :param sample: The new input value.
        :return: The new smoothed value.
        """
        raise NotImplementedError("This method must be overridden by subclasses.")

    def _export(self, value):
        return value

    def _commit(self, average, local_min, local_max):
        self._average = average
        self._local_min = local_min
        self._local_max = local_max
        self._sample_count += 1
        return self._export(average)

    @property
    def sample_count(self) -> int:
        return self._sample_count

    @property
    def is_seeded(self) -> bool:
        return self._sample_count > 0

    def value(self):
        """Return the current smoothed value, or None before the first sample."""
        if not self.is_seeded:
            return None
        return self._export(self._average)

    def local_range(self) -> Optional[Tuple]:
        """
        Return (local_min, local_max), the recent extrema fading toward the average.
        These are not the global extrema of the series. None before the first sample.
        """
        if not self.is_seeded:
            return None
        return self._export(self._local_min), self._export(self._local_max)

    def reset(self):
        """Forget all history; the next sample seeds the filter again."""
        log.debug(f"{type(self).__name__} reset after {self._sample_count} samples")
        self._sample_count = 0
        self._average = None
        self._local_min = None
        self._local_max = None
