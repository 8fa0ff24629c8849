"""Rolling variance indicator."""

import logging
from typing import Any, Iterable

from tatk.buffer import RollingBuffer
from tatk.numeric import Num
from tatk.traits import as_num, as_series
from .base import Indicator, check_data, check_period

log = logging.getLogger(__name__)


class Variance(Indicator):
    """
    Variance of the last ``period`` samples.

    Args:
        period: Window size. Sample variance divides by ``period - 1`` and
            therefore needs a period of at least 2.
        data: Historical samples, at least ``period`` of them
        is_sample: Sample (True) or population (False) variance
    """

    def __init__(self, period: int, data: Iterable[Any], is_sample: bool = True):
        name = type(self).__name__
        check_period(name, period, minimum=2 if is_sample else 1)
        series = as_series(data)
        check_data(name, series, period)

        self._period = period
        self._is_sample = is_sample
        self._buffer = RollingBuffer(period, series)
        self._value = self._measure()
        log.debug("Seeded %r from %d samples", self, len(series))

    @property
    def is_sample(self) -> bool:
        return self._is_sample

    def _measure(self) -> Num:
        return self._buffer.variance(self._is_sample)

    def next(self, sample: Any) -> Num:
        self._buffer.shift(as_num(sample))
        self._value = self._measure()
        return self._value

    def warmup_periods(self) -> int:
        return self._period
