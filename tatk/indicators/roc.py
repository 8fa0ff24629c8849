"""Rate of Change (ROC) indicator implementation."""

import logging
from typing import Any, Iterable

from tatk.buffer import RollingBuffer
from tatk.numeric import Num, ieee
from tatk.traits import as_num, as_series
from .base import Indicator, Stats, check_data, check_period

log = logging.getLogger(__name__)


class ROC(Stats, Indicator):
    """
    Rate of Change, percentage change over `period` samples.

    ROC = (x - x[t - period]) / x[t - period] * 100

    A zero base value yields inf/NaN rather than raising.
    """

    def __init__(self, period: int, data: Iterable[Any]):
        check_period("ROC", period, minimum=2)
        series = as_series(data)
        check_data("ROC", series, period + 1)

        self._period = period
        # Trailing raw samples; the oldest is x[t - period] for the next sample.
        self._values = RollingBuffer(period, series[:period])
        self._value = self._rate(series[period])
        self._values.shift(series[period])
        self._buffer = RollingBuffer(period, [self._value])

        for sample in series[period + 1:]:
            self._step(sample)

        log.debug("Seeded %r from %d samples", self, len(series))

    def _rate(self, sample: Num) -> Num:
        base = self._values.oldest()
        with ieee():
            return (sample - base) / base * Num(100)

    def _step(self, sample: Num) -> Num:
        self._value = self._rate(sample)
        self._buffer.shift(self._value)
        self._values.shift(sample)
        return self._value

    def next(self, sample: Any) -> Num:
        return self._step(as_num(sample))

    def warmup_periods(self) -> int:
        return self._period + 1
