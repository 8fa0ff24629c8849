"""Exponential Moving Average (EMA) indicator implementation."""

import logging
from typing import Any, Iterable

from tatk.buffer import RollingBuffer
from tatk.numeric import Num
from tatk.traits import as_num, as_series
from .base import Indicator, Stats, check_data, check_period

log = logging.getLogger(__name__)


class EMA(Stats, Indicator):
    """
    Exponential Moving Average.

    EMA = (x - EMA_prev) * k + EMA_prev, with k = 2 / (period + 1)

    Implementation:
      - Seed with the SMA of the first `period` samples
      - Apply the recurrence to every remaining sample
      - Stats queries run over the last `period` EMA outputs
    """

    def __init__(self, period: int, data: Iterable[Any]):
        check_period("EMA", period)
        series = as_series(data)
        check_data("EMA", series, period)

        self._period = period
        self._k = Num(2) / Num(period + 1)
        self._value = RollingBuffer(period, series[:period]).mean()
        self._buffer = RollingBuffer(period, [self._value])

        for sample in series[period:]:
            self._step(sample)

        log.debug("Seeded %r from %d samples", self, len(series))

    @property
    def k(self) -> Num:
        """Smoothing factor."""
        return self._k

    def _step(self, sample: Num) -> Num:
        self._value = (sample - self._value) * self._k + self._value
        self._buffer.shift(self._value)
        return self._value

    def next(self, sample: Any) -> Num:
        return self._step(as_num(sample))

    def warmup_periods(self) -> int:
        return self._period
