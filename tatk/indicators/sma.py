"""Simple Moving Average (SMA) indicator implementation."""

import logging
from typing import Any, Iterable

from tatk.buffer import RollingBuffer
from tatk.numeric import Num
from tatk.traits import as_num, as_series
from .base import Indicator, Stats, check_data, check_period

log = logging.getLogger(__name__)


class SMA(Stats, Indicator):
    """
    Simple Moving Average of the last ``period`` samples.

    Stats queries (``sum``, ``mean``, ``variance``, ``stdev``) run over the
    raw samples in the window, which is what Bollinger Bands build on.
    """

    def __init__(self, period: int, data: Iterable[Any]):
        check_period("SMA", period)
        series = as_series(data)
        check_data("SMA", series, period)

        self._period = period
        self._buffer = RollingBuffer(period, series)
        self._value = self._buffer.mean()
        log.debug("Seeded %r from %d samples", self, len(series))

    def next(self, sample: Any) -> Num:
        self._buffer.shift(as_num(sample))
        self._value = self._buffer.sum() / Num(self._period)
        return self._value

    def warmup_periods(self) -> int:
        return self._period
