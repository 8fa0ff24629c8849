"""Average True Range (ATR) indicator implementation (Wilder)."""

import logging
from typing import Any, Sequence

from tatk.buffer import RollingBuffer
from tatk.numeric import Num
from .base import Indicator, Stats, check_data, check_period
from .true_range import TrueRange

log = logging.getLogger(__name__)


class ATR(Stats, Indicator):
    """
    ATR (Average True Range) using Wilder's smoothing.

    ATR:
      - Seed with SMA(TR) over the first `period` true ranges
      - Thereafter: ATR = (prev_atr * (period - 1) + TR) / period

    Needs ``period + 1`` samples, the first one only supplies a previous close.
    """

    def __init__(self, period: int, data: Sequence[Any]):
        check_period("ATR", period)
        check_data("ATR", data, period + 1)

        samples = list(data)

        self._period = period
        self._true_range = TrueRange(period, samples[:period + 1])
        self._value = self._true_range.mean()
        self._buffer = RollingBuffer(period, [self._value])

        for sample in samples[period + 1:]:
            self.next(sample)

        log.debug("Seeded %r from %d samples", self, len(samples))

    @property
    def true_range(self) -> TrueRange:
        """Underlying true range line."""
        return self._true_range

    def next(self, sample: Any) -> Num:
        tr = self._true_range.next(sample)
        self._value = (self._value * Num(self._period - 1) + tr) / Num(self._period)
        self._buffer.shift(self._value)
        return self._value

    def warmup_periods(self) -> int:
        return self._period + 1
