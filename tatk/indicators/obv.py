"""On-Balance Volume (OBV) indicator implementation."""

import logging
from typing import Any, Sequence

from tatk.buffer import RollingBuffer
from tatk.numeric import Num
from tatk.traits import to_close_volume
from .base import Indicator, Stats, check_data, check_period

log = logging.getLogger(__name__)


class OBV(Stats, Indicator):
    """
    On-Balance Volume.

    OBV starts at 0 on the first sample.
      - If close > prev_close: OBV += volume
      - If close < prev_close: OBV -= volume
      - If close == prev_close: OBV unchanged

    The cumulative value is never windowed; ``period`` only sizes the history
    of OBV values kept for Stats queries. Samples are any objects with
    ``close`` and ``volume`` attributes, or ``(close, volume)`` tuples.
    """

    def __init__(self, period: int, data: Sequence[Any]):
        check_period("OBV", period)
        check_data("OBV", data, period)

        samples = [to_close_volume(sample) for sample in data]

        self._period = period
        self._last_close = samples[0][0]
        self._value = Num(0)
        self._buffer = RollingBuffer(period, [self._value])

        for close, volume in samples[1:]:
            self._step(close, volume)

        log.debug("Seeded %r from %d samples", self, len(samples))

    def _step(self, close: Num, volume: Num) -> Num:
        if close > self._last_close:
            self._value = self._value + volume
        elif close < self._last_close:
            self._value = self._value - volume

        self._last_close = close
        self._buffer.shift(self._value)
        return self._value

    def next(self, sample: Any) -> Num:
        return self._step(*to_close_volume(sample))

    def warmup_periods(self) -> int:
        return self._period
