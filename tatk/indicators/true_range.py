"""True Range (TR) indicator implementation."""

import logging
from typing import Any, Sequence

from tatk.buffer import RollingBuffer
from tatk.numeric import Num
from tatk.traits import to_hlc
from .base import Indicator, Stats, check_data, check_period

log = logging.getLogger(__name__)


class TrueRange(Stats, Indicator):
    """
    True Range, the largest of three price ranges.

      TR = max(
        abs(high - low),
        abs(high - prev_close),
        abs(low - prev_close),
      )

    Samples are any objects with ``high``, ``low`` and ``close`` attributes,
    or ``(high, low, close)`` tuples. The first sample only supplies the
    previous close, so ``period + 1`` samples are needed.
    """

    def __init__(self, period: int, data: Sequence[Any]):
        check_period("TrueRange", period)
        check_data("TrueRange", data, period + 1)

        samples = [to_hlc(sample) for sample in data]

        self._period = period
        self._last_close = samples[0][2]
        self._value = self._range(*samples[1])
        self._buffer = RollingBuffer(period, [self._value])

        for high, low, close in samples[2:]:
            self._value = self._range(high, low, close)
            self._buffer.shift(self._value)

        log.debug("Seeded %r from %d samples", self, len(samples))

    @property
    def last_close(self) -> Num:
        return self._last_close

    def _range(self, high: Num, low: Num, close: Num) -> Num:
        tr = max(
            abs(high - low),
            abs(high - self._last_close),
            abs(low - self._last_close),
        )
        self._last_close = close
        return tr

    def next(self, sample: Any) -> Num:
        self._value = self._range(*to_hlc(sample))
        self._buffer.shift(self._value)
        return self._value

    def warmup_periods(self) -> int:
        return self._period + 1
