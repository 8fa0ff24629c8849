"""Relative Strength Index (RSI) indicator (Wilder)."""

import logging
from typing import Any, Iterable

from tatk.buffer import RollingBuffer
from tatk.numeric import Num, ieee
from tatk.traits import as_num, as_series
from .base import Indicator, Stats, check_data, check_period

log = logging.getLogger(__name__)


class RSI(Stats, Indicator):
    """
    Relative Strength Index (RSI) using Wilder's smoothing.

    RSI = 100 - (100 / (1 + RS))
    RS  = avg_gain / avg_loss

    Implementation:
      - Seed avg_gain/avg_loss with the plain mean of gains/losses over the
        first `period` deltas (the first smoothing step from zero averages)
      - Then apply Wilder smoothing: avg = (avg * (period - 1) + current) / period
      - Needs period + 1 samples (period deltas)

    avg_loss == 0 is not special-cased: RS becomes inf and RSI evaluates to
    100. When both averages are 0 the result is NaN.
    """

    def __init__(
        self,
        period: int,
        data: Iterable[Any],
        oversold: float = 20.0,
        overbought: float = 80.0,
    ):
        check_period("RSI", period)
        series = as_series(data)
        check_data("RSI", series, period + 1)

        self._period = period
        self._oversold = Num(oversold)
        self._overbought = Num(overbought)

        gains = Num(0)
        losses = Num(0)
        for previous, current in zip(series[:period], series[1:period + 1]):
            change = current - previous
            if change > 0:
                gains += change
            else:
                losses -= change

        self._avg_gain = Num(0)
        self._avg_loss = Num(0)
        self._last = series[period]
        self._value = self._smooth(gains, losses)
        self._buffer = RollingBuffer(period, [self._value])

        for sample in series[period + 1:]:
            self._step(sample)

        log.debug("Seeded %r from %d samples", self, len(series))

    def _smooth(self, gain: Num, loss: Num) -> Num:
        previous_weight = Num(self._period - 1)
        period = Num(self._period)
        self._avg_gain = (self._avg_gain * previous_weight + gain) / period
        self._avg_loss = (self._avg_loss * previous_weight + loss) / period

        with ieee():
            return Num(100) - Num(100) / (Num(1) + self._avg_gain / self._avg_loss)

    def _step(self, sample: Num) -> Num:
        change = sample - self._last
        self._last = sample

        gain = change if change > 0 else Num(0)
        loss = -change if change < 0 else Num(0)

        self._value = self._smooth(gain, loss)
        self._buffer.shift(self._value)
        return self._value

    @property
    def avg_gain(self) -> Num:
        return self._avg_gain

    @property
    def avg_loss(self) -> Num:
        return self._avg_loss

    @property
    def oversold(self) -> Num:
        """Threshold below which the RSI is oversold (default 20)."""
        return self._oversold

    @oversold.setter
    def oversold(self, value: float) -> None:
        self._oversold = Num(value)

    @property
    def overbought(self) -> Num:
        """Threshold above which the RSI is overbought (default 80)."""
        return self._overbought

    @overbought.setter
    def overbought(self, value: float) -> None:
        self._overbought = Num(value)

    def is_oversold(self) -> bool:
        return bool(self._value < self._oversold)

    def is_overbought(self) -> bool:
        return bool(self._value > self._overbought)

    def next(self, sample: Any) -> Num:
        return self._step(as_num(sample))

    def warmup_periods(self) -> int:
        # Need period deltas → period + 1 samples
        return self._period + 1
