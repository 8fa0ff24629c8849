# tatk/indicators/macd.py
"""
MACD (Moving Average Convergence Divergence) indicator implementation.

MACD is a trend-following momentum indicator that shows the relationship
between two moving averages of prices.
"""

import logging
from typing import Any, Iterable, NamedTuple

from tatk.errors import InvalidSizeError
from tatk.numeric import Num
from tatk.traits import as_num, as_series
from .base import Indicator, check_data, check_period
from .ema import EMA

log = logging.getLogger(__name__)


class MACDOutput(NamedTuple):
    """Values produced by one MACD step."""

    macd: Num
    short: Num
    long: Num


class MACD(Indicator):
    """
    MACD (Moving Average Convergence Divergence) indicator.

    Calculates the difference between two exponential moving averages (EMAs)
    and a signal line (EMA of the MACD line).

    Components:
        - MACD Line: Short EMA - Long EMA
        - Signal Line: EMA of MACD Line
        - Histogram: MACD Line - Signal Line

    Signals:
        - MACD crosses above signal: Bullish
        - MACD crosses below signal: Bearish

    Args:
        short: Short EMA period (commonly 12)
        long: Long EMA period (commonly 26), must be >= short
        signal: Signal line EMA period (commonly 9)
        data: Historical samples, at least ``long + signal - 1`` of them

    Example:
        macd = MACD(12, 26, 9, closes)

        for close in new_closes:
            macd.next(close)
            if macd.crossed() and macd.is_above():
                print("Bullish crossover")
    """

    def __init__(self, short: int, long: int, signal: int, data: Iterable[Any]):
        check_period("MACD short", short)
        check_period("MACD long", long)
        check_period("MACD signal", signal)
        if short > long:
            raise InvalidSizeError(
                f"MACD short period ({short}) must not exceed long period ({long})"
            )

        series = as_series(data)
        check_data("MACD", series, long + signal - 1)

        self._period = signal

        # Short and long EMAs both cover the first `long` samples.
        self._short = EMA(short, series[:long])
        self._long = EMA(long, series[:long])

        # MACD line for every remaining sample seeds the signal line.
        macd_values = [self._short.value - self._long.value]
        for sample in series[long:]:
            macd_values.append(self._short.next(sample) - self._long.next(sample))
        self._signal = EMA(signal, macd_values)

        self._value = macd_values[-1]
        self._crossed = False
        log.debug("Seeded %r from %d samples", self, len(series))

    @property
    def short_period(self) -> int:
        return self._short.period

    @property
    def long_period(self) -> int:
        return self._long.period

    @property
    def signal_value(self) -> Num:
        """Current signal line value."""
        return self._signal.value

    @property
    def histogram(self) -> Num:
        """MACD line minus signal line."""
        return self._value - self._signal.value

    def crossed(self) -> bool:
        """True if the MACD line crossed the signal line on the last step."""
        return self._crossed

    def is_above(self) -> bool:
        return bool(self._value > self._signal.value)

    def is_below(self) -> bool:
        return bool(self._value < self._signal.value)

    def next(self, sample: Any) -> MACDOutput:
        """
        Update indicator with a new sample.

        Returns:
            MACDOutput of (macd, short EMA, long EMA)
        """
        sample = as_num(sample)
        was_above = self.is_above()
        was_below = self.is_below()

        short_value = self._short.next(sample)
        long_value = self._long.next(sample)

        self._value = short_value - long_value
        self._signal.next(self._value)

        # Touching the signal line is not a cross.
        self._crossed = (was_below and self.is_above()) or (
            was_above and self.is_below()
        )
        return MACDOutput(self._value, short_value, long_value)

    def warmup_periods(self) -> int:
        return self._long.period + self._period - 1

    def __repr__(self) -> str:
        return (
            f"MACD(short={self.short_period}, long={self.long_period}, "
            f"signal={self._period}, value={float(self._value):.5f})"
        )
