"""
Linear Regression (least squares) over a sliding window.

For x in 1..period and the window's y values:

  slope     = (n * Σxy - Σx * Σy) / (n * Σx² - (Σx)²)
  intercept = (Σy - slope * Σx) / n
  value     = intercept + slope * n   (the fitted value of the newest sample)
"""

import logging
from typing import Any, Iterable

import numpy as np

from tatk.buffer import RollingBuffer
from tatk.numeric import Num, ieee
from tatk.traits import as_num, as_series
from .base import Indicator, Stats, check_data, check_period

log = logging.getLogger(__name__)


class LinearRegression(Stats, Indicator):
    """
    Best fit line over the last ``period`` samples.

    Σx and Σx² only depend on the period and are computed once. Each step
    recomputes Σxy over the window, so updates are O(period).
    """

    def __init__(self, period: int, data: Iterable[Any]):
        check_period("LinearRegression", period, minimum=2)
        series = as_series(data)
        check_data("LinearRegression", series, period)

        self._period = period
        self._x = np.arange(1, period + 1, dtype=Num)
        self._sum_x = Num(period * (period + 1)) / Num(2)
        self._sum_x_sq = Num(period * (period + 1) * (2 * period + 1)) / Num(6)

        self._values = RollingBuffer(period, series[:period])
        self._fit()
        self._buffer = RollingBuffer(period, [self._value])

        for sample in series[period:]:
            self._step(sample)

        log.debug("Seeded %r from %d samples", self, len(series))

    def _window(self) -> np.ndarray:
        return np.fromiter(self._values, dtype=Num, count=len(self._values))

    def _fit(self) -> None:
        n = Num(self._period)
        sum_y = self._values.sum()
        sum_xy = Num(np.dot(self._x, self._window()))

        self._slope = (n * sum_xy - self._sum_x * sum_y) / (
            n * self._sum_x_sq - self._sum_x * self._sum_x
        )
        self._intercept = (sum_y - self._slope * self._sum_x) / n
        self._value = self._intercept + self._slope * n

    def _step(self, sample: Num) -> Num:
        self._values.shift(sample)
        self._fit()
        self._buffer.shift(self._value)
        return self._value

    @property
    def slope(self) -> Num:
        return self._slope

    @property
    def intercept(self) -> Num:
        return self._intercept

    def r_sq(self) -> Num:
        """
        Coefficient of determination of the current fit (1 - SSR / SST).

        A flat window has no variance to explain and yields NaN.
        """
        y = self._window()
        predicted = self._intercept + self._slope * self._x
        sst = np.sum((y - self._values.mean()) ** 2)
        ssr = np.sum((y - predicted) ** 2)
        with ieee():
            return Num(1) - ssr / sst

    def forecast(self, distance: int) -> Num:
        """Extrapolate the line ``distance`` steps past the newest sample."""
        return self._intercept + self._slope * Num(self._period + distance)

    def line_stdev(self) -> Num:
        """Sample standard deviation of the window's y values."""
        return self._values.stdev(True)

    def next(self, sample: Any) -> Num:
        return self._step(as_num(sample))

    def warmup_periods(self) -> int:
        return self._period
