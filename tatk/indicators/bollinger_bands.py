"""Bollinger Bands indicator implementation."""

import logging
from typing import Any, Iterable, NamedTuple

from tatk.numeric import Num
from .base import Indicator, Line
from .sma import SMA

log = logging.getLogger(__name__)


class BandsOutput(NamedTuple):
    """Values produced by one Bollinger Bands step."""

    lower: Num
    value: Num
    upper: Num


class BollingerBands(Indicator):
    """
    Bollinger Bands (line +/- distance * sample standard deviation).

    The middle line defaults to an SMA of the samples. ``with_line`` wraps any
    other line (EMA, DEMA, ...); the standard deviation then comes from that
    line's own history.

      - lower: value - distance * stdev
      - upper: value + distance * stdev

    Notes:
    - Uses sample standard deviation (ddof=1).
    - A wrapped line whose history holds a single value (e.g. an EMA seeded
      from exactly `period` samples) has no sample stdev yet, so the bands
      are NaN until its next update.
    - A negative distance is treated as its absolute value.
    """

    def __init__(self, period: int, data: Iterable[Any], distance: float = 2.0):
        self._bind(SMA(period, data), distance)

    @classmethod
    def with_line(cls, line: Line, distance: float = 2.0) -> "BollingerBands":
        """Create Bollinger Bands around an already seeded line."""
        bands = cls.__new__(cls)
        bands._bind(line, distance)
        return bands

    def _bind(self, line: Line, distance: float) -> None:
        if not isinstance(line, Line):
            raise TypeError(f"{type(line).__name__} does not implement the Line protocol")

        self._line = line
        self._period = line.period
        self._distance = abs(Num(distance))
        self._update_bands()
        log.debug("Created %r around %s", self, type(line).__name__)

    def _update_bands(self) -> None:
        offset = self._line.stdev(True) * self._distance
        self._lower = self.value - offset
        self._upper = self.value + offset

    @property
    def line(self) -> Line:
        """Middle line the bands are built around."""
        return self._line

    @property
    def value(self) -> Num:
        return self._line.value

    @property
    def distance(self) -> Num:
        return self._distance

    @property
    def lower(self) -> Num:
        return self._lower

    @property
    def upper(self) -> Num:
        return self._upper

    @property
    def width(self) -> Num:
        return self._upper - self._lower

    def stdev(self, is_sample: bool = True) -> Num:
        """Standard deviation of the middle line."""
        return self._line.stdev(is_sample)

    def next(self, sample: Any) -> BandsOutput:
        """
        Advance the middle line and recompute the bands.

        Returns:
            BandsOutput of (lower, value, upper)
        """
        self._line.next(sample)
        self._update_bands()
        return BandsOutput(self._lower, self.value, self._upper)

    def warmup_periods(self) -> int:
        warmup = getattr(self._line, "warmup_periods", None)
        return warmup() if warmup is not None else self._period

    def __repr__(self) -> str:
        return (
            f"BollingerBands(period={self._period}, distance={float(self._distance)}, "
            f"lower={float(self._lower):.5f}, value={float(self.value):.5f}, "
            f"upper={float(self._upper):.5f})"
        )
