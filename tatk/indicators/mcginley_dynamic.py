"""McGinley Dynamic (MD) indicator implementation."""

import logging
from typing import Any, Iterable

from tatk.buffer import RollingBuffer
from tatk.numeric import Num, ieee
from tatk.traits import as_num, as_series
from .base import Indicator, Stats, check_data, check_period

log = logging.getLogger(__name__)


class McGinleyDynamic(Stats, Indicator):
    """
    McGinley Dynamic, a moving average that speeds up in falling markets.

    MD = MD_prev + (x - MD_prev) / (k * period * (x / MD_prev) ** 4)

    The first sample seeds MD. A previous value of 0 is not guarded: the
    division propagates inf/NaN instead of raising.
    """

    def __init__(self, period: int, data: Iterable[Any], k: float = 0.6):
        check_period("McGinleyDynamic", period, minimum=2)
        series = as_series(data)
        check_data("McGinleyDynamic", series, period + 1)

        self._period = period
        self._k = Num(k)
        self._value = series[0]
        self._buffer = RollingBuffer(period, [self._value])

        for sample in series[1:]:
            self._step(sample)

        log.debug("Seeded %r from %d samples", self, len(series))

    @property
    def k(self) -> Num:
        """Constant applied to the period, normally 0.6."""
        return self._k

    def _step(self, sample: Num) -> Num:
        with ieee():
            ratio = (sample / self._value) ** 4
            self._value = self._value + (sample - self._value) / (
                self._k * Num(self._period) * ratio
            )
        self._buffer.shift(self._value)
        return self._value

    def next(self, sample: Any) -> Num:
        return self._step(as_num(sample))

    def warmup_periods(self) -> int:
        return self._period + 1
