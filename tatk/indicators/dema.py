"""
Double Exponential Moving Average (DEMA) indicator implementation.

DEMA = 2 * EMA(n) - EMA(EMA(n))
"""

import logging
from typing import Any, Iterable

from tatk.buffer import RollingBuffer
from tatk.numeric import Num
from tatk.traits import as_num, as_series
from .base import Indicator, Stats, check_data, check_period
from .ema import EMA

log = logging.getLogger(__name__)


class DEMA(Stats, Indicator):
    """
    Double Exponential Moving Average.

    Owns two EMAs: one over the samples and one over the first EMA's outputs.
    The second EMA needs `period` outputs of the first to seed, so the
    indicator needs ``2 * period - 1`` samples.
    """

    def __init__(self, period: int, data: Iterable[Any]):
        check_period("DEMA", period)
        series = as_series(data)
        check_data("DEMA", series, 2 * period - 1)

        self._period = period
        self._ema = EMA(period, series[:period])

        # Collect `period` outputs of EMA(n) to seed EMA(EMA(n)).
        outputs = [self._ema.value]
        for sample in series[period:2 * period - 1]:
            outputs.append(self._ema.next(sample))
        self._ema_of_ema = EMA(period, outputs)

        self._value = Num(2) * self._ema.value - self._ema_of_ema.value
        self._buffer = RollingBuffer(period, [self._value])

        for sample in series[2 * period - 1:]:
            self._step(sample)

        log.debug("Seeded %r from %d samples", self, len(series))

    def _step(self, sample: Num) -> Num:
        ema = self._ema.next(sample)
        self._value = Num(2) * ema - self._ema_of_ema.next(ema)
        self._buffer.shift(self._value)
        return self._value

    def next(self, sample: Any) -> Num:
        return self._step(as_num(sample))

    def warmup_periods(self) -> int:
        return 2 * self._period - 1
