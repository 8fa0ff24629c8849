"""Base class, mixins and protocols shared by technical indicators."""

import abc
from typing import Any, Protocol, Sized, runtime_checkable

from tatk.buffer import RollingBuffer
from tatk.errors import InvalidDataError, InvalidSizeError
from tatk.numeric import Num


def check_period(name: str, period: int, minimum: int = 1) -> None:
    """Raise InvalidSizeError when ``period`` is below ``minimum``."""
    if period < minimum:
        raise InvalidSizeError(f"{name} period must be >= {minimum}, got {period}")


def check_data(name: str, data: Sized, required: int) -> None:
    """Raise InvalidDataError when fewer than ``required`` samples are supplied."""
    if len(data) < required:
        raise InvalidDataError(
            f"{name} needs at least {required} samples, got {len(data)}"
        )


class Indicator(abc.ABC):
    """
    Abstract base class for all technical indicators.

    Subclasses validate and seed themselves in ``__init__`` and advance one
    sample at a time through ``next``.
    """

    _period: int
    _value: Num

    @property
    def period(self) -> int:
        """Window the indicator looks at."""
        return self._period

    @property
    def value(self) -> Num:
        """Most recently calculated value."""
        return self._value

    @abc.abstractmethod
    def next(self, sample: Any):
        """Update indicator state with a new sample and return the latest value(s)."""
        raise NotImplementedError

    @abc.abstractmethod
    def warmup_periods(self) -> int:
        """Return the number of historical samples needed to construct the indicator."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(period={self.period}, "
            f"value={float(self.value):.5f})"
        )


class Stats:
    """Statistics over the trailing ``period`` values an indicator keeps."""

    _buffer: RollingBuffer

    def sum(self) -> Num:
        return self._buffer.sum()

    def mean(self) -> Num:
        return self._buffer.mean()

    def variance(self, is_sample: bool = True) -> Num:
        return self._buffer.variance(is_sample)

    def stdev(self, is_sample: bool = True) -> Num:
        return self._buffer.stdev(is_sample)


@runtime_checkable
class Line(Protocol):
    """
    A single line usable inside composite indicators.

    SMA, EMA, DEMA and the other single-series indicators all satisfy it,
    so BollingerBands and Cross can wrap any of them.
    """

    @property
    def period(self) -> int: ...

    @property
    def value(self) -> Num: ...

    def next(self, sample: Any) -> Any: ...

    def stdev(self, is_sample: bool = True) -> Num: ...
