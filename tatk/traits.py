"""
Capability protocols for user-defined samples.

Indicators never depend on a concrete record type. Scalar indicators accept
plain numbers or any object exposing ``as_value()``; range and volume
indicators accept any object exposing the attributes they read (``high``,
``low``, ``close``, ``volume``) or the equivalent plain tuple.
"""

from typing import Any, Iterable, Protocol, runtime_checkable

import numpy as np

from .numeric import Num

_SCALARS = (int, float, np.integer, np.floating)


@runtime_checkable
class AsValue(Protocol):
    """A sample that reduces itself to a single number (HL2, OHLC4, ...)."""

    def as_value(self) -> float: ...


@runtime_checkable
class HasOpen(Protocol):
    open: float


@runtime_checkable
class HasHigh(Protocol):
    high: float


@runtime_checkable
class HasLow(Protocol):
    low: float


@runtime_checkable
class HasClose(Protocol):
    close: float


@runtime_checkable
class HasVolume(Protocol):
    volume: float


@runtime_checkable
class HighLowClose(HasHigh, HasLow, HasClose, Protocol):
    """Sample accepted by TrueRange and ATR."""


@runtime_checkable
class CloseVolume(HasClose, HasVolume, Protocol):
    """Sample accepted by OBV."""


def hl2(sample: Any) -> Num:
    """Average of high and low."""
    return (Num(sample.high) + Num(sample.low)) / Num(2)


def hlc3(sample: Any) -> Num:
    """Average of high, low and close (typical price)."""
    return (Num(sample.high) + Num(sample.low) + Num(sample.close)) / Num(3)


def ohlc4(sample: Any) -> Num:
    """Average of open, high, low and close."""
    return (
        Num(sample.open) + Num(sample.high) + Num(sample.low) + Num(sample.close)
    ) / Num(4)


def as_num(sample: Any) -> Num:
    """Convert a number or an ``AsValue`` sample to ``Num``."""
    if isinstance(sample, _SCALARS):
        return Num(sample)
    if isinstance(sample, AsValue):
        return Num(sample.as_value())
    raise TypeError(
        f"expected a number or an object with as_value(), got {type(sample).__name__}"
    )


def as_series(data: Iterable[Any]) -> np.ndarray:
    """Convert historical samples to a one dimensional ``Num`` array."""
    if isinstance(data, np.ndarray):
        return np.asarray(data, dtype=Num).reshape(-1)
    return np.array([as_num(sample) for sample in data], dtype=Num)


def to_hlc(sample: Any) -> tuple[Num, Num, Num]:
    """Extract ``(high, low, close)`` from a record or a plain tuple."""
    if isinstance(sample, HighLowClose):
        return Num(sample.high), Num(sample.low), Num(sample.close)
    if isinstance(sample, (tuple, list, np.ndarray)):
        high, low, close = sample
        return Num(high), Num(low), Num(close)
    raise TypeError(f"expected (high, low, close), got {type(sample).__name__}")


def to_close_volume(sample: Any) -> tuple[Num, Num]:
    """Extract ``(close, volume)`` from a record or a plain tuple."""
    if isinstance(sample, CloseVolume):
        return Num(sample.close), Num(sample.volume)
    if isinstance(sample, (tuple, list, np.ndarray)):
        close, volume = sample
        return Num(close), Num(volume)
    raise TypeError(f"expected (close, volume), got {type(sample).__name__}")
