"""
Fixed-capacity rolling window over numeric samples.

The buffer keeps a running sum so mean queries are O(1) as the window slides.
Variance and standard deviation take one pass over the window and are
computed on demand rather than cached.
"""

from collections import deque
from typing import Any, Iterable, Iterator

import numpy as np

from .errors import InvalidDataError, InvalidSizeError
from .numeric import Num, ieee
from .traits import as_series


class RollingBuffer:
    """
    Rolling window of at most ``capacity`` samples, oldest first.

    Example:
        buf = RollingBuffer.from_array(3, [1.0, 2.0, 3.0, 4.0])
        buf.queue()      # (2.0, 3.0, 4.0)
        buf.shift(5.0)   # returns evicted 2.0
        buf.mean()       # 4.0
    """

    def __init__(self, capacity: int, data: Iterable[Any]):
        """
        Build a buffer from historical data.

        Args:
            capacity: Maximum number of samples held, must be > 0
            data: Samples, oldest first. When longer than ``capacity`` only the
                newest ``capacity`` samples are kept; when shorter the buffer is
                partially filled and grows on ``shift``.

        Raises:
            InvalidSizeError: If capacity is less than 1
            InvalidDataError: If data is empty
        """
        if capacity < 1:
            raise InvalidSizeError(f"buffer capacity must be > 0, got {capacity}")

        series = as_series(data)
        if series.size == 0:
            raise InvalidDataError("buffer requires at least one sample")

        self._capacity = capacity
        self._data: deque = deque(series[-capacity:], maxlen=capacity)
        self._sum = Num(0)
        for value in self._data:
            self._sum += value

    @classmethod
    def from_array(cls, capacity: int, data: Iterable[Any]) -> "RollingBuffer":
        """Create a buffer from ``data``; see ``RollingBuffer.__init__``."""
        return cls(capacity, data)

    @property
    def capacity(self) -> int:
        return self._capacity

    def is_ready(self) -> bool:
        """Return True once the buffer holds ``capacity`` samples."""
        return len(self._data) == self._capacity

    def oldest(self) -> Num:
        """Next sample to be evicted."""
        return self._data[0]

    def newest(self) -> Num:
        """Most recently added sample."""
        return self._data[-1]

    def queue(self) -> tuple[Num, ...]:
        """Contents from oldest to newest."""
        return tuple(self._data)

    def shift(self, value: Any) -> Num:
        """
        Add a new (newest) sample.

        Returns:
            The evicted oldest sample when the buffer was full, otherwise 0
            while the buffer is still growing.
        """
        value = Num(value)
        evicted = Num(0)
        if self.is_ready():
            evicted = self._data[0]
            self._sum -= evicted

        # deque(maxlen) drops the oldest element itself.
        self._data.append(value)
        self._sum += value
        return evicted

    def sum(self) -> Num:
        return self._sum

    def mean(self) -> Num:
        return self._sum / Num(len(self._data))

    def variance(self, is_sample: bool = True) -> Num:
        """
        Variance of the window.

        Args:
            is_sample: Divide by ``len - 1`` (sample) instead of ``len``
                (population). A single-element sample variance is NaN.
        """
        mean = self.mean()
        squares = Num(0)
        for value in self._data:
            squares += (value - mean) ** 2

        divisor = len(self._data) - 1 if is_sample else len(self._data)
        with ieee():
            return squares / Num(divisor)

    def stdev(self, is_sample: bool = True) -> Num:
        """Standard deviation of the window, see ``variance``."""
        return np.sqrt(self.variance(is_sample))

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Num]:
        return iter(self._data)

    def __repr__(self) -> str:
        return (
            f"RollingBuffer(capacity={self._capacity}, "
            f"len={len(self._data)}, sum={float(self._sum):.5f})"
        )
