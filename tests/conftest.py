# tests/conftest.py
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from tatk.marketdata import Candle  # noqa: E402

# First 20 daily closes of the TA-Lib reference series.
TALIB_SMALL = [
    91.500, 94.815, 94.375, 95.095, 93.780,
    94.625, 92.530, 92.750, 90.315, 92.470,
    96.125, 97.250, 98.500, 89.875, 91.000,
    92.815, 89.155, 89.345, 91.625, 89.875,
]


@pytest.fixture
def talib_small() -> list[float]:
    """
    Returns the 20 reference closes.

    Tests seed indicators with all but the last close and feed the last one
    through ``next``.
    """
    return list(TALIB_SMALL)


def make_candle(i: int) -> Candle:
    """
    Deterministic candle series whose closes rise and fall in a saw-tooth.
    """
    base = 100.0 + (i % 7) * 1.5 - (i % 3)
    return Candle(
        timestamp=f"2025-01-01T00:{i:02d}:00Z",
        open=base,
        high=base + 1.0 + (i % 4) * 0.25,
        low=base - 0.75,
        close=base + 0.2 * ((i % 5) - 2),
        volume=1000.0 + 10.0 * i,
    )


@pytest.fixture
def candle_factory():
    """
    Returns a function: (i:int) -> Candle
    """
    return make_candle


@pytest.fixture
def make_candles(candle_factory):
    """
    Returns a function: (n:int, start:int=0) -> list[Candle]
    """
    def _make(n: int, start: int = 0) -> list[Candle]:
        return [candle_factory(i) for i in range(start, start + n)]

    return _make
