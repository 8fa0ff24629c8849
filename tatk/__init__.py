# tatk/__init__.py
"""
tatk - Technical Analysis Toolkit.

Streaming technical-analysis indicators (moving averages, oscillators,
volatility and regression measures). Each indicator is seeded from a history
of samples and then updated incrementally, one sample at a time, without
rescanning the history.

Quick start:
    from tatk.indicators import EMA, BollingerBands, Cross, SMA

    ema = EMA(10, closes)
    bands = BollingerBands.with_line(EMA(20, closes), distance=2.0)
    cross = Cross(SMA(10, closes), SMA(30, closes))

    for close in new_closes:
        ema.next(close)
        lower, middle, upper = bands.next(close)
        if cross.next(close) and cross.is_golden():
            print("Golden cross")

The float width (32 or 64 bit) is chosen with TATK_FLOAT_WIDTH, see
``tatk.config``.
"""

from .buffer import RollingBuffer
from .config import configure_logging, settings
from .errors import InvalidDataError, InvalidSizeError, TAError
from .marketdata import Candle
from .numeric import Num

__version__ = "0.3.0"
__all__ = [
    "RollingBuffer",
    "configure_logging",
    "settings",
    "InvalidDataError",
    "InvalidSizeError",
    "TAError",
    "Candle",
    "Num",
]
