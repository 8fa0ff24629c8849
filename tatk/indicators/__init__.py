# tatk/indicators/__init__.py
"""
Technical indicators over streaming numeric samples.

Every indicator is seeded from historical samples when it is created and then
updated one sample at a time with ``next``.

Example:
    from tatk.indicators import SMA, RSI, MACD

    sma = SMA(10, closes)
    rsi = RSI(14, closes)
    macd = MACD(12, 26, 9, closes)

    # Update with each new close
    sma_value = sma.next(close)
    rsi_value = rsi.next(close)
    macd_values = macd.next(close)
"""

from .base import Indicator, Line, Stats
from .atr import ATR
from .bollinger_bands import BandsOutput, BollingerBands
from .cross import Cross
from .dema import DEMA
from .ema import EMA
from .linear_regression import LinearRegression
from .macd import MACD, MACDOutput
from .mcginley_dynamic import McGinleyDynamic
from .obv import OBV
from .roc import ROC
from .rsi import RSI
from .sma import SMA
from .standard_deviation import StandardDeviation
from .true_range import TrueRange
from .variance import Variance

# Long and short spellings used interchangeably in the literature.
AverageTrueRange = ATR
BBands = BollingerBands
DoubleExponentialMovingAverage = DEMA
ExponentialMovingAverage = EMA
LineReg = LinearRegression
MovingAverageConvergenceDivergence = MACD
MD = McGinleyDynamic
OnBalanceVolume = OBV
RateOfChange = ROC
RelativeStrengthIndex = RSI
SimpleMovingAverage = SMA
STDEV = StandardDeviation
TR = TrueRange

__all__ = [
    "Indicator",
    "Line",
    "Stats",
    "ATR",
    "BandsOutput",
    "BollingerBands",
    "Cross",
    "DEMA",
    "EMA",
    "LinearRegression",
    "MACD",
    "MACDOutput",
    "McGinleyDynamic",
    "OBV",
    "ROC",
    "RSI",
    "SMA",
    "StandardDeviation",
    "TrueRange",
    "Variance",
    "AverageTrueRange",
    "BBands",
    "DoubleExponentialMovingAverage",
    "ExponentialMovingAverage",
    "LineReg",
    "MovingAverageConvergenceDivergence",
    "MD",
    "OnBalanceVolume",
    "RateOfChange",
    "RelativeStrengthIndex",
    "SimpleMovingAverage",
    "STDEV",
    "TR",
]
