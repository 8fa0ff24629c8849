# tatk/marketdata.py
"""
Market data records.

``Candle`` satisfies every capability protocol in ``tatk.traits`` and is
provided for convenience; indicators accept any object with the same
attributes.
"""

from dataclasses import dataclass


@dataclass
class Candle:
    """
    Represents a single OHLCV candle.

    Attributes:
        open: Opening price
        high: Highest price during period
        low: Lowest price during period
        close: Closing price
        volume: Trading volume (or 0 if unavailable)
        timestamp: ISO 8601 timestamp or Unix timestamp string
    """

    open: float
    high: float
    low: float
    close: float
    volume: float = 0.0
    timestamp: str = ""

    @property
    def hl2(self) -> float:
        """Midpoint between high and low."""
        return (self.high + self.low) / 2

    @property
    def hlc3(self) -> float:
        """Typical price (HLC/3)."""
        return (self.high + self.low + self.close) / 3

    @property
    def ohlc4(self) -> float:
        """Average of open, high, low and close."""
        return (self.open + self.high + self.low + self.close) / 4

    @property
    def range(self) -> float:
        """Calculate candle range (high - low)."""
        return self.high - self.low

    def as_value(self) -> float:
        """Value fed to single-series indicators: the close."""
        return self.close

    def __repr__(self) -> str:
        return (
            f"Candle(timestamp={self.timestamp}, "
            f"O={self.open:.5f}, H={self.high:.5f}, "
            f"L={self.low:.5f}, C={self.close:.5f}, "
            f"V={self.volume:.0f})"
        )
