"""
Cross detection between two lines.

Golden cross: the short (reactive) line crosses above the long line.
Death cross: the short line crosses below the long line.
"""

from typing import Any

from .base import Line


class Cross:
    """
    Tracks whether two lines crossed on the most recent update.

    Example:
        cross = Cross(SMA(10, closes), SMA(30, closes))

        for close in new_closes:
            if cross.next(close) and cross.is_golden():
                print("Golden cross")

    ``crossed()`` is not sticky: it reflects only the last ``next`` call.
    """

    def __init__(self, short_line: Line, long_line: Line):
        self._short_line = short_line
        self._long_line = long_line
        self._crossed = False

    @property
    def short_line(self) -> Line:
        return self._short_line

    @property
    def long_line(self) -> Line:
        return self._long_line

    def crossed(self) -> bool:
        return self._crossed

    def is_golden(self) -> bool:
        return self._crossed and bool(self._short_line.value > self._long_line.value)

    def is_death(self) -> bool:
        return self._crossed and bool(self._short_line.value < self._long_line.value)

    def next(self, sample: Any) -> bool:
        """Advance both lines by ``sample`` and return whether they crossed."""
        was_below = bool(self._short_line.value < self._long_line.value)

        self._short_line.next(sample)
        self._long_line.next(sample)

        self._crossed = was_below != bool(self._short_line.value < self._long_line.value)
        return self._crossed

    def __repr__(self) -> str:
        return (
            f"Cross(short={self._short_line!r}, long={self._long_line!r}, "
            f"crossed={self._crossed})"
        )
