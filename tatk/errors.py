"""Errors raised while constructing buffers and indicators."""


class TAError(ValueError):
    """Base class for all tatk errors."""


class InvalidSizeError(TAError):
    """Period, capacity or window is below the minimum the indicator needs."""


class InvalidDataError(TAError):
    """Not enough historical samples were supplied to seed the indicator."""
