"""
Numeric type shared by every buffer and indicator.

``Num`` is a numpy floating scalar type picked once from
``settings.float_width``. All arithmetic in the library is written against it,
so 32-bit and 64-bit builds behave identically apart from precision. Numpy
scalars follow IEEE semantics on division by zero, which the indicators rely
on for their documented degenerate cases.
"""

import numpy as np

from .config import settings

_FLOAT_TYPES: dict[int, type[np.floating]] = {
    32: np.float32,
    64: np.float64,
}


def resolve_float_type(width: int) -> type[np.floating]:
    """Return the numpy float type for a bit width (32 or 64)."""
    try:
        return _FLOAT_TYPES[width]
    except KeyError:
        raise ValueError(
            f"unsupported float width {width}, expected one of {sorted(_FLOAT_TYPES)}"
        ) from None


settings.validate_float_width()
Num = resolve_float_type(settings.float_width)


def ieee() -> np.errstate:
    """Silence numpy warnings for the IEEE inf/NaN results indicators may produce."""
    return np.errstate(divide="ignore", invalid="ignore", over="ignore")
