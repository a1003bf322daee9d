"""Text formatting helpers."""

from __future__ import annotations

import math
import struct

_FLOAT32_MAX = 3.4028234663852886e38


def _as_float32(value: float) -> float:
    if math.isnan(value) or math.isinf(value):
        return value
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        # Values beyond single precision round to infinity.
        if abs(value) > _FLOAT32_MAX:
            return math.copysign(math.inf, value)
        raise


def float_to_str(value: float, precision: int = 10) -> str:
    """Single-precision value in fixed notation with a trailing ``f``."""
    if precision < 0:
        raise ValueError("precision must not be negative")
    return f"{_as_float32(float(value)):.{precision}f}f"