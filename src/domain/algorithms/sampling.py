from __future__ import annotations

# 2**64 as a float; dividing a uint64 draw by it maps onto [0, 1].
_UINT64_RANGE = float(1 << 64)


def uniform_in_range(raw: int, min_value: float, max_value: float) -> float:
    """Map one unsigned 64-bit draw onto [min_value, max_value).

    Float rounding can carry the largest draws onto max_value, never past it.
    """

    value = min_value + (max_value - min_value) * (raw / _UINT64_RANGE)
    return min(value, max_value)
