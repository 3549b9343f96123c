"""
Signed integer thresholds by byte width.
"""

from .errors import UnsupportedIntSizeError


INT16_MIN, INT16_MAX = -(1 << 15), (1 << 15) - 1
INT32_MIN, INT32_MAX = -(1 << 31), (1 << 31) - 1
INT64_MIN, INT64_MAX = -(1 << 63), (1 << 63) - 1
UINT64_MAX = (1 << 64) - 1

INT_THRESHOLDS = {
    2: (INT16_MIN, INT16_MAX),
    4: (INT32_MIN, INT32_MAX),
    8: (INT64_MIN, INT64_MAX),
}


def get_int_thresholds(size):
    """Return (min, max) of a signed integer of size bytes."""
    try:
        return INT_THRESHOLDS[size]
    except KeyError:
        raise UnsupportedIntSizeError(f"unsupported int size {size}") from None
