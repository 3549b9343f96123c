"""
Range limiting of unsigned 64-bit values into a signed bound.
"""

import logging

from .errors import WrongLimitsError
from .limits import INT64_MAX, INT64_MIN, UINT64_MAX, get_int_thresholds


logger = logging.getLogger(__name__)


def _rem(a, b):
    # Truncated remainder: the result carries the sign of the dividend.
    r = abs(a) % abs(b)
    return -r if a < 0 else r


class Int64Limiter:
    """
    Immutable [min_value, max_value) bound for generated int64 values.

    limit() maps v to min_value + v % distance, then takes the remainder
    by min_value for negative results and by max_value otherwise. The
    second step can move values outside the bound, e.g. with (-10, -2) a
    base of -10 becomes 0.
    """

    __slots__ = ('_min_value', '_max_value', '_distance')

    def __init__(self, min_value, max_value):
        for name, value in (('min', min_value), ('max', max_value)):
            if not isinstance(value, int) or isinstance(value, bool):
                raise WrongLimitsError(f"{name} value {value!r} is not an integer")
            if not INT64_MIN <= value <= INT64_MAX:
                raise WrongLimitsError(f"{name} value {value} out of int64 range")
        if min_value >= max_value:
            raise WrongLimitsError(
                f"wrong limits: min value {min_value} must be less than max value {max_value}"
            )
        object.__setattr__(self, '_min_value', min_value)
        object.__setattr__(self, '_max_value', max_value)
        object.__setattr__(self, '_distance', max_value - min_value)

    @classmethod
    def new(cls, min_value=None, max_value=None, size=8):
        """
        Create a limiter, filling a missing bound with the min or max of a
        signed int of size bytes. Zero is a regular bound.
        """
        if min_value is None or max_value is None:
            min_threshold, max_threshold = get_int_thresholds(size)
            if min_value is None:
                min_value = min_threshold
            if max_value is None:
                max_value = max_threshold

        limiter = cls(min_value, max_value)
        logger.debug(
            "Created int64 limiter",
            extra={
                "event": "limiter.created",
                "min_value": min_value,
                "max_value": max_value,
                "size": size
            }
        )
        return limiter

    @property
    def min_value(self):
        return self._min_value

    @property
    def max_value(self):
        return self._max_value

    @property
    def distance(self):
        return self._distance

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self._min_value, self._max_value))

    def limit(self, v):
        """Map an unsigned 64-bit value into the bound."""
        if not isinstance(v, int) or isinstance(v, bool):
            raise TypeError(f"value {v!r} is not an integer")
        if not 0 <= v <= UINT64_MAX:
            raise ValueError(f"value {v} out of uint64 range")
        base = self._min_value + v % self._distance
        if base < 0:
            return _rem(base, self._min_value)
        return _rem(base, self._max_value)

    def __eq__(self, other):
        if not isinstance(other, Int64Limiter):
            return NotImplemented
        return (self._min_value, self._max_value) == (other._min_value, other._max_value)

    def __hash__(self):
        return hash((self._min_value, self._max_value))

    def __repr__(self):
        return f"Int64Limiter({self._min_value}, {self._max_value})"
