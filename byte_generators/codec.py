"""
Big-endian codecs between generator output and 64-bit integers.
"""

from .base import GeneratorError


INT64_BYTE_LENGTH = 8


class DecodeLengthError(GeneratorError, ValueError):
    """Raised when generated bytes are too short to decode."""


def _head(data):
    if len(data) < INT64_BYTE_LENGTH:
        raise DecodeLengthError(
            f"cannot decode 64-bit integer from {len(data)} bytes: "
            f"at least {INT64_BYTE_LENGTH} required"
        )
    return data[:INT64_BYTE_LENGTH]


def build_uint64_from_bytes(data):
    """Decode the first 8 bytes as an unsigned integer."""
    return int.from_bytes(_head(data), 'big')


def build_int64_from_bytes(data):
    """Decode the first 8 bytes as a two's-complement signed integer."""
    return int.from_bytes(_head(data), 'big', signed=True)
