"""
Byte generators subpackage.
"""

from .base import Generator, GeneratorError
from .codec import DecodeLengthError, build_int64_from_bytes, build_uint64_from_bytes
from .hash import HashGenerator, ShakeGenerator, HashReducer
from .random_bytes import RandomBytes

__all__ = [
    'Generator',
    'GeneratorError',
    'DecodeLengthError',
    'build_int64_from_bytes',
    'build_uint64_from_bytes',
    'HashGenerator',
    'ShakeGenerator',
    'HashReducer',
    'RandomBytes'
]
