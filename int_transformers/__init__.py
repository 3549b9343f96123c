"""
Int64 transformers subpackage.
"""

from .errors import (
    TransformerError,
    WrongLimitsError,
    UnsupportedIntSizeError,
    GeneratorCapacityError,
    GeneratorNotSetError,
    UnknownEngineError
)
from .limits import get_int_thresholds
from .limiter import Int64Limiter
from .random_int64 import RandomInt64Transformer
from .engines import ENGINES, new_random_int64_transformer

__all__ = [
    'TransformerError',
    'WrongLimitsError',
    'UnsupportedIntSizeError',
    'GeneratorCapacityError',
    'GeneratorNotSetError',
    'UnknownEngineError',
    'get_int_thresholds',
    'Int64Limiter',
    'RandomInt64Transformer',
    'ENGINES',
    'new_random_int64_transformer'
]
