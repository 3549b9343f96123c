"""
Exceptions raised by the int64 transformers.
"""


class TransformerError(Exception):
    """Base exception for transformer errors."""


class WrongLimitsError(TransformerError, ValueError):
    """Raised when a bound is out of range or min is not below max."""


class UnsupportedIntSizeError(TransformerError, ValueError):
    """Raised when no int thresholds exist for a byte size."""


class GeneratorCapacityError(TransformerError, ValueError):
    """Raised when a generator produces fewer bytes than required."""

    def __init__(self, required, available):
        super().__init__(
            f"requested byte length ({required}) higher than generator can produce ({available})"
        )
        self.required = required
        self.available = available


class GeneratorNotSetError(TransformerError, RuntimeError):
    """Raised when transforming before a generator is bound."""


class UnknownEngineError(TransformerError, KeyError):
    """Raised when an engine name is not registered."""
