"""
Int64 transformer over an injected byte generator.
"""

import logging

from byte_generators import build_int64_from_bytes, build_uint64_from_bytes

from .errors import GeneratorCapacityError, GeneratorNotSetError


logger = logging.getLogger(__name__)


class RandomInt64Transformer:
    """
    Produce an int64 from the output of a bound generator.

    The generator is bound once, either through the constructor or
    set_generator(), before any call to transform(). Rebinding while
    transform() runs in other threads is left to the caller to avoid.
    """

    def __init__(self, limiter=None, size=8, generator=None):
        if size <= 0:
            raise ValueError("size must be positive")
        self.limiter = limiter
        self.byte_length = size
        self.generator = None
        if generator is not None:
            self.set_generator(generator)

    def transform(self, original, limiter=None):
        """
        Generate an int64 for the original bytes.

        An explicit limiter overrides the default one for this call only.
        Without any limiter the first 8 generated bytes are returned as a
        signed value.
        """
        if limiter is None:
            limiter = self.limiter

        if self.generator is None:
            raise GeneratorNotSetError("generator is not set")

        res_bytes = self.generator.generate(original)

        if limiter is not None:
            return limiter.limit(build_uint64_from_bytes(res_bytes))
        return build_int64_from_bytes(res_bytes)

    def get_required_generator_byte_length(self):
        return self.byte_length

    def set_generator(self, generator):
        """Bind a generator producing at least byte_length bytes."""
        if generator.size() < self.byte_length:
            logger.warning(
                "Rejected generator with insufficient output size",
                extra={
                    "event": "transformer.generator_rejected",
                    "required": self.byte_length,
                    "available": generator.size()
                }
            )
            raise GeneratorCapacityError(self.byte_length, generator.size())
        self.generator = generator
        logger.debug(
            "Bound generator",
            extra={
                "event": "transformer.generator_bound",
                "generator": type(generator).__name__,
                "size": generator.size()
            }
        )
