"""
Named generator engines and transformer assembly.
"""

import logging

from byte_generators import HashGenerator, HashReducer, RandomBytes, ShakeGenerator

from .errors import UnknownEngineError
from .limiter import Int64Limiter
from .random_int64 import RandomInt64Transformer


logger = logging.getLogger(__name__)


def _random_engine(byte_length, salt=None, seed=None, **kwargs):
    return RandomBytes(seed=seed, size=byte_length)


def _hash_engine(byte_length, salt=None, seed=None, hash_name="sha256"):
    if not salt:
        raise ValueError("hash engine requires a non-empty salt")
    generator = HashGenerator(salt, hash_name)
    if generator.size() < byte_length:
        return ShakeGenerator(salt, byte_length)
    return HashReducer(generator, byte_length)


ENGINES = {
    "random": _random_engine,
    "hash": _hash_engine,
}


def new_random_int64_transformer(engine="random", min_value=None, max_value=None,
                                 size=8, salt=None, seed=None,
                                 hash_name="sha256"):
    """
    Build a RandomInt64Transformer with its generator already bound.

    A limiter is created only when at least one bound is given; the other
    bound then defaults to the int threshold for size. The generator
    always produces 8 bytes so the whole int64 is drawn from it.
    """
    try:
        factory = ENGINES[engine]
    except KeyError:
        raise UnknownEngineError(f"unknown engine {engine!r}") from None

    limiter = None
    if min_value is not None or max_value is not None:
        limiter = Int64Limiter.new(min_value, max_value, size)

    byte_length = 8
    generator = factory(byte_length, salt=salt, seed=seed, hash_name=hash_name)
    transformer = RandomInt64Transformer(limiter, byte_length, generator=generator)

    logger.debug(
        "Assembled int64 transformer",
        extra={
            "event": "transformer.assembled",
            "engine": engine,
            "limiter": repr(limiter),
            "byte_length": byte_length
        }
    )
    return transformer
