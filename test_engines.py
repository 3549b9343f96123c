#!/usr/bin/env python3
"""
Test suite for generator engines and transformer assembly.
"""

import hashlib
import hmac
import random
from concurrent.futures import ThreadPoolExecutor
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import pytest

from byte_generators import HashReducer, ShakeGenerator, build_uint64_from_bytes
from int_transformers import (
    ENGINES, Int64Limiter, UnknownEngineError, new_random_int64_transformer
)
from int_transformers.limits import INT32_MAX


def fold(data, size):
    result = bytearray(size)
    for i, b in enumerate(data):
        result[i % size] ^= b
    return bytes(result)


def test_registered_engines():
    assert sorted(ENGINES) == ["hash", "random"]


def test_hash_engine_deterministic():
    """The hash engine maps equal inputs to equal outputs."""
    first = new_random_int64_transformer("hash", salt=b"secret")
    second = new_random_int64_transformer("hash", salt=b"secret")
    assert first.limiter is None
    assert first.transform(b"42") == second.transform(b"42")

    digest = hmac.new(b"secret", b"42", hashlib.sha256).digest()
    expected = int.from_bytes(fold(digest, 8), 'big', signed=True)
    assert first.transform(b"42") == expected
    print("✓ hash engine test passed!")


def test_hash_engine_with_bounds():
    transformer = new_random_int64_transformer("hash", 10, 20, salt=b"secret")
    assert transformer.limiter == Int64Limiter(10, 20)

    digest = hmac.new(b"secret", b"42", hashlib.sha256).digest()
    expected = Int64Limiter(10, 20).limit(build_uint64_from_bytes(fold(digest, 8)))
    assert transformer.transform(b"42") == expected


def test_hash_engine_requires_salt():
    with pytest.raises(ValueError):
        new_random_int64_transformer("hash")
    with pytest.raises(ValueError):
        new_random_int64_transformer("hash", salt=b"")


def test_hash_engine_generators():
    assert isinstance(ENGINES["hash"](8, salt=b"s"), HashReducer)
    assert ENGINES["hash"](8, salt=b"s", hash_name="md5").size() == 8
    wide = ENGINES["hash"](64, salt=b"s")
    assert isinstance(wide, ShakeGenerator)
    assert wide.size() == 64


def test_hash_engine_hash_name():
    """The builder passes hash_name through to the hash engine."""
    transformer = new_random_int64_transformer("hash", salt=b"secret", hash_name="sha512")
    digest = hmac.new(b"secret", b"42", hashlib.sha512).digest()
    expected = int.from_bytes(fold(digest, 8), 'big', signed=True)
    assert transformer.transform(b"42") == expected
    assert transformer.transform(b"42") != new_random_int64_transformer("hash", salt=b"secret").transform(b"42")

    # The random engine accepts and ignores it
    assert new_random_int64_transformer("random", seed=7, hash_name="sha512").generator.size() == 8


def test_random_engine_seeded():
    transformer = new_random_int64_transformer("random", seed=7)
    raw = random.Random(7).randbytes(8)
    assert transformer.transform(b"") == int.from_bytes(raw, 'big', signed=True)

    transformer = new_random_int64_transformer(min_value=-5, max_value=5, seed=7)
    assert transformer.transform(b"") == Int64Limiter(-5, 5).limit(int.from_bytes(raw, 'big'))
    print("✓ random engine test passed!")


def test_single_bound_uses_size_threshold():
    transformer = new_random_int64_transformer(min_value=0, size=4, seed=1)
    assert transformer.limiter.min_value == 0
    assert transformer.limiter.max_value == INT32_MAX
    assert 0 <= transformer.transform(b"") < INT32_MAX


def test_unknown_engine():
    with pytest.raises(UnknownEngineError):
        new_random_int64_transformer("nope")
    with pytest.raises(KeyError):
        new_random_int64_transformer("nope")


def test_concurrent_transform():
    transformer = new_random_int64_transformer("hash", -1000, 1000, salt=b"secret")
    inputs = [str(i).encode() for i in range(200)]
    expected = [transformer.transform(value) for value in inputs]
    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(transformer.transform, inputs))
    assert results == expected


def main():
    """Run all engine tests."""
    print("Running engine tests...")

    test_registered_engines()
    test_hash_engine_deterministic()
    test_hash_engine_with_bounds()
    test_hash_engine_requires_salt()
    test_hash_engine_generators()
    test_hash_engine_hash_name()
    test_random_engine_seeded()
    test_single_bound_uses_size_threshold()
    test_unknown_engine()
    test_concurrent_transform()

    print("✓ All engine tests passed!")


if __name__ == "__main__":
    main()
