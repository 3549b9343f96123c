"""
Deterministic generators built on hashlib.
The same salt and original bytes always produce the same output.
"""

import hashlib
import hmac

from .base import Generator


class HashGenerator(Generator):
    """Salted HMAC over the original bytes."""

    def __init__(self, salt, hash_name="sha256"):
        if hash_name not in hashlib.algorithms_available:
            raise ValueError(f"unknown hash function {hash_name!r}")
        self.salt = salt
        self.hash_name = hash_name
        self._digest_size = hashlib.new(hash_name).digest_size
        if self._digest_size == 0:
            raise ValueError(f"hash function {hash_name!r} has no fixed digest size")

    def generate(self, original):
        return hmac.new(self.salt, original, self.hash_name).digest()

    def size(self):
        return self._digest_size


class ShakeGenerator(Generator):
    """SHAKE128 over salt and original, squeezed to a fixed length."""

    def __init__(self, salt, size=32):
        if size <= 0:
            raise ValueError("size must be positive")
        self.salt = salt
        self._size = size

    def generate(self, original):
        hasher = hashlib.shake_128(self.salt)
        hasher.update(original)
        return hasher.digest(self._size)

    def size(self):
        return self._size


class HashReducer(Generator):
    """
    Reduce a wide generator to a narrower output.

    The wrapped output is split into size-byte blocks which are XOR-ed
    together; a trailing partial block is folded into the head.
    """

    def __init__(self, generator, size):
        if size <= 0:
            raise ValueError("size must be positive")
        if generator.size() < size:
            raise ValueError(
                f"cannot reduce {generator.size()} bytes to {size} bytes"
            )
        self.generator = generator
        self._size = size

    def generate(self, original):
        data = self.generator.generate(original)
        result = bytearray(self._size)
        for offset in range(0, len(data), self._size):
            for i, b in enumerate(data[offset:offset + self._size]):
                result[i] ^= b
        return bytes(result)

    def size(self):
        return self._size
