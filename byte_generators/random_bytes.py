"""
Random byte generator.
"""

import random
import threading

from .base import Generator


class RandomBytes(Generator):
    """
    Generator ignoring the original value and returning bytes from a
    private random.Random stream.

    Passing a seed makes the stream reproducible across runs. The stream
    state is shared between calls, so access is serialized with a lock.
    """

    def __init__(self, seed=None, size=8):
        if size <= 0:
            raise ValueError("size must be positive")
        self._rng = random.Random(seed)
        self._lock = threading.Lock()
        self._size = size

    def generate(self, original):
        with self._lock:
            return self._rng.randbytes(self._size)

    def size(self):
        return self._size
