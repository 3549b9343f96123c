#!/usr/bin/env python3
"""
Stub generators for testing.
"""

from byte_generators import Generator


class FixedGenerator(Generator):
    """Generator returning the same bytes for every input."""

    def __init__(self, output, size=None):
        self.output = output
        self._size = len(output) if size is None else size
        self.calls = []

    def generate(self, original):
        self.calls.append(original)
        return self.output

    def size(self):
        return self._size


class FailingGenerator(Generator):
    """Generator raising a fixed exception."""

    def __init__(self, error, size=8):
        self.error = error
        self._size = size

    def generate(self, original):
        raise self.error

    def size(self):
        return self._size
