"""
Base interface for byte generators.
"""

from abc import ABC, abstractmethod


class GeneratorError(Exception):
    """Base exception for generator errors."""


class Generator(ABC):
    """
    Abstract generator producing a fixed-length byte sequence from an
    original value, either deterministically or at random.
    """

    @abstractmethod
    def generate(self, original):
        """Return size() bytes derived from the original bytes."""
        raise NotImplementedError

    @abstractmethod
    def size(self):
        """Return the length of sequences produced by generate()."""
        raise NotImplementedError
