"""Testing utilities for seqtrie consumers."""

from .fixtures import TrieTestHelper

__all__ = ['TrieTestHelper']
