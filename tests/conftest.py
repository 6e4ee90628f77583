"""Shared pytest setup for the seqtrie test suite."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from seqtrie import Trie


@pytest.fixture
def word_trie():
    """Trie of the words test/trie/abc/abd plus 'tree' counted over every prefix."""
    trie = Trie(int)
    trie.insert("test", 42)
    trie.insert("trie", 1)
    trie.insert("abc", 7)
    trie["abd"] = 3
    trie.update("tree", lambda data: data + 1)
    return trie


@pytest.fixture
def number_trie():
    """Trie of three integer sequences sharing the prefix 1, 2, 3."""
    trie = Trie(int)
    trie.insert([1, 2, 3, 4], 1)
    trie.insert([5, 6, 7, 8, 9], 2)
    trie.insert([1, 2, 3, 5, 8, 13, 21], 3)
    return trie
