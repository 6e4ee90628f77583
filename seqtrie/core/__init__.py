"""Core data structures of seqtrie: nodes, the trie engine, cursors and scoring."""

from .errors import (
    TrieError,
    CursorError,
    CursorRangeError,
    StaleCursorError,
    ConfigurationError,
)
from .node import TrieNode, ROOT
from .cursor import TrieCursor
from .trie import Trie, MatchResult
from .score import ScoreFunction, OverlapScore, CustomScore, compare

__all__ = [
    'TrieError',
    'CursorError',
    'CursorRangeError',
    'StaleCursorError',
    'ConfigurationError',
    'TrieNode',
    'ROOT',
    'TrieCursor',
    'Trie',
    'MatchResult',
    'ScoreFunction',
    'OverlapScore',
    'CustomScore',
    'compare',
]
