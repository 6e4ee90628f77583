"""seqtrie - Sequence Trie and k-NN Classifier Library.

seqtrie provides an in-memory trie keyed by arbitrary element sequences
(strings, lists, tuples, bytes), a bidirectional depth-first cursor over it,
a fold-style scoring protocol for comparing a query against every trie path
of the same length, and a k-nearest-neighbour classifier built from these
parts.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Storage:
    from seqtrie import Trie

Classification:
    from seqtrie import KNNTrie, ClassifierConfig
━━━━━━━━━━━━━━━━━━━━━━━━━━

Every prefix of a stored key owns a data slot. Lookups never fail; they
create missing nodes with default data.
"""

__version__ = "0.1.0"

# Core components
from .core.errors import (
    TrieError,
    CursorError,
    CursorRangeError,
    StaleCursorError,
    ConfigurationError,
)
from .core.node import TrieNode
from .core.cursor import TrieCursor
from .core.trie import Trie, MatchResult
from .core.score import ScoreFunction, OverlapScore, CustomScore, compare

# Classifier
from .classifier import KNNTrie, KBest, LabelFrequencies, majority_vote

# Configuration
from .config import ClassifierConfig, VoteStrategy

# High-level API
from .api import (
    build_trie,
    count_nodes,
    find_keys,
    get_leaf_keys,
    get_tree_stats,
    train_classifier,
)

__all__ = [
    "__version__",
    # Core
    'TrieError',
    'CursorError',
    'CursorRangeError',
    'StaleCursorError',
    'ConfigurationError',
    'TrieNode',
    'TrieCursor',
    'Trie',
    'MatchResult',
    'ScoreFunction',
    'OverlapScore',
    'CustomScore',
    'compare',
    # Classifier
    'KNNTrie',
    'KBest',
    'LabelFrequencies',
    'majority_vote',
    # Config
    'ClassifierConfig',
    'VoteStrategy',
    # API
    'build_trie',
    'count_nodes',
    'find_keys',
    'get_leaf_keys',
    'get_tree_stats',
    'train_classifier',
]
