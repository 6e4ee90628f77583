"""High-level API for seqtrie.

This module provides simple, functional interfaces for common trie
operations. These functions wrap the object-oriented API for ease of use in
simple cases.
"""

from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from ._common.config import ClassifierConfig
from .classifier import KNNTrie
from .core.cursor import TrieCursor
from .core.trie import Trie


def build_trie(
    items: Iterable[Tuple[Iterable, Any]],
    default_factory: Callable[[], Any] = int,
    key_factory: Optional[Callable[[List[Any]], Any]] = None
) -> Trie:
    """Build a Trie from ``(key, value)`` pairs.

    Later pairs overwrite earlier ones with the same key.

    Args:
        items: Pairs to insert, in order
        default_factory: Data for nodes that only exist as prefixes
        key_factory: How to rebuild keys (inferred when omitted)

    Returns:
        A new Trie

    Example:
        >>> trie = build_trie([("test", 42), ("trie", 1)])
        >>> trie["test"]
        42
    """
    trie = Trie(default_factory, key_factory)
    for key, value in items:
        trie.insert(key, value)
    return trie


def _walk(trie: Trie) -> Iterator[TrieCursor]:
    """Yield a cursor at every non-root node, in pre-order."""
    cursor = trie.begin().increment()
    while not cursor.at_end():
        yield cursor
        cursor.increment()


def count_nodes(trie: Trie, include_root: bool = True) -> int:
    """Count the nodes of a trie.

    Args:
        trie: Trie to inspect
        include_root: Count the root node as well

    Returns:
        Number of nodes
    """
    count = trie.node_count()
    return count if include_root else count - 1


def find_keys(
    trie: Trie,
    predicate: Callable[[Any, Any], bool]
) -> Iterator[Any]:
    """Find the keys whose ``(key, data)`` satisfies a predicate.

    Args:
        trie: Trie to search
        predicate: Function(key, data) -> bool

    Yields:
        Matching keys in pre-order, the empty key (root) excluded

    Example:
        >>> trie = build_trie([("ab", 1), ("ac", 2)])
        >>> list(find_keys(trie, lambda key, data: data > 1))
        ['ac']
    """
    for key, data in trie:
        if predicate(key, data):
            yield key


def get_leaf_keys(trie: Trie) -> Iterator[Any]:
    """Get the keys of all leaf nodes (keys that are nobody's prefix).

    Yields:
        Leaf keys in pre-order
    """
    for cursor in _walk(trie):
        if cursor.is_leaf():
            yield cursor.key()


def get_tree_stats(trie: Trie) -> Dict[str, Any]:
    """Get statistics about a trie.

    Returns:
        Dictionary with ``total_nodes`` (root included), ``leaf_nodes``,
        ``internal_nodes``, ``max_depth``, ``depths`` (node count per depth)
        and ``average_branching`` (mean fan-out of internal nodes)

    Example:
        >>> stats = get_tree_stats(build_trie([("ab", 1), ("ac", 2)]))
        >>> stats['leaf_nodes'], stats['max_depth']
        (2, 2)
    """
    stats = {
        'total_nodes': 1,
        'leaf_nodes': 1 if trie.is_leaf() else 0,
        'max_depth': 0,
        'depths': {0: 1}
    }

    for cursor in _walk(trie):
        depth = cursor.depth()
        stats['total_nodes'] += 1

        if cursor.is_leaf():
            stats['leaf_nodes'] += 1

        stats['max_depth'] = max(stats['max_depth'], depth)
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    # Every node but the root hangs off exactly one internal node.
    stats['average_branching'] = (
        (stats['total_nodes'] - 1) / stats['internal_nodes']
        if stats['internal_nodes'] > 0 else 0.0
    )

    return stats


def train_classifier(
    samples: Iterable[Tuple[Iterable, Any]],
    config: Optional[ClassifierConfig] = None
) -> KNNTrie:
    """Create a KNNTrie and learn every ``(features, label)`` sample.

    Args:
        samples: Training pairs
        config: Classifier configuration

    Returns:
        The trained classifier
    """
    knn = KNNTrie(config)
    for features, label in samples:
        knn.learn(features, label)
    return knn
