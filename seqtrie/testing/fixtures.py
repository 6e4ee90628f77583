"""Test fixtures for seqtrie consumers.

These fixtures provide controlled access to internal state for testing purposes
without exposing implementation details as part of the public API.
"""

from typing import Any, Dict, Iterable, List, Optional

from ..core.node import ROOT
from ..core.trie import Trie


class TrieTestHelper:
    """Public test fixture for verifying trie structure.

    This class provides a stable testing interface for checking the node
    arena of a Trie without depending on how it is laid out. It's designed
    for use in test suites of projects that build on seqtrie.

    Example:
        helper = TrieTestHelper(trie)

        assert helper.edges_are_sorted()
        assert helper.is_tree()
        assert helper.get_summary()['total_nodes'] == 6
    """

    def __init__(self, trie: Trie):
        """Initialize with the trie to inspect.

        Args:
            trie: The Trie under test
        """
        self._trie = trie

    def get_summary(self) -> Dict[str, Any]:
        """Returns high-level structural state for testing.

        Returns:
            Dictionary containing:
            - total_nodes: Nodes in the arena, root included
            - leaf_nodes: Nodes without outgoing edges
            - edge_count: Total number of edges
            - max_fan_out: Largest number of edges on one node
            - structural_version: Current structural version of the trie
        """
        nodes = self._trie._nodes
        return {
            'total_nodes': len(nodes),
            'leaf_nodes': sum(1 for node in nodes if node.is_leaf()),
            'edge_count': sum(node.fan_out() for node in nodes),
            'max_fan_out': max(node.fan_out() for node in nodes),
            'structural_version': self._trie.structural_version,
        }

    def edges_are_sorted(self) -> bool:
        """Check that every edge list is strictly ascending (sorted, no duplicates)."""
        for node in self._trie._nodes:
            elements = node.elements
            if any(not elements[i] < elements[i + 1] for i in range(len(elements) - 1)):
                return False
            if len(node.children) != len(elements):
                return False
        return True

    def is_tree(self) -> bool:
        """Check that the root has no parent and every other node exactly one."""
        nodes = self._trie._nodes
        parents = [0] * len(nodes)
        for node in nodes:
            for child in node.children:
                parents[child] += 1
        return parents[ROOT] == 0 and all(count == 1 for count in parents[1:])

    def path_of(self, key: Iterable) -> Optional[List[int]]:
        """Return the arena indices along ``key`` (root first), or None if absent."""
        nodes = self._trie._nodes
        path = [ROOT]
        for element in key:
            child = nodes[path[-1]].child_for(element)
            if child is None:
                return None
            path.append(child)
        return path
