"""TrieNode storage unit for seqtrie.

The TrieNode is a plain data container. It holds
one data value plus its outgoing edges, and nothing else. Edges refer to
child nodes by their index in the owning Trie's node arena, so a node never
holds a reference to another node object and the tree can be cloned or
handed over as a flat list.
"""

from bisect import bisect_left
from typing import Any, Iterator, List, Optional, Tuple


class TrieNode:
    """One node of a Trie: a data slot plus a sorted edge list.

    The edge list is stored as two parallel lists. ``elements`` is kept
    sorted ascending and free of duplicates, which allows binary search on
    lookup and insert. ``children[i]`` is the arena index of the node reached
    through ``elements[i]``.

    Inserting an edge shifts the positions of every later edge. Anything that
    remembers positions into ``elements`` (a TrieCursor, for instance) is no
    longer valid after such an insert.
    """

    __slots__ = ("data", "elements", "children")

    def __init__(self, data: Any = None):
        self.data = data
        self.elements: List[Any] = []
        self.children: List[int] = []

    def is_leaf(self) -> bool:
        """Check if this node has no outgoing edges."""
        return not self.elements

    def fan_out(self) -> int:
        """Return the number of outgoing edges."""
        return len(self.elements)

    def find_edge(self, element: Any) -> int:
        """Return the position where ``element`` is, or would be inserted.

        Args:
            element: Key element to look for

        Returns:
            Position in the edge list (``fan_out()`` if past the last edge)
        """
        return bisect_left(self.elements, element)

    def has_edge_at(self, position: int, element: Any) -> bool:
        """Check if the edge at ``position`` is labelled ``element``."""
        return position < len(self.elements) and self.elements[position] == element

    def child_for(self, element: Any) -> Optional[int]:
        """Return the arena index of the child reached by ``element``, or None."""
        position = self.find_edge(element)
        if self.has_edge_at(position, element):
            return self.children[position]
        return None

    def add_edge(self, position: int, element: Any, child: int) -> None:
        """Insert an edge at ``position``; the caller keeps the order sorted."""
        self.elements.insert(position, element)
        self.children.insert(position, child)

    def edges(self) -> Iterator[Tuple[Any, int]]:
        """Iterate over ``(element, child_index)`` pairs in sorted order."""
        return zip(self.elements, self.children)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(data={self.data!r}, elements={self.elements!r})"


# Arena index of the root node in every Trie.
ROOT = 0
