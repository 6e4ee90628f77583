"""Bidirectional depth-first cursor for seqtrie.

A TrieCursor walks every node of a Trie in pre-order (parent before
children, children in element order) and can step both forwards and
backwards. Its position is a stack of edge positions, one per level, that
spells the path from the root to the current node.

The cursor has three states:

- rewound: empty stack, standing on the root, one before the first node
- positioned: the top of the stack names the current node
- end: the stack holds only the root's end-of-children position

Creating an edge anywhere in the trie shifts positions inside edge lists,
so cursors check the trie's structural version on every operation and
raise StaleCursorError once it has moved on.
"""

import logging
from typing import TYPE_CHECKING, Any, Iterable, List, Tuple

from .errors import CursorRangeError, StaleCursorError
from .node import ROOT, TrieNode

if TYPE_CHECKING:
    from .trie import Trie

logger = logging.getLogger(__name__)

# Stand-in node index for the end position, which has no node.
_NO_NODE = -1


class TrieCursor:
    """Depth-first pre-order cursor over a Trie.

    Args:
        trie: The Trie to walk. The cursor starts rewound.

    Example:
        >>> cursor = trie.begin()
        >>> cursor.increment()
        >>> while not cursor.at_end():
        ...     print(cursor.key(), cursor.data)
        ...     cursor.increment()
    """

    def __init__(self, trie: 'Trie'):
        self._trie = trie
        self._version = trie.structural_version
        # _path[i] is a position in the edge list of the node at level i;
        # _trail[i] is the arena index of the node that edge leads to.
        self._path: List[int] = []
        self._trail: List[int] = []

    @property
    def trie(self) -> 'Trie':
        return self._trie

    def _check_valid(self) -> None:
        if self._trie.structural_version != self._version:
            logger.debug("Cursor at depth %d used after the trie changed", len(self._path))
            raise StaleCursorError(
                "Trie structure changed since this cursor was created; "
                "create a new cursor"
            )

    def _node(self, index: int) -> TrieNode:
        return self._trie._node(index)

    def _top_index(self) -> int:
        return self._trail[-1] if self._trail else ROOT

    def _push(self, parent: int, position: int) -> None:
        node = self._node(parent)
        self._path.append(position)
        self._trail.append(node.children[position] if position < node.fan_out() else _NO_NODE)

    def _pop(self) -> int:
        self._trail.pop()
        return self._path.pop()

    # State

    def at_begin(self) -> bool:
        """Check if the cursor is rewound (standing on the root)."""
        return not self._path

    def at_end(self) -> bool:
        """Check if the cursor is past the last node."""
        return (len(self._path) == 1
                and self._path[0] == self._node(ROOT).fan_out())

    def depth(self) -> int:
        """Return the number of edges between the root and the current node."""
        return len(self._path)

    def rewind(self) -> 'TrieCursor':
        """Move back to the rewound state."""
        self._check_valid()
        self._path.clear()
        self._trail.clear()
        return self

    def to_end(self) -> 'TrieCursor':
        """Move to the end state."""
        self._check_valid()
        self._path = [self._node(ROOT).fan_out()]
        self._trail = [_NO_NODE]
        return self

    def seek(self, key: Iterable) -> 'TrieCursor':
        """Position the cursor at ``key``, or at end if ``key`` is not in the trie.

        The empty key leaves the cursor rewound, on the root.
        """
        self.rewind()
        for element in key:
            parent = self._top_index()
            node = self._node(parent)
            position = node.find_edge(element)
            if not node.has_edge_at(position, element):
                return self.to_end()
            self._push(parent, position)
        return self

    # Movement

    def increment(self) -> 'TrieCursor':
        """Advance to the next node in pre-order.

        Raises:
            CursorRangeError: If the cursor is already at end
        """
        self._check_valid()
        if self.at_begin():
            self._push(ROOT, 0)
            return self
        if self.at_end():
            raise CursorRangeError("Cannot increment a cursor past the end of the trie")

        current = self._trail[-1]
        if not self._node(current).is_leaf():
            self._push(current, 0)
            return self

        # Climb until an ancestor has a next sibling; an exhausted root
        # leaves the end position on the stack.
        position = self._pop() + 1
        while self._path and position == self._node(self._trail[-1]).fan_out():
            position = self._pop() + 1
        self._push(self._top_index(), position)
        return self

    def decrement(self) -> 'TrieCursor':
        """Step back to the previous node in pre-order.

        From a first child this moves up to the parent (or back to the
        rewound state at the top level). Otherwise it moves to the previous
        sibling's right-most descendant. From end it moves to the last node.

        Raises:
            CursorRangeError: If the cursor is rewound
        """
        self._check_valid()
        if self.at_begin():
            raise CursorRangeError("Cannot decrement a cursor before the start of the trie")

        position = self._pop()
        if position == 0:
            return self

        self._push(self._top_index(), position - 1)
        current = self._node(self._trail[-1])
        while not current.is_leaf():
            self._push(self._trail[-1], current.fan_out() - 1)
            current = self._node(self._trail[-1])
        return self

    # Dereference

    def _require_node(self) -> None:
        self._check_valid()
        if self.at_end():
            raise CursorRangeError("Cannot dereference a cursor at the end of the trie")

    def key(self) -> Any:
        """Return the key of the current node (the empty key when rewound)."""
        self._require_node()
        elements = []
        parent = ROOT
        for position, child in zip(self._path, self._trail):
            elements.append(self._node(parent).elements[position])
            parent = child
        return self._trie.make_key(elements)

    @property
    def data(self) -> Any:
        """Data of the current node; assigning writes through to the trie."""
        self._require_node()
        return self._node(self._top_index()).data

    @data.setter
    def data(self, value: Any) -> None:
        self._require_node()
        self._node(self._top_index()).data = value

    def item(self) -> Tuple[Any, Any]:
        """Return ``(key, data)`` for the current node."""
        return self.key(), self.data

    def is_leaf(self) -> bool:
        """Check if the current node has no children."""
        self._require_node()
        return self._node(self._top_index()).is_leaf()

    def insert(self, key: Iterable, value: Any) -> 'TrieCursor':
        """Insert ``value`` at ``key`` and leave the cursor on that node.

        The walk always starts from the root, whatever the current position.
        This cursor stays valid afterwards; every other cursor over the same
        trie becomes stale if new edges were created.
        """
        self._check_valid()
        trie = self._trie
        trie._note_key(key)
        self._path.clear()
        self._trail.clear()

        for element in key:
            parent = self._top_index()
            trie.insert_or_get_edge(parent, element)
            self._push(parent, self._node(parent).find_edge(element))

        self._node(self._top_index()).data = value
        self._version = trie.structural_version
        return self

    # Comparison

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TrieCursor):
            return NotImplemented
        return self._trie is other._trie and self._path == other._path

    def __repr__(self) -> str:
        if self.at_begin():
            state = "rewound"
        elif self.at_end():
            state = "end"
        else:
            state = f"depth={len(self._path)}"
        return f"{self.__class__.__name__}({state})"
