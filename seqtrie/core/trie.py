"""Trie engine for seqtrie.

A Trie maps sequences of elements (strings, lists, tuples, bytes, or any
forward iterable) to data. Every prefix of a stored key owns its own data
slot, so inserting ``"tree"`` also materialises data for ``""``, ``"t"``,
``"tr"`` and ``"tre"``. The trie does not record which prefixes were stored
on purpose; callers that need that distinction keep a flag in their data.

Nodes live in a flat arena (a list) owned by the Trie and address their
children by index. The arena is never shared between tries: copies clone it
and ``take()`` hands it over, leaving the source empty.

Elements only need equality and a strict total order (``<``); edges are kept
sorted and located with binary search.
"""

import copy
import logging
from typing import Any, Callable, Iterable, Iterator, List, NamedTuple, Optional, Tuple

from .cursor import TrieCursor
from .node import ROOT, TrieNode

logger = logging.getLogger(__name__)


class MatchResult(NamedTuple):
    """Outcome of ``Trie.match``.

    ``matched`` is True when the whole sequence was consumed. ``data`` is the
    data of the node for the longest matched prefix (the root when nothing
    matched).
    """
    matched: bool
    data: Any


def _infer_key_factory(key: Iterable) -> Callable[[List[Any]], Any]:
    """Pick a function that rebuilds keys shaped like ``key`` from elements."""
    if isinstance(key, str):
        return "".join
    if isinstance(key, bytes):
        return bytes
    if isinstance(key, tuple):
        return tuple
    return list


class Trie:
    """Associative container keyed by element sequences.

    Args:
        default_factory: Zero-argument callable producing the data of newly
            created nodes (``int`` gives zero, ``dict`` an empty dict, ...)
        key_factory: Callable turning a list of elements back into a key.
            When omitted it is inferred from the first key inserted:
            strings rebuild as strings, tuples as tuples, bytes as bytes and
            everything else as lists.

    Example:
        >>> trie = Trie(int)
        >>> trie.insert("test", 42)
        >>> trie["test"], trie["te"]
        (42, 0)
        >>> trie.match("tent")
        MatchResult(matched=False, data=0)
    """

    def __init__(self,
                 default_factory: Callable[[], Any] = int,
                 key_factory: Optional[Callable[[List[Any]], Any]] = None):
        self.default_factory = default_factory
        self._explicit_key_factory = key_factory
        self._key_factory = key_factory
        self._nodes: List[TrieNode] = [TrieNode(default_factory())]
        self._version = 0

    # Node storage

    @property
    def structural_version(self) -> int:
        """Counter bumped every time an edge is created or the trie is emptied.

        Cursors remember the version they were created at and refuse to
        operate once it changes.
        """
        return self._version

    @property
    def key_factory(self) -> Callable[[List[Any]], Any]:
        """Function used to rebuild keys from their elements."""
        return self._key_factory or list

    @property
    def data(self) -> Any:
        """Data stored at the root (the empty key)."""
        return self._nodes[ROOT].data

    @data.setter
    def data(self, value: Any) -> None:
        self._nodes[ROOT].data = value

    def _node(self, index: int) -> TrieNode:
        return self._nodes[index]

    def _note_key(self, key: Iterable) -> None:
        if self._key_factory is None:
            self._key_factory = _infer_key_factory(key)

    def make_key(self, elements: Iterable) -> Any:
        """Build a key of this trie's key type from a sequence of elements."""
        return self.key_factory(list(elements))

    def is_leaf(self) -> bool:
        """Check if the trie holds no keys at all (the root has no edges)."""
        return self._nodes[ROOT].is_leaf()

    def node_count(self) -> int:
        """Return the number of nodes, root included."""
        return len(self._nodes)

    def insert_or_get_edge(self, node_index: int, element: Any) -> int:
        """Return the child of ``node_index`` reached by ``element``.

        The child is created with default data when the edge does not exist
        yet. Creating an edge invalidates every outstanding cursor.

        Args:
            node_index: Arena index of the parent node
            element: Edge label to follow or create

        Returns:
            Arena index of the child node
        """
        node = self._nodes[node_index]
        position = node.find_edge(element)
        if node.has_edge_at(position, element):
            return node.children[position]

        child = len(self._nodes)
        self._nodes.append(TrieNode(self.default_factory()))
        node.add_edge(position, element, child)
        self._version += 1
        return child

    def _insert_key(self, key: Iterable) -> int:
        self._note_key(key)
        index = ROOT
        for element in key:
            index = self.insert_or_get_edge(index, element)
        return index

    # Mutation

    def insert(self, key: Iterable, value: Any) -> None:
        """Store ``value`` at the node for ``key``.

        Missing nodes along the way are created with default data; the data
        of existing prefix nodes is left untouched. An empty key sets the
        root data. ``value`` is always stored as-is, callables included; use
        ``update`` to apply a function.

        Args:
            key: Sequence of elements
            value: Data to store
        """
        self._nodes[self._insert_key(key)].data = value

    def update(self, key: Iterable, func: Callable[[Any], Any]) -> None:
        """Replace the data of every node on the path of ``key`` with ``func(data)``.

        The root and every prefix of ``key`` are updated, each exactly once.
        This is the way to accumulate information over all prefixes, e.g.
        counting how many keys pass through a node.

        Args:
            key: Sequence of elements
            func: Function mapping old data to new data
        """
        self._note_key(key)
        root = self._nodes[ROOT]
        root.data = func(root.data)

        index = ROOT
        for element in key:
            index = self.insert_or_get_edge(index, element)
            node = self._nodes[index]
            node.data = func(node.data)

    def lookup_or_insert(self, key: Iterable) -> Any:
        """Return the data for ``key``, creating missing nodes with default data.

        Mutable data (dicts, Counters, lists) is returned by reference, so
        in-place changes are visible in the trie. Never fails.
        """
        return self._nodes[self._insert_key(key)].data

    def __getitem__(self, key: Iterable) -> Any:
        return self.lookup_or_insert(key)

    def __setitem__(self, key: Iterable, value: Any) -> None:
        self.insert(key, value)

    def clear(self) -> None:
        """Remove all nodes and reset the root data to its default.

        A key type inferred from earlier keys is forgotten as well.
        """
        logger.debug("Clearing trie with %d nodes", len(self._nodes))
        self._nodes = [TrieNode(self.default_factory())]
        self._key_factory = self._explicit_key_factory
        self._version += 1

    # Lookup

    def match(self, sequence: Iterable) -> MatchResult:
        """Follow ``sequence`` through existing edges only.

        Never creates nodes.

        Returns:
            ``MatchResult(True, data)`` if the whole sequence was consumed,
            otherwise ``MatchResult(False, data)`` with the data of the
            longest matched prefix (possibly the root).
        """
        node = self._nodes[ROOT]
        for element in sequence:
            child = node.child_for(element)
            if child is None:
                return MatchResult(False, node.data)
            node = self._nodes[child]
        return MatchResult(True, node.data)

    def __contains__(self, key: Iterable) -> bool:
        return self.match(key).matched

    # Traversal

    def _edge_iter(self, index: int) -> Iterator[Tuple[Any, int]]:
        return self._nodes[index].edges()

    def each_elem_with_depth(self, visitor: Callable[[Any, Any, int], bool]) -> None:
        """Depth-first pre-order walk passing the depth of every visited node.

        Like ``each_elem`` but ``visitor(element, data, depth)`` also receives
        the number of edges between the root and the visited node (1 for the
        root's children).
        """
        stack = [self._edge_iter(ROOT)]
        while stack:
            edge = next(stack[-1], None)
            if edge is None:
                stack.pop()
                continue

            element, child = edge
            if visitor(element, self._nodes[child].data, len(stack)):
                stack.append(self._edge_iter(child))

    def each_elem(self, visitor: Callable[[Any, Any], bool]) -> None:
        """Depth-first pre-order walk over every edge.

        ``visitor(element, data)`` is called once per edge with the edge's
        element and the data of the node it leads to. The root's own data is
        never visited. A truthy return value descends into that node's
        children; a falsy one skips the subtree and the walk carries on with
        the next sibling or ancestor.

        The visitor may change data in place but must not insert keys while
        the walk is running.
        """
        self.each_elem_with_depth(lambda element, data, depth: visitor(element, data))

    def each(self, visitor: Callable[[Any, Any], bool]) -> None:
        """Depth-first pre-order walk over every (key, data) pair.

        ``visitor(key, data)`` receives the full key from the root to the
        visited node, starting with the empty key at the root. The return
        value has the same meaning as in ``each_elem``.
        """
        path: List[Any] = []
        if not visitor(self.make_key(path), self._nodes[ROOT].data):
            return

        stack = [self._edge_iter(ROOT)]
        while stack:
            edge = next(stack[-1], None)
            if edge is None:
                stack.pop()
                if path:
                    path.pop()
                continue

            element, child = edge
            path.append(element)
            if visitor(self.make_key(path), self._nodes[child].data):
                stack.append(self._edge_iter(child))
            else:
                path.pop()

    # Cursors

    def begin(self) -> TrieCursor:
        """Return a cursor in the rewound state (one before the first node)."""
        return TrieCursor(self)

    def end(self) -> TrieCursor:
        """Return a cursor in the end state."""
        return TrieCursor(self).to_end()

    def find(self, key: Iterable) -> TrieCursor:
        """Return a cursor positioned at ``key``, or at end if it is absent."""
        return TrieCursor(self).seek(key)

    def __iter__(self) -> Iterator[Tuple[Any, Any]]:
        """Iterate over ``(key, data)`` for every non-root node in pre-order.

        Inserting new keys while iterating raises StaleCursorError.
        """
        cursor = self.begin().increment()
        while not cursor.at_end():
            yield cursor.item()
            cursor.increment()

    # Copy and transfer

    def copy(self) -> 'Trie':
        """Return a deep copy; the clone shares no nodes or data with this trie."""
        return copy.deepcopy(self)

    def __copy__(self) -> 'Trie':
        return self.copy()

    def __deepcopy__(self, memo: dict) -> 'Trie':
        clone = self.__class__.__new__(self.__class__)
        memo[id(self)] = clone
        clone.default_factory = self.default_factory
        clone._explicit_key_factory = self._explicit_key_factory
        clone._key_factory = self._key_factory
        clone._version = 0
        clone._nodes = []
        for node in self._nodes:
            twin = TrieNode(copy.deepcopy(node.data, memo))
            twin.elements = list(node.elements)
            twin.children = list(node.children)
            clone._nodes.append(twin)
        return clone

    def take(self) -> 'Trie':
        """Move this trie's contents into a new Trie and leave this one empty.

        The moved-to Trie keeps the key type; this one forgets an inferred
        key type and infers it again from the next key.

        Returns:
            A Trie owning every node previously held here
        """
        moved = self.__class__(self.default_factory, self._explicit_key_factory)
        moved._key_factory = self._key_factory
        moved._nodes = self._nodes
        logger.debug("Moving %d nodes out of trie", len(self._nodes))
        self._nodes = [TrieNode(self.default_factory())]
        self._key_factory = self._explicit_key_factory
        self._version += 1
        return moved

    # Formatting

    def format(self) -> str:
        """Render one ``{ e1 e2 ... } : data`` line per node in pre-order."""
        lines = []

        def add_line(key, data):
            elements = "".join(f"{element} " for element in key)
            lines.append(f"{{ {elements}}} : {data}")
            return True

        self.each(add_line)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        factory = getattr(self.default_factory, "__name__", repr(self.default_factory))
        return f"{self.__class__.__name__}(nodes={len(self._nodes)}, default_factory={factory})"
