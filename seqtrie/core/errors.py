"""Exception types for seqtrie.

Missing keys are never errors in seqtrie: lookups create default data and
``match`` reports the longest matched prefix. The exceptions here cover
misuse only, such as reading a cursor that sits at the end or using a cursor
after the trie it walks has grown new edges.
"""


class TrieError(Exception):
    """Base class for all seqtrie errors."""
    pass


class CursorError(TrieError):
    """Raised when a TrieCursor is used outside its contract."""
    pass


class CursorRangeError(CursorError, IndexError):
    """Raised when a cursor is dereferenced at end or moved past either end."""
    pass


class StaleCursorError(CursorError):
    """Raised when a cursor is used after the trie structure changed.

    Creating an edge may shift the positions stored in a node's edge list,
    so every cursor created before the change no longer describes a valid
    path. Writing data to existing nodes does not invalidate cursors.
    """
    pass


class ConfigurationError(TrieError, ValueError):
    """Raised when a configuration object fails validation."""
    pass
