"""Common components shared across seqtrie.

This internal package contains configuration code. It should NOT be imported
directly by users.

Important: This package must NEVER import from ``seqtrie.core`` to avoid
circular dependencies.
"""

# Re-export configuration components
from .config import (
    ClassifierConfig,
    VoteStrategy,
)

__all__ = [
    'ClassifierConfig',
    'VoteStrategy',
]
