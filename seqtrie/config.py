"""Public configuration module.

Re-exports the configuration components from the internal _common package.
"""

from ._common.config import (
    ClassifierConfig,
    VoteStrategy,
)

__all__ = [
    'ClassifierConfig',
    'VoteStrategy',
]
