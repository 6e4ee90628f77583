"""Configuration for the seqtrie classifier.

This module defines how users specify classification behaviour: how many
neighbours vote, how paths are scored and what to answer when nothing can be
compared.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional


class VoteStrategy(Enum):
    """How neighbours are turned into a label."""
    SINGLE_BEST = "single"   # Majority label of the single best path
    K_BEST = "k_best"        # Majority over the summed k best paths


@dataclass
class ClassifierConfig:
    """Complete configuration for KNNTrie.

    score_function must provide ``init()`` and ``step(score, pattern_element,
    path_element)``; None selects OverlapScore. It is typed loosely because
    this package must not import from ``seqtrie.core``.
    """

    # Neighbour count; None means single best
    k: Optional[int] = None

    # Label returned when no learned sequence has the query's length
    default_label: Any = None

    # Scoring
    score_function: Optional[Any] = None

    @property
    def strategy(self) -> VoteStrategy:
        """Voting strategy implied by ``k``."""
        return VoteStrategy.SINGLE_BEST if self.k is None else VoteStrategy.K_BEST

    # Convenience constructors for common configurations

    @classmethod
    def nearest(cls, default_label: Any = None) -> 'ClassifierConfig':
        """Create config that answers with the single best neighbour."""
        return cls(k=None, default_label=default_label)

    @classmethod
    def k_nearest(cls, k: int, default_label: Any = None) -> 'ClassifierConfig':
        """Create config that votes over the ``k`` best neighbours.

        Args:
            k: Number of neighbours that vote
            default_label: Answer when there is nothing to compare against

        Returns:
            ClassifierConfig for k-best voting
        """
        return cls(k=k, default_label=default_label)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.k is not None:
            if isinstance(self.k, bool) or not isinstance(self.k, int):
                errors.append("k must be an integer or None")
            elif self.k < 1:
                errors.append("k must be positive")

        if self.score_function is not None:
            for method in ("init", "step"):
                if not callable(getattr(self.score_function, method, None)):
                    errors.append(f"score_function must provide {method}()")

        return errors
