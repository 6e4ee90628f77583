"""k-nearest-neighbour classification on top of a Trie.

Feature sequences are learned into a Trie whose data is a label-frequency
map. A query is scored against every learned sequence of the same length with
``compare``; the label comes from a majority vote over the best neighbour, or
over the summed frequencies of the k best neighbours.

Tie-breaks are explicit:

- single best: the first path in pre-order with the highest score wins
- k best: candidates are ordered by ``(score, sorted label counts)``; a full
  set only admits strictly higher scores and evicts its lowest entry
- majority vote: the highest count wins, the lowest label on equal counts
"""

import logging
from bisect import bisect_left
from collections import Counter
from typing import Any, Iterable, List, Optional, Tuple

from ._common.config import ClassifierConfig
from .core.errors import ConfigurationError
from .core.score import OverlapScore, compare
from .core.trie import Trie

logger = logging.getLogger(__name__)


class LabelFrequencies(Counter):
    """Mapping from label to the number of times it was learned."""

    def sort_key(self) -> Tuple[Tuple[Any, int], ...]:
        """Return the ``(label, count)`` pairs in label order.

        This is the natural ordering of frequency maps used for tie-breaks.
        """
        return tuple(sorted(self.items()))

    def __str__(self) -> str:
        return "[" + "".join(f"{{ {label} : {count} }}" for label, count in self.sort_key()) + "]"


def majority_vote(labels: LabelFrequencies, default: Any = None) -> Any:
    """Return the label with the highest count.

    Labels are scanned in ascending order and only a strictly higher count
    replaces the current best, so the lowest label wins a tie.

    Args:
        labels: Label counts
        default: Answer for an empty map

    Returns:
        The winning label, or ``default``
    """
    best_label, best_count = default, None
    for label in sorted(labels):
        count = labels[label]
        if best_count is None or count > best_count:
            best_label, best_count = label, count
    return best_label


class KBest:
    """Bounded ordered set holding the k best-scoring frequency maps.

    Entries are kept ascending by ``(score, labels.sort_key())``. Identical
    entries collapse into one, as in a set.
    """

    def __init__(self, k: int):
        if k < 1:
            raise ValueError(f"k must be positive, got {k}")
        self.k = k
        self._keys: List[Tuple[Any, tuple]] = []
        self._labels: List[LabelFrequencies] = []

    def __len__(self) -> int:
        return len(self._keys)

    def store_if_better(self, score: Any, labels: LabelFrequencies) -> bool:
        """Offer a candidate; return True if it was retained.

        Below capacity every new candidate is kept. At capacity a candidate
        needs a score strictly above the lowest retained score, and the lowest
        entry is evicted to make room.
        """
        if len(self._keys) >= self.k and not score > self._keys[0][0]:
            return False

        key = (score, labels.sort_key())
        position = bisect_left(self._keys, key)
        if position < len(self._keys) and self._keys[position] == key:
            return False

        self._keys.insert(position, key)
        self._labels.insert(position, labels)
        if len(self._keys) > self.k:
            del self._keys[0]
            del self._labels[0]
        return True

    def entries(self) -> List[Tuple[Any, LabelFrequencies]]:
        """Return the retained ``(score, labels)`` pairs, best first."""
        return [(key[0], labels) for key, labels in zip(reversed(self._keys), reversed(self._labels))]

    def label_frequencies(self) -> LabelFrequencies:
        """Sum the label counts of every retained entry."""
        total = LabelFrequencies()
        for labels in self._labels:
            for label, count in labels.items():
                total[label] += count
        return total


class KNNTrie:
    """k-nearest-neighbour classifier over fixed-length feature sequences.

    Args:
        config: Classifier configuration (defaults to single-best voting with
            OverlapScore)

    Raises:
        ConfigurationError: If the configuration is invalid

    Example:
        >>> knn = KNNTrie()
        >>> knn.learn([1, 0, 1], "odd")
        >>> knn.learn([0, 1, 0], "even")
        >>> knn.classify([1, 1, 1])
        'odd'
    """

    def __init__(self, config: Optional[ClassifierConfig] = None):
        self.config = config or ClassifierConfig()

        config_errors = self.config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self._trie = Trie(LabelFrequencies)
        self._samples = 0

    @property
    def score_function(self):
        """Scoring strategy in use, read from the current config."""
        return self.config.score_function or OverlapScore()

    @property
    def trie(self) -> Trie:
        """The underlying Trie of label frequencies."""
        return self._trie

    def __len__(self) -> int:
        """Number of samples learned."""
        return self._samples

    def learn(self, features: Iterable, label: Any) -> None:
        """Count one occurrence of ``label`` for the sequence ``features``."""
        self._trie[features][label] += 1
        self._samples += 1
        logger.debug("Learned label %r (%d samples)", label, self._samples)

    def _candidates(self, features: Iterable, sink) -> None:
        # Paths that are only prefixes of longer learned sequences carry an
        # empty map and are not neighbours.
        def report(score, labels):
            if labels:
                sink(score, labels)

        compare(self._trie, features, self.score_function, report)

    def nearest(self, features: Iterable, k: int) -> List[Tuple[Any, LabelFrequencies]]:
        """Return the ``k`` best ``(score, labels)`` neighbours, best first."""
        k_best = KBest(k)
        self._candidates(features, k_best.store_if_better)
        return k_best.entries()

    def classify(self, features: Iterable, k: Optional[int] = None) -> Any:
        """Predict a label for ``features``.

        Args:
            features: Query sequence
            k: Number of neighbours that vote; defaults to ``config.k``.
                None uses only the single best-scoring neighbour.

        Returns:
            The majority label, or ``config.default_label`` when no learned
            sequence has the same length as ``features``

        With single-best voting the first candidate is accepted whatever
        its score, so a query that shares no element with any learned
        sequence of its length still gets a label. Only an empty candidate
        set falls back to ``config.default_label``.
        """
        if k is None:
            k = self.config.k
        default = self.config.default_label

        if k is None:
            best: List[Any] = []

            def keep_best(score, labels):
                if not best or score > best[0]:
                    best[:] = [score, labels]

            self._candidates(features, keep_best)
            label = majority_vote(best[1], default) if best else default
            logger.debug("Single-best classification: score=%r label=%r",
                         best[0] if best else None, label)
            return label

        k_best = KBest(k)
        self._candidates(features, k_best.store_if_better)
        label = majority_vote(k_best.label_frequencies(), default)
        logger.debug("k-best classification: k=%d neighbours=%d label=%r", k, len(k_best), label)
        return label

    def __str__(self) -> str:
        return self._trie.format()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(samples={self._samples}, strategy={self.config.strategy.value})"
