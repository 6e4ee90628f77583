"""Score protocol and fixed-length comparison for seqtrie.

A ScoreFunction folds a query pattern against one trie path, element by
element: ``score = step(score, pattern_element, path_element)`` starting from
``init()``. ``compare`` runs that fold along every path whose length equals
the pattern's length and reports the final score with the path's data.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Iterable, List

if TYPE_CHECKING:
    from .trie import Trie


class ScoreFunction(ABC):
    """Abstract base class for element-wise scoring strategies.

    Implementations define the starting score and how one aligned pair of
    elements changes it. Instances are also callable, ``score_function(score,
    a, b)`` being ``step(score, a, b)``.
    """

    @abstractmethod
    def init(self) -> Any:
        """Return the starting score for a new path."""
        pass

    @abstractmethod
    def step(self, score: Any, pattern_element: Any, path_element: Any) -> Any:
        """Combine the running score with one aligned pair of elements.

        Args:
            score: Score accumulated over the preceding elements
            pattern_element: Element of the query pattern
            path_element: Element of the trie path at the same position

        Returns:
            The new running score
        """
        pass

    def __call__(self, score: Any, pattern_element: Any, path_element: Any) -> Any:
        return self.step(score, pattern_element, path_element)


class OverlapScore(ScoreFunction):
    """Counts the positions where pattern and path hold equal elements.

    Higher is closer; a path identical to the pattern scores its length.
    """

    def init(self) -> int:
        return 0

    def match(self, lhs: Any, rhs: Any) -> int:
        """Return 1 for equal elements, 0 otherwise."""
        return 1 if lhs == rhs else 0

    def step(self, score: int, pattern_element: Any, path_element: Any) -> int:
        return score + self.match(pattern_element, path_element)


class CustomScore(ScoreFunction):
    """Score function built from plain callables.

    Allows custom scoring without subclassing.
    """

    def __init__(self, init_func: Callable[[], Any],
                 step_func: Callable[[Any, Any, Any], Any]):
        """Initialize with custom functions.

        Args:
            init_func: Function() -> starting score
            step_func: Function(score, pattern_element, path_element) -> score
        """
        self.init_func = init_func
        self.step_func = step_func

    def init(self) -> Any:
        return self.init_func()

    def step(self, score: Any, pattern_element: Any, path_element: Any) -> Any:
        return self.step_func(score, pattern_element, path_element)


def compare(trie: 'Trie',
            pattern: Iterable,
            score_function: ScoreFunction,
            result: Callable[[Any, Any], Any]) -> None:
    """Score ``pattern`` against every trie path of the same length.

    For each path with exactly as many edges as ``pattern`` has elements,
    ``result(score, data)`` is called once with the folded score and the data
    of the path's last node. Shorter paths never reach the cutoff and longer
    paths are cut off at it, so neither is reported. Every path keeps its own
    running score; siblings never see each other's partial scores.

    An empty pattern matches only the root, which is reported with
    ``score_function.init()``.

    Args:
        trie: Trie to search
        pattern: Query sequence (iterated once)
        score_function: Scoring strategy; any object with ``init()`` and
            ``step(score, pattern_element, path_element)`` will do
        result: Callback receiving ``(score, data)``
    """
    elements = list(pattern)
    length = len(elements)
    if not length:
        result(score_function.init(), trie.data)
        return

    # scores[d] is the running score of the node currently visited at depth d.
    scores: List[Any] = [score_function.init()] * (length + 1)

    def visit(element, data, depth):
        scores[depth] = score_function.step(scores[depth - 1], elements[depth - 1], element)
        if depth == length:
            result(scores[depth], data)
            return False
        return True

    trie.each_elem_with_depth(visit)
