"""
Trace emission and replay.

TraceEmitter turns any StringMatcher into a lazy sequence of Step values;
TracePlayer caches pulled steps so a renderer can scrub forward and back
without running the algorithm again. Playback speed and scheduling belong to
the caller.
"""

from typing import Iterator, List, Optional, Tuple, Union

from ..algorithms.algorithm import StringMatcher
from ..algorithms.rabin_karp_search import RabinKarpConfig
from ..algorithms.registry import AlgorithmName, create_matcher
from .steps import Step, StepIterator, StepState


class TraceEmitter:
    """Wraps a matcher to produce its step sequence instead of a MatchResult."""

    def __init__(self, matcher: StringMatcher):
        self.matcher = matcher

    def trace(self, text: str, pattern: str) -> StepIterator:
        """
        Start a trace of the wrapped matcher.

        Raises:
            InvalidInputError: If the pattern is empty or inputs are not strings
        """
        self.matcher.validate_input(text, pattern)
        return self.matcher.create_trace(text, pattern)

    def materialize(self, text: str, pattern: str) -> Tuple[Step, ...]:
        """Run the trace to completion and return every step."""
        return tuple(self.trace(text, pattern))


def trace(
    text: str,
    pattern: str,
    algorithm: Union[str, AlgorithmName] = AlgorithmName.NAIVE,
    rabin_karp: Optional[RabinKarpConfig] = None,
) -> StepIterator:
    """Lazy step sequence of `algorithm` searching for pattern in text."""
    return TraceEmitter(create_matcher(algorithm, rabin_karp)).trace(text, pattern)


class TracePlayer:
    """
    Cursor over a step sequence with backward navigation.

    Steps are pulled from the source only when the cursor moves past what has
    already been cached; moving back reads from the cache.
    """

    def __init__(self, steps: Iterator[Step]):
        self._source = iter(steps)
        self._history: List[Step] = []
        self._exhausted = False
        self.position = -1

    def __len__(self) -> int:
        """Number of steps pulled so far."""
        return len(self._history)

    @property
    def current(self) -> Optional[Step]:
        if self.position < 0:
            return None
        return self._history[self.position]

    @property
    def is_finished(self) -> bool:
        step = self.current
        return step is not None and step.state is StepState.FINISHED

    def _pull(self) -> bool:
        if self._exhausted:
            return False
        try:
            self._history.append(next(self._source))
        except StopIteration:
            self._exhausted = True
            return False
        return True

    def step_forward(self) -> Optional[Step]:
        """Move one step forward; returns None once the sequence is over."""
        if self.position + 1 >= len(self._history) and not self._pull():
            return None
        self.position += 1
        return self._history[self.position]

    def step_back(self) -> Optional[Step]:
        """Move one step back; returns None once the cursor is before the first step."""
        if self.position < 0:
            return None
        self.position -= 1
        return self.current

    def seek(self, index: int) -> Step:
        """Jump to the step at `index`, pulling from the source as needed."""
        if index < 0:
            raise IndexError("Step index must be non-negative")
        while index >= len(self._history):
            if not self._pull():
                raise IndexError(f"Trace has only {len(self._history)} steps")
        self.position = index
        return self._history[index]

    def reset(self) -> None:
        """Rewind to before the first step, keeping the cache."""
        self.position = -1

    def found_indices(self) -> List[int]:
        """Match start positions revealed up to and including the cursor."""
        return [
            step.text_index
            for step in self._history[: self.position + 1]
            if step.state is StepState.FOUND
        ]
