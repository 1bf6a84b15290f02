from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Tuple


class InvalidInputError(ValueError):
    """Raised when a text/pattern pair violates the matcher input contract."""


@dataclass(frozen=True)
class MatchResult:
    """
    Result of a substring search.

    Attributes:
        matches: Start index of every occurrence, strictly increasing
        elapsed_time_us: Wall-clock time of the search in microseconds
        operation_count: Character comparisons and hash updates performed
        hash_collisions: Windows whose hash matched but whose characters did not
                         (hash-based algorithms only)
    """

    matches: Tuple[int, ...]
    elapsed_time_us: float
    operation_count: int
    hash_collisions: int = 0

    @classmethod
    def empty(cls) -> "MatchResult":
        """Zeroed result for inputs that cannot contain a match."""
        return cls(matches=(), elapsed_time_us=0.0, operation_count=0)

    @property
    def found(self) -> bool:
        return len(self.matches) > 0

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the field names of the comparison endpoint."""
        return {
            "matches": list(self.matches),
            "time": self.elapsed_time_us,
            "steps": self.operation_count,
        }


class StringMatcher(ABC):
    """
    Abstract base class for substring search algorithms.

    Every implementation offers two views of the same algorithm: ``search``
    runs it to completion and returns a MatchResult, ``create_trace`` returns a
    step iterator that replays its internal progress for visualization.
    """

    @abstractmethod
    def search(self, text: str, pattern: str) -> MatchResult:
        """
        Find every occurrence of pattern in text.

        Args:
            text: The text to search in
            pattern: The pattern to search for

        Returns:
            A MatchResult with the match positions, timing and operation count

        Raises:
            InvalidInputError: If the pattern is empty or the inputs are not strings
        """
        pass

    @abstractmethod
    def create_trace(self, text: str, pattern: str):
        """
        Create a step iterator over the algorithm's progress.

        Inputs are assumed validated; use TraceEmitter for the checked entry point.
        """
        pass

    @abstractmethod
    def get_algorithm_name(self) -> str:
        """
        Get the name of the algorithm.

        Returns:
            A string representing the algorithm name
        """
        pass

    def validate_input(self, text: str, pattern: str) -> None:
        """
        Check the text/pattern pair before running the algorithm.

        Raises:
            InvalidInputError: If either input is not a string or the pattern is empty
        """
        if not isinstance(text, str) or not isinstance(pattern, str):
            raise InvalidInputError("Text and pattern must be strings")
        if len(pattern) == 0:
            raise InvalidInputError("Pattern must not be empty")

    def __str__(self) -> str:
        """String representation of the algorithm."""
        return f"{self.get_algorithm_name()}"
