import time

from ..trace.steps import StepIterator, StepState
from .algorithm import MatchResult, StringMatcher


class NaiveMatcher(StringMatcher):
    """
    Brute-force substring search.

    Slides the pattern over every candidate start position and compares
    left to right until the first mismatch.

    Time Complexity: O((n-m+1) * m) worst case, e.g. text AAAA...B, pattern AAB
    Space Complexity: O(1)
    """

    def search(self, text: str, pattern: str) -> MatchResult:
        """
        Find every occurrence of pattern in text by brute force.

        Args:
            text: The text to search in
            pattern: The pattern to search for

        Returns:
            A MatchResult counting one operation per character comparison
        """
        self.validate_input(text, pattern)
        n, m = len(text), len(pattern)
        if m > n:
            return MatchResult.empty()

        start_time = time.perf_counter()
        comparisons = 0
        matches = []

        for i in range(n - m + 1):
            j = 0
            while j < m:
                comparisons += 1
                if text[i + j] != pattern[j]:
                    break
                j += 1
            if j == m:
                matches.append(i)

        end_time = time.perf_counter()
        elapsed_us = (end_time - start_time) * 1_000_000

        return MatchResult(
            matches=tuple(matches),
            elapsed_time_us=elapsed_us,
            operation_count=comparisons,
        )

    def create_trace(self, text: str, pattern: str) -> "NaiveTrace":
        return NaiveTrace(text, pattern)

    def get_algorithm_name(self) -> str:
        return "Naive"


class NaiveTrace(StepIterator):
    """Step-by-step replay of NaiveMatcher."""

    def __init__(self, text: str, pattern: str):
        super().__init__(text, pattern)
        self.window_start = 0
        self.offset = 0
        self._phase = "init"

    def _advance(self) -> None:
        if self._phase == "init":
            self._emit(
                StepState.INIT,
                message=f"Searching for {self.pattern!r} in text of length {self.n}",
            )
            self._phase = "window"
            return

        if self._phase == "window":
            if self.window_start > self.n - self.m:
                self._finish()
                return
            self._emit(
                StepState.WINDOW,
                self.window_start,
                0,
                f"Checking window at index {self.window_start}",
            )
            self.offset = 0
            self._phase = "compare"
            return

        i, j = self.window_start, self.offset
        if not self._compare(i + j, j):
            self.window_start += 1
            self._phase = "window"
            return

        self.offset += 1
        if self.offset == self.m:
            self._emit(
                StepState.FOUND,
                i,
                self.m - 1,
                f"Pattern found starting at index {i}",
            )
            self.window_start += 1
            self._phase = "window"
