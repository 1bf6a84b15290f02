import time
from typing import Optional

from ..data_structures.lps_table import LpsBuilder, LpsTable
from ..trace.steps import LpsSnapshot, StepIterator, StepState
from .algorithm import MatchResult, StringMatcher


class KmpMatcher(StringMatcher):
    """
    Knuth-Morris-Pratt substring search.

    Preprocesses the pattern into an LPS table and uses it to fall back the
    pattern cursor on a mismatch, so the text cursor never moves backwards.
    The comparisons spent building the table are part of operation_count.

    Time Complexity: O(n + m)
    Space Complexity: O(m) for the LPS table
    """

    def __init__(self, lps_builder: Optional[LpsBuilder] = None):
        self.lps_builder = lps_builder or LpsBuilder()

    def search(self, text: str, pattern: str) -> MatchResult:
        """
        Find every occurrence of pattern in text, overlapping ones included.

        Args:
            text: The text to search in
            pattern: The pattern to search for

        Returns:
            A MatchResult whose operation_count includes the LPS comparisons
        """
        self.validate_input(text, pattern)
        n, m = len(text), len(pattern)
        if m > n:
            return MatchResult.empty()

        start_time = time.perf_counter()

        lps = self.lps_builder.build(pattern)
        comparisons = lps.comparisons
        matches = []

        text_idx = pat_idx = 0
        while text_idx < n:
            comparisons += 1
            if text[text_idx] == pattern[pat_idx]:
                text_idx += 1
                pat_idx += 1
                if pat_idx == m:
                    matches.append(text_idx - m)
                    pat_idx = lps[m - 1]
            elif pat_idx != 0:
                pat_idx = lps[pat_idx - 1]
            else:
                text_idx += 1

        end_time = time.perf_counter()
        elapsed_us = (end_time - start_time) * 1_000_000

        return MatchResult(
            matches=tuple(matches),
            elapsed_time_us=elapsed_us,
            operation_count=comparisons,
        )

    def create_trace(self, text: str, pattern: str) -> "KmpTrace":
        return KmpTrace(text, pattern, self.lps_builder.build(pattern))

    def get_algorithm_name(self) -> str:
        return "KMP"


class KmpTrace(StepIterator):
    """Step-by-step replay of KmpMatcher."""

    def __init__(self, text: str, pattern: str, lps: LpsTable):
        super().__init__(text, pattern)
        self.lps = lps
        self.snapshot = LpsSnapshot(values=lps.values)
        self.text_idx = 0
        self.pat_idx = 0
        self._started = False

    def _advance(self) -> None:
        if not self._started:
            self._started = True
            self._emit(
                StepState.INIT,
                message=f"LPS table for {self.pattern!r}: {list(self.lps.values)}",
                auxiliary=self.snapshot,
            )
            if self.m > self.n:
                self._finish()
            return

        if self.text_idx >= self.n:
            self._finish()
            return

        if self._compare(self.text_idx, self.pat_idx):
            self.text_idx += 1
            self.pat_idx += 1
            if self.pat_idx == self.m:
                start = self.text_idx - self.m
                self._emit(
                    StepState.FOUND,
                    start,
                    self.m - 1,
                    f"Pattern found at index {start}",
                    self.snapshot,
                )
                self.pat_idx = self.lps.fallback(self.m)
        elif self.pat_idx != 0:
            fallback = self.lps.fallback(self.pat_idx)
            self._emit(
                StepState.SHIFT,
                self.text_idx,
                self.pat_idx,
                f"Mismatch after partial match, pattern cursor falls back to {fallback}",
                self.snapshot,
            )
            self.pat_idx = fallback
        else:
            self.text_idx += 1
