"""
Tests for NaiveMatcher.

Tests cover match positions, comparison counting, boundaries, and invalid input.
"""

import pytest

from src.algorithms.algorithm import InvalidInputError, MatchResult
from src.algorithms.naive_search import NaiveMatcher


class TestNaiveMatcher:
    """Test suite for NaiveMatcher."""

    def setup_method(self):
        self.matcher = NaiveMatcher()

    def test_scenarios(self, scenario_texts):
        """Test every reference scenario."""
        for text, pattern, expected in scenario_texts:
            result = self.matcher.search(text, pattern)
            assert list(result.matches) == expected, (text, pattern)

    def test_result_type(self):
        result = self.matcher.search("abcabcabc", "abc")

        assert isinstance(result, MatchResult)
        assert isinstance(result.matches, tuple)
        assert result.elapsed_time_us >= 0.0

    @pytest.mark.parametrize(
        "text,pattern,expected_comparisons",
        [
            ("abcabcabc", "abc", 13),  # 3 + 1 + 1 + 3 + 1 + 1 + 3
            ("AAAAAAAAAB", "AAAAB", 30),  # 6 windows of 5 comparisons
            ("aab", "ab", 4),
            ("xyz", "q", 3),
        ],
    )
    def test_comparison_count(self, text, pattern, expected_comparisons):
        """Test one operation per character comparison, stopping at a mismatch."""
        assert self.matcher.search(text, pattern).operation_count == expected_comparisons

    def test_worst_case_quadratic(self):
        """Test (n-m+1)*m comparisons on the adversarial input."""
        n, m = 200, 10
        text = "A" * (n - 1) + "B"
        pattern = "A" * (m - 1) + "B"

        result = self.matcher.search(text, pattern)

        assert result.matches == (n - m,)
        assert result.operation_count == (n - m + 1) * m

    def test_pattern_longer_than_text(self):
        """Test the trivially-empty result performs no work."""
        result = self.matcher.search("ab", "abc")

        assert result == MatchResult.empty()

    def test_empty_text(self):
        assert self.matcher.search("", "a") == MatchResult.empty()

    def test_equal_length(self):
        assert self.matcher.search("abc", "abc").matches == (0,)
        assert self.matcher.search("abc", "abd").matches == ()

    def test_empty_pattern_raises(self):
        with pytest.raises(InvalidInputError):
            self.matcher.search("xyz", "")

    def test_case_sensitive(self):
        assert self.matcher.search("aAaA", "A").matches == (1, 3)

    def test_idempotent(self):
        first = self.matcher.search("ABABDABACDABABCABAB", "AB")
        second = self.matcher.search("ABABDABACDABABCABAB", "AB")

        assert first.matches == second.matches
        assert first.operation_count == second.operation_count

    def test_get_algorithm_name(self):
        assert self.matcher.get_algorithm_name() == "Naive"
