"""
Tests for LpsBuilder and LpsTable.

Tests cover known tables, table invariants, comparison counting, and edge cases.
"""

import random

import pytest

from src.data_structures.lps_table import LpsBuilder, LpsTable


def brute_force_lps(pattern):
    """LPS straight from the definition, for cross-checking."""
    table = []
    for i in range(len(pattern)):
        prefix = pattern[: i + 1]
        best = 0
        for length in range(1, i + 1):
            if prefix[:length] == prefix[-length:]:
                best = length
        table.append(best)
    return table


class TestLpsBuilder:
    """Test suite for LpsBuilder."""

    def setup_method(self):
        self.builder = LpsBuilder()

    @pytest.mark.parametrize(
        "pattern,expected",
        [
            ("ABABCABAB", [0, 0, 1, 2, 0, 1, 2, 3, 4]),
            ("AAAAB", [0, 1, 2, 3, 0]),
            ("AAAA", [0, 1, 2, 3]),
            ("AABAACAABAA", [0, 1, 0, 1, 2, 0, 1, 2, 3, 4, 5]),
            ("abcd", [0, 0, 0, 0]),
            ("aabaaab", [0, 1, 0, 1, 2, 2, 3]),
            ("a", [0]),
        ],
    )
    def test_known_tables(self, pattern, expected):
        """Test tables for well-known patterns."""
        table = self.builder.build(pattern)

        assert list(table) == expected
        assert len(table) == len(pattern)

    def test_empty_pattern(self):
        """Test that an empty pattern yields an empty table."""
        table = self.builder.build("")

        assert table.values == ()
        assert table.comparisons == 0

    def test_comparisons_counted_per_iteration(self):
        """Test that fallback iterations are counted too."""
        # i=1..3 extend the prefix; at i=4 'B' falls back 3 -> 2 -> 1 -> 0
        assert self.builder.build("AAAAB").comparisons == 7
        assert self.builder.build("abc").comparisons == 2
        assert self.builder.build("a").comparisons == 0

    def test_invariants_random_patterns(self):
        """Test lps[0] == 0 and lps[i] <= i against the definition."""
        rng = random.Random(1234)

        for _ in range(300):
            pattern = "".join(rng.choice("ab") for _ in range(rng.randint(1, 15)))
            table = self.builder.build(pattern)

            assert table[0] == 0
            assert all(0 <= value <= i for i, value in enumerate(table))
            assert list(table) == brute_force_lps(pattern)

    def test_comparisons_linear_bound(self):
        """Test construction stays within 2m comparisons."""
        rng = random.Random(99)

        for _ in range(100):
            pattern = "".join(rng.choice("aab") for _ in range(rng.randint(1, 40)))
            assert self.builder.build(pattern).comparisons <= 2 * len(pattern)

    def test_deterministic(self):
        """Test repeated builds produce equal tables."""
        assert self.builder.build("ABABCABAB") == self.builder.build("ABABCABAB")


class TestLpsTable:
    """Test suite for LpsTable sequence behavior."""

    def test_sequence_protocol(self):
        table = LpsTable(values=(0, 1, 2), comparisons=2)

        assert len(table) == 3
        assert table[2] == 2
        assert list(table) == [0, 1, 2]

    @pytest.mark.parametrize("matched,expected", [(0, 0), (1, 0), (3, 1), (5, 3)])
    def test_fallback(self, matched, expected):
        """Test fallback reads lps[matched - 1], 0 for nothing matched."""
        table = LpsTable(values=(0, 0, 1, 2, 3))

        assert table.fallback(matched) == expected

    def test_immutable(self):
        table = LpsTable(values=(0, 1))

        with pytest.raises(AttributeError):
            table.values = (0, 0)
