"""
Longest proper prefix which is also a suffix (LPS) table for KMP.

Definition:
- lps[i] = length of the longest proper prefix of pattern[0..i] that is also
  a suffix of pattern[0..i]
- lps[0] = 0 and 0 <= lps[i] <= i

The fallback branch (length = lps[length - 1]) neither advances the cursor nor
writes the table; it is what keeps construction amortized O(m).
"""

from dataclasses import dataclass
from typing import Iterator, List, Tuple


@dataclass(frozen=True)
class LpsTable:
    """
    Immutable LPS table.

    Attributes:
        values: The table, one entry per pattern character
        comparisons: Character comparisons performed while building it
    """

    values: Tuple[int, ...]
    comparisons: int = 0

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, idx: int) -> int:
        return self.values[idx]

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)

    def fallback(self, matched: int) -> int:
        """Pattern cursor to resume from after `matched` characters matched."""
        if matched <= 0:
            return 0
        return self.values[matched - 1]


class LpsBuilder:
    """Builds the LPS table of a pattern in O(m) time and space."""

    def build(self, pattern: str) -> LpsTable:
        """
        Compute the LPS table for pattern.

        An empty pattern yields an empty table; matchers reject empty
        patterns before getting here.
        """
        m = len(pattern)
        lps: List[int] = [0] * m
        comparisons = 0

        length = 0
        i = 1
        while i < m:
            comparisons += 1
            if pattern[i] == pattern[length]:
                length += 1
                lps[i] = length
                i += 1
            elif length != 0:
                length = lps[length - 1]
            else:
                lps[i] = 0
                i += 1

        return LpsTable(values=tuple(lps), comparisons=comparisons)
