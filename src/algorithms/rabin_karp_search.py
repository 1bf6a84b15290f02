import time
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..data_structures.rolling_hash import (
    AdditiveRollingHash,
    PolynomialRollingHash,
    RollingHash,
)
from ..trace.steps import HashPair, StepIterator, StepState
from .algorithm import MatchResult, StringMatcher


class HashVariant(Enum):
    POLYNOMIAL = "polynomial"
    ADDITIVE = "additive"


@dataclass(frozen=True)
class RabinKarpConfig:
    """
    Hash configuration for Rabin-Karp.

    Attributes:
        variant: POLYNOMIAL (modular Horner hash) or ADDITIVE (letter weights,
                 collides on anagram windows)
        base: Alphabet radix d of the polynomial hash
        modulus: Prime modulus q of the polynomial hash
    """

    variant: HashVariant = HashVariant.POLYNOMIAL
    base: int = 256
    modulus: int = 101

    def __post_init__(self):
        if not isinstance(self.variant, HashVariant):
            raise ValueError(f"Unknown hash variant: {self.variant}")
        if self.base <= 0:
            raise ValueError("Base must be positive")
        if self.modulus <= 1:
            raise ValueError("Modulus must be greater than 1")

    def create_hash(self, text: str, width: int) -> RollingHash:
        """Rolling hash over text positioned at its first window."""
        if self.variant is HashVariant.ADDITIVE:
            return AdditiveRollingHash(text, width)
        return PolynomialRollingHash(text, width, base=self.base, modulus=self.modulus)


class RabinKarpMatcher(StringMatcher):
    """
    Rabin-Karp substring search.

    Compares the pattern hash against a rolling hash of each text window and
    verifies character by character only when the hashes are equal; equal
    hashes do not imply equal strings.

    operation_count = initial hashing + one per window + verification comparisons

    Time Complexity: O(n + m) average, O(n * m) worst case (many collisions)
    Space Complexity: O(1)
    """

    def __init__(self, config: Optional[RabinKarpConfig] = None):
        self.config = config or RabinKarpConfig()

    def search(self, text: str, pattern: str) -> MatchResult:
        """
        Find every occurrence of pattern in text using the configured hash.

        Args:
            text: The text to search in
            pattern: The pattern to search for

        Returns:
            A MatchResult with hash_collisions set to the number of windows
            rejected during character verification
        """
        self.validate_input(text, pattern)
        n, m = len(text), len(pattern)
        if m > n:
            return MatchResult.empty()

        start_time = time.perf_counter()

        window = self.config.create_hash(text, m)
        pattern_hash = window.hash_of(pattern)
        operations = window.operations
        collisions = 0
        matches = []

        for i in range(n - m + 1):
            operations += 1
            if window.value == pattern_hash:
                j = 0
                while j < m:
                    operations += 1
                    if text[i + j] != pattern[j]:
                        break
                    j += 1
                if j == m:
                    matches.append(i)
                else:
                    collisions += 1

            if window.can_advance():
                window.advance()

        end_time = time.perf_counter()
        elapsed_us = (end_time - start_time) * 1_000_000

        return MatchResult(
            matches=tuple(matches),
            elapsed_time_us=elapsed_us,
            operation_count=operations,
            hash_collisions=collisions,
        )

    def create_trace(self, text: str, pattern: str) -> "RabinKarpTrace":
        return RabinKarpTrace(text, pattern, self.config)

    def get_algorithm_name(self) -> str:
        return "Rabin-Karp"


class RabinKarpTrace(StepIterator):
    """Step-by-step replay of RabinKarpMatcher."""

    def __init__(self, text: str, pattern: str, config: RabinKarpConfig):
        super().__init__(text, pattern)
        self.config = config
        self.window: Optional[RollingHash] = None
        self.pattern_hash = 0
        self.window_start = 0
        self.offset = 0
        self._phase = "init"

    def _hashes(self) -> HashPair:
        return HashPair(pattern_hash=self.pattern_hash, window_hash=self.window.value)

    def _advance(self) -> None:
        if self._phase == "init":
            if self.m > self.n:
                self._emit(
                    StepState.INIT,
                    message="Pattern is longer than text, nothing to hash",
                )
                self._finish()
                return
            self.window = self.config.create_hash(self.text, self.m)
            self.pattern_hash = self.window.hash_of(self.pattern)
            self._emit(
                StepState.INIT,
                message=f"{self.config.variant.value} hash of pattern and first window",
                auxiliary=self._hashes(),
            )
            self._phase = "window"
            return

        if self._phase == "window":
            self._check_window()
        elif self._phase == "verify":
            self._verify()
        else:
            self._roll()

    def _check_window(self) -> None:
        i = self.window_start
        hashes = self._hashes()
        self._emit(
            StepState.WINDOW,
            i,
            0,
            f"Checking hash: P({hashes.pattern_hash}) vs T({hashes.window_hash})",
            hashes,
        )
        if hashes.pattern_hash == hashes.window_hash:
            self._emit(
                StepState.HASH_MATCH,
                i,
                0,
                "Hash match, checking characters",
                hashes,
            )
            self.offset = 0
            self._phase = "verify"
        else:
            self._emit(StepState.HASH_MISMATCH, i, 0, "Hash mismatch", hashes)
            self._phase = "roll"

    def _verify(self) -> None:
        i, j = self.window_start, self.offset
        if not self._compare(i + j, j):
            self._phase = "roll"
            return

        self.offset += 1
        if self.offset == self.m:
            self._emit(
                StepState.FOUND,
                i,
                self.m - 1,
                f"Pattern found at index {i}",
                self._hashes(),
            )
            self._phase = "roll"

    def _roll(self) -> None:
        if not self.window.can_advance():
            self._finish()
            return
        self.window.advance()
        self.window_start += 1
        self._phase = "window"
