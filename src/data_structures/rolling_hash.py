"""
Rolling hashes over a fixed-width window of a text.

Polynomial (Rabin-Karp) hash:
- H(s) = (s[0]*d^(m-1) + s[1]*d^(m-2) + ... + s[m-1]) mod q, by Horner's method
- Slide by one: H' = (d*(H - s[i]*h) + s[i+m]) mod q, where h = d^(m-1) mod q
- H - s[i]*h can be negative; the result is normalized into [0, q)

Additive character-weight hash:
- H(s) = sum of weight(c) for c in s, weight = 1-based alphabet position
  (case-insensitive), 0 for anything that is not an ASCII letter
- Slide by one: H' = H - weight(s[i]) + weight(s[i+m])
- Every permutation of a window hashes the same, so anagram windows collide.
"""

import string
from abc import ABC, abstractmethod

_ALPHABET = string.ascii_lowercase


def char_weight(ch: str) -> int:
    """Alphabet position of an ASCII letter (a/A = 1 .. z/Z = 26), else 0."""
    lowered = ch.lower()
    if len(lowered) == 1 and lowered in _ALPHABET:
        return ord(lowered) - ord("a") + 1
    return 0


class RollingHash(ABC):
    """
    Hash of a fixed-width window that slides over a text one character at a time.

    The window starts at position 0. ``operations`` counts the preprocessing
    work done to hash the first window; rolling updates are counted by the
    caller, one per window examined.
    """

    def __init__(self, text: str, width: int):
        if width <= 0:
            raise ValueError("Window width must be positive")
        if width > len(text):
            raise ValueError("Window width cannot exceed text length")

        self.text = text
        self.width = width
        self.position = 0
        self.operations = 0
        self.value = self._initial_hash()

    @abstractmethod
    def hash_of(self, chunk: str) -> int:
        """Hash a string directly, without rolling."""
        pass

    @abstractmethod
    def _initial_hash(self) -> int:
        """Hash the first window, counting preprocessing operations."""
        pass

    @abstractmethod
    def _roll(self, leaving: str, entering: str) -> int:
        """Hash of the next window given the character leaving and entering it."""
        pass

    @property
    def window(self) -> str:
        return self.text[self.position : self.position + self.width]

    def can_advance(self) -> bool:
        return self.position + self.width < len(self.text)

    def advance(self) -> int:
        """Slide the window one position to the right in O(1)."""
        if not self.can_advance():
            raise IndexError("Window is already at the end of the text")

        leaving = self.text[self.position]
        entering = self.text[self.position + self.width]
        self.value = self._roll(leaving, entering)
        self.position += 1
        return self.value


class PolynomialRollingHash(RollingHash):
    """Modular polynomial hash with radix `base` and prime modulus `modulus`."""

    def __init__(self, text: str, width: int, base: int = 256, modulus: int = 101):
        if base <= 0:
            raise ValueError("Base must be positive")
        if modulus <= 1:
            raise ValueError("Modulus must be greater than 1")

        self.base = base
        self.modulus = modulus
        super().__init__(text, width)

    def hash_of(self, chunk: str) -> int:
        value = 0
        for ch in chunk:
            value = (self.base * value + ord(ch)) % self.modulus
        return value

    def _initial_hash(self) -> int:
        # h = base^(width-1) mod modulus, weight of the leading character
        high_order = 1
        for _ in range(self.width - 1):
            high_order = (high_order * self.base) % self.modulus
            self.operations += 1
        self._high_order = high_order

        value = 0
        for i in range(self.width):
            value = (self.base * value + ord(self.text[i])) % self.modulus
            self.operations += 1
        return value

    def _roll(self, leaving: str, entering: str) -> int:
        value = self.base * (self.value - ord(leaving) * self._high_order)
        value += ord(entering)
        # Python's % takes the sign of the modulus, so the residue lands in [0, q)
        return value % self.modulus


class AdditiveRollingHash(RollingHash):
    """Sum of character weights; see char_weight."""

    def hash_of(self, chunk: str) -> int:
        return sum(char_weight(ch) for ch in chunk)

    def _initial_hash(self) -> int:
        value = 0
        for i in range(self.width):
            value += char_weight(self.text[i])
            self.operations += 1
        return value

    def _roll(self, leaving: str, entering: str) -> int:
        return self.value - char_weight(leaving) + char_weight(entering)
