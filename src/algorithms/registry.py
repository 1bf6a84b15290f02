from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple, Union

from .algorithm import StringMatcher
from .kmp_search import KmpMatcher
from .naive_search import NaiveMatcher
from .rabin_karp_search import RabinKarpConfig, RabinKarpMatcher


class AlgorithmName(Enum):
    """The fixed set of search strategies, valued by their report keys."""

    NAIVE = "naive"
    KMP = "kmp"
    RABIN_KARP = "rabinKarp"

    @classmethod
    def parse(cls, name: Union[str, "AlgorithmName"]) -> "AlgorithmName":
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower()
        if key not in _ALIASES:
            raise ValueError(f"Unknown algorithm: {name}")
        return _ALIASES[key]


_ALIASES = {
    "naive": AlgorithmName.NAIVE,
    "brute-force": AlgorithmName.NAIVE,
    "brute_force": AlgorithmName.NAIVE,
    "kmp": AlgorithmName.KMP,
    "rk": AlgorithmName.RABIN_KARP,
    "rabinkarp": AlgorithmName.RABIN_KARP,
    "rabin-karp": AlgorithmName.RABIN_KARP,
    "rabin_karp": AlgorithmName.RABIN_KARP,
}

ALGORITHM_ORDER: Tuple[AlgorithmName, ...] = (
    AlgorithmName.NAIVE,
    AlgorithmName.KMP,
    AlgorithmName.RABIN_KARP,
)


def create_matcher(
    algorithm: Union[str, AlgorithmName],
    rabin_karp: Optional[RabinKarpConfig] = None,
) -> StringMatcher:
    """Instantiate the matcher for an algorithm name or alias."""
    name = AlgorithmName.parse(algorithm)
    if name is AlgorithmName.NAIVE:
        return NaiveMatcher()
    if name is AlgorithmName.KMP:
        return KmpMatcher()
    return RabinKarpMatcher(rabin_karp)


@dataclass(frozen=True)
class AlgorithmInfo:
    """Reference notes shown next to a visualization."""

    title: str
    time_complexity: str
    space_complexity: str
    description: str
    steps: Tuple[str, ...]
    pros: Tuple[str, ...]
    cons: Tuple[str, ...]


ALGORITHM_INFO: Dict[AlgorithmName, AlgorithmInfo] = {
    AlgorithmName.NAIVE: AlgorithmInfo(
        title="Naive String Matching",
        time_complexity="O((n-m+1) * m)",
        space_complexity="O(1)",
        description=(
            "Slides the pattern over the text one position at a time and "
            "compares characters left to right at each position."
        ),
        steps=(
            "Align the pattern with the beginning of the text.",
            "Compare characters from left to right.",
            "On a mismatch, shift the pattern one position to the right.",
            "On a full match, record the index and keep shifting.",
        ),
        pros=("Simple to implement", "No preprocessing required"),
        cons=("Quadratic worst case, e.g. text AAAA...B with pattern AAAB",),
    ),
    AlgorithmName.KMP: AlgorithmInfo(
        title="Knuth-Morris-Pratt (KMP)",
        time_complexity="O(n + m)",
        space_complexity="O(m)",
        description=(
            "Preprocesses the pattern into an LPS table that tells how far the "
            "pattern cursor can fall back on a mismatch, so the text cursor "
            "never moves backwards."
        ),
        steps=(
            "Build the longest-prefix-suffix (LPS) table of the pattern.",
            "Compare text and pattern characters; on a match advance both cursors.",
            "On a mismatch fall back the pattern cursor using the LPS table.",
            "Continue until the end of the text.",
        ),
        pros=("Linear time", "No backtracking in the text"),
        cons=("Extra O(m) table", "More involved to implement"),
    ),
    AlgorithmName.RABIN_KARP: AlgorithmInfo(
        title="Rabin-Karp",
        time_complexity="Average O(n + m), worst O(n * m)",
        space_complexity="O(1)",
        description=(
            "Hashes the pattern and every text window of the same length with a "
            "rolling hash and compares characters only when the hashes match."
        ),
        steps=(
            "Hash the pattern and the first text window.",
            "Slide the window one character at a time, updating its hash in O(1).",
            "When the hashes match, verify character by character.",
        ),
        pros=("Rolling hash makes window updates O(1)",),
        cons=("Slow when many windows collide", "Hashing overhead"),
    ),
}
