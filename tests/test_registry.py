"""
Tests for the algorithm registry.
"""

import pytest

from src.algorithms.kmp_search import KmpMatcher
from src.algorithms.naive_search import NaiveMatcher
from src.algorithms.rabin_karp_search import (
    HashVariant,
    RabinKarpConfig,
    RabinKarpMatcher,
)
from src.algorithms.registry import (
    ALGORITHM_INFO,
    ALGORITHM_ORDER,
    AlgorithmName,
    create_matcher,
)


class TestAlgorithmName:
    """Test suite for AlgorithmName parsing."""

    @pytest.mark.parametrize(
        "alias,expected",
        [
            ("naive", AlgorithmName.NAIVE),
            ("NAIVE", AlgorithmName.NAIVE),
            ("brute-force", AlgorithmName.NAIVE),
            ("kmp", AlgorithmName.KMP),
            (" KMP ", AlgorithmName.KMP),
            ("rk", AlgorithmName.RABIN_KARP),
            ("rabinKarp", AlgorithmName.RABIN_KARP),
            ("rabin-karp", AlgorithmName.RABIN_KARP),
            ("rabin_karp", AlgorithmName.RABIN_KARP),
            (AlgorithmName.KMP, AlgorithmName.KMP),
        ],
    )
    def test_parse(self, alias, expected):
        assert AlgorithmName.parse(alias) is expected

    @pytest.mark.parametrize("alias", ["", "boyer-moore", "aho-corasick", "k mp"])
    def test_parse_unknown(self, alias):
        with pytest.raises(ValueError, match="Unknown algorithm"):
            AlgorithmName.parse(alias)

    def test_report_keys(self):
        assert [name.value for name in ALGORITHM_ORDER] == ["naive", "kmp", "rabinKarp"]


class TestCreateMatcher:
    """Test suite for create_matcher."""

    @pytest.mark.parametrize(
        "name,cls",
        [("naive", NaiveMatcher), ("kmp", KmpMatcher), ("rk", RabinKarpMatcher)],
    )
    def test_matcher_types(self, name, cls):
        assert isinstance(create_matcher(name), cls)

    def test_rabin_karp_config_forwarded(self):
        config = RabinKarpConfig(variant=HashVariant.ADDITIVE)

        matcher = create_matcher(AlgorithmName.RABIN_KARP, rabin_karp=config)

        assert matcher.config is config

    def test_fresh_instances(self):
        assert create_matcher("kmp") is not create_matcher("kmp")


class TestAlgorithmInfo:
    """Test suite for ALGORITHM_INFO."""

    def test_every_algorithm_documented(self):
        assert set(ALGORITHM_INFO) == set(AlgorithmName)

    def test_entries_populated(self):
        for info in ALGORITHM_INFO.values():
            assert info.title
            assert info.time_complexity.startswith(("O(", "Average"))
            assert len(info.steps) > 0
            assert len(info.pros) > 0 and len(info.cons) > 0
