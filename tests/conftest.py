"""
Pytest configuration and fixtures for MatchMach tests.

This file contains shared fixtures and configuration for all test modules.
"""

import sys
from pathlib import Path

import matplotlib
import pytest

# Plots are written to files during tests, never shown
matplotlib.use("Agg")

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def scenario_texts():
    """Reference (text, pattern, expected matches) triples."""
    return [
        ("ABABDABACDABABCABAB", "ABABCABAB", [10]),
        ("AAAAAAAAAB", "AAAAB", [5]),
        ("abcabcabc", "abc", [0, 3, 6]),
        ("aaaaa", "aa", [0, 1, 2, 3]),
        ("abracadabra", "abra", [0, 7]),
        ("abc", "abcd", []),
        ("abc", "abc", [0]),
        ("abc", "abd", []),
    ]


@pytest.fixture
def all_matchers():
    """One instance of every matcher with default configuration."""
    from src.algorithms.kmp_search import KmpMatcher
    from src.algorithms.naive_search import NaiveMatcher
    from src.algorithms.rabin_karp_search import RabinKarpMatcher

    return [NaiveMatcher(), KmpMatcher(), RabinKarpMatcher()]


# Configure pytest markers
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


# Custom collection modifiers
def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers automatically."""
    for item in items:
        if "integration" in item.nodeid or "test_integration" in item.nodeid:
            item.add_marker(pytest.mark.integration)

        if any(keyword in item.nodeid for keyword in ["large", "stress"]):
            item.add_marker(pytest.mark.slow)

        if not any(
            marker.name in ["integration", "slow"] for marker in item.iter_markers()
        ):
            item.add_marker(pytest.mark.unit)


# Pytest options
def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-slow", action="store_true", default=False, help="run slow tests"
    )


def pytest_runtest_setup(item):
    """Skip slow tests unless --run-slow is passed."""
    if "slow" in item.keywords and not item.config.getoption("--run-slow"):
        pytest.skip("need --run-slow option to run")
