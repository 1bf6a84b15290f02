"""
Benchmarking module for substring search algorithms.

Runs the naive, KMP and Rabin-Karp matchers on identical input and reports
match positions, elapsed time and operation counts side by side.
"""

from .benchmark import (
    BenchmarkConfig,
    BenchmarkReport,
    BenchmarkResult,
    BenchmarkRunner,
    print_report,
)
from .submission import handle_compare_request

__all__ = [
    "BenchmarkConfig",
    "BenchmarkReport",
    "BenchmarkResult",
    "BenchmarkRunner",
    "handle_compare_request",
    "print_report",
]
