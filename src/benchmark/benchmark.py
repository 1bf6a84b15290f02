import statistics
import time
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

import matplotlib.pyplot as plt

from ..algorithms.algorithm import InvalidInputError, MatchResult
from ..algorithms.rabin_karp_search import RabinKarpConfig
from ..algorithms.registry import ALGORITHM_ORDER, AlgorithmName, create_matcher

Workload = Callable[[int], Tuple[str, str]]


@dataclass
class BenchmarkConfig:
    """Configuration for a benchmark sweep over growing text sizes"""

    x_vals: List[int] = field(default_factory=lambda: [1_000, 5_000, 10_000, 50_000])
    line_vals: List[str] = field(
        default_factory=lambda: [name.value for name in ALGORITHM_ORDER]
    )
    line_names: List[str] = field(
        default_factory=lambda: ["Naive", "KMP", "Rabin-Karp"]
    )
    styles: List[Tuple[str, str]] = field(
        default_factory=lambda: [("blue", "-"), ("green", "-"), ("red", "-")]
    )
    x_name: str = "N"
    ylabel: str = "Time (us)"
    plot_name: str = "string-matching"
    rabin_karp: RabinKarpConfig = field(default_factory=RabinKarpConfig)
    warmup_runs: int = 3
    measure_runs: int = 10
    min_runtime_us: float = 1_000.0
    measure_memory: bool = True
    verbose: bool = False


@dataclass
class BenchmarkResult:
    """Result of a single sweep measurement"""

    value: float
    std_dev: float
    measurements: List[float]
    config_name: str
    x_value: Union[int, float]
    operation_count: int = 0
    match_count: int = 0
    memory_usage: Optional[float] = None


@dataclass(frozen=True)
class BenchmarkReport:
    """
    Side-by-side results of every algorithm on one (text, pattern) input.

    Attributes:
        results: Read-only MatchResult per algorithm, in ALGORITHM_ORDER
    """

    results: Mapping[AlgorithmName, MatchResult]

    def __post_init__(self):
        object.__setattr__(self, "results", MappingProxyType(dict(self.results)))

    def __hash__(self) -> int:
        return hash(tuple(self.results.items()))

    @classmethod
    def empty(cls) -> "BenchmarkReport":
        return cls({name: MatchResult.empty() for name in ALGORITHM_ORDER})

    def __getitem__(self, name: Union[str, AlgorithmName]) -> MatchResult:
        return self.results[AlgorithmName.parse(name)]

    def matches_agree(self) -> bool:
        """True when every algorithm reported the same match positions."""
        unique = {result.matches for result in self.results.values()}
        return len(unique) <= 1

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        """Serialize as {"naive": ..., "kmp": ..., "rabinKarp": ...}."""
        return {name.value: result.to_dict() for name, result in self.results.items()}


class BenchmarkRunner:
    """Runs every matcher on the same input and times them"""

    def __init__(self, config: Optional[BenchmarkConfig] = None):
        self.config = config or BenchmarkConfig()
        self.matchers = {
            name: create_matcher(name, self.config.rabin_karp)
            for name in ALGORITHM_ORDER
        }
        self.results: Dict[str, List[BenchmarkResult]] = {}

    def compare(self, text: str, pattern: str) -> BenchmarkReport:
        """
        Run naive, KMP and Rabin-Karp in sequence on the same input.

        Raises:
            InvalidInputError: If text or pattern is empty or not a string
        """
        if not isinstance(text, str) or not isinstance(pattern, str):
            raise InvalidInputError("Text and pattern must be strings")
        if not text:
            raise InvalidInputError("Text must not be empty")
        if not pattern:
            raise InvalidInputError("Pattern must not be empty")

        results = {}
        for name in ALGORITHM_ORDER:
            results[name] = self.matchers[name].search(text, pattern)
        return BenchmarkReport(results)

    def do_bench(self, fn: Callable[[], Any]) -> Tuple[float, float, List[float]]:
        """Time a function call multiple times and return mean, stdev, samples (us)"""
        for _ in range(self.config.warmup_runs):
            fn()

        times: List[float] = []
        total_runtime = 0.0

        while (
            len(times) < self.config.measure_runs
            or total_runtime < self.config.min_runtime_us
        ):
            start = time.perf_counter()
            fn()
            end = time.perf_counter()

            runtime_us = (end - start) * 1_000_000
            times.append(runtime_us)
            total_runtime += runtime_us

        mean_time = statistics.mean(times)
        std_dev = statistics.stdev(times) if len(times) > 1 else 0.0

        return mean_time, std_dev, times

    def run_sweep(self, workload: Workload) -> Dict[str, List[BenchmarkResult]]:
        """
        Measure each configured algorithm at each text size.

        Args:
            workload: Maps a text size N to the (text, pattern) pair to search

        Returns:
            BenchmarkResults keyed by algorithm name
        """
        inputs = {x_val: workload(x_val) for x_val in self.config.x_vals}
        total_steps = len(self.config.line_vals) * len(self.config.x_vals)
        current_step = 0

        if self.config.verbose:
            print(f"\nStarting benchmark: {self.config.plot_name}")
            print(f"Started at {datetime.now().strftime('%H:%M:%S')}")
            print("=" * 80)

        for line_val in self.config.line_vals:
            matcher = self.matchers[AlgorithmName.parse(line_val)]
            line_results = []

            for x_val in self.config.x_vals:
                current_step += 1
                text, pattern = inputs[x_val]

                outcome = matcher.search(text, pattern)
                mean_time, std_dev, measurements = self.do_bench(
                    lambda: matcher.search(text, pattern)
                )

                result = BenchmarkResult(
                    value=mean_time,
                    std_dev=std_dev,
                    measurements=measurements,
                    config_name=line_val,
                    x_value=x_val,
                    operation_count=outcome.operation_count,
                    match_count=len(outcome.matches),
                    memory_usage=self._memory_usage()
                    if self.config.measure_memory
                    else None,
                )
                line_results.append(result)

                if self.config.verbose:
                    progress = (current_step / total_steps) * 100
                    print(
                        f"[{current_step:2d}/{total_steps}] {matcher} "
                        f"N={x_val:>10,} ({progress:5.1f}%) "
                        f"-> {mean_time:10.2f}us (+/-{std_dev:8.2f}) "
                        f"ops={outcome.operation_count:,}"
                    )

            self.results[line_val] = line_results

        if self.config.verbose:
            print("=" * 80)
            print(f"Benchmark completed at {datetime.now().strftime('%H:%M:%S')}")

        return self.results

    def _memory_usage(self) -> float:
        """Resident set size of this process in MB"""
        import os

        import psutil

        process = psutil.Process(os.getpid())
        return process.memory_info().rss / 1024 / 1024

    def generate_plot(self, show_plots: bool = True, save_plot: bool = True) -> None:
        """Generate time and operation count plots of the last sweep"""
        self._generate_single_plot(
            "Search Time",
            self.config.ylabel,
            lambda r: r.value,
            lambda r: r.std_dev,
            show_plots,
            save_plot,
        )
        self._generate_single_plot(
            "Operation Count",
            "Operations",
            lambda r: r.operation_count,
            lambda r: 0,
            show_plots,
            save_plot,
            suffix="-operations",
        )

        if self.config.measure_memory:
            self._generate_single_plot(
                "Memory Usage",
                "Memory (MB)",
                lambda r: r.memory_usage,
                lambda r: 0,
                show_plots,
                save_plot,
                suffix="-memory",
            )

    def _generate_single_plot(
        self,
        title_suffix: str,
        ylabel: str,
        value_fn: Callable,
        error_fn: Callable,
        show_plots: bool,
        save_plot: bool,
        suffix: str = "",
    ) -> None:
        """Generate a single plot"""
        plt.figure(figsize=(12, 8))

        for i, line_val in enumerate(self.config.line_vals):
            if line_val not in self.results:
                continue

            results = [r for r in self.results[line_val] if value_fn(r) is not None]
            if not results:
                continue

            color, style = (
                self.config.styles[i] if i < len(self.config.styles) else ("blue", "-")
            )
            label = (
                self.config.line_names[i]
                if i < len(self.config.line_names)
                else line_val
            )

            plt.errorbar(
                [r.x_value for r in results],
                [value_fn(r) for r in results],
                yerr=[error_fn(r) for r in results],
                color=color,
                linestyle=style,
                marker="o",
                label=label,
                capsize=5,
                capthick=2,
            )

        plt.xlabel(self.config.x_name)
        plt.ylabel(ylabel)
        plt.title(f"{self.config.plot_name} - {title_suffix}")
        plt.legend()
        plt.grid(True, alpha=0.3)
        plt.tight_layout()

        if save_plot:
            filename = f"{self.config.plot_name}{suffix}.png"
            plt.savefig(filename, dpi=150, bbox_inches="tight")

        if show_plots:
            plt.show()
        else:
            plt.close()

    def print_data(self) -> None:
        """Print detailed sweep results"""
        print(f"\n{self.config.plot_name} Benchmark Results")
        print("=" * 80)

        for i, line_val in enumerate(self.config.line_vals):
            if line_val not in self.results:
                continue

            line_name = (
                self.config.line_names[i]
                if i < len(self.config.line_names)
                else line_val
            )
            print(f"\n{line_name} ({line_val}):")

            header = (
                f"{'N':<10} {'Search (us)':<14} {'Std Dev':<10} "
                f"{'Operations':<12} {'Matches':<8}"
            )
            if self.config.measure_memory:
                header += f" {'Memory (MB)':<12}"
            print(header)
            print("-" * len(header))

            for result in self.results[line_val]:
                row = (
                    f"{result.x_value:<10} {result.value:<14.2f} "
                    f"{result.std_dev:<10.2f} {result.operation_count:<12} "
                    f"{result.match_count:<8}"
                )
                if self.config.measure_memory and result.memory_usage is not None:
                    row += f" {result.memory_usage:<12.2f}"
                elif self.config.measure_memory:
                    row += f" {'N/A':<12}"
                print(row)


def print_report(report: BenchmarkReport) -> None:
    """Print a single comparison side by side"""
    header = f"{'Algorithm':<12} {'Time (us)':<12} {'Operations':<12} {'Matches'}"
    print(header)
    print("-" * len(header))
    for name, result in report.results.items():
        print(
            f"{name.value:<12} {result.elapsed_time_us:<12.2f} "
            f"{result.operation_count:<12} {list(result.matches)}"
        )
