"""
Simple command line runner for the string matching algorithms.

Usage examples:
    python -m src.benchmark.simple_runner --text ABABDABACDABABCABAB --pattern ABABCABAB
    python -m src.benchmark.simple_runner --text abcabcabc --pattern abc --trace kmp
    python -m src.benchmark.simple_runner --sweep --sizes 1000,5000,10000 --workload worst-case
"""

import argparse
import json
import sys

from data.generate import TextGenerator, worst_case_workload
from data.reader import TextReader
from src.algorithms.rabin_karp_search import HashVariant, RabinKarpConfig
from src.benchmark import BenchmarkConfig, BenchmarkRunner, print_report
from src.trace.emitter import trace


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compare substring search algorithms")
    parser.add_argument("--text", help="Text to search in")
    parser.add_argument("--text-file", help="Read the text from a UTF-8 file")
    parser.add_argument("--pattern", help="Pattern to search for")
    parser.add_argument(
        "--trace",
        metavar="ALGORITHM",
        help="Print the step trace of one algorithm (naive, kmp, rk)",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the comparison as JSON"
    )
    parser.add_argument(
        "--hash-variant",
        choices=[variant.value for variant in HashVariant],
        default=HashVariant.POLYNOMIAL.value,
        help="Rabin-Karp hash function",
    )
    parser.add_argument("--base", type=int, default=256, help="Polynomial hash radix")
    parser.add_argument(
        "--modulus", type=int, default=101, help="Polynomial hash prime modulus"
    )
    parser.add_argument(
        "--sweep", action="store_true", help="Benchmark over growing text sizes"
    )
    parser.add_argument(
        "--sizes",
        default="1000,5000,10000,50000",
        help="Comma-separated list of text sizes for --sweep",
    )
    parser.add_argument(
        "--workload",
        choices=["random", "worst-case"],
        default="random",
        help="Text generator for --sweep",
    )
    parser.add_argument(
        "--pattern-length", type=int, default=8, help="Pattern length for --sweep"
    )
    parser.add_argument("--seed", type=int, default=42, help="Seed for --sweep texts")
    parser.add_argument(
        "--output-prefix", default="string-matching", help="Prefix for plot files"
    )
    parser.add_argument("--no-plots", action="store_true", help="Skip generating plots")
    return parser


def run_sweep(args, rabin_karp: RabinKarpConfig) -> None:
    sizes = [int(size.strip()) for size in args.sizes.split(",")]
    config = BenchmarkConfig(
        x_vals=sizes,
        plot_name=args.output_prefix,
        rabin_karp=rabin_karp,
        verbose=True,
    )

    if args.workload == "worst-case":

        def workload(n):
            return worst_case_workload(n, args.pattern_length)

    else:
        generator = TextGenerator(seed=args.seed)

        def workload(n):
            return generator.workload(n, args.pattern_length)

    runner = BenchmarkRunner(config)
    runner.run_sweep(workload)
    runner.print_data()
    if not args.no_plots:
        runner.generate_plot(show_plots=False)
        print(f"\nPlots saved as {args.output_prefix}*.png")


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        rabin_karp = RabinKarpConfig(
            variant=HashVariant(args.hash_variant),
            base=args.base,
            modulus=args.modulus,
        )

        if args.sweep:
            run_sweep(args, rabin_karp)
            return 0

        text = args.text
        if args.text_file:
            with TextReader(args.text_file) as reader:
                text = reader.read()
        if text is None or args.pattern is None:
            parser.error("--text (or --text-file) and --pattern are required")

        if args.trace:
            for index, step in enumerate(
                trace(text, args.pattern, args.trace, rabin_karp)
            ):
                print(f"{index:5d} {step.state.value:<14} {step.message}")
            return 0

        report = BenchmarkRunner(BenchmarkConfig(rabin_karp=rabin_karp)).compare(
            text, args.pattern
        )
        if args.json:
            print(json.dumps(report.to_dict(), indent=2))
        else:
            print_report(report)
            if not report.matches_agree():
                print("Warning: algorithms disagree on match positions")
        return 0

    except (ValueError, FileNotFoundError) as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
