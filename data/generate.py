import random
import time
from pathlib import Path
from typing import Iterator, Optional, Tuple

from mimesis import Text
from mimesis.locales import Locale


class TextGenerator:
    """Generates benchmark texts and patterns efficiently using mimesis."""

    def __init__(self, locale: Locale = Locale.EN, seed: Optional[int] = None):
        self.provider = Text(locale=locale, seed=seed)
        self.random = random.Random(seed)

    def generate_chunk(self, sentences: int = 5) -> str:
        """Generate a chunk of prose made of a few sentences."""
        return self.provider.text(quantity=sentences)

    def generate_text(self, length: int) -> str:
        """Generate prose of exactly `length` characters."""
        if length < 0:
            raise ValueError("Length must be non-negative")

        parts = []
        total = 0
        while total < length:
            chunk = self.generate_chunk() + " "
            parts.append(chunk)
            total += len(chunk)
        return "".join(parts)[:length]

    def generate_batch(self, count: int, length: int) -> Iterator[str]:
        """Generate a batch of texts."""
        for _ in range(count):
            yield self.generate_text(length)

    def sample_pattern(self, text: str, length: int) -> str:
        """Pick a substring of `text` so the pattern occurs at least once."""
        if not 0 < length <= len(text):
            raise ValueError("Pattern length must be between 1 and the text length")
        start = self.random.randint(0, len(text) - length)
        return text[start : start + length]

    def workload(self, n: int, pattern_length: int = 8) -> Tuple[str, str]:
        """A random prose text of length n and a pattern sampled from it."""
        text = self.generate_text(n)
        return text, self.sample_pattern(text, min(pattern_length, n))


def worst_case_workload(n: int, pattern_length: int = 8) -> Tuple[str, str]:
    """
    Text AAAA...B with pattern AA...B.

    Every window matches all but the last character, which drives the naive
    matcher to (n-m+1)*m comparisons while KMP stays linear.
    """
    if n < 1 or not 0 < pattern_length <= n:
        raise ValueError("Need 0 < pattern_length <= n")
    text = "A" * (n - 1) + "B"
    pattern = "A" * (pattern_length - 1) + "B"
    return text, pattern


class CorpusStorage:
    """Stores generated prose as a UTF-8 text file for repeatable benchmarks."""

    def __init__(self, filepath: Path):
        self.filepath = Path(filepath)

    def store_text(
        self, generator: TextGenerator, total_length: int, batch_size: int = 100_000
    ) -> None:
        """Write `total_length` characters of generated prose in batches."""
        print(f"Generating {total_length:,} characters of text...")
        start_time = time.time()

        written = 0
        with open(self.filepath, "w", encoding="utf-8") as data_file:
            while written < total_length:
                batch_length = min(batch_size, total_length - written)
                data_file.write(generator.generate_text(batch_length))
                written += batch_length

                if written % (batch_size * 10) == 0:
                    elapsed = time.time() - start_time
                    rate = written / elapsed if elapsed > 0 else 0
                    print(
                        f"Progress: {written:,}/{total_length:,} "
                        f"({100 * written / total_length:.1f}%) - "
                        f"Rate: {rate:,.0f} chars/sec"
                    )

        elapsed = time.time() - start_time
        print(f"Generation complete! {written:,} characters in {elapsed:.1f}s")


def main():
    """Generate a 10 million character corpus for benchmarking."""

    TOTAL_LENGTH = 10_000_000
    BATCH_SIZE = 100_000
    SEED = 42

    data_dir = Path(__file__).parent
    output_file = data_dir / "corpus.txt"

    generator = TextGenerator(locale=Locale.EN, seed=SEED)
    storage = CorpusStorage(output_file)

    if output_file.exists():
        response = input(f"Output file {output_file} exists. Overwrite? (y/N): ")
        if response.lower() != "y":
            print("Aborted.")
            return

    try:
        storage.store_text(generator, TOTAL_LENGTH, BATCH_SIZE)
        print("Corpus generation completed successfully!")

    except KeyboardInterrupt:
        print("\nGeneration interrupted by user.")
    except Exception as e:
        print(f"Error during generation: {e}")
        raise


if __name__ == "__main__":
    main()
