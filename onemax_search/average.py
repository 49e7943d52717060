"""Average the per-iteration best values over several hill-climbing runs."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

__all__ = ["average_runs", "write_averages", "main"]

DEFAULT_FOLDER = "output"
DEFAULT_RUNS = 30
DEFAULT_MAX_ITERATIONS = 1000
DEFAULT_RESULT = "result.txt"


def _read_pairs(text: str) -> Iterator[tuple[int, float]]:
    """Yield ``(iteration, fitness)`` pairs until the first malformed one."""
    tokens = iter(text.split())
    for iteration_token in tokens:
        fitness_token = next(tokens, None)
        if fitness_token is None:
            return
        try:
            yield int(iteration_token), float(fitness_token)
        except ValueError:
            return


def average_runs(
    folder: str | Path = DEFAULT_FOLDER,
    num_runs: int = DEFAULT_RUNS,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> list[float]:
    """Average ``Run_<n>.txt`` traces in ``folder`` iteration by iteration.

    Each sum is divided by ``num_runs`` even when some files are missing;
    missing files are reported on standard error and skipped.  Entries with
    an iteration outside ``0..max_iterations`` are ignored.
    """
    if num_runs <= 0:
        raise ValueError("num_runs must be positive")
    if max_iterations < 0:
        raise ValueError("max_iterations must not be negative")

    sums = [0.0] * (max_iterations + 1)
    directory = Path(folder)
    for run_number in range(1, num_runs + 1):
        path = directory / f"Run_{run_number}.txt"
        try:
            text = path.read_text()
        except OSError:
            print(f"Cannot open file: {path}", file=sys.stderr)
            continue
        for iteration, fitness in _read_pairs(text):
            if 0 <= iteration <= max_iterations:
                sums[iteration] += fitness

    return [total / num_runs for total in sums]


def write_averages(averages: Iterable[float], path: str | Path) -> Path:
    """Write ``"<iteration> <average>"`` lines with six decimals to ``path``."""
    target = Path(path)
    with open(target, "w") as outfile:
        for iteration, value in enumerate(averages):
            outfile.write(f"{iteration} {value:.6f}\n")
    return target


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Average hill-climbing traces over several runs."
    )
    parser.add_argument("--folder", default=DEFAULT_FOLDER)
    parser.add_argument("--runs", type=int, default=DEFAULT_RUNS)
    parser.add_argument(
        "--max-iterations", type=int, default=DEFAULT_MAX_ITERATIONS
    )
    parser.add_argument("--output", default=DEFAULT_RESULT)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    averages = average_runs(args.folder, args.runs, args.max_iterations)
    try:
        write_averages(averages, args.output)
    except OSError:
        print(f"Cannot create {args.output}", file=sys.stderr)
        return 1
    print(f"Averaged results written to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())