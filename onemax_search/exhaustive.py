"""Exhaustive enumeration of every bit string for the OneMax problem."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable, Sequence
from typing import TextIO

from onemax_search.onemax import one_max

__all__ = ["next_bitstring", "search", "run", "main"]

DEFAULT_TIME_LIMIT = 1800  # seconds (30 minutes)
PROGRESS_EVERY = 1000


def _bits_text(bits: Sequence[int]) -> str:
    return "".join(str(b) for b in bits)


def next_bitstring(bits: Sequence[int]) -> list[int] | None:
    """Return the bit string that follows ``bits`` in binary order.

    Returns ``None`` when ``bits`` is already all ones.
    """
    for i in reversed(range(len(bits))):
        if bits[i] == 0:
            return [*bits[:i], 1] + [0] * (len(bits) - i - 1)
    return None


def search(
    bit: int,
    time_limit: float = DEFAULT_TIME_LIMIT,
    clock: Callable[[], float] = time.monotonic,
    out: TextIO | None = None,
) -> tuple[list[int], int]:
    """Enumerate all bit strings of length ``bit`` from all zeros upward.

    Stops early when ``time_limit`` seconds have passed on ``clock``.
    Returns the best string found and the number of evaluations made.
    """
    out = out if out is not None else sys.stdout
    current: list[int] | None = [0] * bit
    best = list(current)
    evaluations = 0
    start = clock()

    while (current := next_bitstring(current)) is not None:
        now = clock()
        if now - start >= time_limit:
            print("Reached 30 minutes, terminated!!!", file=out)
            break

        if one_max(current, bit) > one_max(best, bit):
            best = current

        evaluations += 1
        if evaluations % PROGRESS_EVERY == 0:
            elapsed = int(now - start)
            print(f"nfes: {evaluations} | elapsed: {elapsed}s", file=out)
            print(_bits_text(best), file=out)

    print(_bits_text(best), file=out)
    return best, evaluations


def run(
    bit: int,
    runs: int,
    iterations: int,
    rate: float,
    out: TextIO | None = None,
) -> list[list[int]]:
    """Run the exhaustive search ``runs`` times; return each run's best string."""
    out = out if out is not None else sys.stdout
    print(f"{bit} {runs} {iterations} {rate:g}", file=out)
    return [search(bit, out=out)[0] for _ in range(runs)]


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Exhaustive search over OneMax bit strings."
    )
    parser.add_argument("bit", type=int, help="length of the bit string")
    parser.add_argument("runs", type=int, help="number of runs")
    parser.add_argument("iterations", type=int, help="number of iterations")
    parser.add_argument("rate", type=float, help="algorithm parameter")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    run(args.bit, args.runs, args.iterations, args.rate)
    return 0


if __name__ == "__main__":
    sys.exit(main())