"""Hill climbing with single-bit-flip neighbours on the OneMax problem."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from onemax_search.onemax import one_max

__all__ = ["ClimbResult", "hill_climb", "run", "main"]


@dataclass
class ClimbResult:
    """Outcome of one hill-climbing run.

    ``history[k]`` is the best value after ``k`` iterations (``history[0]``
    is the initial value); ``trajectory[k]`` is the solution after
    iteration ``k + 1``.
    """

    solution: list[int]
    best_value: int
    evaluations: int
    history: list[int] = field(default_factory=list)
    trajectory: list[list[int]] = field(default_factory=list)


def hill_climb(
    bit: int,
    iterations: int,
    rng: random.Random | None = None,
    out: TextIO | None = None,
) -> ClimbResult:
    """Climb from a random bit string for ``iterations`` single-bit flips.

    A neighbour is accepted when it is at least as good as the current one.
    If ``out`` is given, an ``"<iteration> <best value>"`` line is written to
    it for the start and for every iteration.
    """
    rng = rng if rng is not None else random.Random()
    solution = [rng.randrange(2) for _ in range(bit)]
    best_value = one_max(solution, bit)
    evaluations = 1
    history = [best_value]
    trajectory: list[list[int]] = []

    if out is not None:
        print(f"0 {best_value}", file=out)

    for step in range(1, iterations + 1):
        neighbor = list(solution)
        flip = rng.randrange(bit)
        neighbor[flip] = 1 - neighbor[flip]

        neighbor_value = one_max(neighbor, bit)
        evaluations += 1

        if neighbor_value >= best_value:
            solution = neighbor
            best_value = neighbor_value

        history.append(best_value)
        trajectory.append(solution)
        if out is not None:
            print(f"{step} {best_value}", file=out)

    return ClimbResult(
        solution=solution,
        best_value=best_value,
        evaluations=evaluations,
        history=history,
        trajectory=trajectory,
    )


def run(
    bit: int,
    runs: int,
    iterations: int,
    rate: float,
    output_dir: str | Path = "output",
    rng: random.Random | None = None,
    out: TextIO | None = None,
) -> list[ClimbResult]:
    """Run hill climbing ``runs`` times, writing ``Run_<n>.txt`` traces."""
    out = out if out is not None else sys.stdout
    rng = rng if rng is not None else random.Random()
    print(f"{bit} {runs} {iterations} {rate:g}", file=out)

    directory = Path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)

    results = []
    for run_number in range(1, runs + 1):
        with open(directory / f"Run_{run_number}.txt", "w") as trace:
            result = hill_climb(bit, iterations, rng=rng, out=trace)
        for value, solution in zip(result.history[1:], result.trajectory):
            print(f"Run: {run_number}, Evaluations = {value}", file=out)
            print("Solution: " + "".join(str(b) for b in solution), file=out)
        results.append(result)
    return results


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Hill climbing on OneMax.")
    parser.add_argument("bit", type=int, help="length of the bit string")
    parser.add_argument("runs", type=int, help="number of runs")
    parser.add_argument("iterations", type=int, help="iterations per run")
    parser.add_argument("rate", type=float, help="algorithm parameter")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    run(args.bit, args.runs, args.iterations, args.rate)
    return 0


if __name__ == "__main__":
    sys.exit(main())