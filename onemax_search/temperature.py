"""Geometric cooling schedule written out for plotting."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

__all__ = ["cooling_schedule", "schedule_filename", "write_schedule", "main"]

DEFAULT_TEMPERATURE = 100.0
DEFAULT_COOL_DOWN = 90.0  # percent kept per iteration
DEFAULT_ITERATIONS = 100


def cooling_schedule(
    temperature: float = DEFAULT_TEMPERATURE,
    cool_down: float = DEFAULT_COOL_DOWN,
    iterations: int = DEFAULT_ITERATIONS,
) -> list[float]:
    """Return the temperature at each iteration.

    The temperature starts at ``temperature`` and is multiplied by
    ``cool_down / 100`` after every iteration.
    """
    values = []
    current = temperature
    for _ in range(iterations):
        values.append(current)
        current = current * (cool_down / 100)
    return values


def schedule_filename(
    temperature: float = DEFAULT_TEMPERATURE,
    cool_down: float = DEFAULT_COOL_DOWN,
) -> str:
    """Name of the file holding a schedule, from truncated parameters."""
    return f"T_{int(temperature)}CD_{int(cool_down)}.txt"


def write_schedule(
    directory: str | Path = ".",
    temperature: float = DEFAULT_TEMPERATURE,
    cool_down: float = DEFAULT_COOL_DOWN,
    iterations: int = DEFAULT_ITERATIONS,
) -> Path:
    """Write the schedule, one temperature per line, and return its path."""
    path = Path(directory) / schedule_filename(temperature, cool_down)
    with open(path, "w") as f:
        for value in cooling_schedule(temperature, cool_down, iterations):
            f.write(f"{value:g} \n")
    return path


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Write a geometric cooling schedule."
    )
    parser.add_argument("--directory", default=".")
    parser.add_argument("--temperature", type=float, default=DEFAULT_TEMPERATURE)
    parser.add_argument("--cool-down", type=float, default=DEFAULT_COOL_DOWN)
    parser.add_argument("--iterations", type=int, default=DEFAULT_ITERATIONS)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    write_schedule(args.directory, args.temperature, args.cool_down, args.iterations)
    return 0


if __name__ == "__main__":
    sys.exit(main())