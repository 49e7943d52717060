"""The OneMax objective: the number of ones in a bit string."""

from collections.abc import Sequence

__all__ = ["one_max"]


def one_max(solution: Sequence[int], bit_size: int) -> int:
    """Return the sum of the first ``bit_size`` bits of ``solution``."""
    if bit_size > len(solution):
        raise ValueError(
            f"bit_size {bit_size} exceeds solution length {len(solution)}"
        )
    if bit_size <= 0:
        return 0
    return sum(solution[:bit_size])