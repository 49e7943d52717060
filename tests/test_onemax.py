import pytest

from onemax_search.onemax import one_max


def test_counts_ones():
    assert one_max([1, 0, 1, 1], 4) == 3


@pytest.mark.parametrize("n", [1, 5, 32])
def test_all_ones_gives_length(n):
    assert one_max([1] * n, n) == n


@pytest.mark.parametrize("n", [1, 7])
def test_all_zeros_gives_zero(n):
    assert one_max([0] * n, n) == 0


def test_only_prefix_is_counted():
    assert one_max([0, 1, 1, 1], 2) == 1


def test_zero_size_counts_nothing():
    assert one_max([1, 1, 1], 0) == 0


def test_size_larger_than_solution_raises():
    with pytest.raises(ValueError):
        one_max([1, 0], 3)