import io
import itertools

import pytest

from onemax_search.exhaustive import main, next_bitstring, run, search


def test_next_bitstring_increments_last_bit():
    assert next_bitstring([0, 0]) == [0, 1]


def test_next_bitstring_carries():
    assert next_bitstring([0, 1, 1]) == [1, 0, 0]


def test_next_bitstring_all_ones_is_last():
    assert next_bitstring([1, 1, 1]) is None


def test_next_bitstring_does_not_mutate_input():
    bits = [0, 1]
    next_bitstring(bits)
    assert bits == [0, 1]


@pytest.mark.parametrize("n", [1, 3, 5])
def test_enumeration_visits_every_string_in_order(n):
    seen = [[0] * n]
    while (nxt := next_bitstring(seen[-1])) is not None:
        seen.append(nxt)
    expected = [list(p) for p in itertools.product([0, 1], repeat=n)]
    assert seen == expected


@pytest.mark.parametrize("n", [1, 4, 6])
def test_search_finds_all_ones(n):
    buf = io.StringIO()
    best, evaluations = search(n, out=buf)
    assert best == [1] * n
    assert evaluations == 2**n - 1
    assert buf.getvalue().splitlines()[-1] == "1" * n


def test_search_empty_string():
    buf = io.StringIO()
    best, evaluations = search(0, out=buf)
    assert best == []
    assert evaluations == 0
    assert buf.getvalue() == "\n"


def test_search_stops_at_time_limit():
    ticks = iter([0.0, 10.0])
    buf = io.StringIO()
    best, evaluations = search(3, time_limit=5, clock=lambda: next(ticks), out=buf)
    lines = buf.getvalue().splitlines()
    assert lines[0] == "Reached 30 minutes, terminated!!!"
    assert best == [0, 0, 0]
    assert evaluations == 0


def test_run_prints_header_and_returns_bests():
    buf = io.StringIO()
    bests = run(3, 2, 100, 0.5, out=buf)
    assert buf.getvalue().splitlines()[0] == "3 2 100 0.5"
    assert bests == [[1, 1, 1], [1, 1, 1]]


def test_main_prints_best(capsys):
    assert main(["3", "1", "10", "0.5"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "3 1 10 0.5"
    assert lines[-1] == "111"


def test_main_requires_arguments():
    with pytest.raises(SystemExit):
        main(["3"])