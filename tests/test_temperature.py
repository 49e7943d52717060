import pytest

from onemax_search.temperature import (
    cooling_schedule,
    main,
    schedule_filename,
    write_schedule,
)


def test_schedule_starts_at_initial_temperature():
    values = cooling_schedule(100, 90, 100)
    assert len(values) == 100
    assert values[0] == 100


def test_schedule_is_geometric():
    values = cooling_schedule(100, 90, 20)
    for previous, current in zip(values, values[1:]):
        assert current == pytest.approx(previous * 0.9)


def test_schedule_strictly_decreasing():
    values = cooling_schedule(50, 80, 30)
    assert all(a > b for a, b in zip(values, values[1:]))


def test_zero_iterations_is_empty():
    assert cooling_schedule(100, 90, 0) == []


def test_filename_uses_truncated_parameters():
    assert schedule_filename(100, 90) == "T_100CD_90.txt"
    assert schedule_filename(100.7, 90.9) == schedule_filename(100, 90)


def test_write_schedule_lines(tmp_path):
    path = write_schedule(tmp_path, 100, 90, 5)
    assert path.name == schedule_filename(100, 90)
    lines = path.read_text().splitlines()
    assert len(lines) == 5
    assert lines[0] == "100 "
    assert all(line.endswith(" ") for line in lines)
    parsed = [float(line) for line in lines]
    assert parsed == pytest.approx(cooling_schedule(100, 90, 5), rel=1e-5)


def test_main_writes_default_file(tmp_path):
    assert main(["--directory", str(tmp_path)]) == 0
    lines = (tmp_path / "T_100CD_90.txt").read_text().splitlines()
    assert len(lines) == 100