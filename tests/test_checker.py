# tests/test_checker.py
import pytest

from Sudoku.checker import Checker, CheckerResult
from Sudoku.grid import Grid, Row, Column, Square

ALMOST_SOLVED = [
    7, 2, 6, 4, 9, 3, 8, 1, 5,
    3, 1, 5, 7, 2, 8, 9, 4, 6,
    4, 8, 9, 6, 5, 1, 2, 3, 7,
    8, 5, 2, 1, 4, 7, 6, 9, 3,
    6, 7, 3, 9, 8, 5, 1, 2, 4,
    9, 4, 1, 3, 6, 2, 7, 5, 8,
    1, 9, 4, 8, 3, 6, 5, 7, 2,
    5, 6, 7, 2, 1, 4, 3, 8, 0,
    2, 3, 8, 5, 7, 9, 4, 0, 1,
]

CONFLICTING = [
    7, 2, 7, 4, 9, 3, 8, 1, 5,
    3, 9, 5, 7, 2, 8, 9, 4, 6,
    6, 8, 9, 6, 5, 1, 2, 3, 7,
    8, 5, 2, 1, 4, 7, 6, 9, 3,
    6, 7, 3, 9, 8, 5, 1, 2, 4,
    9, 4, 1, 3, 6, 2, 7, 5, 8,
    1, 9, 4, 8, 3, 6, 5, 7, 2,
    5, 6, 7, 2, 1, 4, 3, 8, 0,
    2, 3, 8, 5, 7, 9, 4, 0, 8,
]

CORNER_UNITS = [Row(0), Column(0), Square(0, 0), Row(8), Column(8), Square(2, 2)]


@pytest.mark.parametrize("values, expected", [
    ([1, 2, 3, 4], CheckerResult(valid=True, complete=True)),
    ([1, 0, 3, 4], CheckerResult(valid=True, complete=False)),
    ([1, 2, 1, 4], CheckerResult(valid=False, complete=True)),
    ([1, 0, 1, 4], CheckerResult(valid=False, complete=False)),
    ([0, 0, 0, 0], CheckerResult(valid=True, complete=False)),
])
def test_check_subsection(values, expected):
    assert Checker().check_subsection(values) == expected


def test_duplicate_does_not_hide_a_later_zero():
    # Conflict comes first, the zero is the last value scanned
    assert Checker().check_subsection([3, 3, 1, 0]) == CheckerResult(valid=False, complete=False)


def test_checker_reuse_does_not_leak_state():
    checker = Checker()
    checker.check_subsection([1, 2, 3, 4])
    assert checker.check_subsection([4, 3, 2, 1]) == CheckerResult(valid=True, complete=True)


def test_check_subsections_valid():
    grid = Grid(ALMOST_SOLVED)
    results = Checker().check_subsections(
        [grid.get_subsection_values(t) for t in CORNER_UNITS]
    )
    assert results == [
        (Row(0), CheckerResult(valid=True, complete=True)),
        (Column(0), CheckerResult(valid=True, complete=True)),
        (Square(0, 0), CheckerResult(valid=True, complete=True)),
        (Row(8), CheckerResult(valid=True, complete=False)),
        (Column(8), CheckerResult(valid=True, complete=False)),
        (Square(2, 2), CheckerResult(valid=True, complete=False)),
    ]


def test_check_subsections_invalid():
    grid = Grid(CONFLICTING)
    results = Checker().check_subsections(
        [grid.get_subsection_values(t) for t in CORNER_UNITS]
    )
    assert results == [
        (Row(0), CheckerResult(valid=False, complete=True)),
        (Column(0), CheckerResult(valid=False, complete=True)),
        (Square(0, 0), CheckerResult(valid=False, complete=True)),
        (Row(8), CheckerResult(valid=False, complete=False)),
        (Column(8), CheckerResult(valid=False, complete=False)),
        (Square(2, 2), CheckerResult(valid=False, complete=False)),
    ]


def test_check_subsections_keeps_input_order():
    grid = Grid(ALMOST_SOLVED)
    subsections = list(reversed(grid.get_all_subsection_values()))
    results = Checker().check_subsections(subsections)
    assert [t for t, _ in results] == [s.subsection_type for s in subsections]
