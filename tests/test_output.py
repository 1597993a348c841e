# tests/test_output.py
import json

from Sudoku.game import Game
from Sudoku.grid import Grid
from Sudoku.main import solve_puzzle, solve_all_puzzles
from Sudoku.output import SolutionFormatter
from Sudoku.solver import Solver

SMALL = [
    0, 0, 3, 4,
    3, 4, 0, 0,
    0, 2, 0, 0,
    0, 0, 0, 0,
]


def test_grid_visualization():
    game = Game(Grid(SMALL))
    text = SolutionFormatter.format_grid_visualization(game)
    assert text.splitlines() == [
        "+-----+-----+",
        "| · · | 3 4 |",
        "| 3 4 | · · |",
        "+-----+-----+",
        "| · 2 | · · |",
        "| · · | · · |",
        "+-----+-----+",
    ]


def test_solution_json():
    game = Game(Grid(SMALL))
    solver = Solver(game)
    solver.solve()
    report = SolutionFormatter.format_solution_json(game, solver.stats, SMALL)
    assert report['puzzle_info']['solved'] is True
    assert report['puzzle_info']['size'] == 4
    assert report['puzzle_info']['clues'] == 5
    assert report['board'][0] == [2, 1, 3, 4]
    assert report['invalid_subsections'] == []
    assert report['initial'] == SMALL
    assert report['solving_stats']['backtracks'] == solver.stats['backtracks']


def test_human_readable_lists_invalid_units():
    game = Game(Grid(SMALL))
    game.add_entry((0, 0), 3)
    text = SolutionFormatter.format_solution_human_readable(game, {})
    assert "✗ not solved" in text
    assert "Row(0)" in text
    assert "Column(0)" in text


def test_solve_puzzle_writes_outputs(tmp_path):
    puzzle = tmp_path / "small.json"
    puzzle.write_text(json.dumps({"cells": SMALL}))
    out = tmp_path / "out"

    solved, game, solver = solve_puzzle(str(puzzle), output_dir=str(out), verbose=False)

    assert solved
    assert game.is_correct()
    saved = json.loads((out / "solution.json").read_text())
    assert saved['board'] == game.get_rows()
    assert "SUDOKU SOLUTION" in (out / "solution.txt").read_text()


def test_solve_puzzle_reports_bad_input(tmp_path):
    puzzle = tmp_path / "bad.json"
    puzzle.write_text(json.dumps({"cells": [0] * 9}))
    solved, game, solver = solve_puzzle(str(puzzle), output_dir=str(tmp_path / "out"), verbose=False)
    assert (solved, game, solver) == (False, None, None)


def test_solve_all_puzzles(tmp_path):
    data = tmp_path / "json"
    data.mkdir()
    (data / "a.json").write_text(json.dumps({"cells": SMALL}))
    (data / "b.json").write_text(json.dumps({"cells": [1, 1] + [0] * 14}))

    results = solve_all_puzzles(str(data), output_dir=str(tmp_path / "out"))

    assert [(r['file'], r['solved']) for r in results] == [("a.json", True), ("b.json", False)]
