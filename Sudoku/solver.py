"""
Stepwise backtracking solver for Sudoku

The search is a plain depth-first enumeration kept as an explicit state
machine instead of recursion, so a caller can advance it one step at a time
and look at the board in between:

  - empty_positions: cells still to fill, popped in row-major scan order
  - trials: the entries the solver placed itself, top = deepest decision

No candidate pruning and no cell ordering heuristics. Each step places or
changes a single value and relies on Game re-checking the whole board.
"""

import time
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

from .game import Entry, Game
from .grid import Position


class SolverStatus(Enum):
    IN_PROGRESS = "in_progress"
    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"


class UnsolvableError(RuntimeError):
    """The puzzle has contradictory clues or no solution"""


class Solver:
    def __init__(self, game: Game, verbose: bool = False):
        self.game = game
        self.verbose = verbose
        self.status = SolverStatus.IN_PROGRESS
        self.stats: Dict[str, int] = {
            'steps': 0,
            'placements': 0,
            'retries': 0,
            'backtracks': 0,
        }
        # Reversed scan, so pop() hands out the top-left empty cell first
        self.empty_positions: List[Position] = [
            Position(x, y)
            for y, row in enumerate(game.get_rows())
            for x, value in enumerate(row)
            if value == 0
        ][::-1]
        self.trials: List[Entry] = []
        # Set after a position ran out of values: the parent decision moves next
        self._backtracking = False

    # -------------------------------------------------------------------------
    # Single step
    # -------------------------------------------------------------------------
    def next(self) -> SolverStatus:
        """Advance the search by one placement, retry or backtrack."""
        if self.status is SolverStatus.UNSOLVABLE:
            return self.status
        if self.game.is_correct():
            self.status = SolverStatus.SOLVED
            return self.status

        self.stats['steps'] += 1

        if not self._backtracking and not self.game.invalid_subsections:
            if not self.empty_positions:
                # Full board that is not correct; nothing left to try
                return self._give_up()
            position = self.empty_positions.pop()
            self.trials.append(self.game.add_entry(position, 1))
            self.stats['placements'] += 1
            return self.status

        if not self.trials:
            return self._give_up()

        last_entry = self.trials.pop()
        next_value = last_entry.value + 1
        if next_value <= self.game.size():
            self.trials.append(self.game.add_entry(last_entry.position, next_value))
            self.stats['retries'] += 1
            self._backtracking = False
        else:
            self.game.add_entry(last_entry.position, 0)
            self.empty_positions.append(last_entry.position)
            self.stats['backtracks'] += 1
            self._backtracking = True
        return self.status

    def _give_up(self) -> SolverStatus:
        self.status = SolverStatus.UNSOLVABLE
        if self.verbose:
            print(f"✗ No solution: search exhausted after {self.stats['steps']} steps")
        return self.status

    # -------------------------------------------------------------------------
    # Drivers
    # -------------------------------------------------------------------------
    def steps(self) -> Iterator[Tuple[SolverStatus, Tuple[int, ...]]]:
        """Yield (status, board values) after every step until the search ends."""
        while True:
            status = self.next()
            yield status, self.game.values()
            if status is not SolverStatus.IN_PROGRESS:
                return

    def solve(self, timeout_seconds: Optional[float] = None) -> SolverStatus:
        """Run next() until solved or unsolvable, or until the timeout expires."""
        start_time = time.time()

        if self.verbose:
            print(f"Starting backtracking search: {self.game}")
            print(f"Empty cells: {len(self.empty_positions)}\n")

        status = self.next()
        while status is SolverStatus.IN_PROGRESS:
            if timeout_seconds is not None and time.time() - start_time > timeout_seconds:
                if self.verbose:
                    print(f"\n⚠ Timeout after {timeout_seconds}s")
                    self._print_stats()
                return status
            if self.verbose and self.stats['steps'] % 10000 == 0:
                print(f"  Progress: steps {self.stats['steps']} | "
                      f"Depth: {len(self.trials)} | Backtracks: {self.stats['backtracks']}")
            status = self.next()

        if self.verbose:
            print("\n✓ Puzzle solved!" if status is SolverStatus.SOLVED else "\n✗ No solution found")
            self._print_stats()
        return status

    def _print_stats(self) -> None:
        """Print solving statistics."""
        print("\nSolving Statistics:")
        print(f"  Steps: {self.stats['steps']}")
        print(f"  Placements: {self.stats['placements']}")
        print(f"  Retries: {self.stats['retries']}")
        print(f"  Backtracks: {self.stats['backtracks']}")
        print(f"  Game history: {len(self.game.entries)} entries")


def solve(game: Game) -> Game:
    """Solve a game in place and return it; raises UnsolvableError."""
    solver = Solver(game)
    if solver.solve() is SolverStatus.UNSOLVABLE:
        raise UnsolvableError("Game isn't solvable or was given in an invalid state")
    return game
