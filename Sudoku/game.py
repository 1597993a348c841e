"""
Game state: a grid, its undo history and the cached validity snapshot

Every mutation goes through Game so the caches (invalid_subsections and
is_complete) are rebuilt from the whole board right after it.
"""
from typing import List, Optional, Set, Tuple
from dataclasses import dataclass

import numpy as np

from .grid import Grid, GridSubsectionType, Position, PositionLike, Square
from .checker import Checker


@dataclass(frozen=True)
class Entry:
    """A recorded mutation, used for undo and as the solver's trail"""
    position: Position
    value: int
    previous_value: int


class Game:
    """Owns one Grid; the only place the board is mutated"""

    def __init__(self, grid: Grid):
        self.grid = grid
        self.checker = Checker()
        self.entries: List[Entry] = []
        self.invalid_subsections: Set[GridSubsectionType] = set()
        self.is_complete = False
        self._refresh_validity()

    # -------------------------------------------------------------------------
    # Validity cache
    # -------------------------------------------------------------------------
    def _refresh_validity(self) -> None:
        """Rebuild invalid_subsections and is_complete from scratch."""
        results = self.checker.check_subsections(self.grid.get_all_subsection_values())
        self.invalid_subsections = {t for t, result in results if not result.valid}
        self.is_complete = all(result.complete for _, result in results)

    # -------------------------------------------------------------------------
    # Mutators
    # -------------------------------------------------------------------------
    def add_entry(self, position: PositionLike, value: int) -> Entry:
        position = Position(*position)
        previous_value = self.grid.set_cell(position, value)
        entry = Entry(position=position, value=value, previous_value=previous_value)
        self.entries.append(entry)
        self._refresh_validity()
        return entry

    def undo_entry(self) -> Optional[Entry]:
        if not self.entries:
            return None
        entry = self.entries.pop()
        self.grid.set_cell(entry.position, entry.previous_value)
        self._refresh_validity()
        return entry

    def unset_cell(self, position: PositionLike) -> None:
        """Clear a cell; only a cell that held a value leaves a history entry."""
        position = Position(*position)
        previous_value = self.grid.set_cell(position, 0)
        if previous_value == 0:
            return
        self.entries.append(Entry(position=position, value=0, previous_value=previous_value))
        self._refresh_validity()

    def reset(self) -> None:
        self.grid.reset()
        self.entries.clear()
        self._refresh_validity()

    # -------------------------------------------------------------------------
    # Read accessors
    # -------------------------------------------------------------------------
    def is_correct(self) -> bool:
        return self.is_complete and not self.invalid_subsections

    def size(self) -> int:
        return self.grid.side_size

    @property
    def history(self) -> List[Entry]:
        return list(self.entries)

    def get_cell(self, position: PositionLike) -> int:
        return self.grid.get_cell(position)

    def is_readonly(self, position: PositionLike) -> bool:
        return self.grid.is_readonly(position)

    def values(self) -> Tuple[int, ...]:
        return self.grid.values()

    def to_array(self) -> np.ndarray:
        return self.grid.to_array()

    def get_rows(self) -> List[List[int]]:
        n = self.size()
        values = self.values()
        return [list(values[y * n:(y + 1) * n]) for y in range(n)]

    def get_columns(self) -> List[List[int]]:
        return [list(column) for column in zip(*self.get_rows())]

    def get_square(self, bx: int, by: int) -> List[int]:
        return list(self.grid.get_subsection_values(Square(bx, by)))

    def get_squares(self) -> List[List[int]]:
        """Boxes in raster order: left to right, then top to bottom"""
        box_size = self.grid.box_size
        return [
            self.get_square(bx, by)
            for by in range(box_size)
            for bx in range(box_size)
        ]

    def __repr__(self):
        return (f"Game(size={self.size()}, entries={len(self.entries)}, "
                f"invalid={len(self.invalid_subsections)}, complete={self.is_complete})")
