"""
Core data structures for the Sudoku board: cells, positions and subsections

The grid knows how to address rows, columns and boxes but nothing about the
rules that apply to them; see checker.py for that.
"""
import json
import math
from typing import Iterator, List, NamedTuple, Sequence, Tuple, Union
from dataclasses import dataclass

import numpy as np


# -----------------------------------------------------------------------------
# Errors
# -----------------------------------------------------------------------------
class GridError(Exception):
    """Base class for recoverable grid errors"""


class InvalidGridSize(GridError):
    pass


class CellOutOfBounds(GridError):
    pass


class InvalidCellValue(GridError):
    def __init__(self, index: int, value: int = None):
        self.index = index
        self.value = value
        super().__init__(f"Invalid value {value} for cell {index}")


class ReadonlyCellMutation(GridError):
    pass


class InvalidRowNumber(GridError):
    pass


class InvalidColumnNumber(GridError):
    pass


class InvalidSquareNumber(GridError):
    pass


# -----------------------------------------------------------------------------
# Positions and cells
# -----------------------------------------------------------------------------
class Position(NamedTuple):
    """Cell coordinates: x is the column, y the row"""
    x: int
    y: int


PositionLike = Union[Position, Tuple[int, int]]


@dataclass
class Cell:
    """Represents a single cell in the grid"""
    value: int = 0
    readonly: bool = False  # Original clue, never written after construction


# -----------------------------------------------------------------------------
# Subsections
# -----------------------------------------------------------------------------
class GridSubsectionType:
    """A row, column or box of the grid, addressed by index only"""

    def coordinates(self, box_size: int) -> List[Position]:
        raise NotImplementedError


@dataclass(frozen=True)
class Row(GridSubsectionType):
    index: int

    def coordinates(self, box_size: int) -> List[Position]:
        side_size = box_size * box_size
        return [Position(x, self.index) for x in range(side_size)]

    def __repr__(self):
        return f"Row({self.index})"


@dataclass(frozen=True)
class Column(GridSubsectionType):
    index: int

    def coordinates(self, box_size: int) -> List[Position]:
        side_size = box_size * box_size
        return [Position(self.index, y) for y in range(side_size)]

    def __repr__(self):
        return f"Column({self.index})"


@dataclass(frozen=True)
class Square(GridSubsectionType):
    bx: int
    by: int

    def coordinates(self, box_size: int) -> List[Position]:
        """Raster order inside the box_size x box_size block"""
        x0 = self.bx * box_size
        y0 = self.by * box_size
        return [
            Position(x0 + (k % box_size), y0 + (k // box_size))
            for k in range(box_size * box_size)
        ]

    def __repr__(self):
        return f"Square({self.bx},{self.by})"


class SubsectionValues:
    """
    Values of one subsection, resolved against a snapshot of the board.

    Iteration is lazy and can be repeated; mutating the grid afterwards does
    not affect an existing instance.
    """

    def __init__(self, subsection_type: GridSubsectionType,
                 coordinates: List[Position], snapshot: Tuple[int, ...], side_size: int):
        self.subsection_type = subsection_type
        self.coordinates = coordinates
        self._snapshot = snapshot
        self._side_size = side_size

    def __iter__(self) -> Iterator[int]:
        for x, y in self.coordinates:
            yield self._snapshot[y * self._side_size + x]

    def __len__(self):
        return len(self.coordinates)

    def __repr__(self):
        return f"SubsectionValues({self.subsection_type!r}, {list(self)})"


def _exact_sqrt(n: int):
    """Integer square root of n, or None if n is not a perfect square"""
    root = math.isqrt(n)
    return root if root * root == n else None


# -----------------------------------------------------------------------------
# Grid
# -----------------------------------------------------------------------------
class Grid:
    """Board storage with row-major cells and subsection addressing"""

    def __init__(self, cells: Sequence[int]):
        cells = list(cells)
        if len(cells) < 4:
            raise InvalidGridSize(f"Grid needs at least 4 cells, got {len(cells)}")

        side_size = _exact_sqrt(len(cells))
        if side_size is None:
            raise InvalidGridSize(f"{len(cells)} cells is not a square board")
        box_size = _exact_sqrt(side_size)
        if box_size is None:
            raise InvalidGridSize(f"Side {side_size} has no integer box size")

        self.side_size = side_size
        self.box_size = box_size
        self.cells: List[Cell] = []
        for i, value in enumerate(cells):
            if value < 0 or value > side_size:
                raise InvalidCellValue(i, value)
            self.cells.append(Cell(value=value, readonly=value != 0))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        return cls([value for row in rows for value in row])

    @classmethod
    def from_json(cls, json_path: str) -> "Grid":
        """Load a puzzle from JSON: {"cells": [...]} or {"rows": [[...], ...]}"""
        with open(json_path, 'r') as f:
            data = json.load(f)

        if 'cells' in data:
            return cls(data['cells'])
        if 'rows' in data:
            return cls.from_rows(data['rows'])
        raise ValueError(f"[grid] {json_path} has neither 'cells' nor 'rows'")

    # ---------- cell access ----------

    def _index(self, pos: PositionLike) -> int:
        x, y = pos
        if x < 0 or y < 0 or x >= self.side_size or y >= self.side_size:
            raise CellOutOfBounds(f"({x},{y}) outside {self.side_size}x{self.side_size} grid")
        return y * self.side_size + x

    def get_cell(self, pos: PositionLike) -> int:
        return self.cells[self._index(pos)].value

    def is_readonly(self, pos: PositionLike) -> bool:
        return self.cells[self._index(pos)].readonly

    def set_cell(self, pos: PositionLike, value: int) -> int:
        """Write a value and return the one it replaced"""
        i = self._index(pos)
        cell = self.cells[i]
        if cell.readonly:
            raise ReadonlyCellMutation(f"Cell {tuple(pos)} is a clue")
        if value < 0 or value > self.side_size:
            raise InvalidCellValue(i, value)
        previous_value = cell.value
        cell.value = value
        return previous_value

    def reset(self):
        """Zero every cell that is not a clue"""
        for cell in self.cells:
            if not cell.readonly:
                cell.value = 0

    def copy(self) -> "Grid":
        """Independent grid with the same values and the same clues"""
        grid = Grid([0] * len(self.cells))
        grid.cells = [Cell(value=c.value, readonly=c.readonly) for c in self.cells]
        return grid

    def values(self) -> Tuple[int, ...]:
        return tuple(c.value for c in self.cells)

    def to_array(self) -> np.ndarray:
        return np.array(self.values(), dtype=int).reshape(self.side_size, self.side_size)

    def __len__(self):
        return len(self.cells)

    # ---------- subsections ----------

    def _check_subsection(self, subsection_type: GridSubsectionType):
        if isinstance(subsection_type, Row):
            if not 0 <= subsection_type.index < self.side_size:
                raise InvalidRowNumber(str(subsection_type.index))
        elif isinstance(subsection_type, Column):
            if not 0 <= subsection_type.index < self.side_size:
                raise InvalidColumnNumber(str(subsection_type.index))
        elif isinstance(subsection_type, Square):
            if not (0 <= subsection_type.bx < self.box_size and 0 <= subsection_type.by < self.box_size):
                raise InvalidSquareNumber(f"{subsection_type.bx},{subsection_type.by}")
        else:
            raise TypeError(f"Unknown subsection type: {subsection_type!r}")

    def _subsection_values(self, subsection_type: GridSubsectionType,
                           snapshot: Tuple[int, ...]) -> SubsectionValues:
        self._check_subsection(subsection_type)
        return SubsectionValues(
            subsection_type,
            subsection_type.coordinates(self.box_size),
            snapshot,
            self.side_size,
        )

    def get_subsection_values(self, subsection_type: GridSubsectionType) -> SubsectionValues:
        return self._subsection_values(subsection_type, self.values())

    def get_all_subsection_values(self) -> List[SubsectionValues]:
        """One (row, column, box) triple per index, all read from the same snapshot"""
        snapshot = self.values()
        out: List[SubsectionValues] = []
        for i in range(self.side_size):
            out.append(self._subsection_values(Row(i), snapshot))
            out.append(self._subsection_values(Column(i), snapshot))
            out.append(self._subsection_values(Square(i % self.box_size, i // self.box_size), snapshot))
        return out

    def get_subsections_for_cell(self, pos: PositionLike) -> List[GridSubsectionType]:
        """Row, column and box containing pos"""
        self._index(pos)
        x, y = pos
        return [Row(y), Column(x), Square(x // self.box_size, y // self.box_size)]

    def __repr__(self):
        return f"Grid(side_size={self.side_size}, box_size={self.box_size})"
