"""
Sudoku Stepper Package

A generalized Sudoku board (4x4, 9x9, 16x16, ...) with undo history and a
stepwise backtracking solver.
"""

from .grid import (
    Grid, Cell, Position, GridSubsectionType, Row, Column, Square, SubsectionValues,
    GridError, InvalidGridSize, CellOutOfBounds, InvalidCellValue, ReadonlyCellMutation,
    InvalidRowNumber, InvalidColumnNumber, InvalidSquareNumber,
)
from .checker import Checker, CheckerResult
from .game import Game, Entry
from .solver import Solver, SolverStatus, UnsolvableError, solve
from .output import SolutionFormatter

__version__ = "1.0.0"
__all__ = [
    'Grid',
    'Cell',
    'Position',
    'GridSubsectionType',
    'Row',
    'Column',
    'Square',
    'SubsectionValues',
    'GridError',
    'InvalidGridSize',
    'CellOutOfBounds',
    'InvalidCellValue',
    'ReadonlyCellMutation',
    'InvalidRowNumber',
    'InvalidColumnNumber',
    'InvalidSquareNumber',
    'Checker',
    'CheckerResult',
    'Game',
    'Entry',
    'Solver',
    'SolverStatus',
    'UnsolvableError',
    'solve',
    'SolutionFormatter'
]
