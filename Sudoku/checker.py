"""
Rule checking for Sudoku subsections

A subsection (row, column or box) is valid when no nonzero value repeats,
and complete when it holds no zero. Both flags always describe the whole
subsection, not just the first conflict.
"""

from typing import Iterable, List, Set, Tuple
from dataclasses import dataclass

from .grid import GridSubsectionType, SubsectionValues


@dataclass(frozen=True)
class CheckerResult:
    valid: bool
    complete: bool


# -----------------------------------------------------------------------------
# Constraint Checking
# -----------------------------------------------------------------------------
class Checker:
    """Validates subsections against the no-repeat rule."""

    def __init__(self):
        # Scratch set, cleared at the start of every check
        self._seen: Set[int] = set()

    def check_subsection(self, values: Iterable[int]) -> CheckerResult:
        """Single pass over the values; duplicates do not stop the scan."""
        self._seen.clear()
        valid = True
        complete = True
        for value in values:
            if value == 0:
                complete = False
                continue
            if value in self._seen:
                valid = False
            else:
                self._seen.add(value)
        return CheckerResult(valid=valid, complete=complete)

    def check_subsections(
        self, subsections: Iterable[SubsectionValues]
    ) -> List[Tuple[GridSubsectionType, CheckerResult]]:
        """One result per subsection, in input order."""
        return [
            (subsection.subsection_type, self.check_subsection(subsection))
            for subsection in subsections
        ]
