# -*- coding: utf-8 -*-
"""Checks deciding whether a partial grid is still an acceptable puzzle."""
from abc import ABC, abstractmethod
from typing import Optional

from sudokugen.common.grid import Grid
from sudokugen.engine.checker import is_consistent, propagate_singles
from sudokugen.engine.filler import BacktrackingFiller
from sudokugen.utils.registry import Registry

SOLVABILITY_CHECKS: Registry = Registry(
    "solvability_checks",
    default_mapping={
        "any_solution": "sudokugen.engine.solvability.SolutionExistsCheck",
        "unique_solution": "sudokugen.engine.solvability.UniqueSolutionCheck",
    },
)


class SolvabilityCheck(ABC):
    """
    Decides whether a partial grid is acceptable as a puzzle.

    Solutions are counted with a deterministic search: the most constrained
    cell first, candidates in ascending order, and singles propagated at every
    node. The same grid always costs the same number of steps.
    """

    def __init__(self, max_iterations: Optional[int] = None):
        """
        Args:
            max_iterations (`Optional[int]`): Cap on assignments per check,
                raised as `InternalSolverFailure`. None disables the cap.
        """
        self.filler = BacktrackingFiller(
            None, max_iterations=max_iterations, most_constrained=True, propagate=True
        )

    def count_solutions(self, grid: Grid, limit: int) -> int:
        if not is_consistent(grid):
            return 0
        return self.filler.count_solutions(grid, limit=limit)

    @abstractmethod
    def __call__(self, grid: Grid) -> bool:
        """Return True if `grid` is acceptable."""


class SolutionExistsCheck(SolvabilityCheck):
    """Accepts any grid with at least one completion."""

    def __call__(self, grid: Grid) -> bool:
        return self.count_solutions(grid, limit=1) >= 1


class UniqueSolutionCheck(SolvabilityCheck):
    """Accepts only grids with exactly one completion."""

    def __call__(self, grid: Grid) -> bool:
        return self.count_solutions(grid, limit=2) == 1


__all__ = [
    "SOLVABILITY_CHECKS",
    "SolvabilityCheck",
    "SolutionExistsCheck",
    "UniqueSolutionCheck",
    "propagate_singles",
]
