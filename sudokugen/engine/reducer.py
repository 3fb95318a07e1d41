# -*- coding: utf-8 -*-
"""Derive a puzzle from a solved grid by clearing cells."""
import random
from dataclasses import dataclass

from sudokugen.common.constants import CELL_COUNT
from sudokugen.common.errors import InternalSolverFailure, InvalidArgumentError
from sudokugen.common.grid import Grid
from sudokugen.engine.checker import is_consistent
from sudokugen.engine.solvability import SolvabilityCheck
from sudokugen.utils.log import get_logger

logger = get_logger(__name__)


@dataclass
class ReductionResult:
    """A puzzle and how many removals it took versus how many were asked for."""

    puzzle: Grid
    removed: int
    requested: int

    @property
    def exhausted(self) -> bool:
        """True if the candidate pool ran out before `requested` removals."""
        return self.removed < self.requested


class PuzzleReducer:
    """
    Clears randomly chosen cells while the puzzle stays acceptable.

    Every filled position is tried at most once, in a uniformly random order.
    A removal is committed only if `solvability_check` accepts the grid with
    the cell cleared; otherwise the value is put back and the position is not
    tried again.
    """

    def __init__(self, rng: random.Random, solvability_check: SolvabilityCheck):
        self.rng = rng
        self.solvability_check = solvability_check

    def reduce(self, full_grid: Grid, removal_count: int) -> ReductionResult:
        """
        Remove up to `removal_count` cells from a copy of `full_grid`.

        Args:
            full_grid (`Grid`): The solved grid. It is not modified.
            removal_count (`int`): Target number of cleared cells, in [0, 81].

        Returns:
            `ReductionResult`: The puzzle, possibly with fewer removals than
            requested when no remaining cell can be cleared.
        """
        if (
            isinstance(removal_count, bool)
            or not isinstance(removal_count, int)
            or not 0 <= removal_count <= CELL_COUNT
        ):
            raise InvalidArgumentError(
                f"removal_count must be an int in [0, {CELL_COUNT}], got {removal_count!r}"
            )

        puzzle = full_grid.copy()
        pool = puzzle.filled_positions()
        self.rng.shuffle(pool)

        removed = 0
        rejected = 0
        for pos in pool:
            if removed >= removal_count:
                break
            value = puzzle.get(pos)
            puzzle.clear(pos)
            if self.solvability_check(puzzle):
                removed += 1
                logger.debug(f"Removed {value} at {tuple(pos)} ({removed}/{removal_count})")
            else:
                puzzle.set(pos, value)
                rejected += 1
                logger.debug(f"Kept {value} at {tuple(pos)}, removal rejected")

        if not is_consistent(puzzle):
            raise InternalSolverFailure(f"Reduced puzzle breaks the Sudoku rules: {puzzle!r}")

        if removed < removal_count:
            logger.info(
                f"Candidate pool exhausted: removed {removed} of {removal_count} requested cells "
                f"({rejected} removals rejected)"
            )
        return ReductionResult(puzzle=puzzle, removed=removed, requested=removal_count)
