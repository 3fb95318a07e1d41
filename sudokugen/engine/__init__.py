# -*- coding: utf-8 -*-
"""Generation entry points."""
import random
from dataclasses import dataclass
from typing import Optional, Union

from sudokugen.common.constants import GRID_SIZE
from sudokugen.common.errors import InternalSolverFailure, InvalidSizeError
from sudokugen.common.grid import Grid
from sudokugen.engine.checker import is_solved
from sudokugen.engine.filler import BacktrackingFiller
from sudokugen.engine.reducer import PuzzleReducer, ReductionResult
from sudokugen.engine.solvability import SOLVABILITY_CHECKS, SolvabilityCheck
from sudokugen.engine.transforms import shuffle_grid
from sudokugen.utils.log import get_logger

logger = get_logger(__name__)


def generate_full_sudoku(
    width: int = GRID_SIZE,
    height: int = GRID_SIZE,
    rng: Optional[random.Random] = None,
    max_iterations: Optional[int] = None,
    transform: bool = False,
) -> Grid:
    """
    Generate a completely filled, valid grid.

    Args:
        width (`int`): Grid width, must be 9.
        height (`int`): Grid height, must be 9.
        rng (`Optional[random.Random]`): Random source. A fresh OS-seeded one
            is used if not given.
        max_iterations (`Optional[int]`): Cap on backtracking assignments.
        transform (`bool`): Also apply random solution-preserving swaps and a
            rotation to the filled grid.

    Returns:
        `Grid`: The solved grid.

    Raises:
        InvalidSizeError: if the size is not 9x9.
        InternalSolverFailure: if backtracking fails, which only a bug can cause.
    """
    if width != GRID_SIZE or height != GRID_SIZE:
        raise InvalidSizeError(
            f"Only {GRID_SIZE}x{GRID_SIZE} grids are supported, got {width}x{height}"
        )
    rng = rng or random.Random()

    grid = Grid()
    filler = BacktrackingFiller(rng, max_iterations=max_iterations)
    if not filler.fill(grid):
        raise InternalSolverFailure("Backtracking exhausted every candidate on an empty grid")
    if transform:
        grid = shuffle_grid(grid, rng)
    if not is_solved(grid):
        raise InternalSolverFailure(f"Generated grid is not a valid solution: {grid!r}")

    logger.debug(f"Generated full grid after {filler.iterations} assignments")
    return grid


def _build_check(solvability_check: Union[str, SolvabilityCheck]) -> SolvabilityCheck:
    if isinstance(solvability_check, SolvabilityCheck):
        return solvability_check
    check_cls = SOLVABILITY_CHECKS.get(solvability_check)
    return check_cls()


def reduce_sudoku(
    full_grid: Grid,
    removal_count: int,
    rng: Optional[random.Random] = None,
    solvability_check: Union[str, SolvabilityCheck] = "any_solution",
) -> ReductionResult:
    """Same as `generate_sudoku_to_solve`, also reporting how many cells were removed."""
    rng = rng or random.Random()
    reducer = PuzzleReducer(rng, _build_check(solvability_check))
    return reducer.reduce(full_grid, removal_count)


def generate_sudoku_to_solve(
    full_grid: Grid,
    removal_count: int,
    rng: Optional[random.Random] = None,
    solvability_check: Union[str, SolvabilityCheck] = "any_solution",
) -> Grid:
    """
    Derive a puzzle from a solved grid by clearing cells.

    Fewer than `removal_count` cells are cleared when no remaining cell can be
    removed without failing `solvability_check`; this is not an error.

    Args:
        full_grid (`Grid`): The solved grid, left untouched.
        removal_count (`int`): Number of cells to clear, in [0, 81].
        rng (`Optional[random.Random]`): Random source.
        solvability_check (`Union[str, SolvabilityCheck]`): `any_solution`
            (default), `unique_solution`, a dotted class path, or an instance.

    Returns:
        `Grid`: The puzzle.

    Raises:
        InvalidArgumentError: if `removal_count` is out of range.
    """
    return reduce_sudoku(full_grid, removal_count, rng, solvability_check).puzzle


@dataclass
class GenerationResult:
    solution: Grid
    puzzle: Grid
    removed: int
    requested: int


def generate_from_config(config) -> GenerationResult:
    """Run the full generation described by a checked `Config`."""
    rng = random.Random(config.generator.seed)
    solution = generate_full_sudoku(
        GRID_SIZE,
        GRID_SIZE,
        rng=rng,
        max_iterations=config.generator.max_iterations,
        transform=config.generator.transform,
    )
    # max_iterations only caps filling the full grid, checks run uncapped
    result = reduce_sudoku(
        solution, config.reducer.removal_count, rng, config.reducer.solvability_check
    )
    logger.info(
        f"Generated puzzle with {result.removed} empty cells "
        f"({result.requested} requested, check `{config.reducer.solvability_check}`)"
    )
    return GenerationResult(
        solution=solution,
        puzzle=result.puzzle,
        removed=result.removed,
        requested=result.requested,
    )


__all__ = [
    "generate_full_sudoku",
    "generate_sudoku_to_solve",
    "reduce_sudoku",
    "generate_from_config",
    "GenerationResult",
    "ReductionResult",
]
