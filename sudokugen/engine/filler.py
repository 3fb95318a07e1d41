# -*- coding: utf-8 -*-
"""Randomized backtracking over the constraint checker."""
import random
from typing import List, Optional, Set, Tuple

from sudokugen.common.constants import EMPTY
from sudokugen.common.errors import InternalSolverFailure
from sudokugen.common.grid import Grid, Position
from sudokugen.engine.checker import candidates, propagate_singles
from sudokugen.utils.log import get_logger

logger = get_logger(__name__)


class BacktrackingFiller:
    """
    Depth-first search that completes a grid cell by cell.

    Features:
    - Candidates of every cell are shuffled with the injected random source,
      so repeated runs produce different grids
    - Works from an empty grid (generation) or from a partial one (solving)
    - Optional iteration cap, raised as `InternalSolverFailure` when hit
    """

    def __init__(
        self,
        rng: Optional[random.Random],
        max_iterations: Optional[int] = None,
        most_constrained: bool = False,
        propagate: bool = False,
    ):
        """
        Initialize the filler.

        Args:
            rng (`Optional[random.Random]`): Random source used to order
                candidates. None tries candidates in ascending order, which
                makes every search deterministic.
            max_iterations (`Optional[int]`): Upper bound on value assignments
                per call. None disables the cap.
            most_constrained (`bool`): Visit the empty cell with the fewest
                candidates first instead of the first empty cell in row-major
                order. Solving partial grids is much faster this way.
            propagate (`bool`): Fill naked and hidden singles at every node of
                `count_solutions` before branching. Contradictions are then
                found long before the search gets deep.
        """
        self.rng = rng
        self.max_iterations = max_iterations
        self.most_constrained = most_constrained
        self.propagate = propagate
        self.iterations = 0

    def fill(self, grid: Grid) -> bool:
        """
        Complete `grid` in place.

        Returns:
            `bool`: True if the grid is completely filled, False if no
            completion exists. On False the grid is left as it was passed in.
        """
        self.iterations = 0
        filled = self._fill(grid)
        logger.debug(
            f"Backtracking {'filled' if filled else 'exhausted'} "
            f"after {self.iterations} assignments"
        )
        return filled

    def solve(self, grid: Grid) -> Optional[Grid]:
        """Return a completed copy of `grid`, or None if it has no solution."""
        solution = grid.copy()
        if self.fill(solution):
            return solution
        return None

    def count_solutions(self, grid: Grid, limit: int = 2) -> int:
        """
        Count completions of `grid`, stopping once `limit` are found.

        The caller's grid is not changed.
        """
        self.iterations = 0
        return self._count(grid.copy(), limit)

    def _step(self) -> None:
        self.iterations += 1
        if self.max_iterations is not None and self.iterations > self.max_iterations:
            raise InternalSolverFailure(
                f"Backtracking exceeded the iteration cap of {self.max_iterations}"
            )

    def _next_empty(self, grid: Grid) -> Optional[Tuple[Position, Set[int]]]:
        """The next cell to assign and its candidates, or None when the grid is full."""
        if not self.most_constrained:
            for pos in Grid.positions():
                if grid.get(pos) == EMPTY:
                    return pos, candidates(grid, pos)
            return None

        best = None
        for pos in grid.empty_positions():
            cand = candidates(grid, pos)
            if len(cand) <= 1:
                return pos, cand  # forced move or dead end
            if best is None or len(cand) < len(best[1]):
                best = (pos, cand)
        return best

    def _ordered(self, cand: Set[int]) -> List[int]:
        nums = sorted(cand)
        if self.rng is not None:
            self.rng.shuffle(nums)
        return nums

    def _fill(self, grid: Grid) -> bool:
        nxt = self._next_empty(grid)
        if nxt is None:
            return True

        pos, cand = nxt
        for v in self._ordered(cand):
            self._step()
            grid.set(pos, v)
            if self._fill(grid):
                return True
            grid.clear(pos)

        return False

    def _count(self, grid: Grid, limit: int) -> int:
        if self.propagate:
            # singles go to a node-local copy, the caller undoes only its own assignment
            grid = grid.copy()
            if not propagate_singles(grid):
                return 0

        nxt = self._next_empty(grid)
        if nxt is None:
            return 1

        pos, cand = nxt
        found = 0
        for v in self._ordered(cand):
            self._step()
            grid.set(pos, v)
            found += self._count(grid, limit - found)
            grid.clear(pos)
            if found >= limit:
                break

        return found
