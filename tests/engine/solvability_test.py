# -*- coding: utf-8 -*-
"""Test cases for the solvability checks and their registry."""
import random
import unittest

from parameterized import parameterized

from sudokugen.common.errors import InternalSolverFailure
from sudokugen.common.grid import Grid
from sudokugen.engine.checker import is_consistent
from sudokugen.engine.reducer import PuzzleReducer
from sudokugen.engine.solvability import (
    SOLVABILITY_CHECKS,
    SolutionExistsCheck,
    SolvabilityCheck,
    UniqueSolutionCheck,
    propagate_singles,
)
from tests.tools import PUZZLE_ROWS, PUZZLE_SOLUTION_ROWS, canonical_grid, is_subset_of


class AlwaysRejectCheck(SolvabilityCheck):
    def __call__(self, grid):
        return False


class TestSolvabilityChecks(unittest.TestCase):
    def test_registry_default_mapping(self):
        self.assertIs(SOLVABILITY_CHECKS.get("any_solution"), SolutionExistsCheck)
        self.assertIs(SOLVABILITY_CHECKS.get("unique_solution"), UniqueSolutionCheck)
        self.assertIn("any_solution", SOLVABILITY_CHECKS.names())

    def test_registry_dotted_path(self):
        check_cls = SOLVABILITY_CHECKS.get(
            "tests.engine.solvability_test.AlwaysRejectCheck"
        )
        self.assertIs(check_cls, AlwaysRejectCheck)
        self.assertFalse(check_cls()(Grid()))

    def test_registry_unknown_name(self):
        with self.assertRaises(ValueError):
            SOLVABILITY_CHECKS.get("no_such_check")
        with self.assertRaises(ImportError):
            SOLVABILITY_CHECKS.get("tests.engine.solvability_test.NoSuchCheck")

    def test_propagate_singles_fills_forced_cells(self):
        grid = Grid.from_rows(PUZZLE_ROWS)
        self.assertTrue(propagate_singles(grid))
        # (4, 4) can only hold a 5
        self.assertEqual(grid.get((4, 4)), 5)
        self.assertGreater(grid.filled_count(), 30)
        self.assertTrue(is_subset_of(grid, Grid.from_rows(PUZZLE_SOLUTION_ROWS)))

    def test_propagate_singles_detects_dead_end(self):
        rows = [[1, 2, 3, 4, 5, 6, 7, 8, 0]] + [[0] * 9 for _ in range(8)]
        rows[1][8] = 9
        self.assertFalse(propagate_singles(Grid.from_rows(rows)))

    def test_solution_exists(self):
        check = SolutionExistsCheck()
        self.assertTrue(check(Grid()))
        self.assertTrue(check(Grid.from_rows(PUZZLE_ROWS)))
        self.assertTrue(check(canonical_grid()))

        rows = [row[:] for row in PUZZLE_ROWS]
        rows[0][2] = 5  # duplicate 5 in row 0
        self.assertFalse(check(Grid.from_rows(rows)))

    def test_unique_solution(self):
        check = UniqueSolutionCheck()
        self.assertTrue(check(Grid.from_rows(PUZZLE_ROWS)))
        self.assertTrue(check(canonical_grid()))
        self.assertFalse(check(Grid()))

    def test_unique_solution_rejects_swappable_digits(self):
        # clearing every 1 and 2 leaves both the grid and its 1<->2 swap as solutions
        grid = canonical_grid()
        for pos in Grid.positions():
            if grid.get(pos) in (1, 2):
                grid.clear(pos)
        self.assertTrue(SolutionExistsCheck()(grid))
        self.assertFalse(UniqueSolutionCheck()(grid))

    def test_propagate_singles_fills_hidden_single(self):
        # 1s at (1,3), (2,6), (3,1) and (6,2) leave (0,0) as the only place for
        # a 1 in row 0, although (0,0) itself still has every digit available
        rows = [[0] * 9 for _ in range(9)]
        rows[1][3] = rows[2][6] = rows[3][1] = rows[6][2] = 1
        grid = Grid.from_rows(rows)
        self.assertTrue(propagate_singles(grid))
        self.assertEqual(grid.get((0, 0)), 1)
        self.assertTrue(is_consistent(grid))

    def test_propagate_singles_detects_missing_room(self):
        # the three empty cells of row 0 share a box with the 9 at (1, 6)
        rows = [[0] * 9 for _ in range(9)]
        rows[0][:6] = [1, 2, 3, 4, 5, 6]
        rows[1][6] = 9
        self.assertFalse(propagate_singles(Grid.from_rows(rows)))

    def test_check_cost_is_deterministic(self):
        grid = canonical_grid()
        for pos in list(Grid.positions())[::2]:
            grid.clear(pos)
        a, b = SolutionExistsCheck(), SolutionExistsCheck()
        self.assertTrue(a(grid))
        self.assertTrue(b(grid))
        self.assertEqual(a.filler.iterations, b.filler.iterations)

    def test_iteration_cap_is_honored(self):
        check = UniqueSolutionCheck(max_iterations=1)
        with self.assertRaises(InternalSolverFailure):
            check(Grid())


class StepRecordingCheck(SolutionExistsCheck):
    """Records the most assignments any single call needed."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.worst = 0

    def __call__(self, grid):
        accepted = super().__call__(grid)
        self.worst = max(self.worst, self.filler.iterations)
        return accepted


class TestCheckCost(unittest.TestCase):
    @parameterized.expand([(0,), (1,), (16,), (27,), (34,)])
    def test_removing_every_cell_stays_cheap(self, seed):
        check = StepRecordingCheck()
        result = PuzzleReducer(random.Random(seed), check).reduce(canonical_grid(), 81)
        self.assertEqual(result.removed, 81)
        self.assertLess(check.worst, 2000)

    @parameterized.expand([(0,), (16,), (27,), (34,)])
    def test_capped_check_accepts_subsets_of_a_solution(self, seed):
        check = SolutionExistsCheck(max_iterations=5000)
        result = PuzzleReducer(random.Random(seed), check).reduce(canonical_grid(), 81)
        self.assertEqual(result.removed, 81)
        self.assertEqual(result.puzzle, Grid())
