# -*- coding: utf-8 -*-
"""Test cases for the generation entry points."""
import random
import unittest
from unittest import mock

from parameterized import parameterized

from sudokugen import (
    InternalSolverFailure,
    InvalidArgumentError,
    InvalidSizeError,
    generate_from_config,
    generate_full_sudoku,
    generate_sudoku_to_solve,
)
from sudokugen.common.config import Config
from sudokugen.common.grid import Grid
from sudokugen.engine import reduce_sudoku
from sudokugen.engine.checker import candidates, is_legal, is_solved
from sudokugen.engine.solvability import SolutionExistsCheck, UniqueSolutionCheck
from tests.tools import canonical_grid, is_subset_of, units_are_permutations


class TestGenerateFullSudoku(unittest.TestCase):
    def test_generated_grids_are_valid(self):
        for seed in range(10):
            grid = generate_full_sudoku(9, 9, rng=random.Random(seed))
            self.assertTrue(units_are_permutations(grid))
            self.assertTrue(is_solved(grid))

    def test_checker_agrees_with_generated_grid(self):
        grid = generate_full_sudoku(9, 9, rng=random.Random(11))
        for pos in Grid.positions():
            value = grid.get(pos)
            cleared = grid.copy()
            cleared.clear(pos)
            self.assertTrue(is_legal(cleared, pos, value))
            self.assertEqual(candidates(cleared, pos), {value})

    def test_different_seeds_give_different_grids(self):
        a = generate_full_sudoku(9, 9, rng=random.Random(1))
        b = generate_full_sudoku(9, 9, rng=random.Random(2))
        self.assertNotEqual(a, b)

    def test_same_seed_gives_same_grid(self):
        a = generate_full_sudoku(9, 9, rng=random.Random(5), transform=True)
        b = generate_full_sudoku(9, 9, rng=random.Random(5), transform=True)
        self.assertEqual(a, b)

    def test_default_rng(self):
        self.assertTrue(is_solved(generate_full_sudoku()))

    def test_transform(self):
        grid = generate_full_sudoku(9, 9, rng=random.Random(3), transform=True)
        self.assertTrue(is_solved(grid))

    @parameterized.expand([(4, 4), (16, 16), (9, 8), (8, 9), (0, 0)])
    def test_invalid_size(self, width, height):
        with self.assertRaises(InvalidSizeError):
            generate_full_sudoku(width, height)

    def test_exhausted_filler_is_fatal(self):
        with mock.patch(
            "sudokugen.engine.BacktrackingFiller.fill", return_value=False
        ), self.assertRaises(InternalSolverFailure):
            generate_full_sudoku(9, 9, rng=random.Random(0))

    def test_iteration_cap_is_fatal(self):
        with self.assertRaises(InternalSolverFailure):
            generate_full_sudoku(9, 9, rng=random.Random(0), max_iterations=5)


class TestGenerateSudokuToSolve(unittest.TestCase):
    def test_canonical_scenario(self):
        full = canonical_grid()
        puzzle = generate_sudoku_to_solve(full, 50, rng=random.Random(0))
        self.assertEqual(puzzle.filled_count(), 31)
        self.assertTrue(is_subset_of(puzzle, full))
        self.assertTrue(SolutionExistsCheck()(puzzle))

    def test_generated_puzzles_are_solvable(self):
        for seed in range(3):
            rng = random.Random(seed)
            full = generate_full_sudoku(9, 9, rng=rng)
            for n in (0, 20, 40, 60):
                puzzle = generate_sudoku_to_solve(full, n, rng=rng)
                self.assertGreaterEqual(puzzle.filled_count(), 81 - n)
                self.assertTrue(is_subset_of(puzzle, full))
                self.assertTrue(SolutionExistsCheck()(puzzle))

    def test_zero_removals(self):
        full = canonical_grid()
        self.assertEqual(generate_sudoku_to_solve(full, 0), full)

    def test_all_removals_terminate(self):
        puzzle = generate_sudoku_to_solve(canonical_grid(), 81, rng=random.Random(4))
        self.assertTrue(SolutionExistsCheck()(puzzle))

    def test_unique_check_by_name(self):
        full = generate_full_sudoku(9, 9, rng=random.Random(8))
        result = reduce_sudoku(full, 81, rng=random.Random(8), solvability_check="unique_solution")
        # a unique puzzle keeps at least 17 clues
        self.assertTrue(result.exhausted)
        self.assertGreaterEqual(result.puzzle.filled_count(), 17)
        self.assertTrue(UniqueSolutionCheck()(result.puzzle))

    def test_check_instance(self):
        check = UniqueSolutionCheck()
        full = generate_full_sudoku(9, 9, rng=random.Random(0))
        puzzle = generate_sudoku_to_solve(full, 30, solvability_check=check)
        self.assertEqual(puzzle.filled_count(), 51)
        self.assertTrue(check(puzzle))

    @parameterized.expand([(-1,), (82,), (1000,), ("10",)])
    def test_invalid_removal_count(self, count):
        with self.assertRaises(InvalidArgumentError):
            generate_sudoku_to_solve(canonical_grid(), count)


class TestGenerateFromConfig(unittest.TestCase):
    def test_seeded_config_is_reproducible(self):
        config = Config()
        config.generator.seed = 21
        config.reducer.difficulty = "easy"
        config.check_and_update()
        a = generate_from_config(config)
        b = generate_from_config(config)
        self.assertEqual(a.solution, b.solution)
        self.assertEqual(a.puzzle, b.puzzle)
        self.assertEqual(a.requested, 27)
        self.assertEqual(a.removed, 27)
        self.assertEqual(a.puzzle.filled_count(), 54)
        self.assertTrue(is_subset_of(a.puzzle, a.solution))

    @parameterized.expand([(0,), (16,), (27,), (34,)])
    def test_fill_cap_does_not_limit_checks(self, seed):
        config = Config()
        config.generator.seed = seed
        config.generator.max_iterations = 5000
        config.reducer.removal_count = 81
        config.check_and_update()
        result = generate_from_config(config)
        self.assertEqual(result.removed, 81)
        self.assertEqual(result.puzzle, Grid())
        self.assertTrue(is_solved(result.solution))
