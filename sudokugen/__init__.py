# -*- coding: utf-8 -*-
"""Sudoku grid and puzzle generator."""

__version__ = "0.1.0"

from sudokugen.common.errors import (
    InternalSolverFailure,
    InvalidArgumentError,
    InvalidSizeError,
    SudokuError,
)
from sudokugen.common.grid import Grid, Position
from sudokugen.engine import (
    generate_from_config,
    generate_full_sudoku,
    generate_sudoku_to_solve,
)
from sudokugen.utils.printer import format_grid, print_grid

__all__ = [
    "Grid",
    "Position",
    "SudokuError",
    "InvalidSizeError",
    "InvalidArgumentError",
    "InternalSolverFailure",
    "generate_full_sudoku",
    "generate_sudoku_to_solve",
    "generate_from_config",
    "format_grid",
    "print_grid",
]
