# -*- coding: utf-8 -*-
"""Errors raised by the generator."""


class SudokuError(Exception):
    """Base class of all generator errors."""


class InvalidSizeError(SudokuError, ValueError):
    """The requested grid dimensions are not 9x9."""


class InvalidArgumentError(SudokuError, ValueError):
    """An argument is outside its valid range, e.g. a removal count above 81."""


class InternalSolverFailure(SudokuError, RuntimeError):
    """The backtracking search failed where it mathematically cannot.

    Raised when filling an empty grid exhausts every candidate, when the
    iteration cap is hit, or when a puzzle fails its own consistency check.
    It always points at a bug and is never retried.
    """
