# -*- coding: utf-8 -*-
"""Permutations that map a solved grid to another solved grid."""
import random

from sudokugen.common.constants import BOX_SIZE, GRID_SIZE
from sudokugen.common.errors import InvalidArgumentError
from sudokugen.common.grid import Grid


def _check_same_group(i: int, j: int, what: str) -> None:
    if not (0 <= i < GRID_SIZE and 0 <= j < GRID_SIZE):
        raise InvalidArgumentError(f"{what} index out of range: {i}, {j}")
    if i // BOX_SIZE != j // BOX_SIZE:
        raise InvalidArgumentError(f"{what}s {i} and {j} are not in the same box {what.lower()}")


def swap_rows(grid: Grid, i: int, j: int) -> Grid:
    """Swap two rows of the same band."""
    _check_same_group(i, j, "Row")
    rows = grid.to_rows()
    rows[i], rows[j] = rows[j], rows[i]
    return Grid.from_rows(rows)


def swap_columns(grid: Grid, i: int, j: int) -> Grid:
    """Swap two columns of the same stack."""
    _check_same_group(i, j, "Column")
    rows = grid.to_rows()
    for row in rows:
        row[i], row[j] = row[j], row[i]
    return Grid.from_rows(rows)


def swap_bands(grid: Grid, a: int, b: int) -> Grid:
    """Swap two bands (groups of three rows), e.g. rows 0-2 with rows 6-8."""
    if not (0 <= a < BOX_SIZE and 0 <= b < BOX_SIZE):
        raise InvalidArgumentError(f"Band index out of range: {a}, {b}")
    rows = grid.to_rows()
    for k in range(BOX_SIZE):
        ra, rb = a * BOX_SIZE + k, b * BOX_SIZE + k
        rows[ra], rows[rb] = rows[rb], rows[ra]
    return Grid.from_rows(rows)


def swap_stacks(grid: Grid, a: int, b: int) -> Grid:
    """Swap two stacks (groups of three columns)."""
    if not (0 <= a < BOX_SIZE and 0 <= b < BOX_SIZE):
        raise InvalidArgumentError(f"Stack index out of range: {a}, {b}")
    rows = grid.to_rows()
    for row in rows:
        for k in range(BOX_SIZE):
            ca, cb = a * BOX_SIZE + k, b * BOX_SIZE + k
            row[ca], row[cb] = row[cb], row[ca]
    return Grid.from_rows(rows)


def rotate(grid: Grid, quarter_turns: int = 1) -> Grid:
    """Rotate clockwise by `quarter_turns` * 90 degrees."""
    rows = grid.to_rows()
    for _ in range(quarter_turns % 4):
        rows = [list(row) for row in zip(*rows[::-1])]
    return Grid.from_rows(rows)


def _random_pair(rng: random.Random, n: int):
    return rng.sample(range(n), 2)


def shuffle_grid(grid: Grid, rng: random.Random, rounds: int = 3) -> Grid:
    """
    Apply random row, column, band and stack swaps, then a random rotation.

    Each swap keeps every row, column and box a permutation of 1-9, so a
    solved grid stays solved.

    Args:
        grid (`Grid`): The grid to permute, left untouched.
        rng (`random.Random`): Random source.
        rounds (`int`): Swap attempts per band, per stack and for the band
            and stack order.

    Returns:
        `Grid`: The permuted grid.
    """
    for group in range(BOX_SIZE):
        for _ in range(rounds):
            i, j = _random_pair(rng, BOX_SIZE)
            grid = swap_rows(grid, group * BOX_SIZE + i, group * BOX_SIZE + j)
            i, j = _random_pair(rng, BOX_SIZE)
            grid = swap_columns(grid, group * BOX_SIZE + i, group * BOX_SIZE + j)
    for _ in range(rounds):
        grid = swap_bands(grid, *_random_pair(rng, BOX_SIZE))
        grid = swap_stacks(grid, *_random_pair(rng, BOX_SIZE))
    return rotate(grid, rng.randrange(4))
