# -*- coding: utf-8 -*-
"""Sudoku legality rules shared by the filler and the solvability checks."""
from typing import Iterable, List, Set, Tuple

from sudokugen.common.constants import DIGITS, EMPTY, GRID_SIZE
from sudokugen.common.grid import Cell, Grid, Position


def _build_peers() -> List[List[Tuple[Position, ...]]]:
    grid = Grid()
    peers = []
    for r in range(GRID_SIZE):
        row_peers = []
        for c in range(GRID_SIZE):
            pos = Position(r, c)
            cells = {
                other
                for unit in (grid.row(r), grid.column(c), grid.box(pos.box))
                for other, _ in unit
                if other != pos
            }
            row_peers.append(tuple(sorted(cells)))
        peers.append(row_peers)
    return peers


# the 20 cells sharing a row, column or box with each cell
PEERS = _build_peers()


def _peer_values(grid: Grid, pos: Tuple[int, int]) -> Set[int]:
    """Values in the row, column and box of `pos`, excluding the cell itself."""
    values = {grid.get(other) for other in PEERS[pos[0]][pos[1]]}
    values.discard(EMPTY)
    return values


def is_legal(grid: Grid, pos: Tuple[int, int], value: int) -> bool:
    """
    Check whether placing `value` at `pos` keeps the grid legal.

    The current content of `pos` is ignored, so a filled cell can be
    re-checked against its own value.

    Args:
        grid (`Grid`): Current grid.
        pos (`Tuple[int, int]`): (row, column) of the cell.
        value (`int`): Digit to place.

    Returns:
        `bool`: True if `value` is absent from the row, column and box of `pos`.
    """
    return value not in _peer_values(grid, pos)


def candidates(grid: Grid, pos: Tuple[int, int]) -> Set[int]:
    """All digits that `is_legal` accepts at `pos`."""
    return set(DIGITS - _peer_values(grid, pos))


def _has_duplicates(unit: Iterable[Cell]) -> bool:
    nums = [value for _, value in unit if value != EMPTY]
    return len(nums) != len(set(nums))


def is_consistent(grid: Grid) -> bool:
    """
    Check that no row, column or box holds a duplicate digit.

    Empty cells are allowed, so this validates partial grids too.
    """
    for i in range(GRID_SIZE):
        if (
            _has_duplicates(grid.row(i))
            or _has_duplicates(grid.column(i))
            or _has_duplicates(grid.box(i))
        ):
            return False
    return True


def is_solved(grid: Grid) -> bool:
    """A grid is solved when every cell is filled and no unit repeats a digit."""
    return grid.is_full() and is_consistent(grid)


def _build_units() -> Tuple[Tuple[Position, ...], ...]:
    grid = Grid()
    units = []
    for i in range(GRID_SIZE):
        for unit in (grid.row(i), grid.column(i), grid.box(i)):
            units.append(tuple(pos for pos, _ in unit))
    return tuple(units)


# the 27 rows, columns and boxes
UNITS = _build_units()


def propagate_singles(grid: Grid) -> bool:
    """
    Fill forced cells until none is left.

    A cell is forced when it has a single candidate (naked single), or when it
    is the only cell of a row, column or box that can still take a digit the
    unit is missing (hidden single). Mutates `grid`; the set of completions is
    unchanged.

    Returns:
        `bool`: False if a contradiction was found, i.e. an empty cell without
        candidates or a unit with no room left for a missing digit.
    """
    while True:
        cands = {pos: candidates(grid, pos) for pos in grid.empty_positions()}
        if not cands:
            return True

        found = False
        for pos, cand in cands.items():
            if not cand:
                return False
            if len(cand) == 1:
                value = next(iter(cand))
                # an earlier single of this pass may have taken the value
                if not is_legal(grid, pos, value):
                    return False
                grid.set(pos, value)
                found = True
        if found:
            continue

        for unit in UNITS:
            present = {grid.get(pos) for pos in unit}
            for digit in DIGITS - present:
                places = [pos for pos in unit if digit in cands.get(pos, ())]
                if not places:
                    return False
                if len(places) == 1:
                    pos = places[0]
                    if grid.get(pos) != EMPTY or not is_legal(grid, pos, digit):
                        return False
                    grid.set(pos, digit)
                    found = True
        if not found:
            return True
