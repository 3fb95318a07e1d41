# -*- coding: utf-8 -*-
"""The 9x9 cell container."""
from __future__ import annotations

from typing import Iterator, List, NamedTuple, Sequence, Tuple

from sudokugen.common.constants import BOX_SIZE, EMPTY, GRID_SIZE
from sudokugen.common.errors import InvalidArgumentError, InvalidSizeError


class Position(NamedTuple):
    """A (row, column) pair, both in [0, 8]."""

    row: int
    column: int

    @property
    def box(self) -> int:
        return (self.row // BOX_SIZE) * BOX_SIZE + self.column // BOX_SIZE


Cell = Tuple[Position, int]


class Grid:
    """
    Fixed 9x9 storage of cell values.

    A cell holds `EMPTY` (0) or a digit 1-9. The grid does not enforce any
    Sudoku rule; legality lives in `sudokugen.engine.checker`.
    """

    __slots__ = ("_cells",)

    def __init__(self):
        self._cells: List[List[int]] = [[EMPTY] * GRID_SIZE for _ in range(GRID_SIZE)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Grid:
        """
        Build a grid from 9 rows of 9 ints, 0 meaning empty.

        Raises:
            InvalidSizeError: if `rows` is not 9x9.
            InvalidArgumentError: if a value is not an int in [0, 9].
        """
        if len(rows) != GRID_SIZE or any(len(row) != GRID_SIZE for row in rows):
            raise InvalidSizeError(
                f"Expected {GRID_SIZE} rows of {GRID_SIZE} cells, "
                f"got {len(rows)} rows of lengths {[len(row) for row in rows]}"
            )
        grid = cls()
        for r, row in enumerate(rows):
            for c, value in enumerate(row):
                if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 9:
                    raise InvalidArgumentError(f"Invalid value {value!r} at ({r}, {c})")
                grid._cells[r][c] = value
        return grid

    def to_rows(self) -> List[List[int]]:
        return [row[:] for row in self._cells]

    def copy(self) -> Grid:
        grid = Grid()
        grid._cells = self.to_rows()
        return grid

    def get(self, pos: Tuple[int, int]) -> int:
        return self._cells[pos[0]][pos[1]]

    def set(self, pos: Tuple[int, int], value: int) -> None:
        self._cells[pos[0]][pos[1]] = value

    def clear(self, pos: Tuple[int, int]) -> None:
        self._cells[pos[0]][pos[1]] = EMPTY

    # unit iteration

    def row(self, r: int) -> Iterator[Cell]:
        for c in range(GRID_SIZE):
            yield Position(r, c), self._cells[r][c]

    def column(self, c: int) -> Iterator[Cell]:
        for r in range(GRID_SIZE):
            yield Position(r, c), self._cells[r][c]

    def box(self, b: int) -> Iterator[Cell]:
        """Iterate over box `b`, numbered 0-8 left to right, top to bottom."""
        r0 = (b // BOX_SIZE) * BOX_SIZE
        c0 = (b % BOX_SIZE) * BOX_SIZE
        for r in range(r0, r0 + BOX_SIZE):
            for c in range(c0, c0 + BOX_SIZE):
                yield Position(r, c), self._cells[r][c]

    @staticmethod
    def box_of(pos: Tuple[int, int]) -> int:
        return (pos[0] // BOX_SIZE) * BOX_SIZE + pos[1] // BOX_SIZE

    # whole-grid queries

    @staticmethod
    def positions() -> Iterator[Position]:
        """All 81 positions in row-major order."""
        for r in range(GRID_SIZE):
            for c in range(GRID_SIZE):
                yield Position(r, c)

    def filled_positions(self) -> List[Position]:
        return [pos for pos in self.positions() if self.get(pos) != EMPTY]

    def empty_positions(self) -> List[Position]:
        return [pos for pos in self.positions() if self.get(pos) == EMPTY]

    def filled_count(self) -> int:
        return sum(1 for row in self._cells for value in row if value != EMPTY)

    def is_full(self) -> bool:
        return all(value != EMPTY for row in self._cells for value in row)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Grid({''.join(str(v) for row in self._cells for v in row)})"
