# -*- coding: utf-8 -*-
"""Text rendering of grids, for inspection only."""
from typing import List, Optional

from sudokugen.common.constants import BOX_SIZE, EMPTY, GRID_SIZE, PrintStyle
from sudokugen.common.grid import Grid

_BOX_RULE = "------+-------+------"
_DEFAULT_EMPTY = "."


def _cell(value: int, empty: str) -> str:
    return empty if value == EMPTY else str(value)


def _plain_lines(grid: Grid, empty: str) -> List[str]:
    return [" ".join(_cell(v, empty) for _, v in grid.row(r)) for r in range(GRID_SIZE)]


def _boxed_lines(grid: Grid, empty: str) -> List[str]:
    lines = []
    for r in range(GRID_SIZE):
        row = []
        for pos, v in grid.row(r):
            row.append(_cell(v, empty))
            if pos.column % BOX_SIZE == BOX_SIZE - 1 and pos.column != GRID_SIZE - 1:
                row.append("|")
        lines.append(" ".join(row))
        if r % BOX_SIZE == BOX_SIZE - 1 and r != GRID_SIZE - 1:
            lines.append(_BOX_RULE)
    return lines


def _wide_lines(grid: Grid, empty: str) -> List[str]:
    return ["".join(f"{_cell(v, empty):>4}" for _, v in grid.row(r)) for r in range(GRID_SIZE)]


def format_grid(grid: Grid, style: str = "plain", empty: Optional[str] = None) -> str:
    """
    Render `grid` as text, one grid row per line.

    Args:
        grid (`Grid`): The grid to render.
        style (`str`): `plain`, `boxed` or `wide`.
        empty (`Optional[str]`): Placeholder for empty cells. Default to a
            blank for `wide` and to `.` for the other styles.

    Returns:
        `str`: The text block, without a trailing newline.
    """
    if not isinstance(style, PrintStyle):
        style = PrintStyle(style)
    if empty is None:
        empty = " " if style == PrintStyle.WIDE else _DEFAULT_EMPTY
    if style == PrintStyle.BOXED:
        lines = _boxed_lines(grid, empty)
    elif style == PrintStyle.WIDE:
        lines = _wide_lines(grid, empty)
    else:
        lines = _plain_lines(grid, empty)
    return "\n".join(lines)


def print_grid(grid: Grid, style: str = "plain", empty: Optional[str] = None) -> None:
    print(format_grid(grid, style=style, empty=empty))
