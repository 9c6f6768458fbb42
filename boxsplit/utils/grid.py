"""Grid utilities: row-buffer padding, separator insertion and shape checks.

A grid is a list of equal-length strings, one per diagram row. Every helper
that changes the grid returns the new row list rather than mutating strings.
"""

from __future__ import annotations

from boxsplit.exceptions import CapacityError, GridInvariantError
from boxsplit.glyphs import AMBIGUOUS_PAIRS, BLANK, CORNER, HORIZONTAL, VERTICAL


def split_lines(diagram: str) -> list[str]:
    """Split on newlines, dropping trailing empty lines."""
    lines = diagram.split("\n")
    while lines and lines[-1] == "":
        lines.pop()
    return lines


def pad_rows(lines: list[str]) -> list[str]:
    """Right-pad every line with blanks to the longest line's length."""
    width = max((len(line) for line in lines), default=0)
    return [line.ljust(width, BLANK) for line in lines]


def check_rectangular(grid: list[str]) -> None:
    if not grid:
        return
    width = len(grid[0])
    for i, row in enumerate(grid):
        if len(row) != width:
            raise GridInvariantError(
                f"Row {i} has length {len(row)}, expected {width}"
            )


def check_capacity(grid: list[str], max_cells: int) -> None:
    cells = len(grid) * (len(grid[0]) if grid else 0)
    if cells > max_cells:
        raise CapacityError(
            f"Grid of {cells} cells exceeds the limit of {max_cells}"
        )


# ── Columns ──


def find_ambiguous_pair(row: str) -> int:
    """Return the index right after the first glyph of an ambiguous pair, or -1."""
    for pattern in AMBIGUOUS_PAIRS:
        p = row.find(pattern)
        if p >= 0:
            return p + 1
    return -1


def column_separator(left: str, right: str) -> str:
    if left == HORIZONTAL or right == HORIZONTAL or (left == CORNER and right == CORNER):
        return HORIZONTAL
    return BLANK


def insert_column(grid: list[str], p: int) -> list[str]:
    """Insert a separator column at index ``p`` across all rows."""
    return [row[:p] + column_separator(row[p - 1], row[p]) + row[p:] for row in grid]


# ── Rows ──


def rows_conflict(top: str, bottom: str) -> bool:
    """True if two stacked rows put ``+`` over ``+`` or ``-`` over ``-`` anywhere."""
    for t, b in zip(top, bottom):
        if t == b and (t == CORNER or t == HORIZONTAL):
            return True
    return False


def row_separator(top: str, bottom: str) -> str:
    chars = []
    for t, b in zip(top, bottom):
        if t == VERTICAL or b == VERTICAL or (t == CORNER and b == CORNER):
            chars.append(VERTICAL)
        else:
            chars.append(BLANK)
    return "".join(chars)


def insert_row(grid: list[str], i: int) -> list[str]:
    """Insert a separator row between rows ``i - 1`` and ``i``."""
    return grid[:i] + [row_separator(grid[i - 1], grid[i])] + grid[i:]
