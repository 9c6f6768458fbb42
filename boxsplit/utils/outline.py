"""Outline synthesis: rebuilds a closed rectilinear border around one labeled region.

Works on a local, mutable list-of-lists copy of the region's bounding box.
The box carries a one-cell margin on every side to hold the border.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from boxsplit.glyphs import BLANK, CORNER, HORIZONTAL, VERTICAL
from boxsplit.utils.morphology import BBox

# Local stand-in for region cells; never a glyph the outline writes.
_INTERIOR = "@"


def cut_interior(
    labels: NDArray[np.int32],
    region_id: int,
    bbox: BBox,
) -> list[list[str]]:
    """Blank box sized to ``bbox`` with the region's cells marked as interior."""
    fr, fc, lr, lc = bbox
    height, width = lr - fr + 1, lc - fc + 1
    cells = [[BLANK] * width for _ in range(height)]
    for i in range(1, height - 1):
        for j in range(1, width - 1):
            if labels[fr + i, fc + j] == region_id:
                cells[i][j] = _INTERIOR
    return cells


def _put(cells: list[list[str]], i: int, j: int, ch: str) -> None:
    if cells[i][j] == BLANK:
        cells[i][j] = ch


def draw_halo(cells: list[list[str]]) -> None:
    """Surround every interior cell with ``-`` above/below and ``|`` left/right."""
    for i in range(1, len(cells)):
        for j in range(1, len(cells[i])):
            if cells[i][j] == _INTERIOR:
                _put(cells, i - 1, j, HORIZONTAL)
                _put(cells, i, j - 1, VERTICAL)
                _put(cells, i, j + 1, VERTICAL)
                _put(cells, i + 1, j, HORIZONTAL)


def fix_corners(cells: list[list[str]]) -> None:
    """Turn line ends and line crossings into ``+``.

    The four sweeps run in a fixed order; later sweeps see the corners placed
    by earlier ones.
    """
    # Left end of a horizontal run
    for row in cells:
        for j in range(1, len(row)):
            if row[j] == HORIZONTAL and row[j - 1] in (BLANK, VERTICAL):
                row[j - 1] = CORNER
    # Right end of a horizontal run
    for row in cells:
        for j in range(1, len(row)):
            if row[j] in (BLANK, VERTICAL) and row[j - 1] == HORIZONTAL:
                row[j] = CORNER
    # Vertical run hanging below a horizontal
    for i in range(1, len(cells)):
        for j in range(len(cells[i])):
            if cells[i][j] == VERTICAL and cells[i - 1][j] == HORIZONTAL:
                cells[i - 1][j] = CORNER
    # Horizontal under the bottom of a vertical run
    for i in range(1, len(cells)):
        for j in range(len(cells[i])):
            if cells[i][j] == HORIZONTAL and cells[i - 1][j] == VERTICAL:
                cells[i][j] = CORNER


def clear_interior(cells: list[list[str]]) -> None:
    for row in cells:
        for j, ch in enumerate(row):
            if ch == _INTERIOR:
                row[j] = BLANK


def to_rows(cells: list[list[str]]) -> list[str]:
    return ["".join(row) for row in cells]
