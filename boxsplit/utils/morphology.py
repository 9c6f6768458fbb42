"""Region labeling over the blank cells of a character grid."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np
from numpy.typing import NDArray

from boxsplit.glyphs import BLANK, DISCARD, UNLABELED

# (first_row, first_col, last_row, last_col)
BBox = tuple[int, int, int, int]


def blank_mask(grid: list[str]) -> NDArray[np.bool_]:
    """Boolean grid, True where the character is a blank."""
    if not grid:
        return np.zeros((0, 0), dtype=bool)
    return np.array([[ch == BLANK for ch in row] for row in grid], dtype=bool)


def label_regions(
    grid: list[str],
    inserted_rows: Iterable[int] = (),
    inserted_cols: Iterable[int] = (),
) -> tuple[NDArray[np.int32], int, list[BBox]]:
    """Label 4-connected blank regions in raster order of their first cell.

    Returns the label map, the number of enclosed regions, and the bounding box
    of each enclosed region (index ``label - 1``) widened by one cell for the
    border, as ``(first_row, first_col, last_row, last_col)``.

    Enclosed regions get labels 1..n. A region is labeled DISCARD instead when
    it reaches the outer boundary, or when every one of its cells lies in an
    inserted separator row or column (a gap that only exists because two
    borders were pulled apart). A discarded region's label is handed to the
    next region found.
    """
    mask = blank_mask(grid)
    rows, cols = mask.shape
    labels = np.zeros((rows, cols), dtype=np.int32)
    sep_rows = set(inserted_rows)
    sep_cols = set(inserted_cols)
    current_label = 0
    bboxes: list[BBox] = []

    for r in range(rows):
        for c in range(cols):
            if mask[r, c] and labels[r, c] == UNLABELED:
                cells, leaked = _flood_fill(mask, labels, r, c, current_label + 1)
                synthetic = all(cr in sep_rows or cc in sep_cols for cr, cc in cells)
                if leaked or synthetic:
                    for cr, cc in cells:
                        labels[cr, cc] = DISCARD
                else:
                    current_label += 1
                    bboxes.append(_bounds(cells))

    return labels, current_label, bboxes


def _bounds(cells: list[tuple[int, int]]) -> BBox:
    ys = [r for r, _ in cells]
    xs = [c for _, c in cells]
    return (min(ys) - 1, min(xs) - 1, max(ys) + 1, max(xs) + 1)


def _flood_fill(
    mask: NDArray[np.bool_],
    labels: NDArray[np.int32],
    start_r: int,
    start_c: int,
    label: int,
) -> tuple[list[tuple[int, int]], bool]:
    """Stack-driven flood fill. Returns the filled cells and whether it left the grid."""
    rows, cols = mask.shape
    stack = [(start_r, start_c)]
    labels[start_r, start_c] = label
    cells: list[tuple[int, int]] = []
    leaked = False

    while stack:
        r, c = stack.pop()
        cells.append((r, c))
        for dr, dc in [(-1, 0), (1, 0), (0, -1), (0, 1)]:
            nr, nc = r + dr, c + dc
            if not (0 <= nr < rows and 0 <= nc < cols):
                leaked = True
                continue
            if mask[nr, nc] and labels[nr, nc] == UNLABELED:
                labels[nr, nc] = label
                stack.append((nr, nc))

    return cells, leaked
