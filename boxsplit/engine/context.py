"""PipelineContext: the single mutable state object flowing through all transforms.

Grid state (rows, expansion record, region labels) → PipelineContext.*
Per-shape results → ShapeData
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from boxsplit.engine.config import PipelineConfig


@dataclass
class ShapeData:
    """One reconstructed shape, cut out of the expanded grid."""

    region_id: int
    # Bounding box in expanded-grid coordinates, border included
    first_row: int
    first_col: int
    last_row: int
    last_col: int
    # Local copy of the box, border synthesized
    grid: list[str] = field(default_factory=list)
    # Final trimmed text, set once expansions are removed
    text: str = ""

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def remove_column(self, col: int) -> None:
        """Drop an inserted separator column if it falls strictly inside the box."""
        if col <= self.first_col or col >= self.last_col:
            return
        offset = col - self.first_col
        self.grid = [row[:offset] + row[offset + 1:] for row in self.grid]
        self.last_col -= 1

    def remove_row(self, row: int) -> None:
        """Drop an inserted separator row if it falls strictly inside the box."""
        if row <= self.first_row or row >= self.last_row:
            return
        offset = row - self.first_row
        del self.grid[offset]
        self.last_row -= 1

    def stringify(self) -> str:
        return "\n".join(row.rstrip() for row in self.grid)

    def __str__(self) -> str:
        header = f"({self.first_row}, {self.first_col})->({self.last_row}, {self.last_col}):"
        return "\n".join([header, *self.grid])


@dataclass
class PipelineContext:
    """Shared state flowing through the entire pipeline."""

    # Raw diagram text
    diagram_raw: str = ""
    # Row buffers; rectangular once T0.01 has run
    grid: list[str] = field(default_factory=list)

    # --- Expansion record (populated by Layer 1) ---
    width_before_expansion: int = 0
    width_after_first_pass: int = 0
    # Indices of inserted separators, in fully expanded coordinates
    expanded_cols: list[int] = field(default_factory=list)
    expanded_rows: list[int] = field(default_factory=list)

    # --- Region labels (populated by Layer 2) ---
    # 0 = not blank, -1 = leaking region, 1..n = enclosed region n
    labels: NDArray[np.int32] | None = None
    region_count: int = 0
    # Border-inclusive box of region n at index n - 1
    region_bboxes: list[tuple[int, int, int, int]] = field(default_factory=list)

    # --- Shapes (populated by Layer 3) ---
    shapes: list[ShapeData] = field(default_factory=list)

    # --- Pipeline metadata ---
    config: PipelineConfig = field(default_factory=PipelineConfig)
    completed_transforms: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def num_shapes(self) -> int:
        return len(self.shapes)

    def shape_texts(self) -> list[str]:
        return [s.text for s in self.shapes]
