"""Pipeline configuration: capacity limits for a single decomposition."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PipelineConfig:
    """Bounds on the work a single diagram may demand."""

    # Grid area (rows x cols), checked after normalization and after each
    # expansion transform. 4M cells ≈ a 2000x2000 character diagram.
    max_grid_cells: int = 4_000_000

    # Enclosed region cap. None = unbounded (region ids are plain ints).
    max_regions: int | None = None
