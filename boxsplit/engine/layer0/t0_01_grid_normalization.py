"""T0.01 Grid Normalization. ALWAYS FIRST

Split the diagram into rows and right-pad them with blanks to a common width.
"""

from __future__ import annotations

import logging

from boxsplit.engine.context import PipelineContext
from boxsplit.engine.registry import Layer, transform
from boxsplit.utils.grid import check_capacity, pad_rows, split_lines

logger = logging.getLogger(__name__)


@transform(
    id="T0.01",
    layer=Layer.NORMALIZATION,
    description="Pad diagram rows to a rectangular grid",
)
def grid_normalization(ctx: PipelineContext) -> None:
    ctx.grid = pad_rows(split_lines(ctx.diagram_raw))
    check_capacity(ctx.grid, ctx.config.max_grid_cells)
    logger.debug("Normalized grid: %d rows x %d cols", ctx.height, ctx.width)
