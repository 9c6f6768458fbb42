"""T1.03 Column Re-expansion.

Separator rows can line up new side-by-side border pairs. When the first
column pass widened the grid, run it once more over the row-expanded grid.
"""

from __future__ import annotations

import logging

from boxsplit.engine.context import PipelineContext
from boxsplit.engine.layer1.t1_01_column_expansion import expand_columns
from boxsplit.engine.registry import Layer, transform
from boxsplit.utils.grid import check_capacity

logger = logging.getLogger(__name__)


@transform(
    id="T1.03",
    layer=Layer.EXPANSION,
    dependencies=["T1.02"],
    description="Re-run column expansion after row insertion",
)
def column_reexpansion(ctx: PipelineContext) -> None:
    if ctx.width_before_expansion == ctx.width_after_first_pass:
        return
    inserted = expand_columns(ctx)
    check_capacity(ctx.grid, ctx.config.max_grid_cells)
    logger.debug("Column re-expansion: %d columns inserted", inserted)
