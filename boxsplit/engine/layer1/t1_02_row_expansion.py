"""T1.02 Row Expansion.

Insert a separator row between two rows that put ``+`` over ``+`` or ``-``
over ``-`` in the same column. The separator is ``|`` where it continues a
vertical line.
"""

from __future__ import annotations

import logging

from boxsplit.engine.context import PipelineContext
from boxsplit.engine.registry import Layer, transform
from boxsplit.utils.grid import check_capacity, check_rectangular, insert_row, rows_conflict

logger = logging.getLogger(__name__)


@transform(
    id="T1.02",
    layer=Layer.EXPANSION,
    dependencies=["T1.01"],
    description="Insert separator rows between touching horizontal borders",
)
def row_expansion(ctx: PipelineContext) -> None:
    inserted = 0
    i = 1
    while i < ctx.height:
        if rows_conflict(ctx.grid[i - 1], ctx.grid[i]):
            ctx.grid = insert_row(ctx.grid, i)
            check_rectangular(ctx.grid)
            ctx.expanded_rows.append(i)
            inserted += 1
            # The separator never conflicts with either neighbor
            i += 1
        i += 1
    check_capacity(ctx.grid, ctx.config.max_grid_cells)
    logger.debug("Row expansion: %d rows inserted", inserted)
