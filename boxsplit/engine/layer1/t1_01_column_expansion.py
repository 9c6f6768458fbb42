"""T1.01 Column Expansion.

Insert a separator column wherever two border glyphs touch side by side
(``++``, ``||``, ``+|``), so flood fill cannot leak between the shapes they
belong to. The separator is ``-`` when it continues a horizontal line.
"""

from __future__ import annotations

import logging

from boxsplit.engine.context import PipelineContext
from boxsplit.engine.registry import Layer, transform
from boxsplit.utils.grid import check_capacity, check_rectangular, find_ambiguous_pair, insert_column

logger = logging.getLogger(__name__)


def expand_columns(ctx: PipelineContext) -> int:
    """Separate every ambiguous pair, row by row. Returns the number of insertions."""
    inserted = 0
    for i in range(ctx.height):
        p = find_ambiguous_pair(ctx.grid[i])
        while p >= 0:
            ctx.grid = insert_column(ctx.grid, p)
            check_rectangular(ctx.grid)
            ctx.expanded_cols = [c + 1 if c > p else c for c in ctx.expanded_cols]
            ctx.expanded_cols.append(p)
            inserted += 1
            # Rescan from the start; the separator may expose a later pair
            p = find_ambiguous_pair(ctx.grid[i])
    return inserted


@transform(
    id="T1.01",
    layer=Layer.EXPANSION,
    dependencies=["T0.01"],
    description="Insert separator columns between touching vertical borders",
)
def column_expansion(ctx: PipelineContext) -> None:
    ctx.width_before_expansion = ctx.width
    inserted = expand_columns(ctx)
    ctx.width_after_first_pass = ctx.width
    check_capacity(ctx.grid, ctx.config.max_grid_cells)
    logger.debug("Column expansion: %d columns inserted", inserted)
