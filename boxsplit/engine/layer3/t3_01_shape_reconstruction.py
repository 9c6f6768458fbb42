"""T3.01 Shape Reconstruction.

For each enclosed region: cut its bounding box (plus a one-cell margin) out of
the grid, keep only the region's own cells, synthesize a border around them,
turn line ends into corners and blank the interior again.
"""

from __future__ import annotations

import logging

from boxsplit.engine.context import PipelineContext, ShapeData
from boxsplit.engine.registry import Layer, transform
from boxsplit.utils.outline import (
    clear_interior,
    cut_interior,
    draw_halo,
    fix_corners,
    to_rows,
)

logger = logging.getLogger(__name__)


def build_shape(ctx: PipelineContext, region_id: int) -> ShapeData:
    bbox = ctx.region_bboxes[region_id - 1]
    cells = cut_interior(ctx.labels, region_id, bbox)
    draw_halo(cells)
    fix_corners(cells)
    clear_interior(cells)

    fr, fc, lr, lc = bbox
    return ShapeData(
        region_id=region_id,
        first_row=fr,
        first_col=fc,
        last_row=lr,
        last_col=lc,
        grid=to_rows(cells),
    )


@transform(
    id="T3.01",
    layer=Layer.RECONSTRUCTION,
    dependencies=["T2.01"],
    description="Rebuild a bordered shape for every enclosed region",
)
def shape_reconstruction(ctx: PipelineContext) -> None:
    if ctx.labels is None:
        return
    ctx.shapes = [build_shape(ctx, rid) for rid in range(1, ctx.region_count + 1)]
    logger.debug("Shape reconstruction: %d shapes", ctx.num_shapes)
