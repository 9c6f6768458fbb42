"""T2.01 Region Labeling.

Flood fill every blank region. Regions reaching the grid's outer boundary are
outside space and get the DISCARD label, as do gaps made only of inserted
separator cells. The rest are numbered 1..n in raster order of their first
cell.
"""

from __future__ import annotations

import logging

from boxsplit.engine.context import PipelineContext
from boxsplit.engine.registry import Layer, transform
from boxsplit.exceptions import CapacityError
from boxsplit.utils.morphology import label_regions

logger = logging.getLogger(__name__)


@transform(
    id="T2.01",
    layer=Layer.CLASSIFICATION,
    dependencies=["T1.03"],
    description="Label enclosed blank regions, discard those touching the boundary",
)
def region_labeling(ctx: PipelineContext) -> None:
    labels, count, bboxes = label_regions(ctx.grid, ctx.expanded_rows, ctx.expanded_cols)

    limit = ctx.config.max_regions
    if limit is not None and count > limit:
        raise CapacityError(f"Diagram has {count} enclosed regions, limit is {limit}")

    ctx.labels = labels
    ctx.region_count = count
    ctx.region_bboxes = bboxes
    logger.debug("Region labeling: %d enclosed regions", count)
