"""T3.02 Expansion Reversal.

Remove the separator columns and rows inserted by Layer 1 from every shape
they cut through. Removal goes from the highest index down so earlier
removals never shift the indices still to come.
"""

from __future__ import annotations

from boxsplit.engine.context import PipelineContext
from boxsplit.engine.registry import Layer, transform


@transform(
    id="T3.02",
    layer=Layer.RECONSTRUCTION,
    dependencies=["T3.01"],
    description="Remove inserted separators from each shape",
)
def expansion_reversal(ctx: PipelineContext) -> None:
    for col in sorted(ctx.expanded_cols, reverse=True):
        for shape in ctx.shapes:
            shape.remove_column(col)
    for row in sorted(ctx.expanded_rows, reverse=True):
        for shape in ctx.shapes:
            shape.remove_row(row)
