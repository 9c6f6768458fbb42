"""T3.03 Shape Text. Render each shape with trailing blanks trimmed."""

from __future__ import annotations

from boxsplit.engine.context import PipelineContext
from boxsplit.engine.registry import Layer, transform


@transform(
    id="T3.03",
    layer=Layer.RECONSTRUCTION,
    dependencies=["T3.02"],
    description="Render shapes as trimmed text",
)
def shape_text(ctx: PipelineContext) -> None:
    for shape in ctx.shapes:
        shape.text = shape.stringify()
