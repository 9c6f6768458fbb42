"""Pipeline orchestrator: runs transforms in dependency order, all or nothing."""

from __future__ import annotations

import logging
import time

from boxsplit.engine.config import PipelineConfig
from boxsplit.engine.context import PipelineContext
from boxsplit.engine.registry import Layer, TransformRegistry, TransformSpec, get_registry

logger = logging.getLogger(__name__)


class Pipeline:
    """Orchestrates the transform pipeline."""

    def __init__(
        self,
        registry: TransformRegistry | None = None,
        config: PipelineConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or PipelineConfig()

    def run(self, ctx: PipelineContext) -> PipelineContext:
        """Run the full pipeline on the given context.

        A failing transform stops the run and its exception propagates, so a
        context is either fully processed or the call raises.
        """
        start = time.perf_counter()
        ctx.config = self.config

        ordered = self.registry.resolve_order()
        logger.info("Pipeline: %d transforms queued", len(ordered))

        for spec in ordered:
            self._run_one(ctx, spec)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d/%d transforms in %.0fms",
            len(ctx.completed_transforms),
            len(ordered),
            total,
        )
        return ctx

    def run_layer(self, ctx: PipelineContext, layer: Layer) -> PipelineContext:
        """Run only transforms in a specific layer."""
        ctx.config = self.config
        for spec in self.registry.get_layer(layer):
            self._run_one(ctx, spec)
        return ctx

    def _run_one(self, ctx: PipelineContext, spec: TransformSpec) -> None:
        t0 = time.perf_counter()
        try:
            spec.fn(ctx)
        except Exception as e:
            ctx.errors[spec.id] = str(e)
            logger.warning("  %s (%s) FAILED: %s", spec.id, spec.description, e)
            raise
        ctx.completed_transforms.add(spec.id)
        elapsed = (time.perf_counter() - t0) * 1000
        logger.debug("  %s (%s) completed in %.1fms", spec.id, spec.description, elapsed)


def create_pipeline(config: PipelineConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline instance."""
    return Pipeline(config=config)
