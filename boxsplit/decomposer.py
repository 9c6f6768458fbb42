"""Entry point: diagram text in, one text block per enclosed shape out."""

from __future__ import annotations

import importlib
import logging
import pkgutil

from boxsplit.engine.config import PipelineConfig
from boxsplit.engine.context import PipelineContext
from boxsplit.engine.pipeline import create_pipeline

logger = logging.getLogger(__name__)

_LAYERS = ["layer0", "layer1", "layer2", "layer3"]
_registered = False


def register_transforms() -> None:
    """Import all transform modules so @transform decorators fire."""
    global _registered
    if _registered:
        return
    for layer_name in _LAYERS:
        package_name = f"boxsplit.engine.{layer_name}"
        package = importlib.import_module(package_name)
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"{package_name}.{module_name}")
    _registered = True


def decompose(diagram: str, config: PipelineConfig | None = None) -> list[str]:
    """Split an ASCII box diagram into its enclosed shapes.

    Each shape comes back as its own diagram with a closed border, in the
    order its first blank cell appears (top to bottom, left to right). Raises
    CapacityError when the diagram exceeds the limits in ``config``.
    """
    register_transforms()
    ctx = PipelineContext(diagram_raw=diagram)
    create_pipeline(config).run(ctx)
    logger.info("Decomposed %d-row diagram into %d shapes", ctx.height, ctx.num_shapes)
    return ctx.shape_texts()
