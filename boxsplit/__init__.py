"""Boxsplit: decompose ASCII box diagrams into their enclosed shapes."""

import logging

from boxsplit.config import configure_logging
from boxsplit.decomposer import decompose, register_transforms
from boxsplit.engine import Layer, Pipeline, PipelineConfig, PipelineContext, ShapeData, get_registry, transform
from boxsplit.exceptions import BoxSplitError, CapacityError, GridInvariantError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "configure_logging",
    "decompose",
    "register_transforms",
    "Layer",
    "Pipeline",
    "PipelineConfig",
    "PipelineContext",
    "ShapeData",
    "get_registry",
    "transform",
    "BoxSplitError",
    "CapacityError",
    "GridInvariantError",
]
