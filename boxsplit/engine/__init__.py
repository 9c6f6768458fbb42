"""Boxsplit diagram transform engine."""

from boxsplit.engine.registry import transform, Layer, get_registry
from boxsplit.engine.context import PipelineContext, ShapeData
from boxsplit.engine.config import PipelineConfig
from boxsplit.engine.pipeline import Pipeline

__all__ = [
    "transform",
    "Layer",
    "get_registry",
    "PipelineContext",
    "ShapeData",
    "PipelineConfig",
    "Pipeline",
]
