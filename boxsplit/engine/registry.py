"""Transform registry.

Each pipeline step is a plain function over ``PipelineContext``, registered at
import time:

    @transform(id="T1.02", layer=Layer.EXPANSION, dependencies=["T1.01"])
    def row_expansion(ctx: PipelineContext) -> None:
        ...

The pipeline asks the registry for one run order covering every step.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from boxsplit.engine.context import PipelineContext

logger = logging.getLogger(__name__)


class Layer(enum.IntEnum):
    NORMALIZATION = 0
    EXPANSION = 1
    CLASSIFICATION = 2
    RECONSTRUCTION = 3


@dataclass
class TransformSpec:
    id: str
    layer: Layer
    fn: Callable[["PipelineContext"], None]
    dependencies: list[str] = field(default_factory=list)
    # Shown in the pipeline's progress log
    description: str = ""

    @property
    def sort_key(self) -> tuple[Layer, str]:
        return (self.layer, self.id)


class TransformRegistry:
    def __init__(self) -> None:
        self._transforms: dict[str, TransformSpec] = {}

    def register(self, spec: TransformSpec) -> None:
        if spec.id in self._transforms:
            raise ValueError(f"Duplicate transform ID: {spec.id}")
        self._transforms[spec.id] = spec
        logger.debug("Registered transform %s (%s)", spec.id, spec.layer.name)

    def get_layer(self, layer: Layer) -> list[TransformSpec]:
        return sorted(
            (s for s in self._transforms.values() if s.layer == layer),
            key=lambda s: s.id,
        )

    def all(self) -> list[TransformSpec]:
        return sorted(self._transforms.values(), key=lambda s: s.sort_key)

    def resolve_order(self) -> list[TransformSpec]:
        """Every transform after its dependencies; ready transforms go in (layer, id) order.

        Raises ValueError on a dependency that is not registered or on a cycle.
        """
        pending: dict[str, set[str]] = {}
        for spec in self._transforms.values():
            unknown = [d for d in spec.dependencies if d not in self._transforms]
            if unknown:
                raise ValueError(f"{spec.id} depends on unregistered transforms: {unknown}")
            pending[spec.id] = set(spec.dependencies)

        ordered: list[TransformSpec] = []
        while pending:
            ready = [self._transforms[tid] for tid, deps in pending.items() if not deps]
            if not ready:
                raise ValueError(f"Circular dependency detected among: {set(pending)}")
            nxt = min(ready, key=lambda s: s.sort_key)
            ordered.append(nxt)
            del pending[nxt.id]
            for deps in pending.values():
                deps.discard(nxt.id)

        return ordered


# Module-level singleton
_registry = TransformRegistry()


def get_registry() -> TransformRegistry:
    return _registry


def transform(
    *,
    id: str,
    layer: Layer,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Decorator to register a transform function."""

    def decorator(fn: Callable[["PipelineContext"], None]):
        _registry.register(
            TransformSpec(
                id=id,
                layer=layer,
                fn=fn,
                dependencies=dependencies or [],
                description=description,
            )
        )
        return fn

    return decorator
