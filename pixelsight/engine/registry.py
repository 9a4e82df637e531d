"""Transform registry — every analysis stage is a standalone function registered via decorator.

Usage:
    @transform(id="T0.02", layer=Layer.MEASUREMENT, description="Local brightness variation")
    def complexity(ctx: AnalysisContext) -> None:
        ctx.complexity = estimate_complexity(ctx.buffer)

Adding a new stage = creating one file with the decorator. Nothing else changes.
The registry only holds function references; per-image state lives in the context.
"""

from __future__ import annotations

import enum
import heapq
import importlib
import logging
import pkgutil
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from pixelsight.engine.context import AnalysisContext

logger = logging.getLogger(__name__)

LAYER_PACKAGES = ("layer0", "layer1", "layer2")


class Layer(enum.IntEnum):
    MEASUREMENT = 0
    COMPOSITION = 1
    CLASSIFICATION = 2


@dataclass
class TransformSpec:
    id: str
    layer: Layer
    fn: Callable[["AnalysisContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class TransformRegistry:
    """Registry of analysis transforms, keyed by ID."""

    def __init__(self) -> None:
        self._transforms: dict[str, TransformSpec] = {}

    def register(self, spec: TransformSpec) -> None:
        if spec.id in self._transforms:
            raise ValueError(f"Duplicate transform ID: {spec.id}")
        self._transforms[spec.id] = spec
        logger.debug("Registered transform %s (%s)", spec.id, spec.layer.name)

    def resolve_order(self) -> list[TransformSpec]:
        """All transforms in dependency order, ties broken by ID."""
        dependents: dict[str, list[str]] = {tid: [] for tid in self._transforms}
        pending: dict[str, int] = {}
        for tid, spec in self._transforms.items():
            known = [dep for dep in spec.dependencies if dep in self._transforms]
            pending[tid] = len(known)
            for dep in known:
                dependents[dep].append(tid)

        ready = [tid for tid, n in pending.items() if n == 0]
        heapq.heapify(ready)
        ordered: list[TransformSpec] = []
        while ready:
            tid = heapq.heappop(ready)
            ordered.append(self._transforms[tid])
            for child in dependents[tid]:
                pending[child] -= 1
                if pending[child] == 0:
                    heapq.heappush(ready, child)

        if len(ordered) != len(self._transforms):
            stuck = sorted(tid for tid, n in pending.items() if n > 0)
            raise ValueError(f"Circular dependency detected among: {stuck}")
        return ordered

    @property
    def count(self) -> int:
        return len(self._transforms)


# Module-level registry, filled once at import time
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

    def decorator(fn: Callable[["AnalysisContext"], None]):
        spec = TransformSpec(
            id=id,
            layer=layer,
            fn=fn,
            dependencies=dependencies or [],
            description=description,
        )
        _registry.register(spec)
        return fn

    return decorator


def load_transforms() -> TransformRegistry:
    """Import all layer modules so @transform decorators fire. Safe to call repeatedly."""
    for layer_name in LAYER_PACKAGES:
        package = importlib.import_module(f"pixelsight.engine.{layer_name}")
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"{package.__name__}.{module_name}")
    return _registry
