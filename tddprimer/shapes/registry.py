"""
Shape Factory Registry

Explicit, tag-based dispatch from a ``ShapeKind`` to the one factory that
builds it.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Union

from tddprimer.exceptions import UnknownShapeKindError
from tddprimer.shapes.factory import CircleFactory, ShapeFactory, SquareFactory
from tddprimer.shapes.models import ShapeDescription, ShapeKind

KindLike = Union[ShapeKind, str]


class ShapeFactoryRegistry:
    """
    Registry of shape factories keyed by shape kind.

    Thread-safe: lookups are safe from any thread, but registering and
    unregistering factories concurrently requires external synchronization.

    Example:
        >>> registry = ShapeFactoryRegistry()
        >>> registry.register(CircleFactory())
        >>> registry.create("circle", 2.0).name
        'Circle'
    """

    def __init__(self):
        self._factories: Dict[ShapeKind, ShapeFactory] = {}

    def register(self, factory: ShapeFactory) -> None:
        """
        Register a factory under its ``kind``.

        Raises:
            TypeError: If ``factory`` does not implement ShapeFactory
            ValueError: If a factory for the same kind is already registered
        """
        if not isinstance(factory, ShapeFactory) or not isinstance(
            factory.kind, ShapeKind
        ):
            raise TypeError(
                f"factory must implement ShapeFactory, got {type(factory).__name__}"
            )

        if factory.kind in self._factories:
            raise ValueError(f"Factory already registered: {factory.kind.value}")

        self._factories[factory.kind] = factory

    def unregister(self, kind: KindLike) -> None:
        """Remove the factory for ``kind``; unknown kinds are ignored."""
        try:
            resolved = self._resolve_kind(kind)
        except UnknownShapeKindError:
            return
        self._factories.pop(resolved, None)

    def get(self, kind: KindLike) -> Optional[ShapeFactory]:
        """Return the factory for ``kind`` or None if none is registered."""
        try:
            return self._factories.get(self._resolve_kind(kind))
        except UnknownShapeKindError:
            return None

    def has_factory(self, kind: KindLike) -> bool:
        return self.get(kind) is not None

    def list_kinds(self) -> List[str]:
        """Sorted names of the registered shape kinds."""
        return sorted(kind.value for kind in self._factories)

    def create(self, kind: KindLike, dimension: float) -> ShapeDescription:
        """
        Build a shape of the given kind.

        Args:
            kind: ShapeKind member or its value, case-insensitive
            dimension: Diameter for circles, side length for squares

        Raises:
            UnknownShapeKindError: If no factory handles ``kind``
            InvalidArgumentError: If ``dimension`` is rejected by the factory
        """
        factory = self.get(kind)
        if factory is None:
            raise UnknownShapeKindError(kind, self.list_kinds())
        return factory.create(dimension)

    def _resolve_kind(self, kind: KindLike) -> ShapeKind:
        if isinstance(kind, ShapeKind):
            return kind
        if isinstance(kind, str):
            try:
                return ShapeKind(kind.strip().lower())
            except ValueError:
                pass
        raise UnknownShapeKindError(kind, self.list_kinds())


def default_registry() -> ShapeFactoryRegistry:
    """Return a new registry holding the circle and square factories."""

    registry = ShapeFactoryRegistry()
    registry.register(CircleFactory())
    registry.register(SquareFactory())
    return registry


__all__ = ["ShapeFactoryRegistry", "default_registry"]
