"""
Shape description factories.

Components:
- models: ShapeKind tag and the immutable ShapeDescription record
- factory: one factory per shape kind plus create_circle/create_square
- registry: explicit dispatch from a shape kind to its factory
"""

from tddprimer.shapes.factory import (
    CircleFactory,
    ShapeFactory,
    SquareFactory,
    create_circle,
    create_square,
)
from tddprimer.shapes.models import ShapeDescription, ShapeKind
from tddprimer.shapes.registry import ShapeFactoryRegistry, default_registry

__all__ = [
    "ShapeKind",
    "ShapeDescription",
    "ShapeFactory",
    "CircleFactory",
    "SquareFactory",
    "create_circle",
    "create_square",
    "ShapeFactoryRegistry",
    "default_registry",
]
