"""Value objects produced by the shape factories."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ShapeKind(str, Enum):
    """Shape kinds a factory can be registered for."""

    CIRCLE = "circle"
    SQUARE = "square"


class ShapeDescription(BaseModel):
    """
    Immutable description of a geometric shape.

    Instances compare by value and are hashable, so they can be used as
    dictionary keys or collected into sets. Assigning to a field raises
    ``pydantic.ValidationError``.

    Example:
        >>> ShapeDescription(name="Square", area=4.0, perimeter=8.0)
        ShapeDescription(name='Square', area=4.0, perimeter=8.0)
    """

    name: str = Field(..., min_length=1, description="Human readable shape name")
    area: float = Field(..., ge=0.0, description="Enclosed area")
    perimeter: float = Field(..., ge=0.0, description="Length of the boundary")

    model_config = ConfigDict(frozen=True)


__all__ = ["ShapeKind", "ShapeDescription"]
