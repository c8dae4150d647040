"""
Shape factories.

Every shape kind gets its own factory class and its own module-level
``create_*`` helper. Circles and squares are both built from a single number,
so dispatching on the argument type alone cannot tell them apart; callers
always name the shape they want.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import ClassVar, Protocol, runtime_checkable

from tddprimer.exceptions import InvalidArgumentError
from tddprimer.observability.logging import get_logger
from tddprimer.shapes.models import ShapeDescription, ShapeKind

logger = get_logger(__name__)


@runtime_checkable
class ShapeFactory(Protocol):
    """Builds a ``ShapeDescription`` of one kind from a single dimension."""

    kind: ShapeKind

    def create(self, dimension: float) -> ShapeDescription:  # pragma: no cover - interface
        ...


def _reject(
    argument: str, value: float, kind: ShapeKind, reason: str | None = None
) -> InvalidArgumentError:
    logger.warning(
        "invalid_dimension",
        kind=kind.value,
        argument=argument,
        value=value,
    )
    return InvalidArgumentError(argument, value, reason)


def _validate_dimension(argument: str, value: float, kind: ShapeKind) -> float:
    """Return ``value`` as a float or raise for unusable dimensions."""

    # bool is an int subclass; True as a diameter is always a caller bug
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(
            f"{argument} must be a real number, got {type(value).__name__}"
        )

    try:
        dimension = float(value)
    except OverflowError as exc:
        raise _reject(
            argument, value, kind, f"{argument} is too large to represent"
        ) from exc

    if not math.isfinite(dimension) or dimension < 0:
        raise _reject(argument, value, kind)
    return dimension


def _describe(
    name: str,
    area: float,
    perimeter: float,
    argument: str,
    value: float,
    kind: ShapeKind,
) -> ShapeDescription:
    """Build the description, rejecting measurements that overflowed."""

    if not (math.isfinite(area) and math.isfinite(perimeter)):
        raise _reject(
            argument,
            value,
            kind,
            f"{argument} is too large for a finite area and perimeter",
        )
    return ShapeDescription(name=name, area=area, perimeter=perimeter)


class CircleFactory:
    """Describe a circle from its diameter."""

    kind: ClassVar[ShapeKind] = ShapeKind.CIRCLE

    def create(self, diameter: float) -> ShapeDescription:
        dimension = _validate_dimension("diameter", diameter, self.kind)
        radius = dimension / 2.0
        shape = _describe(
            "Circle",
            math.pi * radius * radius,
            2.0 * math.pi * radius,
            "diameter",
            diameter,
            self.kind,
        )
        logger.debug("shape_created", kind=self.kind.value, dimension=dimension)
        return shape


class SquareFactory:
    """Describe a square from its side length."""

    kind: ClassVar[ShapeKind] = ShapeKind.SQUARE

    def create(self, side_length: float) -> ShapeDescription:
        dimension = _validate_dimension("side_length", side_length, self.kind)
        shape = _describe(
            "Square",
            dimension * dimension,
            4.0 * dimension,
            "side_length",
            side_length,
            self.kind,
        )
        logger.debug("shape_created", kind=self.kind.value, dimension=dimension)
        return shape


def create_circle(diameter: float) -> ShapeDescription:
    """
    Describe a circle with the given diameter.

    Raises:
        InvalidArgumentError: If ``diameter`` is negative, NaN, infinite or too large
        TypeError: If ``diameter`` is not a real number

    Example:
        >>> create_circle(2).perimeter == math.pi * 2
        True
    """
    return CircleFactory().create(diameter)


def create_square(side_length: float) -> ShapeDescription:
    """
    Describe a square with the given side length.

    Raises:
        InvalidArgumentError: If ``side_length`` is negative, NaN, infinite or too large
        TypeError: If ``side_length`` is not a real number

    Example:
        >>> create_square(3).area
        9.0
    """
    return SquareFactory().create(side_length)


__all__ = [
    "ShapeFactory",
    "CircleFactory",
    "SquareFactory",
    "create_circle",
    "create_square",
]
