"""
Tests for ShapeFactoryRegistry.
"""

import math

import pytest

from tddprimer.exceptions import InvalidArgumentError, UnknownShapeKindError
from tddprimer.shapes import (
    CircleFactory,
    ShapeDescription,
    ShapeFactoryRegistry,
    ShapeKind,
    SquareFactory,
)

pytestmark = pytest.mark.unit


class StubCircleFactory:
    """Stand-in factory returning a canned description."""

    kind = ShapeKind.CIRCLE

    def __init__(self):
        self.calls = []

    def create(self, dimension):
        self.calls.append(dimension)
        return ShapeDescription(name="Stub", area=1.0, perimeter=1.0)


def test_default_registry_lists_builtin_kinds(registry):
    assert registry.list_kinds() == ["circle", "square"]


@pytest.mark.parametrize(
    "kind", [ShapeKind.CIRCLE, "circle", "Circle", "  CIRCLE "]
)
def test_create_dispatches_on_kind(registry, kind):
    shape = registry.create(kind, 2)

    assert shape.name == "Circle"
    assert shape.perimeter == pytest.approx(2 * math.pi)


def test_create_square_through_registry(registry):
    assert registry.create("square", 3).area == pytest.approx(9.0)


@pytest.mark.parametrize("kind", ["triangle", "", 42, None])
def test_create_unknown_kind_raises(registry, kind):
    with pytest.raises(UnknownShapeKindError) as exc_info:
        registry.create(kind, 1)

    assert exc_info.value.kind == kind
    assert exc_info.value.available == ["circle", "square"]


def test_create_propagates_invalid_argument(registry):
    with pytest.raises(InvalidArgumentError):
        registry.create("square", -1)


def test_register_rejects_duplicate_kind(registry):
    with pytest.raises(ValueError, match="already registered"):
        registry.register(CircleFactory())


def test_register_rejects_non_factory():
    registry = ShapeFactoryRegistry()

    with pytest.raises(TypeError):
        registry.register(object())


def test_register_injected_factory_is_used():
    stub = StubCircleFactory()
    registry = ShapeFactoryRegistry()
    registry.register(stub)

    shape = registry.create("circle", 5)

    assert shape.name == "Stub"
    assert stub.calls == [5]


def test_unregister_removes_factory(registry):
    registry.unregister(ShapeKind.SQUARE)

    assert not registry.has_factory("square")
    assert registry.get("square") is None
    assert registry.list_kinds() == ["circle"]


def test_unregister_unknown_kind_is_noop(registry):
    registry.unregister("hexagon")
    registry.unregister(ShapeKind.SQUARE)
    registry.unregister(ShapeKind.SQUARE)

    assert registry.list_kinds() == ["circle"]


def test_get_returns_registered_instance():
    factory = SquareFactory()
    registry = ShapeFactoryRegistry()
    registry.register(factory)

    assert registry.get("square") is factory
    assert registry.has_factory(ShapeKind.SQUARE)
    assert not registry.has_factory("circle")
