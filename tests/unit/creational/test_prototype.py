"""Tests for the Prototype pattern."""

import pytest

from gof_patterns.creational.prototype import (
    Circle,
    ComponentWithBackReference,
    Prototype,
    PrototypeRegistry,
    Rectangle,
    client_code,
    shapes_client_code,
)
from gof_patterns.domain.exceptions import ResourceNotFoundError


class TestPrototypeClone:
    """Cloning copies fields of every kind."""

    def setup_method(self):
        self.original = Prototype()
        self.original.primitive = 245
        self.original.component = [1, 2, 3]
        self.original.circular_reference = ComponentWithBackReference(self.original)
        self.clone = self.original.clone()

    def test_primitive_is_carried_over(self):
        assert self.clone.primitive == 245

    def test_component_is_deep_copied(self):
        assert self.clone.component == self.original.component
        assert self.clone.component is not self.original.component

    def test_back_reference_points_to_clone(self):
        assert self.clone.circular_reference is not self.original.circular_reference
        assert self.clone.circular_reference.prototype is self.clone
        assert self.original.circular_reference.prototype is self.original


class TestShapes:
    """Shape clones are equal but distinct."""

    def test_clone_is_equal_and_distinct(self):
        circle = Circle(x=1, y=2, color="red", radius=3)
        copied = circle.clone()
        assert copied == circle
        assert copied is not circle

    def test_different_types_are_not_equal(self):
        assert Circle(color="red") != Rectangle(color="red")

    def test_registry_returns_clones(self):
        registry = PrototypeRegistry()
        square = Rectangle(width=5, height=5)
        registry.add("square", square)

        first = registry.get("square")
        second = registry.get("square")
        assert first == square
        assert first is not square
        assert first is not second

    def test_registry_unknown_name(self):
        with pytest.raises(ResourceNotFoundError, match="Prototype 'missing' not found"):
            PrototypeRegistry().get("missing")


def test_client_code_output(capsys):
    client_code()
    lines = capsys.readouterr().out.splitlines()

    assert len(lines) == 4
    assert all(line.endswith("Yay!") for line in lines)


def test_shapes_client_code_output(capsys):
    shapes_client_code()
    lines = capsys.readouterr().out.splitlines()

    assert lines[:3] == [
        "0: Shapes are different objects and they are identical (yay!)",
        "1: Shapes are different objects and they are identical (yay!)",
        "2: Shapes are different objects and they are identical (yay!)",
    ]
    assert lines[3].startswith("Registry clone of big-red-circle: Circle(")
