"""
Prototype.

Prototype is a creational design pattern that lets you copy existing objects
without making your code dependent on their classes.

Use the Prototype when your code shouldn't depend on the concrete classes of
objects that you need to copy, or when you want to reduce the number of
subclasses that only differ in the way they initialize their objects.

Identification: a clone or copy method on the object itself.

Complexity: 1/3
Popularity: 2/3
"""
import copy
from datetime import datetime
from typing import Any, Dict, List, Optional

from gof_patterns.domain.catalog import PatternCategory, PatternInfo
from gof_patterns.domain.exceptions import ResourceNotFoundError
from gof_patterns.infrastructure.registry import demo, register_pattern

register_pattern(PatternInfo(
    name="prototype",
    title="Prototype",
    category=PatternCategory.CREATIONAL,
    intent="Copy existing objects without depending on their classes.",
    applicability=[
        "Code shouldn't depend on the concrete classes of objects it copies.",
        "Reduce subclasses that only differ in how they initialize objects.",
    ],
    identification="A clone or copy method on the object itself.",
    complexity=1,
    popularity=2,
    reference_url="https://refactoring.guru/design-patterns/prototype",
))


class ComponentWithBackReference:
    def __init__(self, prototype: "Prototype"):
        self.prototype = prototype


class Prototype:
    """
    Example class that has cloning ability. Shows how fields of different
    kinds get cloned.
    """

    def __init__(self) -> None:
        self.primitive: Any = None
        self.component: Any = None
        self.circular_reference: Optional[ComponentWithBackReference] = None

    def clone(self) -> "Prototype":
        clone = copy.copy(self)
        clone.component = copy.deepcopy(self.component)

        # The nested object must point at the clone, not at the original
        if self.circular_reference is not None:
            clone.circular_reference = copy.copy(self.circular_reference)
            clone.circular_reference.prototype = clone

        return clone


def client_code() -> None:
    p1 = Prototype()
    p1.primitive = 245
    p1.component = [datetime.now()]
    p1.circular_reference = ComponentWithBackReference(p1)

    p2 = p1.clone()

    if p1.primitive == p2.primitive:
        print("Primitive field values have been carried over to a clone. Yay!")
    else:
        print("Primitive field values have not been copied. Booo!")

    if p1.component is p2.component:
        print("Simple component has not been cloned. Booo!")
    else:
        print("Simple component has been cloned. Yay!")

    if p1.circular_reference is p2.circular_reference:
        print("Component with back reference has not been cloned. Booo!")
    else:
        print("Component with back reference has been cloned. Yay!")

    if p1.circular_reference.prototype is p2.circular_reference.prototype:
        print("Component with back reference is linked to original object. Booo!")
    else:
        print("Component with back reference is linked to the clone. Yay!")


class Shape:
    """Base prototype for shapes."""

    def __init__(self, x: int = 0, y: int = 0, color: str = ""):
        self.x = x
        self.y = y
        self.color = color

    def clone(self) -> "Shape":
        return copy.deepcopy(self)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return vars(self) == vars(other)

    def __repr__(self) -> str:
        attrs = ", ".join(f"{k}={v!r}" for k, v in vars(self).items())
        return f"{type(self).__name__}({attrs})"


class Rectangle(Shape):
    def __init__(self, x: int = 0, y: int = 0, color: str = "", width: int = 0, height: int = 0):
        super().__init__(x, y, color)
        self.width = width
        self.height = height


class Circle(Shape):
    def __init__(self, x: int = 0, y: int = 0, color: str = "", radius: int = 0):
        super().__init__(x, y, color)
        self.radius = radius


class PrototypeRegistry:
    """Catalog of pre-built prototypes that hands out copies."""

    def __init__(self) -> None:
        self._items: Dict[str, Shape] = {}

    def add(self, name: str, prototype: Shape) -> None:
        self._items[name] = prototype

    def get(self, name: str) -> Shape:
        try:
            return self._items[name].clone()
        except KeyError:
            raise ResourceNotFoundError("Prototype", name) from None

    def names(self) -> List[str]:
        return list(self._items)


def shapes_client_code() -> None:
    shapes: List[Shape] = []

    circle = Circle(x=10, y=10, color="red", radius=20)
    shapes.append(circle)
    shapes.append(circle.clone())

    rectangle = Rectangle(width=10, height=20, color="blue")
    shapes.append(rectangle)

    shapes_copy = [shape.clone() for shape in shapes]

    for i, (shape, copied) in enumerate(zip(shapes, shapes_copy)):
        if shape is not copied:
            identical = "and they are identical (yay!)" if shape == copied else "but they are not identical (booo!)"
            print(f"{i}: Shapes are different objects {identical}")
        else:
            print(f"{i}: Shape objects are the same (booo!)")

    registry = PrototypeRegistry()
    registry.add("big-red-circle", Circle(color="red", radius=100))
    registry.add("blue-square", Rectangle(color="blue", width=5, height=5))
    for name in registry.names():
        print(f"Registry clone of {name}: {registry.get(name)!r}")


@demo("prototype", "canonical", "Cloning fields and back references")
def run_canonical() -> None:
    client_code()


@demo("prototype", "shapes", "Cloning shapes and a prototype registry")
def run_shapes() -> None:
    shapes_client_code()
