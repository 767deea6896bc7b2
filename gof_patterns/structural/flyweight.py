"""
Flyweight.

Flyweight is a structural design pattern that lets you fit more objects into
the available amount of RAM by sharing common parts of state between
multiple objects instead of keeping all of the data in each object.

Use the Flyweight only when your program must support a huge number of
objects which barely fit into available RAM.

Identification: a creation method that returns cached objects instead of
creating new ones.

Complexity: 3/3
Popularity: 0/3
"""
import json
from typing import Dict, List, Optional, Sequence, Tuple

from gof_patterns.domain.catalog import PatternCategory, PatternInfo
from gof_patterns.infrastructure.registry import demo, register_pattern

register_pattern(PatternInfo(
    name="flyweight",
    title="Flyweight",
    category=PatternCategory.STRUCTURAL,
    intent="Share common state between many objects to save memory.",
    applicability=[
        "The program must support a huge number of objects which barely fit into RAM.",
    ],
    identification="A creation method returning cached objects instead of new ones.",
    complexity=3,
    popularity=0,
    reference_url="https://refactoring.guru/design-patterns/flyweight",
))


class Flyweight:
    """
    Stores the common (intrinsic) state shared by many real entities and
    accepts the unique (extrinsic) state through its method parameters.
    """

    def __init__(self, shared_state: Sequence[str]):
        self._shared_state = list(shared_state)

    @property
    def shared_state(self) -> List[str]:
        return list(self._shared_state)

    def operation(self, unique_state: Sequence[str]) -> None:
        shared = json.dumps(self._shared_state)
        unique = json.dumps(list(unique_state))
        print(f"Flyweight: Displaying shared ({shared}) and unique ({unique}) state.", end="")


class FlyweightFactory:
    """
    Creates and manages flyweights. Returns an existing flyweight when one
    matches the requested shared state.
    """

    def __init__(self, initial_flyweights: Sequence[Sequence[str]] = ()):
        self._flyweights: Dict[str, Flyweight] = {}
        for state in initial_flyweights:
            self._flyweights[self.get_key(state)] = Flyweight(state)

    @staticmethod
    def get_key(state: Sequence[str]) -> str:
        return "_".join(sorted(state))

    def get_flyweight(self, shared_state: Sequence[str]) -> Flyweight:
        key = self.get_key(shared_state)

        if key not in self._flyweights:
            print("FlyweightFactory: Can't find a flyweight, creating new one.")
            self._flyweights[key] = Flyweight(shared_state)
        else:
            print("FlyweightFactory: Reusing existing flyweight.")

        return self._flyweights[key]

    def __len__(self) -> int:
        return len(self._flyweights)

    def list_flyweights(self) -> None:
        print(f"FlyweightFactory: I have {len(self._flyweights)} flyweights:")
        print("\n".join(self._flyweights), end="")


def add_car_to_police_database(
    factory: FlyweightFactory, plates: str, owner: str, brand: str, model: str, color: str
) -> None:
    print("\n\nClient: Adding a car to database.")
    flyweight = factory.get_flyweight([brand, model, color])
    # The client stores or calculates the extrinsic state and passes it on
    flyweight.operation([plates, owner])


@demo("flyweight", "canonical", "Reusing car flyweights in a police database")
def run_canonical() -> None:
    factory = FlyweightFactory([
        ["Chevrolet", "Camaro2018", "pink"],
        ["Mercedes Benz", "C300", "black"],
        ["Mercedes Benz", "C500", "red"],
        ["BMW", "M5", "red"],
        ["BMW", "X6", "white"],
    ])

    factory.list_flyweights()

    add_car_to_police_database(factory, "CL234IR", "James Doe", "BMW", "M5", "red")
    add_car_to_police_database(factory, "CL234IR", "James Doe", "BMW", "X1", "red")

    print("\n")
    factory.list_flyweights()
    print("")


class TreeType:
    """Intrinsic tree state shared by every tree of the same kind."""

    def __init__(self, name: str, color: str, texture: str):
        self.name = name
        self.color = color
        self.texture = texture

    def draw(self, x: int, y: int) -> str:
        return f"{self.color} {self.name} ({self.texture}) at ({x}, {y})"


class TreeFactory:
    def __init__(self) -> None:
        self._tree_types: Dict[Tuple[str, str, str], TreeType] = {}

    def get_tree_type(self, name: str, color: str, texture: str) -> TreeType:
        key = (name, color, texture)
        tree_type = self._tree_types.get(key)
        if tree_type is None:
            tree_type = TreeType(name, color, texture)
            self._tree_types[key] = tree_type
        return tree_type

    def __len__(self) -> int:
        return len(self._tree_types)


class Tree:
    """Extrinsic state: coordinates plus a reference to a shared type."""

    __slots__ = ("x", "y", "tree_type")

    def __init__(self, x: int, y: int, tree_type: TreeType):
        self.x = x
        self.y = y
        self.tree_type = tree_type

    def draw(self) -> str:
        return self.tree_type.draw(self.x, self.y)


class Forest:
    def __init__(self, factory: Optional[TreeFactory] = None):
        self.factory = factory if factory is not None else TreeFactory()
        self.trees: List[Tree] = []

    def plant_tree(self, x: int, y: int, name: str, color: str, texture: str) -> Tree:
        tree = Tree(x, y, self.factory.get_tree_type(name, color, texture))
        self.trees.append(tree)
        return tree

    def draw(self) -> List[str]:
        return [tree.draw() for tree in self.trees]


@demo("flyweight", "forest", "Many trees sharing a few tree types")
def run_forest() -> None:
    forest = Forest()
    kinds = [
        ("Oak", "green", "rough bark"),
        ("Birch", "white", "smooth bark"),
        ("Pine", "dark green", "needles"),
    ]
    for i in range(12):
        name, color, texture = kinds[i % len(kinds)]
        forest.plant_tree(i * 10, (i * 7) % 50, name, color, texture)

    for line in forest.draw()[:3]:
        print(f"Drawing {line}")
    print(f"Planted {len(forest.trees)} trees sharing {len(forest.factory)} tree types.")
