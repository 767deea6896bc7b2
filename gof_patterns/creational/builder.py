"""
Builder.

Builder is a creational design pattern which lets you construct complex
objects step by step. The same construction code can produce different
types and representations of an object.

Use the Builder to get rid of a "telescoping constructor", or when you want
your code to be able to create different representations of some product.

Identification: a builder has a building method and several methods to
configure the resulting object. Builder methods often support chaining.

Complexity: 2/3
Popularity: 3/3
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from typing import Optional

from gof_patterns.domain.catalog import PatternCategory, PatternInfo
from gof_patterns.infrastructure.registry import demo, register_pattern

register_pattern(PatternInfo(
    name="builder",
    title="Builder",
    category=PatternCategory.CREATIONAL,
    intent="Construct complex objects step by step.",
    applicability=[
        "Get rid of a telescoping constructor.",
        "Create different representations of the same product.",
    ],
    identification="A building method plus several methods that configure the result.",
    complexity=2,
    popularity=3,
    reference_url="https://refactoring.guru/design-patterns/builder",
))


@dataclass
class House:
    has_walls: bool = False
    has_doors: bool = False
    has_windows: bool = False
    has_roof: bool = False
    has_garage: bool = False

    def get_config(self) -> str:
        return "\n".join(
            f"{field.name}: {str(getattr(self, field.name)).lower()},"
            for field in fields(self)
        )


class Builder(ABC):
    """The Builder interface specifies the steps for creating a House."""

    @abstractmethod
    def reset(self) -> None:
        pass

    @abstractmethod
    def build_walls(self) -> None:
        pass

    @abstractmethod
    def build_doors(self) -> None:
        pass

    @abstractmethod
    def build_windows(self) -> None:
        pass

    @abstractmethod
    def build_roof(self) -> None:
        pass

    @abstractmethod
    def build_garage(self) -> None:
        pass


class HouseBuilder(Builder):
    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self._house = House()

    def build_walls(self) -> None:
        self._house.has_walls = True

    def build_doors(self) -> None:
        self._house.has_doors = True

    def build_windows(self) -> None:
        self._house.has_windows = True

    def build_roof(self) -> None:
        self._house.has_roof = True

    def build_garage(self) -> None:
        self._house.has_garage = True

    def get_house(self) -> House:
        """
        Return the finished house and start over with a blank one, so the
        builder is ready for the next product.
        """
        result = self._house
        self.reset()
        return result


class Director:
    """
    The Director only runs the building steps in a particular sequence. It
    is optional: the client can drive the builder directly.
    """

    def __init__(self) -> None:
        self._builder: Optional[Builder] = None

    @property
    def builder(self) -> Builder:
        if self._builder is None:
            raise AttributeError("Director has no builder")
        return self._builder

    @builder.setter
    def builder(self, builder: Builder) -> None:
        self._builder = builder

    def build_minimal_house(self) -> None:
        self.builder.build_walls()
        self.builder.build_doors()
        self.builder.build_roof()

    def build_full_house(self) -> None:
        self.builder.build_walls()
        self.builder.build_garage()
        self.builder.build_doors()
        self.builder.build_roof()
        self.builder.build_windows()


def client_code(director: Director) -> None:
    builder = HouseBuilder()
    director.builder = builder

    print("minimal house")
    director.build_minimal_house()
    print(builder.get_house().get_config())

    print("full house")
    director.build_full_house()
    print(builder.get_house().get_config())

    print("custom house")
    builder.build_doors()
    builder.build_garage()
    print(builder.get_house().get_config())


@demo("builder", "example", "Minimal, full and custom houses")
def run_example() -> None:
    client_code(Director())
