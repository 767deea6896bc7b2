"""
Abstract Factory.

Abstract Factory is a creational design pattern which solves the problem of
creating entire product families without specifying their concrete classes.

Use the Abstract Factory when your code needs to work with various families of
related products, but you don't want it to depend on the concrete classes of
those products; they might be unknown beforehand or you simply want to allow
for future extensibility.

Identification: the pattern is easy to recognize by methods which return a
factory object. The factory is then used for creating specific sub-components.

Complexity: 2/3
Popularity: 3/3
"""
from abc import ABC, abstractmethod
from typing import List

from gof_patterns.domain.catalog import PatternCategory, PatternInfo
from gof_patterns.infrastructure.registry import demo, register_pattern

register_pattern(PatternInfo(
    name="abstract-factory",
    title="Abstract Factory",
    category=PatternCategory.CREATIONAL,
    intent="Create entire product families without specifying their concrete classes.",
    applicability=[
        "Code must work with various families of related products without "
        "depending on their concrete classes.",
    ],
    identification="Methods which return a factory object that then creates sub-components.",
    complexity=2,
    popularity=3,
    reference_url="https://refactoring.guru/design-patterns/abstract-factory",
))


class Chair(ABC):
    """
    Each distinct product of a family has a base interface. All variants of
    the product must implement it.
    """

    @abstractmethod
    def has_legs(self) -> bool:
        pass

    @abstractmethod
    def useful_function(self) -> str:
        pass


class Sofa(ABC):

    @abstractmethod
    def useful_function(self) -> str:
        pass


class CoffeeTable(ABC):
    """
    A coffee table can do its own thing, but it can also collaborate with a
    chair. The factory makes sure both come from the same variant.
    """

    @abstractmethod
    def useful_function(self) -> str:
        pass

    @abstractmethod
    def another_useful_function(self, collaborator: Chair) -> str:
        pass


class VictorianChair(Chair):
    def has_legs(self) -> bool:
        return True

    def useful_function(self) -> str:
        return "The result of the product VictorianChair."


class ModernChair(Chair):
    def has_legs(self) -> bool:
        return False

    def useful_function(self) -> str:
        return "The result of the product ModernChair."


class VictorianSofa(Sofa):
    def useful_function(self) -> str:
        return "The result of the product VictorianSofa."


class ModernSofa(Sofa):
    def useful_function(self) -> str:
        return "The result of the product ModernSofa."


class VictorianCoffeeTable(CoffeeTable):
    def useful_function(self) -> str:
        return "The result of the product VictorianCoffeeTable."

    def another_useful_function(self, collaborator: Chair) -> str:
        result = collaborator.useful_function()
        return f"The result of the VictorianCoffeeTable collaborating with the ({result})"


class ModernCoffeeTable(CoffeeTable):
    def useful_function(self) -> str:
        return "The result of the product ModernCoffeeTable."

    def another_useful_function(self, collaborator: Chair) -> str:
        result = collaborator.useful_function()
        return f"The result of the ModernCoffeeTable collaborating with the ({result})"


class FurnitureFactory(ABC):
    """
    The Abstract Factory declares a set of methods that return different
    abstract products. These products form a family; products of one variant
    are incompatible with products of another.
    """

    @abstractmethod
    def create_chair(self) -> Chair:
        pass

    @abstractmethod
    def create_sofa(self) -> Sofa:
        pass

    @abstractmethod
    def create_coffee_table(self) -> CoffeeTable:
        pass


class VictorianFurnitureFactory(FurnitureFactory):
    """Produces the Victorian variant of every product."""

    def create_chair(self) -> Chair:
        return VictorianChair()

    def create_sofa(self) -> Sofa:
        return VictorianSofa()

    def create_coffee_table(self) -> CoffeeTable:
        return VictorianCoffeeTable()


class ModernFurnitureFactory(FurnitureFactory):
    """Produces the Modern variant of every product."""

    def create_chair(self) -> Chair:
        return ModernChair()

    def create_sofa(self) -> Sofa:
        return ModernSofa()

    def create_coffee_table(self) -> CoffeeTable:
        return ModernCoffeeTable()


def client_code(factory: FurnitureFactory) -> None:
    """
    The client works with factories and products only through their abstract
    types, so any factory subclass can be passed in.
    """
    chair = factory.create_chair()
    coffee_table = factory.create_coffee_table()

    print(chair.useful_function())
    print(coffee_table.another_useful_function(chair))


def furnish_room(factory: FurnitureFactory) -> List[str]:
    """Create one product of each kind with a single variant."""
    # Adding a new variant must not require changes here
    products = [factory.create_chair(), factory.create_sofa(), factory.create_coffee_table()]
    return [product.useful_function() for product in products]


@demo("abstract-factory", "canonical", "Chair and coffee table from each factory")
def run_canonical() -> None:
    print("Client: Testing client code with the ModernFurnitureFactory:")
    client_code(ModernFurnitureFactory())

    print("")

    print("Client: Testing the same client code with the VictorianFurnitureFactory:")
    client_code(VictorianFurnitureFactory())


@demo("abstract-factory", "furniture", "Full furniture set from each factory")
def run_furniture() -> None:
    for factory in (ModernFurnitureFactory(), VictorianFurnitureFactory()):
        print(f"{type(factory).__name__}:")
        for result in furnish_room(factory):
            print(f"  {result}")
