"""
Factory Method.

Factory Method is a creational design pattern which solves the problem of
creating product objects without specifying their concrete classes.

Use the Factory Method when you don't know beforehand the exact types and
dependencies of the objects your code should work with, when you want users
of your library to extend its internal components, or when you want to save
system resources by reusing existing objects instead of rebuilding them.

Identification: creation methods which create objects from concrete classes
but return them as objects of an abstract type.

Complexity: 1/3
Popularity: 3/3
"""
import sys
from abc import ABC, abstractmethod
from typing import Dict, Optional, Type

from gof_patterns.domain.catalog import PatternCategory, PatternInfo
from gof_patterns.domain.exceptions import ValidationError
from gof_patterns.infrastructure.registry import demo, register_pattern

register_pattern(PatternInfo(
    name="factory-method",
    title="Factory Method",
    category=PatternCategory.CREATIONAL,
    intent="Create product objects without specifying their concrete classes.",
    applicability=[
        "The exact types of the objects are not known beforehand.",
        "Users of a library should be able to extend its internal components.",
        "Existing objects should be reused instead of rebuilt.",
    ],
    identification="Creation methods returning concrete objects typed as an abstract product.",
    complexity=1,
    popularity=3,
    reference_url="https://refactoring.guru/design-patterns/factory-method",
))


class Product(ABC):
    """Operations that all concrete products must implement."""

    @abstractmethod
    def operation(self) -> str:
        pass


class ConcreteProduct1(Product):
    def operation(self) -> str:
        return "{Result of the ConcreteProduct1}"


class ConcreteProduct2(Product):
    def operation(self) -> str:
        return "{Result of the ConcreteProduct2}"


class Creator(ABC):
    """
    The Creator declares the factory method. Despite its name, its primary
    responsibility is the business logic in some_operation; subclasses change
    that logic indirectly by returning a different product.
    """

    @abstractmethod
    def create_product(self) -> Product:
        pass

    def some_operation(self) -> str:
        product = self.create_product()
        return f"Creator: The same creator's code has just worked with {product.operation()}"


class ConcreteCreator1(Creator):
    def create_product(self) -> Product:
        return ConcreteProduct1()


class ConcreteCreator2(Creator):
    def create_product(self) -> Product:
        return ConcreteProduct2()


def client_code(creator: Creator) -> None:
    print("Client: I'm not aware of the creator's class, but it still works.")
    print(creator.some_operation())


class Button(ABC):

    @abstractmethod
    def render(self) -> str:
        pass

    @abstractmethod
    def on_click(self) -> str:
        pass


class WindowsButton(Button):
    def render(self) -> str:
        return "rendering windows button"

    def on_click(self) -> str:
        return "on click windows button"


class LinuxButton(Button):
    def render(self) -> str:
        return "rendering linux button"

    def on_click(self) -> str:
        return "on click linux button"


class MacButton(Button):
    def render(self) -> str:
        return "rendering mac button"

    def on_click(self) -> str:
        return "on click mac button"


class ButtonCreator(ABC):
    """Dialog creator; subclasses decide which button the dialog gets."""

    @abstractmethod
    def create_button(self) -> Button:
        pass

    def render_dialog(self) -> str:
        button = self.create_button()
        return f"{button.render()} / {button.on_click()}"


class WindowsButtonCreator(ButtonCreator):
    def create_button(self) -> Button:
        return WindowsButton()


class LinuxButtonCreator(ButtonCreator):
    def create_button(self) -> Button:
        return LinuxButton()


class MacButtonCreator(ButtonCreator):
    def create_button(self) -> Button:
        return MacButton()


PLATFORM_CREATORS: Dict[str, Type[ButtonCreator]] = {
    "win32": WindowsButtonCreator,
    "windows": WindowsButtonCreator,
    "linux": LinuxButtonCreator,
    "darwin": MacButtonCreator,
    "mac": MacButtonCreator,
}


def creator_for_platform(platform: Optional[str] = None) -> ButtonCreator:
    """
    Pick a button creator for a platform name.

    Args:
        platform: Platform name such as "linux" or "darwin"; defaults to
            the running interpreter's sys.platform

    Returns:
        Concrete creator for the platform

    Raises:
        ValidationError: If no creator supports the platform
    """
    name = (platform or sys.platform).lower()
    try:
        return PLATFORM_CREATORS[name]()
    except KeyError:
        raise ValidationError(
            f"Unsupported platform '{name}'",
            details={"supported": sorted(PLATFORM_CREATORS)},
        ) from None


@demo("factory-method", "canonical", "Same creator logic with two products")
def run_canonical() -> None:
    print("App: Launched with the ConcreteCreator1.")
    client_code(ConcreteCreator1())
    print("")

    print("App: Launched with the ConcreteCreator2.")
    client_code(ConcreteCreator2())


@demo("factory-method", "buttons", "Platform specific buttons")
def run_buttons() -> None:
    for platform in ("win32", "linux", "darwin"):
        creator = creator_for_platform(platform)
        print(f"{platform}: {creator.render_dialog()}")
