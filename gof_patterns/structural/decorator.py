"""
Decorator.

Decorator is a structural pattern that allows adding new behaviors to
objects dynamically by placing them inside special wrapper objects. Since
targets and decorators follow the same interface, objects can be wrapped
any number of times and get the stacked behavior of all wrappers.

Use the Decorator to assign extra behaviors to objects at runtime without
breaking the code that uses them, or when extending behavior through
inheritance is awkward or impossible.

Identification: creation methods or constructors that accept objects of the
same class or interface as the current class.

Complexity: 2/3
Popularity: 2/3
"""
from abc import ABC, abstractmethod

from gof_patterns.domain.catalog import PatternCategory, PatternInfo
from gof_patterns.infrastructure.registry import demo, register_pattern

register_pattern(PatternInfo(
    name="decorator",
    title="Decorator",
    category=PatternCategory.STRUCTURAL,
    intent="Attach new behaviors to objects by wrapping them.",
    applicability=[
        "Assign extra behaviors at runtime without breaking client code.",
        "Extending behavior through inheritance is awkward or impossible.",
    ],
    identification="Constructors accepting an object of the same interface as the class.",
    complexity=2,
    popularity=2,
    reference_url="https://refactoring.guru/design-patterns/decorator",
))


class Component(ABC):

    @abstractmethod
    def operation(self) -> str:
        pass


class ConcreteComponent(Component):
    def operation(self) -> str:
        return "ConcreteComponent"


class Decorator(Component):
    """The base Decorator delegates all work to the wrapped component."""

    def __init__(self, component: Component):
        self._component = component

    @property
    def component(self) -> Component:
        return self._component

    def operation(self) -> str:
        return self._component.operation()


class ConcreteDecoratorA(Decorator):
    def operation(self) -> str:
        return f"ConcreteDecoratorA({self.component.operation()})"


class ConcreteDecoratorB(Decorator):
    def operation(self) -> str:
        return f"ConcreteDecoratorB({self.component.operation()})"


def client_code(component: Component) -> None:
    print(f"RESULT: {component.operation()}")


@demo("decorator", "canonical", "Stacking two decorators on a component")
def run_canonical() -> None:
    simple = ConcreteComponent()
    print("Client: I've got a simple component:")
    client_code(simple)
    print("")

    decorator1 = ConcreteDecoratorA(simple)
    decorator2 = ConcreteDecoratorB(decorator1)
    print("Client: Now I've got a decorated component:")
    client_code(decorator2)


class BaseNotifier(ABC):

    @abstractmethod
    def send(self, message: str) -> None:
        pass


class Notifier(BaseNotifier):
    def send(self, message: str) -> None:
        print(f"Notifier: sending and notifying users with message: {message}")


class NotifierDecorator(BaseNotifier):
    def __init__(self, notifier: BaseNotifier):
        self.notifier = notifier

    def send(self, message: str) -> None:
        self.notifier.send(message)


class EmailDecorator(NotifierDecorator):
    def send(self, message: str) -> None:
        print("sending email")
        super().send(message)


class SmsDecorator(NotifierDecorator):
    def send(self, message: str) -> None:
        print("sending SMS message")
        super().send(message)


class FacebookDecorator(NotifierDecorator):
    def send(self, message: str) -> None:
        print("sending Facebook notification")
        super().send(message)


class SlackDecorator(NotifierDecorator):
    def send(self, message: str) -> None:
        print("sending Slack notification")
        super().send(message)


def notifier_client_code(notifier: BaseNotifier) -> None:
    notifier.send("Client code")


@demo("decorator", "notifier", "Notification channels stacked on a notifier")
def run_notifier() -> None:
    notifier: BaseNotifier = Notifier()
    notifier = SlackDecorator(notifier)
    notifier = FacebookDecorator(notifier)
    notifier = SmsDecorator(notifier)
    notifier = EmailDecorator(notifier)

    notifier_client_code(notifier)
