"""
Mediator.

Mediator is a behavioral design pattern that reduces coupling between
components of a program by making them communicate indirectly, through a
special mediator object. Components become easy to modify, extend and reuse
because they no longer depend on dozens of other classes.

Use the Mediator when some classes are hard to change because they are
tightly coupled to a bunch of other classes, or when a component can't be
reused in a different program because it depends too much on others.

Identification: the most popular usage is facilitating communication
between GUI components. The Controller part of MVC is a synonym.

Complexity: 2/3
Popularity: 0/3
"""
from abc import ABC, abstractmethod
from typing import Dict, Optional

from gof_patterns.domain.catalog import PatternCategory, PatternInfo
from gof_patterns.infrastructure.registry import demo, register_pattern

register_pattern(PatternInfo(
    name="mediator",
    title="Mediator",
    category=PatternCategory.BEHAVIORAL,
    intent="Make components communicate indirectly through a mediator object.",
    applicability=[
        "Classes are hard to change because they are tightly coupled to others.",
        "A component can't be reused because it depends too much on others.",
        "Lots of component subclasses exist just to reuse basic behavior.",
    ],
    identification="GUI components notifying a controller instead of each other.",
    complexity=2,
    popularity=0,
    reference_url="https://refactoring.guru/design-patterns/mediator",
))


class Mediator(ABC):
    """Components use this method to notify the mediator about events."""

    @abstractmethod
    def notify(self, sender: object, event: str) -> None:
        pass


class BaseComponent:
    """Stores a mediator reference inside each component."""

    def __init__(self, mediator: Optional[Mediator] = None):
        self._mediator = mediator

    @property
    def mediator(self) -> Optional[Mediator]:
        return self._mediator

    @mediator.setter
    def mediator(self, mediator: Mediator) -> None:
        self._mediator = mediator


class Component1(BaseComponent):
    def do_a(self) -> None:
        print("Component 1 does A.")
        self.mediator.notify(self, "A")

    def do_b(self) -> None:
        print("Component 1 does B.")
        self.mediator.notify(self, "B")


class Component2(BaseComponent):
    def do_c(self) -> None:
        print("Component 2 does C.")
        self.mediator.notify(self, "C")

    def do_d(self) -> None:
        print("Component 2 does D.")
        self.mediator.notify(self, "D")


class ConcreteMediator(Mediator):
    def __init__(self, component1: Component1, component2: Component2):
        self._component1 = component1
        self._component1.mediator = self
        self._component2 = component2
        self._component2.mediator = self

    def notify(self, sender: object, event: str) -> None:
        if event == "A":
            print("Mediator reacts on A and triggers following operations:")
            self._component2.do_c()
        elif event == "D":
            print("Mediator reacts on D and triggers following operations:")
            self._component1.do_b()
            self._component2.do_c()


@demo("mediator", "canonical", "Two components coordinated by a mediator")
def run_canonical() -> None:
    c1 = Component1()
    c2 = Component2()
    ConcreteMediator(c1, c2)

    print("Client triggers operation A.")
    c1.do_a()

    print("")

    print("Client triggers operation D.")
    c2.do_d()


class Widget:
    """A GUI element that reports its events to the dialog it belongs to."""

    def __init__(self, name: str, dialog: Optional["Mediator"] = None):
        self.name = name
        self.dialog = dialog
        self.visible = True

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False

    def _notify(self, event: str) -> None:
        if self.dialog is not None:
            self.dialog.notify(self, event)


class Button(Widget):
    def click(self) -> None:
        self._notify("click")


class TextBox(Widget):
    def __init__(self, name: str, dialog: Optional["Mediator"] = None):
        super().__init__(name, dialog)
        self.text = ""

    def type_text(self, text: str) -> None:
        self.text = text
        self._notify("keypress")


class Checkbox(Widget):
    def __init__(self, name: str, dialog: Optional["Mediator"] = None):
        super().__init__(name, dialog)
        self.checked = False

    def check(self, checked: bool = True) -> None:
        self.checked = checked
        self._notify("check")


class AuthenticationDialog(Mediator):
    """
    Concrete mediator. The checkbox switches between the login form and the
    registration form, and the OK button either logs in or registers
    depending on which form is shown. Widgets never talk to each other.
    """

    def __init__(self, accounts: Optional[Dict[str, str]] = None):
        self.title = "Log in"
        self.accounts: Dict[str, str] = dict(accounts or {})
        self.current_user: Optional[str] = None

        self.login_or_register = Checkbox("login_or_register", self)
        self.login_username = TextBox("login_username", self)
        self.login_password = TextBox("login_password", self)
        self.registration_username = TextBox("registration_username", self)
        self.registration_password = TextBox("registration_password", self)
        self.registration_email = TextBox("registration_email", self)
        self.ok_button = Button("ok", self)
        self.cancel_button = Button("cancel", self)

        self._show_login_form()

    def _show_login_form(self) -> None:
        self.title = "Log in"
        for widget in (self.login_username, self.login_password):
            widget.show()
        for widget in (self.registration_username, self.registration_password, self.registration_email):
            widget.hide()

    def _show_registration_form(self) -> None:
        self.title = "Register"
        for widget in (self.login_username, self.login_password):
            widget.hide()
        for widget in (self.registration_username, self.registration_password, self.registration_email):
            widget.show()

    def notify(self, sender: object, event: str) -> None:
        if sender is self.login_or_register and event == "check":
            if self.login_or_register.checked:
                self._show_registration_form()
            else:
                self._show_login_form()
            print(f"Dialog: switched to the '{self.title}' form.")
        elif sender is self.ok_button and event == "click":
            if self.login_or_register.checked:
                self._register()
            else:
                self._login()
        elif sender is self.cancel_button and event == "click":
            print("Dialog: cancelled.")

    def _login(self) -> None:
        username = self.login_username.text
        if self.accounts.get(username) == self.login_password.text:
            self.current_user = username
            print(f"Dialog: welcome back, {username}.")
        else:
            print("Dialog: wrong username or password.")

    def _register(self) -> None:
        username = self.registration_username.text
        if not username or username in self.accounts:
            print(f"Dialog: cannot register '{username}'.")
            return
        self.accounts[username] = self.registration_password.text
        self.current_user = username
        print(f"Dialog: account created for {username} ({self.registration_email.text}).")


@demo("mediator", "dialog", "Authentication dialog mediating its widgets")
def run_dialog() -> None:
    dialog = AuthenticationDialog()
    print(f"Dialog title: {dialog.title}")

    dialog.login_or_register.check()
    dialog.registration_username.type_text("alice")
    dialog.registration_password.type_text("s3cret")
    dialog.registration_email.type_text("alice@example.com")
    dialog.ok_button.click()

    dialog.login_or_register.check(False)
    dialog.login_username.type_text("alice")
    dialog.login_password.type_text("wrong")
    dialog.ok_button.click()

    dialog.login_password.type_text("s3cret")
    dialog.ok_button.click()
