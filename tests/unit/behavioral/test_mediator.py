"""Tests for the Mediator pattern."""

from gof_patterns.behavioral.mediator import (
    AuthenticationDialog,
    Component1,
    Component2,
    ConcreteMediator,
    run_canonical,
    run_dialog,
)


class TestConcreteMediator:
    """Components react to each other only through the mediator."""

    def setup_method(self):
        self.c1 = Component1()
        self.c2 = Component2()
        self.mediator = ConcreteMediator(self.c1, self.c2)

    def test_components_get_mediator(self):
        assert self.c1.mediator is self.mediator
        assert self.c2.mediator is self.mediator

    def test_a_triggers_c(self, capsys):
        self.c1.do_a()
        assert capsys.readouterr().out.splitlines() == [
            "Component 1 does A.",
            "Mediator reacts on A and triggers following operations:",
            "Component 2 does C.",
        ]

    def test_d_triggers_b_and_c(self, capsys):
        self.c2.do_d()
        assert capsys.readouterr().out.splitlines() == [
            "Component 2 does D.",
            "Mediator reacts on D and triggers following operations:",
            "Component 1 does B.",
            "Component 2 does C.",
        ]

    def test_b_alone_triggers_nothing(self, capsys):
        self.c1.do_b()
        assert capsys.readouterr().out == "Component 1 does B.\n"


class TestAuthenticationDialog:
    """The dialog coordinates its widgets."""

    def setup_method(self):
        self.dialog = AuthenticationDialog({"bob": "pw"})

    def test_starts_on_login_form(self):
        assert self.dialog.title == "Log in"
        assert self.dialog.login_username.visible
        assert not self.dialog.registration_email.visible

    def test_checkbox_switches_forms(self):
        self.dialog.login_or_register.check()
        assert self.dialog.title == "Register"
        assert self.dialog.registration_email.visible
        assert not self.dialog.login_password.visible

        self.dialog.login_or_register.check(False)
        assert self.dialog.title == "Log in"

    def test_login(self, capsys):
        self.dialog.login_username.type_text("bob")
        self.dialog.login_password.type_text("pw")
        self.dialog.ok_button.click()

        assert self.dialog.current_user == "bob"
        assert "welcome back, bob" in capsys.readouterr().out

    def test_login_with_wrong_password(self, capsys):
        self.dialog.login_username.type_text("bob")
        self.dialog.login_password.type_text("nope")
        self.dialog.ok_button.click()

        assert self.dialog.current_user is None
        assert "wrong username or password" in capsys.readouterr().out

    def test_register(self):
        self.dialog.login_or_register.check()
        self.dialog.registration_username.type_text("carol")
        self.dialog.registration_password.type_text("secret")
        self.dialog.ok_button.click()

        assert self.dialog.accounts["carol"] == "secret"
        assert self.dialog.current_user == "carol"

    def test_register_existing_user(self, capsys):
        self.dialog.login_or_register.check()
        self.dialog.registration_username.type_text("bob")
        self.dialog.ok_button.click()

        assert self.dialog.accounts["bob"] == "pw"
        assert "cannot register 'bob'" in capsys.readouterr().out


def test_canonical_demo_output(capsys):
    run_canonical()
    lines = capsys.readouterr().out.splitlines()

    assert lines[0] == "Client triggers operation A."
    assert lines[3] == "Component 2 does C."
    assert lines[5] == "Client triggers operation D."
    assert lines[-1] == "Component 2 does C."


def test_dialog_demo_output(capsys):
    run_dialog()
    out = capsys.readouterr().out

    assert "Dialog title: Log in" in out
    assert "account created for alice (alice@example.com)" in out
    assert "wrong username or password" in out
    assert out.rstrip().endswith("Dialog: welcome back, alice.")
