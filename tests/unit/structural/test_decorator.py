"""Tests for the Decorator pattern."""

from gof_patterns.structural.decorator import (
    ConcreteComponent,
    ConcreteDecoratorA,
    ConcreteDecoratorB,
    EmailDecorator,
    Notifier,
    SlackDecorator,
    run_canonical,
    run_notifier,
)


def test_decorators_stack():
    decorated = ConcreteDecoratorB(ConcreteDecoratorA(ConcreteComponent()))
    assert decorated.operation() == "ConcreteDecoratorB(ConcreteDecoratorA(ConcreteComponent))"


def test_decorator_exposes_wrapped_component():
    component = ConcreteComponent()
    assert ConcreteDecoratorA(component).component is component


def test_notifier_decorators_run_outermost_first(capsys):
    EmailDecorator(SlackDecorator(Notifier())).send("hi")
    assert capsys.readouterr().out.splitlines() == [
        "sending email",
        "sending Slack notification",
        "Notifier: sending and notifying users with message: hi",
    ]


def test_canonical_demo_output(capsys):
    run_canonical()
    lines = capsys.readouterr().out.splitlines()

    assert lines[1] == "RESULT: ConcreteComponent"
    assert lines[-1] == "RESULT: ConcreteDecoratorB(ConcreteDecoratorA(ConcreteComponent))"


def test_notifier_demo_output(capsys):
    run_notifier()
    assert capsys.readouterr().out.splitlines() == [
        "sending email",
        "sending SMS message",
        "sending Facebook notification",
        "sending Slack notification",
        "Notifier: sending and notifying users with message: Client code",
    ]
