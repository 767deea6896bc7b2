"""GoF Patterns - Root Package.

This package is a runnable catalog of Gang of Four design patterns. Every
pattern lives in its own module with the classes that make it up and one or
more demonstrations (client code) registered in a shared pattern registry.

Key Components:
    - creational: Abstract Factory, Builder, Factory Method, Prototype
    - structural: Adapter, Bridge, Composite, Decorator, Flyweight, Proxy
    - behavioral: Chain of Responsibility, Command, Iterator, Mediator
    - domain: Catalog models and the exception hierarchy
    - infrastructure: Pattern registry and logging
    - application: Catalog service used by the CLI
    - cli: Command-line interface

Usage:
    >>> gof-patterns list --category structural
    >>> gof-patterns run adapter --variant analytics
"""

from ._package import PACKAGE_NAME, __version__

__package_name__ = PACKAGE_NAME
