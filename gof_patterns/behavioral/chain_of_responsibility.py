"""
Chain of Responsibility.

Chain of Responsibility is a behavioral design pattern that lets you pass
requests along a chain of handlers. Upon receiving a request, each handler
decides either to process it or to pass it to the next handler in the chain.

Use the pattern when your program is expected to process different kinds of
requests in various ways but the exact types and sequences aren't known
beforehand, when several handlers must run in a particular order, or when
the set of handlers and their order should change at runtime.

Identification: behavioral methods of one group of objects indirectly call
the same methods in other objects, all following a common interface.

Complexity: 2/3
Popularity: 1/3
"""
from abc import ABC, abstractmethod
from typing import Any, FrozenSet, Optional

from pydantic import BaseModel, Field

from gof_patterns.domain.catalog import PatternCategory, PatternInfo
from gof_patterns.infrastructure.registry import demo, register_pattern

register_pattern(PatternInfo(
    name="chain-of-responsibility",
    title="Chain of Responsibility",
    category=PatternCategory.BEHAVIORAL,
    intent="Pass a request along a chain of handlers until one deals with it.",
    applicability=[
        "Different kinds of requests are processed in ways not known beforehand.",
        "Several handlers must run in a particular order.",
        "The set of handlers and their order change at runtime.",
    ],
    identification="Methods of one group of objects indirectly calling the same methods of others.",
    complexity=2,
    popularity=1,
    reference_url="https://refactoring.guru/design-patterns/chain-of-responsibility",
))


class Handler(ABC):
    """Declares a method for building the chain and one for handling a request."""

    @abstractmethod
    def set_next(self, handler: "Handler") -> "Handler":
        pass

    @abstractmethod
    def handle(self, request: Any) -> Any:
        pass


class AbstractHandler(Handler):
    """Default chaining behavior: forward to the next handler if there is one."""

    _next_handler: Optional[Handler] = None

    def set_next(self, handler: Handler) -> Handler:
        self._next_handler = handler
        # Returning the handler allows monkey.set_next(squirrel).set_next(dog)
        return handler

    def handle(self, request: Any) -> Any:
        if self._next_handler:
            return self._next_handler.handle(request)
        return None


class MonkeyHandler(AbstractHandler):
    def handle(self, request: Any) -> Optional[str]:
        if request == "Banana":
            return f"Monkey: I'll eat the {request}"
        return super().handle(request)


class SquirrelHandler(AbstractHandler):
    def handle(self, request: Any) -> Optional[str]:
        if request == "Nut":
            return f"Squirrel: I'll eat the {request}"
        return super().handle(request)


class DogHandler(AbstractHandler):
    def handle(self, request: Any) -> Optional[str]:
        if request == "MeatBall":
            return f"Dog: I'll eat the {request}"
        return super().handle(request)


def client_code(handler: Handler) -> None:
    """
    The client usually works with a single handler and is not even aware
    that it is part of a chain.
    """
    for food in ["Nut", "Banana", "Cup of coffee"]:
        print(f"Client: Who wants a {food}?")
        result = handler.handle(food)
        if result:
            print(f"  {result}")
        else:
            print(f"  {food} was left untouched.")


@demo("chain-of-responsibility", "canonical", "Animals taking the food they like")
def run_canonical() -> None:
    monkey = MonkeyHandler()
    squirrel = SquirrelHandler()
    dog = DogHandler()

    monkey.set_next(squirrel).set_next(dog)

    # The client can send a request to any handler, not just the first one
    print("Chain: Monkey > Squirrel > Dog")
    print("")
    client_code(monkey)
    print("")

    print("Subchain: Squirrel > Dog")
    print("")
    client_code(squirrel)


BLACKLISTED_IP_ADDRESSES: FrozenSet[str] = frozenset({"104.31.2.164"})


class OrderBody(BaseModel):
    item: str = ""
    price: str = ""


class OrderRequest(BaseModel):
    is_authenticated: bool = False
    is_admin: bool = False
    body: OrderBody = Field(default_factory=OrderBody)
    ip_address: str = ""


class RequestHandler(AbstractHandler):
    """Validation step; the end of the chain accepts the request."""

    def handle(self, request: OrderRequest) -> bool:
        if self._next_handler:
            return self._next_handler.handle(request)
        return True


class AuthenticationHandler(RequestHandler):
    def handle(self, request: OrderRequest) -> bool:
        if not request.is_authenticated:
            print("Denied access, user not authenticated")
            return False
        return super().handle(request)


class AuthorizationHandler(RequestHandler):
    def handle(self, request: OrderRequest) -> bool:
        if not request.is_admin:
            print("Denied access, permission failed")
            return False
        return super().handle(request)


class ValidationHandler(RequestHandler):
    def handle(self, request: OrderRequest) -> bool:
        if not request.body.item or not request.body.price:
            print("Validation failed")
            return False
        return super().handle(request)


class IpAddressHandler(RequestHandler):
    def __init__(self, blacklist: FrozenSet[str] = BLACKLISTED_IP_ADDRESSES):
        self.blacklist = blacklist

    def handle(self, request: OrderRequest) -> bool:
        if request.ip_address in self.blacklist:
            print("Blacklisted IP Address")
            return False
        return super().handle(request)


def build_order_chain() -> Handler:
    """Authentication > Authorization > Validation > IP blacklist."""
    authentication = AuthenticationHandler()
    (
        authentication
        .set_next(AuthorizationHandler())
        .set_next(ValidationHandler())
        .set_next(IpAddressHandler())
    )
    return authentication


def order_client_code(handler: Handler, request: OrderRequest) -> bool:
    is_valid = handler.handle(request)
    if is_valid:
        print("Request valid, we can now process the order")
    return is_valid


@demo("chain-of-responsibility", "request-validation", "Checks an order request must pass")
def run_request_validation() -> None:
    chain = build_order_chain()

    order_client_code(chain, OrderRequest(
        is_authenticated=True,
        is_admin=True,
        body=OrderBody(item="test", price="100"),
        ip_address="107.77.194.36",
    ))

    order_client_code(chain, OrderRequest(
        is_authenticated=True,
        is_admin=False,
        body=OrderBody(item="test", price="100"),
        ip_address="107.77.194.36",
    ))

    order_client_code(chain, OrderRequest(
        is_authenticated=True,
        is_admin=True,
        body=OrderBody(item="test", price="100"),
        ip_address="104.31.2.164",
    ))
