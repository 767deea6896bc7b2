"""Tests for the Chain of Responsibility pattern."""

import pytest

from gof_patterns.behavioral.chain_of_responsibility import (
    DogHandler,
    IpAddressHandler,
    MonkeyHandler,
    OrderBody,
    OrderRequest,
    SquirrelHandler,
    build_order_chain,
    order_client_code,
    run_canonical,
    run_request_validation,
)


class TestAnimalChain:
    """Requests travel down the chain until someone handles them."""

    def setup_method(self):
        self.monkey = MonkeyHandler()
        self.squirrel = SquirrelHandler()
        self.dog = DogHandler()
        self.monkey.set_next(self.squirrel).set_next(self.dog)

    @pytest.mark.parametrize(
        "food, expected",
        [
            ("Banana", "Monkey: I'll eat the Banana"),
            ("Nut", "Squirrel: I'll eat the Nut"),
            ("MeatBall", "Dog: I'll eat the MeatBall"),
            ("Cup of coffee", None),
        ],
    )
    def test_handle(self, food, expected):
        assert self.monkey.handle(food) == expected

    def test_subchain_skips_earlier_handlers(self):
        assert self.squirrel.handle("Banana") is None

    def test_handlers_do_not_share_next(self):
        assert DogHandler().handle("Nut") is None


def valid_request(**overrides) -> OrderRequest:
    data = {
        "is_authenticated": True,
        "is_admin": True,
        "body": OrderBody(item="test", price="100"),
        "ip_address": "107.77.194.36",
    }
    data.update(overrides)
    return OrderRequest(**data)


class TestOrderChain:
    """Order requests must pass every check."""

    def setup_method(self):
        self.chain = build_order_chain()

    def test_valid_request(self, capsys):
        assert order_client_code(self.chain, valid_request()) is True
        assert capsys.readouterr().out == "Request valid, we can now process the order\n"

    @pytest.mark.parametrize(
        "overrides, message",
        [
            ({"is_authenticated": False}, "Denied access, user not authenticated"),
            ({"is_admin": False}, "Denied access, permission failed"),
            ({"body": OrderBody(item="test")}, "Validation failed"),
            ({"ip_address": "104.31.2.164"}, "Blacklisted IP Address"),
        ],
    )
    def test_rejected_request(self, capsys, overrides, message):
        assert order_client_code(self.chain, valid_request(**overrides)) is False
        assert capsys.readouterr().out == f"{message}\n"

    def test_default_bodies_are_independent(self):
        first = OrderRequest()
        second = OrderRequest()
        first.body.item = "changed"
        assert second.body.item == ""

    def test_custom_blacklist(self, capsys):
        handler = IpAddressHandler(frozenset({"10.0.0.1"}))
        assert handler.handle(valid_request(ip_address="10.0.0.1")) is False
        assert handler.handle(valid_request(ip_address="104.31.2.164")) is True


def test_canonical_demo_output(capsys):
    run_canonical()
    out = capsys.readouterr().out

    assert "Chain: Monkey > Squirrel > Dog" in out
    assert "  Squirrel: I'll eat the Nut" in out
    assert "  Monkey: I'll eat the Banana" in out
    assert "  Cup of coffee was left untouched." in out
    assert "Subchain: Squirrel > Dog" in out


def test_request_validation_demo_output(capsys):
    run_request_validation()
    assert capsys.readouterr().out.splitlines() == [
        "Request valid, we can now process the order",
        "Denied access, permission failed",
        "Blacklisted IP Address",
    ]
