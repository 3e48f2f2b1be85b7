from datetime import datetime
from decimal import Decimal

from retail.errors import (
    EmptyCartError,
    ExpiredProductError,
    InsufficientFundsError,
    InsufficientStockError,
    InvalidArgumentError,
    OutOfStockError,
    ReasonCode,
)
from retail.ui.error_presenter import build_error_message, present_error


def test_out_of_stock_message() -> None:
    text = present_error(OutOfStockError(sku="cheese", name="Cheese", requested=10, available=5))
    assert text.startswith("Only 5 of Cheese in stock, 10 requested.")


def test_insufficient_stock_message() -> None:
    text = present_error(InsufficientStockError(sku="cheese", name="Cheese", requested=3, available=2))
    assert "Cheese stock dropped to 2, 3 in the cart." in text


def test_expired_message() -> None:
    text = present_error(ExpiredProductError(sku="milk", name="Milk", expiry_date=datetime(2026, 10, 18)))
    assert text.startswith("Milk is past its expiry date.")


def test_empty_cart_message() -> None:
    assert present_error(EmptyCartError(customer="Bob")).startswith("The cart of Bob is empty.")


def test_insufficient_funds_message_has_shortfall() -> None:
    exc = InsufficientFundsError(customer="Carol", balance=Decimal("100"), required=Decimal("2300"))
    text = present_error(exc)
    assert "Carol needs 2300.00 but has 100.00." in text
    assert "at least 2200.00" in text


def test_invalid_argument_message() -> None:
    text = present_error(InvalidArgumentError("bad", argument="quantity", value=0))
    assert text.startswith("Invalid quantity: 0.")


def test_unknown_error_falls_back() -> None:
    assert present_error(RuntimeError("boom")).startswith("Unexpected error.")


def test_incomplete_context_falls_back() -> None:
    assert build_error_message(ReasonCode.OUT_OF_STOCK, ctx={"name": "Cheese"}).startswith("Unexpected error.")
