# 🧪 tests/domain/test_checkout_service.py
"""
🧪 Тести для `CheckoutService`.

Перевіряємо:
- повний успішний сценарій (суми, залишки, баланс, чек і маніфест);
- кожну відмову та що вона не змінює ні складу, ні балансу;
- `quote` без побічних ефектів та налаштовуваний тариф доставки.
"""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal

import pytest

from retail.domain.checkout.services import CheckoutConfig, CheckoutService
from retail.errors import (
    EmptyCartError,
    ExpiredProductError,
    InsufficientFundsError,
    InsufficientStockError,
    InvalidArgumentError,
)


def _fill_default_cart(customer, catalog) -> None:
    customer.cart.add(catalog["cheese"], 2)
    customer.cart.add(catalog["biscuits"], 1)
    customer.cart.add(catalog["scratch-card"], 1)


def test_successful_checkout(checkout, catalog, make_customer, sink) -> None:
    alice = make_customer("Alice", 1000)
    _fill_default_cart(alice, catalog)

    receipt = checkout.process_order(alice)

    assert receipt.committed
    assert receipt.subtotal == Decimal("450")
    assert receipt.shipping_cost == Decimal("33")
    assert receipt.total == Decimal("483")
    assert receipt.remaining_balance == Decimal("517")
    assert alice.balance == Decimal("517")
    assert catalog.snapshot() == {"cheese": 3, "biscuits": 2, "scratch-card": 9, "tv": 2}


def test_receipt_lines_follow_cart_order(checkout, catalog, make_customer) -> None:
    alice = make_customer("Alice", 1000)
    _fill_default_cart(alice, catalog)

    receipt = checkout.process_order(alice)

    assert [(line.quantity, line.name, line.line_total) for line in receipt.lines] == [
        (2, "Cheese", Decimal("200")),
        (1, "Biscuits", Decimal("150")),
        (1, "ScratchCard", Decimal("50")),
    ]


def test_only_weighted_items_are_shipped(checkout, catalog, make_customer, sink) -> None:
    alice = make_customer("Alice", 1000)
    _fill_default_cart(alice, catalog)

    receipt = checkout.process_order(alice)

    assert receipt.manifest is not None
    assert [(item.name, item.weight_g) for item in receipt.manifest.items] == [
        ("2x Cheese", Decimal("400")),
        ("1x Biscuits", Decimal("700")),
    ]
    assert receipt.manifest.total_weight_kg == Decimal("1.1")
    # чек, потім маніфест
    assert [block[0] for block in sink.blocks] == ["** Checkout receipt **", "** Shipment notice **"]


def test_digital_only_order_skips_shipping(checkout, catalog, make_customer, sink) -> None:
    bob = make_customer("Bob", 100)
    bob.cart.add(catalog["scratch-card"], 2)

    receipt = checkout.process_order(bob)

    assert receipt.shipping_cost == Decimal("0")
    assert receipt.total == Decimal("100")
    assert receipt.manifest is None
    assert not receipt.requires_shipping
    assert bob.balance == Decimal("0")
    assert len(sink.blocks) == 1


def test_empty_cart(checkout, make_customer, sink) -> None:
    bob = make_customer("Bob", 500)

    with pytest.raises(EmptyCartError) as exc_info:
        checkout.process_order(bob)

    assert exc_info.value.customer == "Bob"
    assert bob.balance == Decimal("500")
    assert sink.blocks == []


def test_missing_customer(checkout) -> None:
    with pytest.raises(InvalidArgumentError):
        checkout.process_order(None)  # type: ignore[arg-type]


def test_insufficient_funds_changes_nothing(checkout, catalog, make_customer, sink) -> None:
    carol = make_customer("Carol", 100)
    carol.cart.add(catalog["tv"], 2)

    with pytest.raises(InsufficientFundsError) as exc_info:
        checkout.process_order(carol)

    # 2000 + 10 кг × 30
    assert exc_info.value.required == Decimal("2300")
    assert exc_info.value.shortfall == Decimal("2200")
    assert carol.balance == Decimal("100")
    assert catalog["tv"].quantity == 2
    assert sink.blocks == []


def test_shipping_counts_towards_funds(checkout, catalog, make_customer) -> None:
    dave = make_customer("Dave", 450)
    _fill_default_cart(dave, catalog)

    with pytest.raises(InsufficientFundsError):
        checkout.process_order(dave)
    assert catalog.snapshot()["cheese"] == 5


def test_exact_balance_succeeds(checkout, catalog, make_customer) -> None:
    erin = make_customer("Erin", 483)
    _fill_default_cart(erin, catalog)

    receipt = checkout.process_order(erin)
    assert receipt.remaining_balance == Decimal("0")


def test_stock_dropped_after_add(checkout, catalog, make_customer) -> None:
    alice = make_customer("Alice", 1000)
    alice.cart.add(catalog["biscuits"], 1)
    alice.cart.add(catalog["cheese"], 3)
    catalog.withdraw("cheese", 3)

    with pytest.raises(InsufficientStockError) as exc_info:
        checkout.process_order(alice)

    assert exc_info.value.requested == 3
    assert exc_info.value.available == 2
    assert catalog.snapshot()["biscuits"] == 3
    assert alice.balance == Decimal("1000")


def test_merged_adds_exceeding_stock_fail_at_checkout(checkout, catalog, make_customer) -> None:
    alice = make_customer("Alice", 10_000)
    alice.cart.add(catalog["cheese"], 3)
    alice.cart.add(catalog["cheese"], 3)

    with pytest.raises(InsufficientStockError):
        checkout.process_order(alice)
    assert catalog["cheese"].quantity == 5


def test_product_expired_between_add_and_checkout(
    shipping_service, sink, formatter, catalog, make_customer, now
) -> None:
    alice = make_customer("Alice", 1000)
    alice.cart.add(catalog["scratch-card"], 1)
    alice.cart.add(catalog["cheese"], 1)
    later = CheckoutService(
        shipping_service=shipping_service,
        sink=sink,
        formatter=formatter,
        clock=lambda: now + timedelta(days=60),
    )

    with pytest.raises(ExpiredProductError) as exc_info:
        later.process_order(alice)

    assert exc_info.value.sku == "cheese"
    assert catalog.snapshot()["scratch-card"] == 10
    assert alice.balance == Decimal("1000")


def test_cart_is_kept_after_checkout(checkout, catalog, make_customer) -> None:
    alice = make_customer("Alice", 1000)
    _fill_default_cart(alice, catalog)

    checkout.process_order(alice)

    assert len(alice.cart) == 3
    assert alice.cart.quantity_of("cheese") == 2


def test_quote_has_no_side_effects(checkout, catalog, make_customer, sink) -> None:
    alice = make_customer("Alice", 1000)
    _fill_default_cart(alice, catalog)

    quote = checkout.quote(alice)

    assert not quote.committed
    assert quote.total == Decimal("483")
    assert quote.remaining_balance == Decimal("517")
    assert quote.manifest is None
    assert alice.balance == Decimal("1000")
    assert catalog["cheese"].quantity == 5
    assert sink.blocks == []


def test_custom_shipping_rate(shipping_service, sink, formatter, clock, catalog, make_customer) -> None:
    service = CheckoutService(
        shipping_service=shipping_service,
        sink=sink,
        formatter=formatter,
        cfg=CheckoutConfig(shipping_rate_per_kg="10"),
        clock=clock,
    )
    alice = make_customer("Alice", 1000)
    _fill_default_cart(alice, catalog)

    receipt = service.process_order(alice)
    assert receipt.shipping_cost == Decimal("11")
    assert receipt.total == Decimal("461")


def test_default_rate(checkout) -> None:
    assert checkout.config.shipping_rate_per_kg == Decimal("30.0")


@pytest.mark.parametrize("rate", [-1, "fast", "NaN"])
def test_invalid_rate_rejected(rate) -> None:
    with pytest.raises(InvalidArgumentError):
        CheckoutConfig(shipping_rate_per_kg=rate)
