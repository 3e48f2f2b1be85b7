# 🧪 tests/infrastructure/test_yaml_catalog_loader.py
"""
🧪 Тести для `YamlCatalogLoader`.

Перевіряємо:
- вбудований демо-каталог;
- усі способи задати термін придатності;
- дати з часовим поясом у кошику;
- відмову на некоректній структурі.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal

import pytest

from retail.domain.cart.cart import Cart
from retail.domain.products.entities import ProductKind
from retail.errors import ExpiredProductError, InvalidArgumentError
from retail.infrastructure.catalog.yaml_catalog_loader import DEMO_CATALOG_PATH, YamlCatalogLoader


def test_demo_catalog(clock, now) -> None:
    catalog = YamlCatalogLoader(clock=clock).load()

    assert [p.sku for p in catalog] == ["cheese", "biscuits", "scratch-card", "tv", "milk"]
    assert catalog["cheese"].kind is ProductKind.EXPIRABLE_SHIPPABLE
    assert catalog["scratch-card"].kind is ProductKind.NON_SHIPPABLE
    assert catalog["tv"].kind is ProductKind.SHIPPABLE
    assert catalog["cheese"].expiry_date == now + timedelta(days=30)
    assert catalog["milk"].is_expired(now)
    assert catalog["tv"].weight_g == Decimal("5000")


def test_load_explicit_path_matches_default(clock) -> None:
    assert len(YamlCatalogLoader(clock=clock).load(DEMO_CATALOG_PATH)) == 5


def test_expiry_formats(clock) -> None:
    catalog = YamlCatalogLoader(clock=clock).load_from_mapping({
        "products": [
            {"name": "Iso", "price": 1, "quantity": 1, "expiry_date": "2026-11-01T08:30:00"},
            {"name": "Day", "price": 1, "quantity": 1, "expiry_date": date(2026, 11, 2)},
            {"name": "Exact", "price": 1, "quantity": 1, "expiry_date": datetime(2026, 11, 3, 9)},
            {"name": "Flagged", "price": 1, "quantity": 1, "expirable": True},
            {"name": "Plain", "price": 1, "quantity": 1},
        ]
    })

    assert catalog["iso"].expiry_date == datetime(2026, 11, 1, 8, 30)
    assert catalog["day"].expiry_date == datetime.combine(date(2026, 11, 2), time.max)
    assert catalog["exact"].expiry_date == datetime(2026, 11, 3, 9)
    assert catalog["flagged"].can_expire() and catalog["flagged"].expiry_date is None
    assert not catalog["plain"].can_expire()


def test_date_only_expiry_lasts_whole_day() -> None:
    catalog = YamlCatalogLoader().load_from_mapping(
        {"products": [{"name": "Bread", "price": 1, "quantity": 1, "expiry_date": "2026-11-02"}]}
    )
    bread = catalog["bread"]
    assert not bread.is_expired(datetime(2026, 11, 2, 23, 59))
    assert bread.is_expired(datetime(2026, 11, 3, 0, 0))



def test_offset_expiry_can_be_added_to_cart(clock) -> None:
    catalog = YamlCatalogLoader(clock=clock).load_from_mapping({
        "products": [
            {"sku": "milk", "name": "Milk", "price": 40, "quantity": 3, "expiry_date": "2030-01-01T00:00:00+00:00"},
            {"sku": "kefir", "name": "Kefir", "price": 35, "quantity": 3, "expiry_date": "2030-01-01T00:00:00Z"},
        ]
    })
    expected = datetime(2030, 1, 1, tzinfo=timezone.utc).astimezone().replace(tzinfo=None)

    for sku in ("milk", "kefir"):
        assert catalog[sku].expiry_date.tzinfo is None
        assert catalog[sku].expiry_date == expected

    cart = Cart(clock=clock)
    cart.add(catalog["milk"], 1)
    cart.add(catalog["kefir"], 2)
    assert cart.quantity_of("milk") == 1
    assert cart.quantity_of("kefir") == 2


def test_native_yaml_timestamp_with_zone(tmp_path, clock) -> None:
    path = tmp_path / "catalog.yaml"
    path.write_text(
        "products:\n"
        "  - {sku: yoghurt, name: Yoghurt, price: 5, quantity: 2, expiry_date: 2020-01-01T00:00:00+02:00}\n",
        encoding="utf-8",
    )

    yoghurt = YamlCatalogLoader(clock=clock).load(path)["yoghurt"]

    assert yoghurt.expiry_date.tzinfo is None
    with pytest.raises(ExpiredProductError):
        Cart(clock=clock).add(yoghurt, 1)

def test_load_from_file(tmp_path, clock) -> None:
    path = tmp_path / "catalog.yaml"
    path.write_text(
        "products:\n"
        "  - {sku: lamp, name: Desk Lamp, price: '19.99', quantity: 4, weight_g: 850}\n",
        encoding="utf-8",
    )

    catalog = YamlCatalogLoader(clock=clock).load(path)

    assert catalog["lamp"].price == Decimal("19.99")
    assert catalog["lamp"].requires_shipping()


@pytest.mark.parametrize(
    "data",
    [
        [],
        {},
        {"products": "cheese"},
        {"products": ["cheese"]},
        {"products": [{"name": "X", "price": 1, "quantity": 1, "expiry_date": "soon"}]},
        {"products": [{"name": "X", "price": 1, "quantity": 1, "expires_in_days": "a week"}]},
    ],
)
def test_invalid_structure(data) -> None:
    with pytest.raises(ValueError):
        YamlCatalogLoader().load_from_mapping(data)


def test_invalid_product_fields() -> None:
    with pytest.raises(InvalidArgumentError):
        YamlCatalogLoader().load_from_mapping({"products": [{"name": "X", "price": -1, "quantity": 1}]})


def test_invalid_yaml_file(tmp_path) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("products: [unclosed\n", encoding="utf-8")

    with pytest.raises(ValueError):
        YamlCatalogLoader().load(path)
