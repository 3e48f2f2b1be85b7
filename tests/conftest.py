# tests/conftest.py
import os
import sys
from datetime import datetime
from pathlib import Path

# 1) Гасимо автопідхоплення сторонніх плагінів
os.environ.setdefault("PYTEST_DISABLE_PLUGIN_AUTOLOAD", "1")

# 2) Додаємо src у sys.path, щоб працював імпорт "retail.…"
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402

from retail.config.config_service import ConfigService  # noqa: E402
from retail.domain.checkout.services import CheckoutService  # noqa: E402
from retail.domain.customers.entities import Customer  # noqa: E402
from retail.domain.products.catalog import Catalog  # noqa: E402
from retail.domain.products.entities import (  # noqa: E402
    expirable_product,
    non_shippable_product,
    shippable_product,
)
from retail.domain.shipping.services import ShippingService  # noqa: E402
from retail.ui.formatters.receipt_formatter import ReceiptFormatter  # noqa: E402
from retail.ui.sinks import MemorySink  # noqa: E402

NOW = datetime(2026, 10, 19, 12, 0, 0)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def clock():
    return lambda: NOW


@pytest.fixture
def sink():
    return MemorySink()


@pytest.fixture
def formatter():
    return ReceiptFormatter()


@pytest.fixture
def shipping_service(sink, formatter):
    return ShippingService(sink, formatter)


@pytest.fixture
def checkout(shipping_service, sink, formatter, clock):
    return CheckoutService(shipping_service=shipping_service, sink=sink, formatter=formatter, clock=clock)


@pytest.fixture
def catalog():
    return Catalog([
        expirable_product("Cheese", 100, 5, weight_g=200, expiry_date=datetime(2026, 12, 1), sku="cheese"),
        expirable_product("Biscuits", 150, 3, weight_g=700, expiry_date=datetime(2027, 1, 15), sku="biscuits"),
        non_shippable_product("ScratchCard", 50, 10, sku="scratch-card"),
        shippable_product("TV", 1000, 2, weight_g=5000, sku="tv"),
    ])


@pytest.fixture
def make_customer(clock):
    def _make(name="Alice", balance=1000):
        return Customer(name, balance, clock=clock)
    return _make


@pytest.fixture
def fresh_config(monkeypatch):
    """ConfigService без змінних RETAIL_* з оточення; скидається після тесту."""
    for env in (
        "RETAIL_CONFIG_PATH",
        "RETAIL_SHIPPING_RATE_PER_KG",
        "RETAIL_CURRENCY_LABEL",
        "RETAIL_CATALOG_PATH",
        "RETAIL_LOG_LEVEL",
        "RETAIL_LOG_FILE",
    ):
        monkeypatch.setenv(env, "")                              # 🔁 Запамʼятовує стан для відкату
        monkeypatch.delenv(env)
    ConfigService.reset()
    yield ConfigService
    ConfigService.reset()
