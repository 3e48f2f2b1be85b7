from decimal import Decimal

from retail.config.setup.container import Container
from retail.domain.products.catalog import Catalog
from retail.ui.sinks import ConsoleSink, MemorySink


def test_container_wires_services(fresh_config, clock) -> None:
    sink = MemorySink()
    container = Container(fresh_config(), sink=sink, clock=clock)

    assert container.sink is sink
    assert container.checkout_config.shipping_rate_per_kg == Decimal("30.0")
    assert container.checkout_service.config is container.checkout_config


def test_rate_and_currency_from_env(fresh_config, monkeypatch) -> None:
    monkeypatch.setenv("RETAIL_SHIPPING_RATE_PER_KG", "10")
    monkeypatch.setenv("RETAIL_CURRENCY_LABEL", "EGP")

    container = Container(fresh_config(), sink=MemorySink())

    assert container.checkout_config.shipping_rate_per_kg == Decimal("10")
    assert container.formatter._fmt_money(Decimal("1")) == "1.00 EGP"


def test_default_sink_is_console(fresh_config) -> None:
    assert isinstance(Container(fresh_config()).sink, ConsoleSink)


def test_demo_catalog_and_customer(fresh_config, clock) -> None:
    sink = MemorySink()
    container = Container(fresh_config(), sink=sink, clock=clock)

    demo = container.load_catalog()
    alice = container.new_customer("Alice", 1000)
    alice.cart.add(demo["cheese"], 2)
    alice.cart.add(demo["biscuits"], 1)
    alice.cart.add(demo["scratch-card"], 1)
    receipt = container.checkout_service.process_order(alice)

    assert isinstance(demo, Catalog)
    assert receipt.total == Decimal("483")
    assert sink.blocks[0][0] == "** Checkout receipt **"


def test_error_handler_writes_to_sink(fresh_config, clock) -> None:
    sink = MemorySink()
    container = Container(fresh_config(), sink=sink, clock=clock)
    bob = container.new_customer("Bob", 10)

    assert container.error_handler(container.checkout_service.process_order)(bob) is None
    assert sink.lines == ["✖ The cart of Bob is empty. Add at least one product before checking out."]
