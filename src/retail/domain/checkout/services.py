# 🛒 retail/domain/checkout/services.py
"""
🛒 Доменний сервіс оформлення замовлення.

🔹 Конвеєр: порожній кошик → валідація → ціни → доставка → перевірка коштів → commit → чек → відправлення.
🔹 До кроку commit жоден товар і жоден баланс не змінюється (усе або нічого).
🔹 Тариф доставки береться з `CheckoutConfig`, а не з глобальної константи.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                # 🪵 Логування кроків оформлення
from dataclasses import dataclass, replace                    # 🧱 Immutable-конфіг сервісу
from datetime import datetime                                 # ⏳ Поточний час для перевірки придатності
from decimal import Decimal                                   # 💵 Точні гроші (без float)
from typing import Callable, List, Optional, Tuple            # 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from retail.domain.cart.cart import CartLine                  # 🛒 Рядки кошика
from retail.domain.customers.entities import Customer         # 👤 Клієнт
from retail.domain.shipping.interfaces import (               # 🚚 Абстракція сервісу доставки
    IShippingService,
    ShipmentItem,
)
from retail.domain.shipping.services import calculate_shipping_cost
from retail.errors.custom_errors import (
    EmptyCartError,
    ExpiredProductError,
    InsufficientFundsError,
    InsufficientStockError,
    InvalidArgumentError,
)
from retail.shared.utils.interfaces import IOutputSink        # 🖨️ Приймач виводу
from retail.shared.utils.logger import LOG_NAME               # 🏷️ Базове імʼя логера
from retail.shared.utils.money import to_decimal
from .interfaces import IReceiptFormatter, Receipt, ReceiptLine

logger = logging.getLogger(f"{LOG_NAME}.domain.checkout")     # 🧾 Іменований логер сервісу


# ================================
# ⚙️ НАЛАШТУВАННЯ
# ================================
@dataclass(frozen=True, slots=True)
class CheckoutConfig:
    """Конфігураційні параметри оформлення."""
    shipping_rate_per_kg: Decimal = Decimal("30.0")           # 🚚 Грошових одиниць за кг

    def __post_init__(self) -> None:
        try:
            rate = to_decimal(self.shipping_rate_per_kg)
        except ValueError as exc:
            raise InvalidArgumentError(
                f"shipping_rate_per_kg must be a number, got {self.shipping_rate_per_kg!r}",
                argument="shipping_rate_per_kg",
                value=self.shipping_rate_per_kg,
            ) from exc
        if not rate.is_finite() or rate < 0:
            raise InvalidArgumentError(
                f"shipping_rate_per_kg must be non-negative, got {self.shipping_rate_per_kg!r}",
                argument="shipping_rate_per_kg",
                value=self.shipping_rate_per_kg,
            )
        object.__setattr__(self, "shipping_rate_per_kg", rate)


# ================================
# 🏛️ ГОЛОВНИЙ ДОМЕННИЙ СЕРВІС
# ================================
class CheckoutService:
    """💳 Оформлює кошик клієнта за один прохід на кожному етапі."""

    def __init__(
        self,
        shipping_service: IShippingService,
        sink: IOutputSink,
        formatter: IReceiptFormatter,
        cfg: CheckoutConfig | None = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        """
        ⚙️ Привʼязує сервіс до доставки, приймача виводу та конфіга.

        Args:
            shipping_service: Куди передаються товари, що потребують доставки.
            sink: Приймач тексту чека.
            formatter: Перетворює `Receipt` на рядки.
            cfg: Тариф доставки та інші параметри, опційний.
            clock: Джерело поточного часу (для перевірки придатності).
        """
        self._shipping = shipping_service
        self._sink = sink
        self._formatter = formatter
        self._cfg = cfg or CheckoutConfig()
        self._clock = clock or datetime.now

    @property
    def config(self) -> CheckoutConfig:
        return self._cfg

    # ================================
    # 🔢 ПУБЛІЧНИЙ API
    # ================================
    def quote(self, customer: Customer) -> Receipt:
        """
        Виконує всі перевірки та розрахунки без списання.

        Raises:
            EmptyCartError, InsufficientStockError, ExpiredProductError, InsufficientFundsError
        """
        receipt = self._prepare(customer)
        logger.info("🧮 Quote ready | customer=%s total=%s", customer.name, receipt.total)
        return receipt

    def process_order(self, customer: Customer) -> Receipt:
        """
        🚀 Оформлює кошик: перевіряє, рахує, списує, друкує чек і відправляє товари.

        Будь-яка помилка до commit не змінює ні складу, ні балансу.

        Returns:
            Receipt: зафіксований чек (з маніфестом, якщо була доставка).
        """
        prepared = self._prepare(customer)                                   # 1️⃣-6️⃣ Усе без мутацій
        lines = customer.cart.lines

        # --- 7️⃣ Commit: склад, потім баланс ---
        for line in lines:
            line.product.reduce_quantity(line.quantity)
        remaining = customer.deduct(prepared.total)
        receipt = replace(prepared, remaining_balance=remaining, committed=True)
        logger.info(
            "✅ Order committed | customer=%s lines=%s subtotal=%s shipping=%s total=%s balance=%s",
            customer.name,
            len(lines),
            receipt.subtotal,
            receipt.shipping_cost,
            receipt.total,
            remaining,
        )

        # --- 8️⃣ Чек ---
        self._sink.emit(self._formatter.format_receipt(receipt))

        # --- 9️⃣ Відправлення ---
        if receipt.shipment_items:
            manifest = self._shipping.ship(receipt.shipment_items)
            receipt = receipt.with_manifest(manifest)
        return receipt

    # ================================
    # 🧠 ВНУТРІШНІ КРОКИ
    # ================================
    def _prepare(self, customer: Customer) -> Receipt:
        if customer is None:
            raise InvalidArgumentError("Customer is required", argument="customer", value=None)
        lines = customer.cart.lines

        # --- 1️⃣ Порожній кошик ---
        if not lines:
            logger.info("🛒 Checkout rejected: empty cart | customer=%s", customer.name)
            raise EmptyCartError(customer=customer.name)

        # --- 2️⃣ Валідація всіх рядків ---
        self._validate(lines)

        # --- 3️⃣ Ціни та рядки доставки ---
        receipt_lines, shipment_items = self._price(lines)
        subtotal = sum((line.line_total for line in receipt_lines), Decimal("0"))

        # --- 4️⃣-5️⃣ Доставка та підсумок ---
        shipping_cost = calculate_shipping_cost(shipment_items, self._cfg.shipping_rate_per_kg)
        total = subtotal + shipping_cost
        logger.debug(
            "🧾 Pricing | subtotal=%s shipping=%s total=%s rate=%s/kg",
            subtotal,
            shipping_cost,
            total,
            self._cfg.shipping_rate_per_kg,
        )

        # --- 6️⃣ Кошти ---
        if not customer.can_afford(total):
            logger.info(
                "💸 Checkout rejected: insufficient funds | customer=%s balance=%s total=%s",
                customer.name,
                customer.balance,
                total,
            )
            raise InsufficientFundsError(customer=customer.name, balance=customer.balance, required=total)

        return Receipt(
            customer=customer.name,
            lines=receipt_lines,
            subtotal=subtotal,
            shipping_cost=shipping_cost,
            total=total,
            remaining_balance=customer.balance - total,
            shipment_items=shipment_items,
        )

    def _validate(self, lines: Tuple[CartLine, ...]) -> None:
        now = self._clock()
        for line in lines:
            product = line.product
            if product.quantity < line.quantity:
                logger.info(
                    "📉 Checkout rejected: insufficient stock | sku=%s requested=%s available=%s",
                    product.sku,
                    line.quantity,
                    product.quantity,
                )
                raise InsufficientStockError(
                    sku=product.sku,
                    name=product.name,
                    requested=line.quantity,
                    available=product.quantity,
                )
            if product.can_expire() and product.is_expired(now):
                logger.info("⌛ Checkout rejected: expired | sku=%s expiry=%s", product.sku, product.expiry_date)
                raise ExpiredProductError(sku=product.sku, name=product.name, expiry_date=product.expiry_date)

    @staticmethod
    def _price(lines: Tuple[CartLine, ...]) -> Tuple[Tuple[ReceiptLine, ...], Tuple[ShipmentItem, ...]]:
        receipt_lines: List[ReceiptLine] = []
        shipment_items: List[ShipmentItem] = []
        for line in lines:
            product = line.product
            receipt_lines.append(
                ReceiptLine(
                    sku=product.sku,
                    name=product.name,
                    quantity=line.quantity,
                    unit_price=product.price,
                    line_total=line.line_total,
                )
            )
            if product.requires_shipping():
                shipment_items.append(
                    ShipmentItem(
                        name=f"{line.quantity}x {product.name}",
                        weight_g=product.weight_g * line.quantity,
                    )
                )
        return tuple(receipt_lines), tuple(shipment_items)


__all__ = ["CheckoutConfig", "CheckoutService"]
