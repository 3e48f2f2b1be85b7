# 🛒 retail/domain/cart/cart.py
"""
🛒 Кошик клієнта: sku → (товар, запитана кількість).

🔹 `add` перевіряє аргументи, залишок і термін придатності на момент додавання.
🔹 Повторне додавання того ж товару зливає кількості в один рядок.
🔹 Залишок порівнюється лише з кількістю поточного виклику, не з сумою в кошику:
   два послідовні `add` разом можуть перевищити склад, це зловить чекаут.
🔹 Кошик ніколи не змінює сам товар.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                      # 🧾 Логування дій із кошиком
from dataclasses import dataclass                                   # 🧱 Рядок кошика
from datetime import datetime                                       # ⏳ Час для перевірки придатності
from decimal import Decimal                                         # 💵 Сума рядка
from typing import Callable, Dict, Iterator, Optional, Tuple        # 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from retail.domain.products.entities import Product
from retail.errors.custom_errors import (
    ExpiredProductError,
    InvalidArgumentError,
    OutOfStockError,
)
from retail.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.domain.cart")

Clock = Callable[[], datetime]                                      # ⏱️ Джерело поточного часу


# ================================
# 🧾 РЯДОК КОШИКА
# ================================
@dataclass(frozen=True, slots=True)
class CartLine:
    """Пара (товар, кількість)."""

    product: Product
    quantity: int

    @property
    def sku(self) -> str:
        return self.product.sku

    @property
    def line_total(self) -> Decimal:
        return self.product.price * self.quantity


# ================================
# 🛒 КОШИК
# ================================
class Cart:
    """Невпорядкований за змістом, але стабільний за порядком першого додавання кошик."""

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self._lines: Dict[str, CartLine] = {}                       # 🔑 sku → рядок
        self._clock: Clock = clock or datetime.now                  # ⏱️ Годинник для перевірки expiry

    def add(self, item: Optional[Product], quantity: int) -> CartLine:
        """
        Додає `quantity` одиниць `item`.

        Raises:
            InvalidArgumentError: товар відсутній або кількість не є додатним цілим.
            OutOfStockError: на складі менше, ніж `quantity`.
            ExpiredProductError: товар уже прострочений.
        """
        if item is None:
            raise InvalidArgumentError("Cannot add an absent product to the cart", argument="item", value=None)
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise InvalidArgumentError(
                f"Quantity must be a positive integer, got {quantity!r}",
                argument="quantity",
                value=quantity,
            )
        if item.quantity < quantity:
            logger.info("📦 Add rejected: out of stock | sku=%s requested=%s available=%s", item.sku, quantity, item.quantity)
            raise OutOfStockError(sku=item.sku, name=item.name, requested=quantity, available=item.quantity)
        if item.can_expire() and item.is_expired(self._clock()):
            logger.info("⌛ Add rejected: expired | sku=%s expiry=%s", item.sku, item.expiry_date)
            raise ExpiredProductError(sku=item.sku, name=item.name, expiry_date=item.expiry_date)

        existing = self._lines.get(item.sku)
        if existing is not None and existing.product is not item:
            raise InvalidArgumentError(
                f"Another product with sku {item.sku!r} is already in the cart",
                argument="item",
                value=item.sku,
            )
        merged = quantity + (existing.quantity if existing else 0)  # ➕ Зливаємо з наявним рядком
        line = CartLine(product=item, quantity=merged)
        self._lines[item.sku] = line
        logger.debug("🛒 Added to cart | sku=%s +%s → %s", item.sku, quantity, merged)
        return line

    def remove(self, sku: str) -> Optional[CartLine]:
        """Прибирає рядок (наприклад, прострочений товар). Повертає видалений рядок або None."""
        line = self._lines.pop(sku, None)
        if line is not None:
            logger.debug("🗑️ Removed from cart | sku=%s", sku)
        return line

    def clear(self) -> None:
        self._lines.clear()

    # ================================
    # 🔍 ЧИТАННЯ
    # ================================
    def quantity_of(self, sku: str) -> int:
        line = self._lines.get(sku)
        return line.quantity if line else 0

    @property
    def lines(self) -> Tuple[CartLine, ...]:
        return tuple(self._lines.values())

    def is_empty(self) -> bool:
        return not self._lines

    def __iter__(self) -> Iterator[CartLine]:
        return iter(tuple(self._lines.values()))

    def __len__(self) -> int:
        return len(self._lines)

    def __contains__(self, sku: object) -> bool:
        return sku in self._lines


__all__ = ["Cart", "CartLine", "Clock"]
