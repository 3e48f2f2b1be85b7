# 📦 retail/domain/products/entities.py
"""
📦 Доменна сутність товару з явними «можливостями» (capabilities).

🔹 Один клас `Product`: опційні поля `weight_g` / `expiry_date` визначають поведінку.
🔹 Похідні предикати `requires_shipping()` та `can_expire()` замість дерева наслідування.
🔹 Поля можливостей незмінні; змінюється лише `quantity` через `reduce_quantity` / `restock`.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                      # 🧾 Логування змін залишку
import re                                                           # 🔤 Побудова sku зі назви
from dataclasses import dataclass, field                            # 🧱 Опис сутностей
from datetime import datetime                                       # ⏳ Термін придатності
from decimal import Decimal                                         # 💰 Ціна та вага
from enum import Enum, unique                                       # 🔖 Вид товару
from typing import Any, Optional                                    # 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from retail.errors.custom_errors import (
    InsufficientStockError,
    InvalidArgumentError,
)
from retail.shared.utils.logger import LOG_NAME                     # 🏷️ Префікс логерів
from retail.shared.utils.money import to_decimal                    # 🔢 Конвертація у Decimal

# ================================
# 🪵 ЛОГЕР МОДУЛЯ
# ================================
logger = logging.getLogger(f"{LOG_NAME}.domain.products")           # 🧾 Модульний логер domain-level


# ================================
# 📏 КОНСТАНТИ ВАЛІДАЦІЇ
# ================================
NAME_MAX_LEN = 200                                                  # 🏷️ Максимальна довжина назви
_SKU_SANITIZER = re.compile(r"[^a-z0-9]+")                          # 🔤 Усе, що не латиниця/цифра


# ================================
# 🔖 ВИД ТОВАРУ
# ================================
@unique
class ProductKind(str, Enum):
    """Похідна класифікація товару за набором можливостей."""

    NON_SHIPPABLE = "non_shippable"
    SHIPPABLE = "shippable"
    EXPIRABLE = "expirable"
    EXPIRABLE_SHIPPABLE = "expirable_shippable"

    def __str__(self) -> str:
        return self.value


# ================================
# 🧽 НОРМАЛІЗАЦІЙНІ ХЕЛПЕРИ
# ================================
def make_sku(name: str) -> str:
    """Стабільний ідентифікатор зі назви: `"Scratch Card"` → `"scratch-card"`."""
    slug = _SKU_SANITIZER.sub("-", (name or "").strip().lower()).strip("-")
    return slug


def _require_non_negative_int(value: Any, *, argument: str) -> int:
    """Ціле ≥ 0 (bool не приймаємо)."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidArgumentError(f"{argument} must be a non-negative integer, got {value!r}", argument=argument, value=value)
    return value


def _require_positive_int(value: Any, *, argument: str) -> int:
    """Ціле > 0 (bool не приймаємо)."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidArgumentError(f"{argument} must be a positive integer, got {value!r}", argument=argument, value=value)
    return value


def _require_non_negative_decimal(value: Any, *, argument: str) -> Decimal:
    """Decimal ≥ 0 із будь-якого числового вводу."""
    try:
        amount = to_decimal(value)
    except ValueError as exc:
        raise InvalidArgumentError(f"{argument} must be a number, got {value!r}", argument=argument, value=value) from exc
    if not amount.is_finite() or amount < 0:
        raise InvalidArgumentError(f"{argument} must be a non-negative number, got {value!r}", argument=argument, value=value)
    return amount


def _naive_local(moment: Optional[datetime]) -> Optional[datetime]:
    """Aware datetime → наївний локальний час; наївні значення й None без змін."""
    if moment is None:
        return None
    if not isinstance(moment, datetime):
        raise InvalidArgumentError(f"expiry_date must be a datetime, got {moment!r}", argument="expiry_date", value=moment)
    if moment.tzinfo is None:
        return moment
    return moment.astimezone().replace(tzinfo=None)                 # 🌍 У поясі процесу, як і `datetime.now()`


# ================================
# 🛍️ СУТНІСТЬ ТОВАРУ
# ================================
@dataclass(frozen=True, eq=False, slots=True)
class Product:
    """
    Товар каталогу.

    `weight_g`: вага одиниці у грамах (None → товар без ваги).
    `expirable`: чи має товар термін придатності; `expiry_date` може бути відсутня.
    Рівність і хеш: за ідентичністю обʼєкта; для ключів використовуйте `sku`.

    Усі поля незмінні, крім `quantity`: залишок змінюють лише `reduce_quantity` і `restock`.
    Пряме присвоєння будь-якого поля, `quantity` теж, дає `FrozenInstanceError`.
    `expiry_date` з часовим поясом зберігається як наївний локальний час.
    """

    name: str
    price: Decimal
    quantity: int
    weight_g: Optional[Decimal] = None
    expiry_date: Optional[datetime] = None
    expirable: bool = False
    sku: str = field(default="")

    def __post_init__(self) -> None:
        name = (self.name or "").strip() if isinstance(self.name, str) else ""
        if not name:
            raise InvalidArgumentError("Product name must not be empty", argument="name", value=self.name)
        if len(name) > NAME_MAX_LEN:
            raise InvalidArgumentError(f"Product name is longer than {NAME_MAX_LEN} characters", argument="name", value=self.name)

        price = _require_non_negative_decimal(self.price, argument="price")
        quantity = _require_non_negative_int(self.quantity, argument="quantity")
        weight = None if self.weight_g is None else _require_non_negative_decimal(self.weight_g, argument="weight_g")
        sku = (self.sku or "").strip() or make_sku(name)            # 🔑 sku за замовчуванням: зі назви
        if not sku:
            raise InvalidArgumentError("Product sku must not be empty", argument="sku", value=self.sku)

        # 🔐 Фіксуємо нормалізовані значення (frozen dataclass)
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "price", price)
        object.__setattr__(self, "quantity", quantity)
        object.__setattr__(self, "weight_g", weight)
        object.__setattr__(self, "expiry_date", _naive_local(self.expiry_date))
        object.__setattr__(self, "expirable", bool(self.expirable or self.expiry_date is not None))
        object.__setattr__(self, "sku", sku)

    # ================================
    # 🧭 МОЖЛИВОСТІ
    # ================================
    def requires_shipping(self) -> bool:
        """Фізична доставка потрібна лише для товарів із додатною вагою."""
        return self.weight_g is not None and self.weight_g > 0

    def can_expire(self) -> bool:
        return self.expirable

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """True, якщо дата придатності задана і `now` строго пізніше за неї."""
        if self.expiry_date is None:
            return False
        moment = _naive_local(now) if now is not None else datetime.now()
        return moment > self.expiry_date

    @property
    def kind(self) -> ProductKind:
        ships = self.requires_shipping()
        if self.expirable:
            return ProductKind.EXPIRABLE_SHIPPABLE if ships else ProductKind.EXPIRABLE
        return ProductKind.SHIPPABLE if ships else ProductKind.NON_SHIPPABLE

    # ================================
    # 📦 ЗМІНА ЗАЛИШКУ
    # ================================
    def reduce_quantity(self, amount: int) -> None:
        """Списує `amount` одиниць зі складу."""
        amount = _require_positive_int(amount, argument="amount")
        if amount > self.quantity:
            raise InsufficientStockError(sku=self.sku, name=self.name, requested=amount, available=self.quantity)
        object.__setattr__(self, "quantity", self.quantity - amount)
        logger.debug("📉 Stock reduced | sku=%s -%s → %s", self.sku, amount, self.quantity)

    def restock(self, amount: int) -> None:
        """Поповнює склад (зовнішній колаборатор, чекаут цього не викликає)."""
        amount = _require_positive_int(amount, argument="amount")
        object.__setattr__(self, "quantity", self.quantity + amount)
        logger.debug("📈 Stock replenished | sku=%s +%s → %s", self.sku, amount, self.quantity)

    def __repr__(self) -> str:
        return f"Product(sku={self.sku!r}, kind={self.kind.value}, price={self.price}, quantity={self.quantity})"


# ================================
# 🏭 ФАБРИКИ ВАРІАНТІВ
# ================================
def expirable_product(
    name: str,
    price: Any,
    quantity: int,
    *,
    weight_g: Any = None,
    expiry_date: Optional[datetime] = None,
    sku: str = "",
) -> Product:
    """Товар із терміном придатності (сир, печиво). Вага > 0 → потребує доставки."""
    return Product(
        name=name,
        price=price,
        quantity=quantity,
        weight_g=weight_g,
        expiry_date=expiry_date,
        expirable=True,
        sku=sku,
    )


def shippable_product(name: str, price: Any, quantity: int, *, weight_g: Any, sku: str = "") -> Product:
    """Товар, що не псується, але має вагу (телевізор)."""
    return Product(name=name, price=price, quantity=quantity, weight_g=weight_g, sku=sku)


def non_shippable_product(name: str, price: Any, quantity: int, *, sku: str = "") -> Product:
    """Цифровий товар: ні ваги, ні терміну придатності (скретч-картка)."""
    return Product(name=name, price=price, quantity=quantity, sku=sku)


__all__ = [
    "Product",
    "ProductKind",
    "make_sku",
    "expirable_product",
    "shippable_product",
    "non_shippable_product",
]
