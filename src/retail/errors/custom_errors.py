# 🚨 retail/errors/custom_errors.py
"""
🚨 Доменні винятки кошика та оформлення замовлення.

🔹 Усі наслідують `CheckoutError` → `UserVisibleError` → `AppError`.
🔹 Кожен виняток несе структурований контекст (sku, кількості, суми).
🔹 `to_log_extra()` повертає словник для `logger.extra`.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging														# 🧾 Логування створення винятків
from datetime import datetime										# ⏳ Термін придатності
from decimal import Decimal											# 💵 Баланс і суми
from typing import Any, Dict, Optional								# 📐 Типізація

# 🧩 Внутрішні модулі проєкту
from retail.shared.errors import AppError, UserVisibleError			# 🧠 Базова ієрархія
from retail.shared.utils.logger import LOG_NAME						# 🏷️ Префікс логерів


# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.errors")					# 🧾 Локальний логер


# ================================
# 🛒 БАЗОВА ПОМИЛКА ОФОРМЛЕННЯ
# ================================
class CheckoutError(UserVisibleError):
    """🛒 Спільний предок усіх помилок кошика та чекауту."""


class InvalidArgumentError(CheckoutError, ValueError):
    """🚫 Відсутній товар або некоректна кількість/значення."""

    def __init__(self, message: str, *, argument: str, value: Any = None) -> None:
        super().__init__(message)
        self.argument = argument										# 🏷️ Імʼя аргументу
        self.value = value												# 🔢 Отримане значення
        logger.debug("🚫 InvalidArgumentError created", extra={"argument": argument, "value": repr(value)})

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        extra.update({"argument": self.argument, "value": repr(self.value)})
        return extra


class _StockShortageError(CheckoutError):
    """📦 Спільна частина для OutOfStock / InsufficientStock."""

    def __init__(self, message: str, *, sku: str, name: str, requested: int, available: int) -> None:
        super().__init__(message)
        self.sku = sku													# 🔑 Ідентифікатор товару
        self.name = name												# 🏷️ Назва товару
        self.requested = requested										# 🛒 Запитана кількість
        self.available = available										# 📦 Фактичний залишок

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        extra.update({
            "sku": self.sku,
            "requested": self.requested,
            "available": self.available,
        })
        return extra


class OutOfStockError(_StockShortageError):
    """📦 Під час `add` запитано більше, ніж є на складі."""

    def __init__(self, *, sku: str, name: str, requested: int, available: int) -> None:
        super().__init__(
            f"Not enough stock for {name!r}: requested {requested}, available {available}",
            sku=sku,
            name=name,
            requested=requested,
            available=available,
        )
        logger.debug("📦 OutOfStockError created", extra={"sku": sku})


class InsufficientStockError(_StockShortageError):
    """📉 Залишок зменшився між `add` і оформленням."""

    def __init__(self, *, sku: str, name: str, requested: int, available: int) -> None:
        super().__init__(
            f"Stock for {name!r} dropped below the requested quantity: "
            f"requested {requested}, available {available}",
            sku=sku,
            name=name,
            requested=requested,
            available=available,
        )
        logger.debug("📉 InsufficientStockError created", extra={"sku": sku})


class ExpiredProductError(CheckoutError):
    """⌛ Товар прострочений (на момент `add` або валідації чекауту)."""

    def __init__(self, *, sku: str, name: str, expiry_date: Optional[datetime]) -> None:
        super().__init__(f"{name!r} expired on {expiry_date:%Y-%m-%d %H:%M}" if expiry_date else f"{name!r} is expired")
        self.sku = sku
        self.name = name
        self.expiry_date = expiry_date									# ⏳ Дата, після якої товар прострочено
        logger.debug("⌛ ExpiredProductError created", extra={"sku": sku})

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        extra.update({
            "sku": self.sku,
            "expiry_date": self.expiry_date.isoformat() if self.expiry_date else None,
        })
        return extra


class EmptyCartError(CheckoutError):
    """🛒 Спроба оформити порожній кошик."""

    def __init__(self, *, customer: str) -> None:
        super().__init__(f"Cart of {customer!r} is empty")
        self.customer = customer

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        extra["customer"] = self.customer
        return extra


class InsufficientFundsError(CheckoutError):
    """💸 Баланс клієнта менший за суму до сплати."""

    def __init__(self, *, customer: str, balance: Decimal, required: Decimal) -> None:
        super().__init__(f"{customer!r} has insufficient funds: balance {balance}, required {required}")
        self.customer = customer
        self.balance = balance											# 💰 Поточний баланс
        self.required = required										# 🧾 Потрібна сума
        logger.debug("💸 InsufficientFundsError created", extra={"customer": customer})

    @property
    def shortfall(self) -> Decimal:
        """Скільки бракує до повної оплати."""
        return self.required - self.balance

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        extra.update({
            "customer": self.customer,
            "balance": str(self.balance),
            "required": str(self.required),
        })
        return extra


# ================================
# 📤 ПУБЛІЧНИЙ API
# ================================
__all__ = [
    "AppError",
    "UserVisibleError",
    "CheckoutError",
    "InvalidArgumentError",
    "OutOfStockError",
    "InsufficientStockError",
    "ExpiredProductError",
    "EmptyCartError",
    "InsufficientFundsError",
]
