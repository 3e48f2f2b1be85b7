# 👤 retail/domain/customers/entities.py
"""
👤 Клієнт: імʼя, баланс і власний кошик.

🔹 Кошик створюється разом із клієнтом і ніколи не замінюється.
🔹 `deduct` захищений: баланс не може піти в мінус через списання.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                      # 🧾 Логування руху коштів
from decimal import Decimal                                         # 💰 Баланс
from typing import Any, Optional                                    # 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from retail.domain.cart.cart import Cart, Clock
from retail.errors.custom_errors import InsufficientFundsError, InvalidArgumentError
from retail.shared.utils.logger import LOG_NAME
from retail.shared.utils.money import to_decimal

logger = logging.getLogger(f"{LOG_NAME}.domain.customers")


def _amount(value: Any, *, argument: str, allow_zero: bool) -> Decimal:
    try:
        amount = to_decimal(value)
    except ValueError as exc:
        raise InvalidArgumentError(f"{argument} must be a number, got {value!r}", argument=argument, value=value) from exc
    if not amount.is_finite() or amount < 0 or (amount == 0 and not allow_zero):
        raise InvalidArgumentError(f"{argument} is out of range: {value!r}", argument=argument, value=value)
    return amount


class Customer:
    """Покупець із балансом у Decimal."""

    def __init__(self, name: str, balance: Any, *, clock: Optional[Clock] = None) -> None:
        clean_name = name.strip() if isinstance(name, str) else ""
        if not clean_name:
            raise InvalidArgumentError("Customer name must not be empty", argument="name", value=name)
        self._name = clean_name
        self.balance: Decimal = _amount(balance, argument="balance", allow_zero=True)
        self._cart = Cart(clock=clock)                              # 🛒 Один кошик на весь час життя

    @property
    def name(self) -> str:
        return self._name

    @property
    def cart(self) -> Cart:
        return self._cart

    def can_afford(self, amount: Decimal) -> bool:
        return self.balance >= amount

    def deduct(self, amount: Any) -> Decimal:
        """Списує `amount`; якщо коштів бракує: InsufficientFundsError без змін балансу."""
        value = _amount(amount, argument="amount", allow_zero=True)
        if self.balance < value:
            raise InsufficientFundsError(customer=self._name, balance=self.balance, required=value)
        self.balance -= value
        logger.debug("💸 Balance deducted | customer=%s -%s → %s", self._name, value, self.balance)
        return self.balance

    def top_up(self, amount: Any) -> Decimal:
        value = _amount(amount, argument="amount", allow_zero=False)
        self.balance += value
        logger.info("💰 Balance topped up | customer=%s +%s → %s", self._name, value, self.balance)
        return self.balance

    def __repr__(self) -> str:
        return f"Customer(name={self._name!r}, balance={self.balance}, cart_lines={len(self._cart)})"


__all__ = ["Customer"]
