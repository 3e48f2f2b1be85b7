# 🧮 retail/errors/reason_codes.py
"""
🧮 Перелік причин збою, які розуміє шар представлення.
"""

from __future__ import annotations

from enum import Enum, unique


@unique
class ReasonCode(str, Enum):
    """Стабільні коди причин (значення придатні для логів і JSON)."""

    INVALID_ARGUMENT = "invalid_argument"      # 🚫 Некоректний виклик add
    OUT_OF_STOCK = "out_of_stock"              # 📦 Немає стільки на складі при додаванні
    EXPIRED = "expired"                        # ⌛ Прострочений товар
    EMPTY_CART = "empty_cart"                  # 🛒 Порожній кошик
    INSUFFICIENT_STOCK = "insufficient_stock"  # 📉 Залишок зменшився до оформлення
    INSUFFICIENT_FUNDS = "insufficient_funds"  # 💸 Не вистачає коштів
    INTERNAL = "internal"                      # ❓ Усе інше

    def __str__(self) -> str:
        return self.value


__all__ = ["ReasonCode"]
