# 🚨 retail/ui/error_presenter.py
"""
🚨 Формує користувацькі повідомлення про помилки оформлення.

🔹 Підбирає текст за `ReasonCode` і підставляє контекст (назва товару, суми).
🔹 Додає пораду, як діяти далі: поповнити склад, баланс, прибрати прострочене.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from decimal import Decimal                                              # 💵 Суми у контексті
from typing import Any, Dict, Final                                      # 🧰 Типи та константи

# 🧩 Внутрішні модулі проєкту
from retail.errors.reason_codes import ReasonCode                        # 🧾 Коди причин
from retail.errors.reason_mapper import map_error_to_reason              # 🗺️ Виняток → причина
from retail.shared.utils.money import q2                                 # 🔁 Округлення до копійок


# ================================
# 📝 ТЕКСТИ
# ================================
_MESSAGES: Final[Dict[ReasonCode, str]] = {
    ReasonCode.INVALID_ARGUMENT: "Invalid {argument}: {value!r}.",
    ReasonCode.OUT_OF_STOCK: "Only {available} of {name} in stock, {requested} requested.",
    ReasonCode.EXPIRED: "{name} is past its expiry date.",
    ReasonCode.EMPTY_CART: "The cart of {customer} is empty.",
    ReasonCode.INSUFFICIENT_STOCK: "{name} stock dropped to {available}, {requested} in the cart.",
    ReasonCode.INSUFFICIENT_FUNDS: "{customer} needs {required} but has {balance}.",
    ReasonCode.INTERNAL: "Unexpected error.",
}

_NEXT_TIPS: Final[Dict[ReasonCode, str]] = {                             # 💡 Пропозиції наступних кроків
    ReasonCode.INVALID_ARGUMENT: "Pass an existing product and a positive quantity.",
    ReasonCode.OUT_OF_STOCK: "Lower the quantity or wait for a restock.",
    ReasonCode.EXPIRED: "Remove the item from the cart and try again.",
    ReasonCode.EMPTY_CART: "Add at least one product before checking out.",
    ReasonCode.INSUFFICIENT_STOCK: "Lower the quantity or restock, then check out again.",
    ReasonCode.INSUFFICIENT_FUNDS: "Top up the balance by at least {shortfall} and retry.",
    ReasonCode.INTERNAL: "Check the log file for details.",
}


# ================================
# 🧾 ГОЛОВНИЙ ФОРМАТЕР ПОВІДОМЛЕНЬ
# ================================
def build_error_message(code: ReasonCode, *, ctx: Dict[str, Any] | None = None) -> str:
    """
    Повертає повідомлення про помилку з порадою в одному рядку.
    """
    context = {
        key: f"{q2(value):.2f}" if isinstance(value, Decimal) else value  # 💵 Суми з двома знаками
        for key, value in (ctx or {}).items()
    }
    try:
        body = _MESSAGES[code].format(**context)                         # 🧾 Основний текст
        tip = _NEXT_TIPS.get(code, "").format(**context)                 # 💡 Додаткова порада
    except (KeyError, IndexError):                                       # 🧩 Неповний ctx → шаблон без підстановок
        body = _MESSAGES[ReasonCode.INTERNAL]
        tip = _NEXT_TIPS[ReasonCode.INTERNAL]
    return f"{body} {tip}".strip()


def present_error(exc: Exception) -> str:
    """Виняток → готовий текст для користувача."""
    code, ctx = map_error_to_reason(exc)
    return build_error_message(code, ctx=ctx)


__all__ = ["build_error_message", "present_error"]
