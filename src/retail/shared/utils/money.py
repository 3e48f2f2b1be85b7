# 💵 retail/shared/utils/money.py
"""
💵 Утиліти для грошей і ваги у Decimal.

🔹 `to_decimal`: надійна конвертація int|float|str|Decimal → Decimal.
🔹 `q2`: квантування до 2 знаків (ROUND_HALF_UP) для відображення.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation      # 🔢 Точна арифметика
from typing import Any                                             # 🧰 Загальний тип

_CENTS = Decimal("0.01")                                           # 🪙 Крок квантування


def to_decimal(value: Any) -> Decimal:
    """Конвертує значення у Decimal. float іде через str, щоб не тягнути двійкові хвости."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):                                    # 🚫 True/False: не гроші
        raise ValueError(f"Некоректне числове значення: {value!r}")
    try:
        return Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError) as e:
        raise ValueError(f"Некоректне числове значення: {value!r}") from e


def q2(value: Any) -> Decimal:
    """Округлює до копійок."""
    return to_decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP)


__all__ = ["to_decimal", "q2"]
