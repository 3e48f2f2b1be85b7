# 🧭 retail/errors/reason_mapper.py
"""
🧭 Мапить винятки → `ReasonCode` + контекст для тексту помилки.

🔹 Розрізняє доменні помилки чекауту та все інше (INTERNAL).
🔹 Повертає словник параметрів (`ctx`), який підставляється у повідомлення.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging															# 🧾 Логування процесу мапінгу
from typing import Any, Dict, Tuple										# 📐 Типи для повернення

# 🧩 Внутрішні модулі проєкту
from retail.shared.utils.logger import LOG_NAME							# 🏷️ Префікс логерів
from .custom_errors import (
    EmptyCartError,
    ExpiredProductError,
    InsufficientFundsError,
    InsufficientStockError,
    InvalidArgumentError,
    OutOfStockError,
)
from .reason_codes import ReasonCode									# 🧮 Перелік причин


# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.errors.reason_mapper")		# 🧾 Локальний логер


# ================================
# 🧭 ОСНОВНИЙ МАПЕР
# ================================
def map_error_to_reason(exc: Exception) -> Tuple[ReasonCode, Dict[str, Any]]:
    """
    Повертає (reason_code, ctx): ctx підставляється у текст (наприклад, {name}).
    """
    logger.debug("🔎 map_error_to_reason start", extra={"exc_type": type(exc).__name__})

    if isinstance(exc, InvalidArgumentError):
        return ReasonCode.INVALID_ARGUMENT, {"argument": exc.argument, "value": exc.value}
    if isinstance(exc, OutOfStockError):
        return ReasonCode.OUT_OF_STOCK, {
            "name": exc.name,
            "requested": exc.requested,
            "available": exc.available,
        }
    if isinstance(exc, InsufficientStockError):
        return ReasonCode.INSUFFICIENT_STOCK, {
            "name": exc.name,
            "requested": exc.requested,
            "available": exc.available,
        }
    if isinstance(exc, ExpiredProductError):
        return ReasonCode.EXPIRED, {"name": exc.name, "expiry_date": exc.expiry_date}
    if isinstance(exc, EmptyCartError):
        return ReasonCode.EMPTY_CART, {"customer": exc.customer}
    if isinstance(exc, InsufficientFundsError):
        return ReasonCode.INSUFFICIENT_FUNDS, {
            "customer": exc.customer,
            "balance": exc.balance,
            "required": exc.required,
            "shortfall": exc.shortfall,
        }

    # ===== Fallback =====
    logger.warning("❓ Unknown error mapped to INTERNAL", extra={"exc_type": type(exc).__name__})
    return ReasonCode.INTERNAL, {}


__all__ = ["map_error_to_reason"]										# 📤 Публічний API
