# 💳 retail/domain/checkout/__init__.py
"""
💳 Пакет `domain.checkout` публікує DTO чека, контракт форматера та сервіс оформлення.

🔹 `interfaces.py`: `Receipt`, `ReceiptLine`, `IReceiptFormatter`.
🔹 `services.py`: `CheckoutService`, `CheckoutConfig`.
"""

from .interfaces import IReceiptFormatter, Receipt, ReceiptLine
from .services import CheckoutConfig, CheckoutService

__all__ = [
    "Receipt",
    "ReceiptLine",
    "IReceiptFormatter",
    "CheckoutConfig",
    "CheckoutService",
]
