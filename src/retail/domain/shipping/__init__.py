# 🚚 retail/domain/shipping/__init__.py
"""
🚚 Пакет `domain.shipping` публікує DTO відправлення, контракт і сервіс.

🔹 `interfaces.py`: `ShipmentItem`, `ShippingManifest`, `IShippingService`, `IManifestFormatter`.
🔹 `services.py`: `ShippingService`, `calculate_shipping_cost`.
"""

from .interfaces import (
    GRAMS_PER_KG,
    IManifestFormatter,
    IShippingService,
    ShipmentItem,
    ShippingManifest,
)
from .services import ShippingService, calculate_shipping_cost

__all__ = [
    "GRAMS_PER_KG",
    "ShipmentItem",
    "ShippingManifest",
    "IManifestFormatter",
    "IShippingService",
    "ShippingService",
    "calculate_shipping_cost",
]
