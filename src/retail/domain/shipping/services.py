# 🚚 retail/domain/shipping/services.py
"""
🚚 Сервіс відправлення та розрахунок вартості доставки за вагою.

Ключові рішення:
- Вага: вхід/вихід у грамах (Decimal). У кг переводимо лише для тарифу та підсумку.
- Гроші: Decimal (жодних float).
- Сервіс без стану: кожен виклик `ship` незалежний.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                      # 🧾 Логування відправлень
from decimal import Decimal                                         # 💵 Точні суми
from typing import Iterable, Sequence                               # 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from retail.shared.utils.interfaces import IOutputSink              # 🖨️ Приймач виводу
from retail.shared.utils.logger import LOG_NAME                     # 🏷️ Префікс логерів
from .interfaces import (
    GRAMS_PER_KG,
    IManifestFormatter,
    IShippingService,
    ShipmentItem,
    ShippingManifest,
)

# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.domain.shipping")


def calculate_shipping_cost(items: Iterable[ShipmentItem], rate_per_kg: Decimal) -> Decimal:
    """`(Σ ваги у г / 1000) × rate_per_kg`; без товарів → 0."""
    total_weight_g = sum((item.weight_g for item in items), Decimal("0"))  # ⚖️ Сумарна вага
    if total_weight_g <= 0:
        return Decimal("0")
    cost = total_weight_g / GRAMS_PER_KG * rate_per_kg               # 🧮 кг × тариф
    logger.debug("🚚 Shipping cost | weight=%sg rate=%s/kg → %s", total_weight_g, rate_per_kg, cost)
    return cost


class ShippingService(IShippingService):
    """📦 Друкує маніфест відправлення та повертає його у вигляді DTO."""

    def __init__(self, sink: IOutputSink, formatter: IManifestFormatter) -> None:
        self._sink = sink                                           # 🖨️ Куди друкуємо
        self._formatter = formatter                                 # 🧾 Як друкуємо

    def ship(self, items: Sequence[ShipmentItem]) -> ShippingManifest:
        manifest = ShippingManifest(items=tuple(items))
        logger.info(
            "📦 Shipment dispatched | items=%s total=%sg",
            len(manifest.items),
            manifest.total_weight_g,
        )
        self._sink.emit(self._formatter.format_manifest(manifest))
        return manifest


__all__ = ["ShippingService", "calculate_shipping_cost"]
