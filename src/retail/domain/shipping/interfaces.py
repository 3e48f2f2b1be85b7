# 🚚 retail/domain/shipping/interfaces.py
"""
🚚 DTO та контракти доставки.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Protocol, Sequence, Tuple

GRAMS_PER_KG = Decimal("1000")                                      # ⚖️ г → кг


# ================================
# 🏛️ СТРУКТУРИ ДАНИХ (DTO)
# ================================
@dataclass(frozen=True, slots=True)
class ShipmentItem:
    """Похідний рядок доставки: `"2x Cheese"`, вага вже помножена на кількість."""
    name: str
    weight_g: Decimal


@dataclass(frozen=True, slots=True)
class ShippingManifest:
    """Підсумок відправлення."""
    items: Tuple[ShipmentItem, ...]

    @property
    def total_weight_g(self) -> Decimal:
        return sum((item.weight_g for item in self.items), Decimal("0"))

    @property
    def total_weight_kg(self) -> Decimal:
        return self.total_weight_g / GRAMS_PER_KG


# ================================
# 🧾 КОНТРАКТИ
# ================================
class IManifestFormatter(Protocol):
    def format_manifest(self, manifest: ShippingManifest) -> List[str]:
        ...


class IShippingService(ABC):
    """Контракт сервісу, що приймає товари на відправку."""

    @abstractmethod
    def ship(self, items: Sequence[ShipmentItem]) -> ShippingManifest:
        """Формує та публікує маніфест відправлення."""
        pass


__all__ = [
    "GRAMS_PER_KG",
    "ShipmentItem",
    "ShippingManifest",
    "IManifestFormatter",
    "IShippingService",
]
