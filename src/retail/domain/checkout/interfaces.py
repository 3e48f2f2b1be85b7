# 🧾 retail/domain/checkout/interfaces.py
"""
🧾 DTO результату оформлення замовлення та контракт форматера чеків.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import List, Optional, Protocol, Tuple

# 🧩 Внутрішні модулі проєкту
from retail.domain.shipping.interfaces import ShipmentItem, ShippingManifest


# ================================
# 🏛️ СТРУКТУРИ ДАНИХ (DTO)
# ================================
@dataclass(frozen=True, slots=True)
class ReceiptLine:
    """Один рядок чека: кількість × назва @ сума рядка."""
    sku: str
    name: str
    quantity: int
    unit_price: Decimal
    line_total: Decimal


@dataclass(frozen=True, slots=True)
class Receipt:
    """
    Повний підсумок оформлення.

    `committed=False`: попередній розрахунок (`quote`), склад і баланс не змінені;
    тоді `remaining_balance`: прогноз після оплати.
    """
    customer: str
    lines: Tuple[ReceiptLine, ...]
    subtotal: Decimal
    shipping_cost: Decimal
    total: Decimal
    remaining_balance: Decimal
    shipment_items: Tuple[ShipmentItem, ...] = ()
    manifest: Optional[ShippingManifest] = None
    committed: bool = False

    @property
    def requires_shipping(self) -> bool:
        return bool(self.shipment_items)

    def with_manifest(self, manifest: ShippingManifest) -> "Receipt":
        return replace(self, manifest=manifest)


# ================================
# 🧾 КОНТРАКТИ
# ================================
class IReceiptFormatter(Protocol):
    def format_receipt(self, receipt: Receipt) -> List[str]:
        ...


__all__ = ["ReceiptLine", "Receipt", "IReceiptFormatter"]
