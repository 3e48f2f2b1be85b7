# 🧾 retail/ui/formatters/receipt_formatter.py
"""
🧾 Форматує чек і маніфест відправлення у текстові рядки.

🔹 Чек: рядки `2x Cheese @ 200.00` у порядку додавання, далі subtotal / shipping / amount / balance.
🔹 Маніфест: назва + вага у грамах, підсумок у кілограмах.
🔹 Суми завжди з двома знаками після коми; вага без зайвих нулів.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from decimal import Decimal                                          # 🔢 Операції з десятковими сумами
from typing import Final, List                                       # 🧰 Типізація та константи

# 🧩 Внутрішні модулі проєкту
from retail.domain.checkout.interfaces import Receipt                # 🧾 DTO чека
from retail.domain.shipping.interfaces import ShippingManifest       # 📦 DTO маніфесту
from retail.shared.utils.money import q2                             # 🔁 Округлення до копійок


# ================================
# 💬 КЛАС ФОРМАТЕРА
# ================================
class ReceiptFormatter:
    """
    💬 Формує готові текстові блоки для приймача виводу.
    """

    RECEIPT_HEADER: Final[str] = "** Checkout receipt **"            # 🧾 Заголовок чека
    PREVIEW_HEADER: Final[str] = "** Checkout quote **"              # 🧮 Заголовок попереднього розрахунку
    MANIFEST_HEADER: Final[str] = "** Shipment notice **"            # 📦 Заголовок маніфесту
    _RULE: Final[str] = "-" * 32                                     # ➖ Розділювач

    def __init__(self, *, currency_label: str = "", width: int = 32) -> None:
        self._currency = currency_label.strip()                      # 💱 Підпис валюти (опційно)
        self._width = max(width, 16)                                 # 📏 Ширина рядка

    # ================================
    # 🧮 ДОПОМІЖНІ ФОРМАТЕРИ
    # ================================
    def _fmt_money(self, amount: Decimal) -> str:
        """Форматує суму як `123.45` або `123.45 EGP`."""
        text = f"{q2(amount):.2f}"
        return f"{text} {self._currency}" if self._currency else text

    @staticmethod
    def _fmt_weight(value: Decimal) -> str:
        """`Decimal("400.0")` → `"400"`, `Decimal("1.10")` → `"1.1"`."""
        normalized = value.normalize()
        return f"{normalized:f}"

    def _row(self, label: str, value: str) -> str:
        pad = max(self._width - len(label) - len(value), 1)
        return f"{label}{' ' * pad}{value}"

    # ================================
    # 🧾 ПУБЛІЧНІ МЕТОДИ
    # ================================
    def format_receipt(self, receipt: Receipt) -> List[str]:
        lines: List[str] = [self.RECEIPT_HEADER if receipt.committed else self.PREVIEW_HEADER]
        for line in receipt.lines:
            lines.append(self._row(f"{line.quantity}x {line.name} @", self._fmt_money(line.line_total)))
        lines.append(self._RULE)
        lines.append(self._row("Subtotal", self._fmt_money(receipt.subtotal)))
        lines.append(self._row("Shipping", self._fmt_money(receipt.shipping_cost)))
        lines.append(self._row("Amount", self._fmt_money(receipt.total)))
        lines.append(self._row("Balance", self._fmt_money(receipt.remaining_balance)))
        return lines

    def format_manifest(self, manifest: ShippingManifest) -> List[str]:
        lines: List[str] = [self.MANIFEST_HEADER]
        for item in manifest.items:
            lines.append(self._row(item.name, f"{self._fmt_weight(item.weight_g)}g"))
        lines.append(f"Total package weight {self._fmt_weight(manifest.total_weight_kg)}kg")
        return lines


__all__ = ["ReceiptFormatter"]
