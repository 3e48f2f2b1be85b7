# 🗂️ retail/domain/products/catalog.py
"""
🗂️ In-memory каталог товарів, індексований за `sku`.

🔹 Гарантує унікальність `sku` у межах каталогу (кошик тримає ключі саме за ним).
🔹 `withdraw` / `restock`: зовнішні зміни залишку поза чекаутом.
🔹 `snapshot()`: знімок залишків для звірки до/після операцій.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                      # 🧾 Логування реєстрації
from typing import Dict, Iterable, Iterator, Optional               # 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from retail.errors.custom_errors import InvalidArgumentError
from retail.shared.utils.logger import LOG_NAME
from .entities import Product

logger = logging.getLogger(f"{LOG_NAME}.domain.catalog")


class Catalog:
    """Реєстр товарів. Порядок ітерації: порядок реєстрації."""

    def __init__(self, products: Optional[Iterable[Product]] = None) -> None:
        self._products: Dict[str, Product] = {}                     # 🔑 sku → товар
        for product in products or ():
            self.add(product)

    # ================================
    # 🧱 РЕЄСТРАЦІЯ ТА ПОШУК
    # ================================
    def add(self, product: Product) -> Product:
        if product is None:
            raise InvalidArgumentError("Product is required", argument="product", value=None)
        if product.sku in self._products:
            raise InvalidArgumentError(f"Duplicate sku {product.sku!r} in catalog", argument="sku", value=product.sku)
        self._products[product.sku] = product
        logger.debug("🗂️ Product registered | sku=%s kind=%s", product.sku, product.kind.value)
        return product

    def find(self, sku: str) -> Optional[Product]:
        return self._products.get(sku)

    def __getitem__(self, sku: str) -> Product:
        return self._products[sku]

    def __contains__(self, sku: object) -> bool:
        return sku in self._products

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products.values())

    def __len__(self) -> int:
        return len(self._products)

    # ================================
    # 📦 ЗОВНІШНІ ЗМІНИ ЗАЛИШКУ
    # ================================
    def withdraw(self, sku: str, amount: int) -> Product:
        """Списання поза чекаутом (брак, інвентаризація)."""
        product = self[sku]
        product.reduce_quantity(amount)
        logger.info("📉 External withdrawal | sku=%s amount=%s left=%s", sku, amount, product.quantity)
        return product

    def restock(self, sku: str, amount: int) -> Product:
        product = self[sku]
        product.restock(amount)
        logger.info("📈 Restock | sku=%s amount=%s now=%s", sku, amount, product.quantity)
        return product

    def snapshot(self) -> Dict[str, int]:
        """sku → поточний залишок."""
        return {sku: product.quantity for sku, product in self._products.items()}


__all__ = ["Catalog"]
