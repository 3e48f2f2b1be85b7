# 🧩 retail/domain/products/__init__.py
"""
🧩 Пакет `domain.products` публікує сутність товару, фабрики варіантів і каталог.

🔹 `entities.py`: `Product`, `ProductKind`, фабрики `expirable_product` / `shippable_product` / `non_shippable_product`.
🔹 `catalog.py`: `Catalog` (реєстр товарів за `sku`).
"""

from .entities import (                                        # 🧱 Сутність і фабрики
    Product,
    ProductKind,
    expirable_product,
    make_sku,
    non_shippable_product,
    shippable_product,
)
from .catalog import Catalog                                   # 🗂️ Реєстр товарів


# ================================
# 📤 ПУБЛІЧНИЙ API ПАКЕТА
# ================================
__all__ = [
    # Сутності
    "Product",
    "ProductKind",
    "Catalog",
    # Фабрики
    "expirable_product",
    "shippable_product",
    "non_shippable_product",
    "make_sku",
]
