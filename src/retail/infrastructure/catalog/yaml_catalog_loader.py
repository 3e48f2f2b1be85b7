# 🗂️ retail/infrastructure/catalog/yaml_catalog_loader.py
"""
🗂️ YamlCatalogLoader: наповнення каталогу з YAML-документа.

Очікуваний формат:
products:
  - { sku: cheese, name: Cheese, price: 100, quantity: 5, weight_g: 200, expires_in_days: 7 }
  - { name: TV, price: 1000, quantity: 2, weight_g: 5000 }
  - { name: Scratch Card, price: 50, quantity: 10 }

Ключові рішення:
- Термін придатності: `expiry_date` (ISO datetime або дата) чи `expires_in_days` відносно годинника.
- Дата без часу означає кінець цього дня.
- Дата з часовим поясом (`+02:00`, `Z`) переводиться в наївний локальний час.
- `expirable: true` без дати → товар із терміном придатності, який ще не встановлено.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import yaml                                                         # 📦 YAML-парсинг

# 🔠 Системні імпорти
import logging
from datetime import date, datetime, time, timedelta
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Union

# 🧩 Внутрішні модулі проєкту
from retail.domain.products.catalog import Catalog
from retail.domain.products.entities import Product
from retail.shared.utils.logger import LOG_NAME

# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.infrastructure.catalog")

DEMO_CATALOG_PATH = Path(__file__).parent / "demo_catalog.yaml"     # 🧪 Вбудований демо-каталог


class YamlCatalogLoader:
    """📥 Будує `Catalog` із YAML-файлу або вже розібраного словника."""

    def __init__(self, clock: Optional[Callable[[], datetime]] = None) -> None:
        self._clock = clock or datetime.now                         # ⏱️ Для `expires_in_days`

    def load(self, path: Union[str, Path, None] = None) -> Catalog:
        source = Path(path) if path else DEMO_CATALOG_PATH
        with open(source, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Каталог {source} не є валідним YAML: {e}") from e
        catalog = self.load_from_mapping(data)
        logger.info("🗂️ Catalog loaded | source=%s products=%s", source, len(catalog))
        return catalog

    def load_from_mapping(self, data: Mapping[str, Any]) -> Catalog:
        if not isinstance(data, Mapping):
            raise ValueError("Каталог має бути словником із ключем 'products'.")
        entries = data.get("products")
        if not isinstance(entries, list):
            logger.error("❗ Секція 'products' відсутня або не є списком")
            raise ValueError("Каталог має містити список 'products'.")

        catalog = Catalog()
        for index, entry in enumerate(entries):
            if not isinstance(entry, Mapping):
                raise ValueError(f"Запис #{index} у каталозі не є словником: {entry!r}")
            catalog.add(self._build_product(entry))
        return catalog

    # ================================
    # 🧠 ВНУТРІШНЯ ЛОГІКА
    # ================================
    def _build_product(self, entry: Mapping[str, Any]) -> Product:
        expiry = self._resolve_expiry(entry)
        fields: Dict[str, Any] = {
            "name": entry.get("name"),
            "price": entry.get("price", 0),
            "quantity": entry.get("quantity", 0),
            "weight_g": entry.get("weight_g"),
            "expiry_date": expiry,
            "expirable": bool(entry.get("expirable", False)),
            "sku": str(entry.get("sku") or ""),
        }
        product = Product(**fields)
        logger.debug("📦 Catalog entry | sku=%s kind=%s expiry=%s", product.sku, product.kind.value, expiry)
        return product

    def _resolve_expiry(self, entry: Mapping[str, Any]) -> Optional[datetime]:
        raw = entry.get("expiry_date")
        if raw is not None:
            return self._to_datetime(raw)
        days = entry.get("expires_in_days")
        if days is not None:
            if isinstance(days, bool) or not isinstance(days, (int, float)):
                raise ValueError(f"expires_in_days має бути числом: {days!r}")
            return self._clock() + timedelta(days=days)
        return None

    @staticmethod
    def _to_datetime(value: Any) -> datetime:
        if isinstance(value, datetime):
            return YamlCatalogLoader._local(value)
        if isinstance(value, date):
            return datetime.combine(value, time.max)                 # 📅 Дата → кінець дня
        if isinstance(value, str):
            text = value.strip()
            try:
                if len(text) == 10:                                  # 📅 YYYY-MM-DD без часу
                    return datetime.combine(date.fromisoformat(text), time.max)
                if text.endswith(("Z", "z")):                        # 🌍 UTC-суфікс (fromisoformat 3.10 його не знає)
                    text = text[:-1] + "+00:00"
                return YamlCatalogLoader._local(datetime.fromisoformat(text))
            except ValueError as e:
                raise ValueError(f"Некоректна дата придатності: {value!r}") from e
        raise ValueError(f"Некоректна дата придатності: {value!r}")

    @staticmethod
    def _local(moment: datetime) -> datetime:
        """Дата з часовим поясом → наївний локальний час, як у годинника чекауту."""
        if moment.tzinfo is None:
            return moment
        return moment.astimezone().replace(tzinfo=None)


__all__ = ["YamlCatalogLoader", "DEMO_CATALOG_PATH"]
