# 🗂️ retail/infrastructure/catalog/__init__.py
"""
🗂️ Інфраструктурні джерела каталогу.

🔹 `YamlCatalogLoader`: наповнення `Catalog` з YAML.
"""

from __future__ import annotations

from .yaml_catalog_loader import DEMO_CATALOG_PATH, YamlCatalogLoader	# 📥 Завантажувач каталогу

__all__ = ["YamlCatalogLoader", "DEMO_CATALOG_PATH"]	# 📦 Публічний експорт пакета
