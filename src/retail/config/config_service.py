# ⚙️ retail/config/config_service.py
"""
⚙️ Єдине джерело налаштувань retail-checkout.

🔹 База: config.yaml поруч із модулем (або файл із `RETAIL_CONFIG_PATH`).
🔹 Поверх неї: змінні оточення та `.env` за таблицею `ENV_OVERRIDES`.
🔹 Доступ за крапковим ключем: `get("checkout.shipping_rate_per_kg")`.
🔹 Один екземпляр на процес; `reset()` / `reload()` для тестів і CLI-флагів.
"""

# 🌐 Зовнішні бібліотеки
import yaml                                                         # 📦 Читання config.yaml
from dotenv import load_dotenv                                      # 🔐 Підхоплення .env

# 🔠 Системні імпорти
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, MutableMapping, Optional

# 🧩 Внутрішні модулі проєкту
from retail.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.config")

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"
CONFIG_PATH_ENV = "RETAIL_CONFIG_PATH"

# 🔐 Змінна оточення → крапковий ключ
ENV_OVERRIDES: Dict[str, str] = {
    "RETAIL_SHIPPING_RATE_PER_KG": "checkout.shipping_rate_per_kg",
    "RETAIL_CURRENCY_LABEL": "checkout.currency_label",
    "RETAIL_CATALOG_PATH": "catalog.path",
    "RETAIL_LOG_LEVEL": "logging.level",
    "RETAIL_LOG_FILE": "logging.file",
}


# ================================
# 🔧 РОБОТА З ВКЛАДЕНИМИ СЛОВНИКАМИ
# ================================
def _merge(target: MutableMapping[str, Any], incoming: Mapping[str, Any]) -> None:
    """Вливає `incoming` у `target`; вкладені словники зливаються, решта перезаписується."""
    for key, value in incoming.items():
        if isinstance(value, Mapping):
            current = target.get(key)
            if not isinstance(current, dict):
                current = target[key] = {}
            _merge(current, value)
        else:
            target[key] = value


def _assign(target: MutableMapping[str, Any], dotted_key: str, value: Any) -> None:
    """`_assign(cfg, "a.b.c", 1)` → `cfg["a"]["b"]["c"] = 1`, проміжні рівні створюються."""
    *path, leaf = dotted_key.split(".")
    node = target
    for part in path:
        child = node.get(part)
        if not isinstance(child, dict):
            child = node[part] = {}
        node = child
    node[leaf] = value


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as stream:
            data = yaml.safe_load(stream)
    except FileNotFoundError:
        logger.warning("⚠️ Config file not found: %s", path)
        return {}
    except yaml.YAMLError as e:
        logger.warning("⚠️ Config file %s is not valid YAML: %s", path, e)
        return {}
    if not isinstance(data, Mapping):
        return {}
    return dict(data)


# ============================
# ⚙️ СЕРВІС КОНФІГУРАЦІЇ
# ============================
class ConfigService:
    """⚙️ Singleton: перший виклик `ConfigService()` читає всі джерела, наступні повертають той самий обʼєкт."""

    _instance: Optional["ConfigService"] = None
    _config: Dict[str, Any]

    def __new__(cls):
        if cls._instance is not None:
            return cls._instance
        instance = super().__new__(cls)
        instance._config = instance._collect()
        cls._instance = instance
        return instance

    @classmethod
    def reset(cls) -> None:
        """🧹 Наступний `ConfigService()` перечитає YAML і оточення."""
        cls._instance = None

    def reload(self) -> None:
        self._config = self._collect()

    @staticmethod
    def _collect() -> Dict[str, Any]:
        """YAML → .env / змінні оточення (останнє перемагає)."""
        yaml_path = Path(os.getenv(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH)
        config = _read_yaml(yaml_path)
        logger.debug("📘 Config base loaded from %s", yaml_path)

        load_dotenv()                                               # 🔐 Не перетирає вже задане оточення
        for env_name, dotted_key in ENV_OVERRIDES.items():
            raw = os.getenv(env_name)
            if raw is not None:
                _assign(config, dotted_key, raw)
                logger.debug("🔐 %s overridden by %s", dotted_key, env_name)
        return config

    def get(self, key: str, default: Any = None) -> Any:
        """
        🔑 Значення за крапковим ключем.

        Args:
            key: Наприклад `"logging.level"`.
            default: Що повернути, якщо будь-якої ланки ключа немає.
        """
        node: Any = self._config
        for part in key.split("."):
            if not isinstance(node, Mapping) or part not in node:
                return default
            node = node[part]
        return node

    def set(self, key: str, value: Any) -> None:
        """✏️ Змінює значення лише в памʼяті процесу."""
        _assign(self._config, key, value)

    def as_dict(self) -> Dict[str, Any]:
        """Копія всієї конфігурації (для діагностики)."""
        snapshot: Dict[str, Any] = {}
        _merge(snapshot, self._config)
        return snapshot


__all__ = ["ConfigService", "ENV_OVERRIDES", "DEFAULT_CONFIG_PATH"]
