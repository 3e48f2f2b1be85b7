# 📦 retail/config/setup/container.py
"""
📦 Контейнер залежностей застосунку.

🔹 Створює сервіси в правильному порядку DI: форматер → приймач → доставка → чекаут.
🔹 Перетворює сирі значення конфігурації (рядки з YAML/.env) на типізовані налаштування.
🔹 Дає єдину точку доступу до каталогу, сервісів і обробника помилок.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                           # 🧾 Базові засоби логування
from datetime import datetime                                            # ⏱️ Тип годинника
from typing import TYPE_CHECKING, Any, Callable, Optional                # 🧮 Допоміжні типи

# 🧩 Внутрішні модулі проєкту
from retail.domain.checkout.services import CheckoutConfig, CheckoutService  # 💳 Доменне оформлення
from retail.domain.customers.entities import Customer                    # 👤 Клієнт
from retail.domain.products.catalog import Catalog                       # 🗂️ Каталог
from retail.domain.shipping.services import ShippingService              # 🚚 Відправлення
from retail.errors.error_handler import make_error_handler               # 🚨 Обгортка обробки помилок
from retail.infrastructure.catalog.yaml_catalog_loader import YamlCatalogLoader  # 📥 Каталог із YAML
from retail.shared.utils.interfaces import IOutputSink                   # 🖨️ Контракт приймача
from retail.shared.utils.logger import LOG_NAME, init_logging_from_config  # 🧾 Конфіг логування
from retail.ui.error_presenter import present_error                      # 💬 Тексти помилок
from retail.ui.formatters.receipt_formatter import ReceiptFormatter      # 🧾 Форматер чеків
from retail.ui.sinks import ConsoleSink                                  # 🖥️ Вивід у консоль

if TYPE_CHECKING:
    from retail.config.config_service import ConfigService               # 🗂️ Тип під час перевірки

logger = logging.getLogger(f"{LOG_NAME}.container")                      # 🧾 Модульний логер контейнера


class Container:
    """🧰 Збирає граф сервісів з одного `ConfigService`."""

    def __init__(
        self,
        config_service: "ConfigService",
        *,
        sink: Optional[IOutputSink] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.config = config_service                                     # ⚙️ Джерело налаштувань
        self.clock: Callable[[], datetime] = clock or datetime.now       # ⏱️ Спільний годинник

        self.formatter = ReceiptFormatter(
            currency_label=str(self.config.get("checkout.currency_label") or ""),
        )                                                                # 🧾 Форматер чеків/маніфестів
        self.sink: IOutputSink = sink or ConsoleSink()                   # 🖨️ Приймач виводу
        self.shipping_service = ShippingService(self.sink, self.formatter)  # 🚚 Сервіс відправлення
        self.checkout_config = self._build_checkout_config()             # ⚙️ Тариф доставки
        self.checkout_service = CheckoutService(
            shipping_service=self.shipping_service,
            sink=self.sink,
            formatter=self.formatter,
            cfg=self.checkout_config,
            clock=self.clock,
        )                                                                # 💳 Оформлення
        self.catalog_loader = YamlCatalogLoader(clock=self.clock)        # 📥 Завантажувач каталогу
        self.error_handler = make_error_handler(self.sink, present_error)  # 🚨 Декоратор для меж застосунку
        logger.debug(
            "🧰 Container ready | rate=%s/kg sink=%s",
            self.checkout_config.shipping_rate_per_kg,
            type(self.sink).__name__,
        )

    # ================================
    # 🏭 ФАБРИКИ
    # ================================
    def init_logging(self) -> logging.Logger:
        """Ініціалізує логування із секції `logging` конфігурації."""
        return init_logging_from_config(self.config.get("logging", {}))

    def load_catalog(self) -> Catalog:
        """Каталог із `catalog.path` або вбудований демо-каталог."""
        return self.catalog_loader.load(self.config.get("catalog.path"))

    def new_customer(self, name: str, balance: Any) -> Customer:
        """Клієнт із тим самим годинником, що й чекаут."""
        return Customer(name, balance, clock=self.clock)

    # ================================
    # 🛠️ ДОПОМІЖНІ МЕТОДИ
    # ================================
    def _build_checkout_config(self) -> CheckoutConfig:
        raw_rate = self.config.get("checkout.shipping_rate_per_kg")
        if raw_rate is None or raw_rate == "":
            logger.debug("⚙️ shipping_rate_per_kg не задано, беремо типовий")
            return CheckoutConfig()
        return CheckoutConfig(shipping_rate_per_kg=raw_rate)


__all__ = ["Container"]
