# 🚀 retail/main.py
"""
🚀 Точка входу `retail-checkout`.

🔹 Завантажує .env і config.yaml, ініціалізує логування та DI-контейнер.
🔹 Наповнює каталог (YAML) і програє демонстраційні сценарії оформлення.
🔹 Доменні помилки показуються користувачу через обробник помилок, решта падає як є.
🔹 Некоректна конфігурація (напр. ставка доставки) → повідомлення у stderr і код виходу 2.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging																# 🧾 Логування запуску
import os																	# 🌱 Змінні оточення для CLI-флагів
import sys																	# 📥 argv
from typing import List, Optional, Sequence									# 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from retail.config.config_service import ConfigService						# ⚙️ Конфігурація
from retail.config.setup.container import Container							# 📦 DI-контейнер
from retail.domain.products.catalog import Catalog							# 🗂️ Каталог
from retail.shared.errors import AppError									# 🧱 Базова доменна помилка
from retail.shared.utils.logger import LOG_NAME								# 🏷️ Префікс логерів
from retail.ui.error_presenter import present_error						# 💬 Текст для користувача
from retail.ui.sinks import ConsoleSink										# 🖥️ Вивід помилки запуску

logger = logging.getLogger(f"{LOG_NAME}.main")								# 🧾 Логер точки входу

USAGE = (
    "usage: retail-checkout [--rate PER_KG] [--catalog PATH] [--currency LABEL] [--log-level LEVEL]\n"
    "  --rate       shipping rate per kilogram (default from config, 30.0)\n"
    "  --catalog    YAML catalog to load instead of the built-in demo\n"
    "  --currency   label printed after amounts on the receipt\n"
    "  --log-level  DEBUG / INFO / WARNING"
)


# ================================
# 🧰 CLI-ФЛАГИ
# ================================
_FLAG_TO_ENV = {
    "--rate": "RETAIL_SHIPPING_RATE_PER_KG",
    "--catalog": "RETAIL_CATALOG_PATH",
    "--currency": "RETAIL_CURRENCY_LABEL",
    "--log-level": "RETAIL_LOG_LEVEL",
}


def _apply_cli_flags_to_env(args: Sequence[str]) -> None:
    """Мапить `--flag value` / `--flag=value` на змінні оточення, які читає ConfigService."""
    items: List[str] = list(args)
    index = 0
    while index < len(items):
        arg = items[index]
        flag, _, inline = arg.partition("=")
        env_name = _FLAG_TO_ENV.get(flag)
        if env_name is None:
            raise SystemExit(f"unknown argument: {arg}\n{USAGE}")
        if inline:
            value = inline
        else:
            index += 1
            if index >= len(items):
                raise SystemExit(f"missing value for {flag}\n{USAGE}")
            value = items[index]
        os.environ[env_name] = value											# 🌱 CLI має пріоритет над .env
        logger.debug("🏳️ CLI flag %s → %s", flag, env_name)
        index += 1


# ================================
# 🎬 ДЕМО-СЦЕНАРІЇ
# ================================
def run_demo(container: Container, catalog: Catalog) -> None:
    """Програє типові сценарії: успішне оформлення та кожен вид відмови."""
    guard = container.error_handler
    checkout = container.checkout_service

    # ✅ Звичайне замовлення з доставкою і цифровим товаром
    alice = container.new_customer("Alice", 1000)

    @guard
    def fill_alice_cart() -> None:
        alice.cart.add(catalog["cheese"], 2)
        alice.cart.add(catalog["biscuits"], 1)
        alice.cart.add(catalog["scratch-card"], 1)

    fill_alice_cart()
    guard(checkout.process_order)(alice)

    # 🛒 Порожній кошик
    bob = container.new_customer("Bob", 500)
    guard(checkout.process_order)(bob)

    # 💸 Не вистачає коштів
    carol = container.new_customer("Carol", 100)
    guard(carol.cart.add)(catalog["tv"], 2)
    guard(checkout.process_order)(carol)

    # 📦 Більше, ніж є на складі
    dave = container.new_customer("Dave", 10_000)
    guard(dave.cart.add)(catalog["cheese"], 10)

    # ⌛ Прострочений товар
    guard(dave.cart.add)(catalog["milk"], 1)


# ================================
# 🚀 ENTRYPOINT
# ================================
def run(argv: Optional[Sequence[str]] = None) -> int:
    """
    Основна точка входу: парсить CLI-флаги, будує контейнер і запускає демо.
    """
    args = list(sys.argv[1:] if argv is None else argv)						# 📥 Зчитуємо CLI-аргументи
    if "-h" in args or "--help" in args:
        print(USAGE)
        return 0
    _apply_cli_flags_to_env(args)												# 🔁 Мапимо флаги на ENV

    ConfigService.reset()														# 🔄 Перечитуємо з урахуванням флагів
    try:
        container = Container(ConfigService())
    except AppError as exc:												# ⚠️ Напр. `--rate abc`
        logger.warning("⚠️ Invalid configuration: %s", exc, extra=exc.to_log_extra())
        ConsoleSink(file=sys.stderr).emit([f"✖ {present_error(exc)}"])
        return 2
    container.init_logging()
    logger.info("🛒 retail-checkout starting | rate=%s/kg", container.checkout_config.shipping_rate_per_kg)
    logger.debug("⚙️ Effective config: %s", container.config.as_dict())

    catalog = container.load_catalog()
    run_demo(container, catalog)
    logger.info("👋 Demo finished | stock=%s", catalog.snapshot())
    return 0


if __name__ == "__main__":														# ▶️ Дозволяє запуск як скрипт
    sys.exit(run())
