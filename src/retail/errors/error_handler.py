# 🛠️ retail/errors/error_handler.py
"""
🛠️ Фабрика декораторів для безпечного виконання операцій на межі застосунку.

🔹 Не змінює сигнатуру функції, працює з будь-якими *args/**kwargs.
🔹 Перехоплює лише `AppError`: логує контекст і показує користувачу зрозумілий текст.
🔹 Будь-які інші винятки летять далі без змін.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import functools													# 🧱 wraps для збереження метаданих
import logging														# 🧾 Логи обробки помилок
from typing import Any, Callable, Optional, TypeVar				# 📐 Типи для сигнатур

# 🧩 Внутрішні модулі проєкту
from retail.shared.errors import AppError							# ⚠️ Доменні винятки
from retail.shared.utils.interfaces import IOutputSink				# 🖨️ Куди показати повідомлення
from retail.shared.utils.logger import LOG_NAME					# 🏷️ Префікс логерів


# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.errors.error_handler")	# 🧾 Локальний логер

T = TypeVar("T")


# ================================
# 🏭 ФАБРИКА ДЕКОРАТОРІВ
# ================================
def make_error_handler(
    sink: IOutputSink,
    presenter: Callable[[Exception], str],
) -> Callable[[Callable[..., T]], Callable[..., Optional[T]]]:
    """
    Створює декоратор, замкнений на приймачі виводу та презентері помилок.

    Args:
        sink: Куди вивести текст помилки.
        presenter: Перетворює виняток на повідомлення для людини.

    Returns:
        Декоратор; обгорнута функція повертає None, якщо сталася `AppError`.
    """

    def decorator(func: Callable[..., T]) -> Callable[..., Optional[T]]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Optional[T]:
            logger.debug("🧱 error_handler.wrapper start", extra={"handler": func.__name__})
            try:
                return func(*args, **kwargs)							# 🧠 Виконуємо оригінальну операцію
            except AppError as exc:
                logger.warning(
                    "⚠️ %s in %s: %s",
                    type(exc).__name__,
                    func.__name__,
                    exc,
                    extra=exc.to_log_extra(),
                )
                sink.emit([f"✖ {presenter(exc)}"])						# 💬 Показуємо користувачу
                return None												# ↩️ Операцію не виконано

        return wrapper

    return decorator													# 🧰 Сам декоратор для DI


__all__ = ["make_error_handler"]										# 📤 Публічний API
