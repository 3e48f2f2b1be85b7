# 🚨 retail/shared/errors.py
"""
🚨 Базова ієрархія винятків застосунку.

🔹 `AppError`: корінь усіх доменних помилок, несе `message` та `details`.
🔹 `UserVisibleError`: помилки, текст яких можна показати користувачу як є.
🔹 `to_log_extra()`: єдиний спосіб передати контекст помилки у `logger.extra`.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from typing import Dict, Optional                                   # 📐 Типізація


# ================================
# 🧠 БАЗОВІ ВИНЯТКИ
# ================================
class AppError(Exception):
    """🧠 Базова помилка застосунку з людським повідомленням і технічними деталями."""

    def __init__(self, message: str, *, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message                                      # 💬 Текст для людини
        self.details = details                                      # 🔍 Технічні подробиці (опційно)

    def to_log_extra(self) -> Dict[str, object]:
        """📦 Формує словник для `logger.extra`."""
        extra: Dict[str, object] = {"error_type": type(self).__name__}
        if self.details:
            extra["details"] = self.details
        return extra

    def __str__(self) -> str:
        return self.message


class UserVisibleError(AppError):
    """👀 Помилка, повідомлення якої безпечно показувати користувачу."""


__all__ = ["AppError", "UserVisibleError"]
