# 🧰 retail/shared/__init__.py
"""
🧰 Спільні утиліти та базові винятки, якими користуються всі шари.
"""

from .errors import AppError, UserVisibleError

__all__ = ["AppError", "UserVisibleError"]
