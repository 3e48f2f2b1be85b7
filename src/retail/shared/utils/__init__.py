# 🧰 retail/shared/utils/__init__.py
"""
🧰 Утиліти: логування та робота з Decimal.
"""

from .logger import LOG_NAME, get_logger, init_logging, init_logging_from_config
from .money import q2, to_decimal

__all__ = [
    "LOG_NAME",
    "get_logger",
    "init_logging",
    "init_logging_from_config",
    "q2",
    "to_decimal",
]
