# 👤 retail/domain/customers/__init__.py
"""
👤 Пакет `domain.customers`: клієнт із балансом і кошиком.
"""

from .entities import Customer

__all__ = ["Customer"]
