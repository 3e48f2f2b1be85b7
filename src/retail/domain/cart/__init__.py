# 🛒 retail/domain/cart/__init__.py
"""
🛒 Пакет `domain.cart`: кошик клієнта та його рядки.
"""

from .cart import Cart, CartLine, Clock

__all__ = ["Cart", "CartLine", "Clock"]
