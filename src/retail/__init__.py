# 🛒 retail/__init__.py
"""
🛒 retail-checkout: каталог, кошик і оформлення замовлення з доставкою за вагою.
"""

__version__ = "1.0.0"
