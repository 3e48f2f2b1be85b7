# 🏛️ retail/domain/__init__.py
"""
🏛️ Доменний шар: товари, кошик, клієнти, доставка, оформлення.
"""
