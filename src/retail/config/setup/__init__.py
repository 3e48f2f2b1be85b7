# 🛠️ retail/config/setup/__init__.py
"""
🛠️ Збирання застосунку: DI-контейнер.
"""
