# 🏗️ retail/infrastructure/__init__.py
"""
🏗️ Інфраструктурний шар: зовнішні джерела даних.
"""
