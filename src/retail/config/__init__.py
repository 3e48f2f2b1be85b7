# ⚙️ retail/config/__init__.py
"""
⚙️ Конфігурація (YAML + оточення) і збірка сервісів у контейнері.
"""

from .config_service import ConfigService
from .setup.container import Container

__all__ = ["ConfigService", "Container"]
