# 🚨 retail/errors/__init__.py
"""
🚨 Пакет помилок: доменні винятки, коди причин і мапер.
"""

from .custom_errors import (
    AppError,
    CheckoutError,
    EmptyCartError,
    ExpiredProductError,
    InsufficientFundsError,
    InsufficientStockError,
    InvalidArgumentError,
    OutOfStockError,
    UserVisibleError,
)
from .error_handler import make_error_handler
from .reason_codes import ReasonCode
from .reason_mapper import map_error_to_reason

__all__ = [
    "AppError",
    "UserVisibleError",
    "CheckoutError",
    "InvalidArgumentError",
    "OutOfStockError",
    "InsufficientStockError",
    "ExpiredProductError",
    "EmptyCartError",
    "InsufficientFundsError",
    "ReasonCode",
    "make_error_handler",
    "map_error_to_reason",
]
