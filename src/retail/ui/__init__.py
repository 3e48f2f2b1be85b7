# 🖥️ retail/ui/__init__.py
"""
🖥️ Шар представлення: форматери чеків, приймачі виводу, тексти помилок.
"""

from .error_presenter import build_error_message, present_error
from .formatters.receipt_formatter import ReceiptFormatter
from .sinks import ConsoleSink, MemorySink

__all__ = [
    "ReceiptFormatter",
    "ConsoleSink",
    "MemorySink",
    "build_error_message",
    "present_error",
]
