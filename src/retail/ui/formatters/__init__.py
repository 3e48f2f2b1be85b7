from .receipt_formatter import ReceiptFormatter

__all__ = ["ReceiptFormatter"]
