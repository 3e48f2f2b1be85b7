# 🧠 retail/shared/utils/interfaces.py
"""
🧠 Спільні контракти, що не належать жодному доменному пакету.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class IOutputSink(Protocol):
    """Приймач текстового виводу (консоль, памʼять, файл)."""

    def emit(self, lines: Sequence[str]) -> None:
        """Виводить блок рядків як одне ціле."""
        ...


__all__ = ["IOutputSink"]
