# 🖨️ retail/ui/sinks.py
"""
🖨️ Реалізації `IOutputSink`.

🔹 `ConsoleSink`: друк у термінал через `rich.console.Console` (без розмітки та підсвітки).
🔹 `MemorySink`: накопичує блоки у памʼяті (тести, вбудовування у інші інтерфейси).
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from rich.console import Console                                     # 🖥️ Вивід у термінал

# 🔠 Системні імпорти
from typing import List, Optional, Sequence, TextIO                  # 🧰 Типізація


class ConsoleSink:
    """🖥️ Друкує кожен блок окремо, відділяючи порожнім рядком."""

    def __init__(self, console: Optional[Console] = None, *, file: Optional[TextIO] = None) -> None:
        self._console = console or Console(file=file, highlight=False, soft_wrap=True)

    def emit(self, lines: Sequence[str]) -> None:
        for line in lines:
            self._console.print(line, markup=False, emoji=False)     # 🚫 Назви товарів: не розмітка
        self._console.print()


class MemorySink:
    """🧠 Зберігає всі отримані блоки."""

    def __init__(self) -> None:
        self.blocks: List[List[str]] = []

    def emit(self, lines: Sequence[str]) -> None:
        self.blocks.append(list(lines))

    @property
    def lines(self) -> List[str]:
        return [line for block in self.blocks for line in block]

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def clear(self) -> None:
        self.blocks.clear()


__all__ = ["ConsoleSink", "MemorySink"]
