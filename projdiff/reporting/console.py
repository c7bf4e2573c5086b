"""
console.py

Консольный формат: фиксированные маркеры и отступы.
"""

from __future__ import annotations

from .renderer import HeaderLevel, Indent, Renderer
from ..core.constants import CONSOLE_BULLETS


class ConsoleRenderer(Renderer):

    def header(self, text: str, level: HeaderLevel) -> None:
        if level == HeaderLevel.H1:
            self.write(f"\n=\n= {text}\n=\n\n")
        elif level == HeaderLevel.H2:
            self.write(f"{text}\n")
        else:
            self.write(f"\n{text}\n\n")

    def list_begin(self) -> None:
        pass

    def list_end(self) -> None:
        self.new_line(1)

    def bullet(self, text: str, indent: Indent) -> None:
        self.write(f"{'  ' * indent}{CONSOLE_BULLETS[int(indent)]} {text}\n")

    def text(self, line: str) -> None:
        self.write(f"{line}\n")

    def pre(self, block: str, indent: Indent) -> None:
        self.bullet(block, indent)

    def new_line(self, count: int = 1) -> None:
        self.write("\n" * count)
