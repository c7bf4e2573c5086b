"""
markdown.py

Markdown: заголовки #, маркированные списки "-" с отступом два пробела на уровень.
"""

from __future__ import annotations

import re

from .renderer import HeaderLevel, Indent, Renderer

# ">" значим только в начале строки
_SPECIAL = re.compile(r"([\\`*_\[\]<|])")


def escape(text: str) -> str:
    return _SPECIAL.sub(r"\\\1", text)


class MarkdownRenderer(Renderer):

    def header(self, text: str, level: HeaderLevel) -> None:
        self.write(f"{'#' * level.value} {escape(text)}\n\n")

    def list_begin(self) -> None:
        pass

    def list_end(self) -> None:
        if self._depth == 0:
            self.new_line(1)

    def bullet(self, text: str, indent: Indent) -> None:
        self.write(f"{self._prefix(indent)}- {escape(text)}\n")

    def text(self, line: str) -> None:
        self.write(f"{escape(line)}\n\n")

    def pre(self, block: str, indent: Indent) -> None:
        code = f"`` {block} ``" if "`" in block else f"`{block}`"
        self.write(f"{self._prefix(indent)}- {code}\n")

    def new_line(self, count: int = 1) -> None:
        self.write("\n" * count)

    @staticmethod
    def _prefix(indent: Indent) -> str:
        # верхний уровень списка начинается без отступа
        return "  " * max(int(indent) - 1, 0)
