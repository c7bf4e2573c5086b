"""
renderer.py

Абстракция рендерера: небольшой набор структурных примитивов
(документ, секции, заголовки, списки, текст), который реализует каждый
формат вывода. Вывод накапливается в буфере и забирается через flush().
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from enum import Enum, IntEnum
from typing import Iterator, List


class SectionKind(Enum):
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    CONTENT = "content"


class HeaderLevel(Enum):
    H1 = 1
    H2 = 2
    H3 = 3


class Indent(IntEnum):
    ZERO = 0
    ONE = 1
    TWO = 2


class Renderer(ABC):
    """
    Базовый рендерер.

    Наследник реализует примитивы (header, bullet, text, pre, new_line и
    открытие/закрытие секций и списков). Составные операции section(),
    list(), item() и item_block() отслеживают вложенность списков и
    переводят её в уровень отступа.
    """

    def __init__(self):
        self._buffer: List[str] = []
        self._depth = 0

    # ---------------------------------------------------------------------
    # BUFFER
    # ---------------------------------------------------------------------

    def write(self, chunk: str) -> None:
        self._buffer.append(chunk)

    def flush(self) -> str:
        content = "".join(self._buffer)
        self._buffer = []
        return content

    # ---------------------------------------------------------------------
    # PRIMITIVES
    # ---------------------------------------------------------------------

    def begin(self) -> None:
        pass

    def end(self) -> None:
        pass

    def section_begin(self, kind: SectionKind) -> None:
        pass

    def section_end(self, kind: SectionKind) -> None:
        pass

    @abstractmethod
    def header(self, text: str, level: HeaderLevel) -> None:
        raise NotImplementedError

    @abstractmethod
    def list_begin(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def list_end(self) -> None:
        raise NotImplementedError

    def item_begin(self, indent: Indent) -> None:
        pass

    def item_end(self, indent: Indent) -> None:
        pass

    @abstractmethod
    def bullet(self, text: str, indent: Indent) -> None:
        raise NotImplementedError

    @abstractmethod
    def text(self, line: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def pre(self, block: str, indent: Indent) -> None:
        raise NotImplementedError

    @abstractmethod
    def new_line(self, count: int = 1) -> None:
        raise NotImplementedError

    # ---------------------------------------------------------------------
    # SCOPED BLOCKS
    # ---------------------------------------------------------------------

    @property
    def indent(self) -> Indent:
        return Indent(min(self._depth, Indent.TWO))

    @contextmanager
    def section(self, kind: SectionKind) -> Iterator[None]:
        self.section_begin(kind)
        yield
        self.section_end(kind)

    @contextmanager
    def list(self) -> Iterator[None]:
        self.list_begin()
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1
        self.list_end()

    def item(self, text: str) -> None:
        self.bullet(text, self.indent)

    @contextmanager
    def item_block(self) -> Iterator[None]:
        """Элемент списка с вложенным содержимым (pre, вложенный list)."""
        indent = self.indent
        self.item_begin(indent)
        yield
        self.item_end(indent)

    def preformatted(self, block: str) -> None:
        self.pre(block, self.indent)
