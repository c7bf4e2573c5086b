# __init__.py для пакета reporting
"""
Пакет reporting: формирование отчёта о различиях.

- Renderer и его реализации (console, markdown, html): структурные примитивы
- ReportComposer: отображение результатов сравнения на примитивы
- JsonProjectCompareResultRenderer: машиночитаемый отчёт
- UniversalResultRenderer: выбор рендерера по формату
"""

from .renderer import Renderer, SectionKind, HeaderLevel, Indent
from .console import ConsoleRenderer
from .markdown import MarkdownRenderer
from .html import HtmlRenderer
from .composer import ProjectCompareResultRenderer, ReportComposer, title
from .json_renderer import JsonProjectCompareResultRenderer
from .universal import UniversalResultRenderer

__all__ = [
    "Renderer",
    "SectionKind",
    "HeaderLevel",
    "Indent",
    "ConsoleRenderer",
    "MarkdownRenderer",
    "HtmlRenderer",
    "ProjectCompareResultRenderer",
    "ReportComposer",
    "title",
    "JsonProjectCompareResultRenderer",
    "UniversalResultRenderer",
]
