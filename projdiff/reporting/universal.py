"""
universal.py

Выбор рендерера по формату вывода.
"""

from __future__ import annotations

from typing import Callable, Dict, Union

from .composer import ProjectCompareResultRenderer, ReportComposer
from .console import ConsoleRenderer
from .html import HtmlRenderer
from .json_renderer import JsonProjectCompareResultRenderer
from .markdown import MarkdownRenderer
from .renderer import Renderer
from ..core.models import Format, ProjectCompareResult

_TEXT_RENDERERS: Dict[Format, Callable[[], Renderer]] = {
    Format.CONSOLE: ConsoleRenderer,
    Format.MARKDOWN: MarkdownRenderer,
    Format.HTML: HtmlRenderer,
}


class UniversalResultRenderer(ProjectCompareResultRenderer):
    """
    json: прямое кодирование модели результатов,
    остальные форматы: ReportComposer поверх соответствующего Renderer.
    """

    def __init__(self, format: Union[str, Format] = Format.CONSOLE, verbose: bool = False):
        self.format = Format.parse(format)
        self.verbose = verbose

    def render(self, result: ProjectCompareResult) -> str:
        return self._create().render(result)

    def _create(self) -> ProjectCompareResultRenderer:
        # новый Renderer на каждый вызов: буфер не разделяется между отчётами
        if self.format == Format.JSON:
            return JsonProjectCompareResultRenderer()
        return ReportComposer(_TEXT_RENDERERS[self.format](), self.verbose)
