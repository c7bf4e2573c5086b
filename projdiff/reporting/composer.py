"""
composer.py

Отображение потока результатов сравнения на примитивы рендерера.

Композитор не зависит от конкретных компараторов и форматов: он работает
только с CompareDetails / CompareError и абстрактным Renderer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Union

from .renderer import HeaderLevel, Renderer, SectionKind
from ..core.constants import ERROR_MARK, FAILURE_MARK, SUCCESS_MARK, WARNING_MARK
from ..core.models import CompareDetails, CompareError, CompareResult, ProjectCompareResult


def title(result: Union[CompareDetails, CompareError]) -> str:
    """TAG > context1 > context2"""
    root = result.tag.upper()
    sub = " > " + " > ".join(result.context) if result.context else ""
    return root + sub


class ProjectCompareResultRenderer(ABC):

    @abstractmethod
    def render(self, result: ProjectCompareResult) -> str:
        raise NotImplementedError


class ReportComposer(ProjectCompareResultRenderer):
    """
    Текстовый отчёт (console / markdown / html) поверх Renderer.
    Без verbose выводятся только заголовки результатов.
    """

    def __init__(self, renderer: Renderer, verbose: bool = False):
        self.renderer = renderer
        self.verbose = verbose

    def render(self, result: ProjectCompareResult) -> str:
        self.renderer.begin()
        for item in result.results:
            self._render_result(item)
        self.renderer.end()
        return self.renderer.flush()

    # ---------------------------------------------------------------------
    # INTERNAL
    # ---------------------------------------------------------------------

    def _render_result(self, result: CompareResult) -> None:
        if isinstance(result, CompareError):
            self._render_error(result)
        else:
            self._render_details(result)

    def _render_details(self, details: CompareDetails) -> None:
        r = self.renderer

        if details.same():
            with r.section(SectionKind.SUCCESS):
                r.header(f"{SUCCESS_MARK} {title(details)}", HeaderLevel.H2)
            return

        with r.section(SectionKind.WARNING):
            r.header(f"{FAILURE_MARK} {title(details)}", HeaderLevel.H2)
            if not self.verbose:
                return

            if details.description:
                r.text(details.description)

            if details.only_in_first:
                self._render_labels("Only in first", details.only_in_first)

            if details.only_in_second:
                self._render_labels("Only in second", details.only_in_second)

            different_values = details.different_values
            if different_values:
                r.header(f"{WARNING_MARK}  Value mismatch ({len(different_values)}):", HeaderLevel.H3)
                with r.section(SectionKind.CONTENT):
                    with r.list():
                        for value in different_values:
                            with r.item_block():
                                r.preformatted(value.context)
                                with r.list():
                                    r.item(value.first)
                                    r.item(value.second)
            else:
                # совместимость раскладки со старым отчётом
                r.new_line(1)

    def _render_labels(self, caption: str, labels) -> None:
        r = self.renderer
        r.header(f"{WARNING_MARK}  {caption} ({len(labels)}):", HeaderLevel.H3)
        with r.section(SectionKind.CONTENT):
            with r.list():
                for label in labels:
                    r.item(label)

    def _render_error(self, error: CompareError) -> None:
        r = self.renderer

        with r.section(SectionKind.ERROR):
            r.header(f"{ERROR_MARK} {title(error)}", HeaderLevel.H2)
            if not self.verbose:
                return

            r.header(f"{WARNING_MARK}  Errors ({len(error.errors)}):", HeaderLevel.H3)
            with r.section(SectionKind.CONTENT):
                with r.list():
                    for e in error.errors:
                        if not e.description:
                            continue
                        r.item(e.description)
