"""
Компараторы содержимого фаз сборки таргетов: headers, sources, resources.

Все три устроены одинаково: список путей + необязательный атрибут элемента
(флаги компиляции, видимость заголовка). Один результат на таргет.
"""
from __future__ import annotations

from typing import Dict, List, Optional

from .base import BaseComparator
from ..core.models import (
    ComparatorParameters,
    CompareResult,
    DifferentValue,
    ProjectDescriptor,
)
from ..utils.diffing import common, ordered_difference, stringify


class BuildPhaseComparator(BaseComparator):
    # раздел таргета в описании проекта
    SECTION: str = ""
    # атрибут элемента, сравниваемый для общих путей (None, если сравниваются только пути)
    ATTRIBUTE: Optional[str] = None

    def compare(
        self,
        first: ProjectDescriptor,
        second: ProjectDescriptor,
        parameters: ComparatorParameters,
    ) -> List[CompareResult]:
        results: List[CompareResult] = []

        for target in self.common_targets(first, second, parameters):
            first_entries = self._entries(first, target)
            second_entries = self._entries(second, target)

            only_in_first, only_in_second = ordered_difference(first_entries, second_entries)

            different_values = []
            if self.ATTRIBUTE:
                for path in common(first_entries, second_entries):
                    a = first_entries[path]
                    b = second_entries[path]
                    if a != b:
                        different_values.append(
                            DifferentValue(context=f"{path} ({self.ATTRIBUTE})", first=a, second=b)
                        )

            results.append(
                self.result(
                    [target],
                    only_in_first=only_in_first,
                    only_in_second=only_in_second,
                    different_values=different_values,
                )
            )

        return results

    def _entries(self, descriptor: ProjectDescriptor, target: str) -> Dict[str, Optional[str]]:
        entries: Dict[str, Optional[str]] = {}
        for item in descriptor.tree.entries(target, self.SECTION):
            path = item.get("path") or item.get("name")
            if path is None:
                continue
            entries[str(path)] = stringify(item.get(self.ATTRIBUTE)) if self.ATTRIBUTE else None
        return entries


class HeadersComparator(BuildPhaseComparator):
    TAG = "headers"
    DESCRIPTION = "Compares headers and their visibility attributes per target."
    SECTION = "headers"
    ATTRIBUTE = "attributes"


class SourcesComparator(BuildPhaseComparator):
    TAG = "sources"
    DESCRIPTION = "Compares compiled sources and their compiler flags per target."
    SECTION = "sources"
    ATTRIBUTE = "flags"


class ResourcesComparator(BuildPhaseComparator):
    TAG = "resources"
    DESCRIPTION = "Compares bundled resources per target."
    SECTION = "resources"
