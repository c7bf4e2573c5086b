"""
Сравнение заданных в проекте (не вычисленных) настроек сборки.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, List

from .base import BaseComparator
from ..core.constants import ROOT_PROJECT_CONTEXT
from ..core.models import ComparatorParameters, CompareResult, ProjectDescriptor
from ..utils.diffing import diff_mappings


class SettingsComparator(BaseComparator):
    """
    Результат на каждую пару (область, конфигурация). Области идут по порядку:
    сначала уровень проекта, затем каждый общий таргет.
    """

    TAG = "settings"
    DESCRIPTION = "Compares build settings of the project and its targets."

    def compare(
        self,
        first: ProjectDescriptor,
        second: ProjectDescriptor,
        parameters: ComparatorParameters,
    ) -> List[CompareResult]:
        configurations = self.common_configurations(first, second, parameters)
        results: List[CompareResult] = []

        # --- уровень проекта ---
        results.extend(
            self._compare_scope(
                ROOT_PROJECT_CONTEXT,
                configurations,
                first.tree.project_settings,
                second.tree.project_settings,
            )
        )

        # --- таргеты ---
        for target in self.common_targets(first, second, parameters):
            results.extend(
                self._compare_scope(
                    target,
                    configurations,
                    lambda c, t=target: first.tree.target_settings(t, c),
                    lambda c, t=target: second.tree.target_settings(t, c),
                )
            )

        return results

    def _compare_scope(
        self,
        scope: str,
        configurations: List[str],
        first_settings: Callable[[str], Dict[str, Any]],
        second_settings: Callable[[str], Dict[str, Any]],
    ) -> List[CompareResult]:
        results = []
        for configuration in configurations:
            only_in_first, only_in_second, different = diff_mappings(
                first_settings(configuration),
                second_settings(configuration),
            )
            results.append(
                self.result(
                    [scope, configuration],
                    only_in_first=only_in_first,
                    only_in_second=only_in_second,
                    different_values=different,
                )
            )
        return results
