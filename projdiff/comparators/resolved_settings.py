"""
Сравнение вычисленных настроек сборки.

Настройки с учётом наследования получает внешний инструмент сборки,
поэтому компаратор дорогой и не входит в набор по умолчанию.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

from .base import BaseComparator
from ..core.constants import DEFAULT_CONFIG
from ..core.exceptions import ComparatorError, ConfigurationError
from ..core.models import ComparatorParameters, CompareResult, ProjectDescriptor
from ..utils.diffing import diff_mappings
from ..utils.system import DefaultSystem, System

logger = logging.getLogger(__name__)


class ResolvedSettingsComparator(BaseComparator):
    TAG = "resolved_settings"
    DESCRIPTION = "Compares build settings resolved by the external build tool."
    REQUIRES_EXTERNAL_TOOL = True

    def __init__(self, system: Optional[System] = None, config: Optional[Dict[str, Any]] = None):
        self.config = dict(config or {})
        self._init_config()
        self.system = system or DefaultSystem(self.config["timeout_seconds"])

    def _init_config(self) -> None:
        for k, v in DEFAULT_CONFIG["resolved_settings"].items():
            self.config.setdefault(k, v)

    def compare(
        self,
        first: ProjectDescriptor,
        second: ProjectDescriptor,
        parameters: ComparatorParameters,
    ) -> List[CompareResult]:
        configurations = self.common_configurations(first, second, parameters)
        results: List[CompareResult] = []

        for target in self.common_targets(first, second, parameters):
            for configuration in configurations:
                only_in_first, only_in_second, different = diff_mappings(
                    self._resolve(first, target, configuration),
                    self._resolve(second, target, configuration),
                )
                results.append(
                    self.result(
                        [target, configuration],
                        only_in_first=only_in_first,
                        only_in_second=only_in_second,
                        different_values=different,
                    )
                )

        return results

    # ==========================================================
    # INTERNAL METHODS
    # ==========================================================

    def _command(self, descriptor: ProjectDescriptor, target: str, configuration: str) -> List[str]:
        project_file = descriptor.tree.project_file
        project = str(self.source_root(descriptor) / project_file) if project_file else str(descriptor.path)

        try:
            return [
                part.format(project=project, target=target, configuration=configuration)
                for part in self.config["command"]
            ]
        except (KeyError, IndexError) as e:
            raise ConfigurationError(
                f"Некорректный шаблон команды: {e}",
                config_key="resolved_settings.command",
            ) from e

    def _resolve(self, descriptor: ProjectDescriptor, target: str, configuration: str) -> Dict[str, Any]:
        command = self._command(descriptor, target, configuration)
        output = self.system.execute(command)

        try:
            data = json.loads(output)
        except json.JSONDecodeError as e:
            raise ComparatorError(
                f"Не удалось разобрать настройки таргета {target} ({configuration}): {e}",
                tag=self.tag,
            ) from e

        if isinstance(data, list):
            data = data[0].get("buildSettings", {}) if data and isinstance(data[0], dict) else {}

        if not isinstance(data, dict):
            raise ComparatorError(
                f"Неожиданный формат настроек таргета {target} ({configuration})",
                tag=self.tag,
            )

        logger.debug("Получено %d настроек для %s/%s", len(data), target, configuration)
        return data
