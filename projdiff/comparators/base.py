"""
Базовый класс для компараторов аспектов проекта.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from ..core.models import (
    ComparatorParameters,
    CompareDetails,
    CompareResult,
    DifferentValue,
    ProjectDescriptor,
)
from ..utils.diffing import common


class BaseComparator(ABC):
    """
    Абстрактный базовый класс для всех компараторов.

    Каждый компаратор представляет собой чистую функцию:
    compare(P_1, P_2, params) → [CompareResult, ...]
    и не хранит состояния между вызовами.
    """

    TAG: str = ""
    DESCRIPTION: str = ""

    # требует запуска внешнего инструмента сборки (дорого)
    REQUIRES_EXTERNAL_TOOL: bool = False

    @property
    def tag(self) -> str:
        return self.TAG

    @abstractmethod
    def compare(
        self,
        first: ProjectDescriptor,
        second: ProjectDescriptor,
        parameters: ComparatorParameters,
    ) -> List[CompareResult]:
        raise NotImplementedError

    # ==========================================================
    # HELPERS
    # ==========================================================

    def result(
        self,
        context: Sequence[str] = (),
        *,
        description: Optional[str] = None,
        only_in_first: Iterable[str] = (),
        only_in_second: Iterable[str] = (),
        different_values: Iterable[DifferentValue] = (),
    ) -> CompareDetails:
        return CompareDetails(
            tag=self.tag,
            context=tuple(context),
            description=description,
            only_in_first=tuple(only_in_first),
            only_in_second=tuple(only_in_second),
            different_values=tuple(different_values),
        )

    @staticmethod
    def source_root(descriptor: ProjectDescriptor) -> Path:
        """Каталог, относительно которого заданы пути проекта."""
        path = Path(descriptor.path)
        return path if path.is_dir() else path.parent

    @staticmethod
    def common_targets(
        first: ProjectDescriptor,
        second: ProjectDescriptor,
        parameters: ComparatorParameters,
    ) -> List[str]:
        targets = common(first.tree.target_names, second.tree.target_names)
        return parameters.targets.filter(targets, "target")

    @staticmethod
    def common_configurations(
        first: ProjectDescriptor,
        second: ProjectDescriptor,
        parameters: ComparatorParameters,
    ) -> List[str]:
        configurations = common(first.tree.configurations, second.tree.configurations)
        return parameters.configurations.filter(configurations, "configuration")

    def __str__(self) -> str:
        return f"{self.tag}: {self.DESCRIPTION}"

    def __repr__(self) -> str:
        return f"<Comparator {self.tag}: {self.__class__.__name__}>"
