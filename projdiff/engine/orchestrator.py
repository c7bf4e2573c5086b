"""
Координатор всего процесса сравнения проектов.

Загрузка → компараторы (по порядку реестра) → фильтрация → отчёт.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from ..comparators.base import BaseComparator
from ..comparators.registry import ALL_AVAILABLE_COMPARATORS, ComparatorType
from ..core.constants import DEFAULT_CONFIG
from ..core.exceptions import GenericError, ProjDiffError
from ..core.models import (
    ComparatorParameters,
    CompareError,
    CompareResult,
    Mode,
    ProjectCompareResult,
    ProjectDescriptor,
    Result,
)
from ..loader import JsonProjectLoader, ProjectLoader
from ..reporting.composer import ProjectCompareResultRenderer
from ..reporting.universal import UniversalResultRenderer

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class ProjectComparator(ABC):

    @abstractmethod
    def compare(
        self,
        first_path: PathLike,
        second_path: PathLike,
        parameters: Optional[ComparatorParameters] = None,
    ) -> Result:
        raise NotImplementedError


class DefaultProjectComparator(ProjectComparator):
    """
    Основной класс сравнения проектов.
    Реализует полный конвейер обработки.
    """

    def __init__(
        self,
        comparators: Sequence[BaseComparator],
        result_renderer: ProjectCompareResultRenderer,
        loader: ProjectLoader,
        differences_only: bool = False,
        continue_after_error: bool = False,
        config: Optional[Dict[str, Any]] = None,
    ):
        self.comparators = list(comparators)
        self.result_renderer = result_renderer
        self.loader = loader
        self.differences_only = differences_only
        self.continue_after_error = continue_after_error

        self.config = config or {}
        self.config.setdefault("max_workers", DEFAULT_CONFIG["general"]["max_workers"])

        self.stats: Dict[str, float] = {
            "loading_time": 0.0,
            "comparison_time": 0.0,
            "rendering_time": 0.0,
            "total_time": 0.0,
        }

    # ==========================================================
    # PUBLIC API
    # ==========================================================

    def compare(
        self,
        first_path: PathLike,
        second_path: PathLike,
        parameters: Optional[ComparatorParameters] = None,
    ) -> Result:
        parameters = parameters or ComparatorParameters()
        total_start = time.perf_counter()

        # ---------- Этап 1: Загрузка (ошибка всегда фатальна) ----------
        t0 = time.perf_counter()
        first = self._create_descriptor(first_path)
        second = self._create_descriptor(second_path)
        self.stats["loading_time"] = time.perf_counter() - t0

        # ---------- Этап 2: Сравнение ----------
        t0 = time.perf_counter()
        result = self._compare(first, second, parameters)
        self.stats["comparison_time"] = time.perf_counter() - t0

        # ---------- Этап 3: Отчёт ----------
        t0 = time.perf_counter()
        success = result.same()
        output = self.result_renderer.render(result)
        self.stats["rendering_time"] = time.perf_counter() - t0

        self.stats["total_time"] = time.perf_counter() - total_start
        logger.debug(
            "Сравнение завершено: %d результатов, success=%s, %.4fс",
            len(result.results), success, self.stats["total_time"],
        )

        return Result(success=success, output=output)

    # ==========================================================
    # INTERNAL METHODS
    # ==========================================================

    def _create_descriptor(self, path: PathLike) -> ProjectDescriptor:
        return self.loader.load(path)

    def _compare(
        self,
        first: ProjectDescriptor,
        second: ProjectDescriptor,
        parameters: ComparatorParameters,
    ) -> ProjectCompareResult:
        if self.continue_after_error and int(self.config["max_workers"]) > 1:
            per_comparator = self._run_parallel(first, second, parameters)
        else:
            per_comparator = self._run_sequential(first, second, parameters)

        results: List[CompareResult] = [
            r for batch in per_comparator for r in batch
            if not (self.differences_only and r.same())
        ]

        return ProjectCompareResult(first=first, second=second, results=tuple(results))

    def _run_sequential(
        self,
        first: ProjectDescriptor,
        second: ProjectDescriptor,
        parameters: ComparatorParameters,
    ) -> List[List[CompareResult]]:
        batches: List[List[CompareResult]] = []

        for comparator in self.comparators:
            batch = self._run_comparator(comparator, first, second, parameters)
            if not self.continue_after_error:
                self._raise_first_error(comparator, batch)
            batches.append(batch)

        return batches

    def _run_parallel(
        self,
        first: ProjectDescriptor,
        second: ProjectDescriptor,
        parameters: ComparatorParameters,
    ) -> List[List[CompareResult]]:
        """
        Компараторы не разделяют состояния; порядок результатов
        восстанавливается по индексу регистрации, а не по времени завершения.
        """
        batches: List[Optional[List[CompareResult]]] = [None] * len(self.comparators)

        with ThreadPoolExecutor(max_workers=int(self.config["max_workers"])) as executor:
            futures = {
                executor.submit(self._run_comparator, comparator, first, second, parameters): index
                for index, comparator in enumerate(self.comparators)
            }
            for future in as_completed(futures):
                batches[futures[future]] = future.result()

        return [batch or [] for batch in batches]

    def _run_comparator(
        self,
        comparator: BaseComparator,
        first: ProjectDescriptor,
        second: ProjectDescriptor,
        parameters: ComparatorParameters,
    ) -> List[CompareResult]:
        t0 = time.perf_counter()
        try:
            batch = list(comparator.compare(first, second, parameters) or [])
        except ProjDiffError as e:
            logger.warning("Компаратор %s завершился с ошибкой: %s", comparator.tag, e)
            return [CompareError(tag=comparator.tag, errors=(e,))]
        except Exception as e:
            logger.warning("Непредвиденная ошибка компаратора %s: %r", comparator.tag, e)
            return [CompareError(tag=comparator.tag, errors=(GenericError.wrap(e),))]

        logger.debug(
            "Компаратор %s: %d результатов за %.4fс",
            comparator.tag, len(batch), time.perf_counter() - t0,
        )
        return batch

    @staticmethod
    def _raise_first_error(comparator: BaseComparator, batch: Iterable[CompareResult]) -> None:
        """
        Прерывает сравнение первой ошибкой первого CompareError.
        Тег компаратора в исключение не добавляется, только в лог.
        """
        for result in batch:
            if isinstance(result, CompareError):
                error = result.errors[0]
                logger.error("Сравнение прервано компаратором %s: %s", result.tag or comparator.tag, error)
                raise error


class ProjectComparatorFactory:

    @staticmethod
    def create(
        comparators: Iterable[ComparatorType] = ALL_AVAILABLE_COMPARATORS,
        mode: Mode = Mode(),
        loader: Optional[ProjectLoader] = None,
        config: Optional[Dict[str, Any]] = None,
    ) -> ProjectComparator:
        config = config or {}
        return DefaultProjectComparator(
            comparators=[c.comparator() for c in comparators],
            result_renderer=UniversalResultRenderer(format=mode.format, verbose=mode.verbose),
            loader=loader or JsonProjectLoader(),
            differences_only=mode.differences_only,
            continue_after_error=mode.continue_after_error,
            config=dict(config.get("general", {})),
        )
