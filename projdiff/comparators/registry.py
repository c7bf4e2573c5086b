"""
Реестр компараторов.

Наборы "all" и "default" заданы неизменяемыми кортежами, собранными при импорте;
регистрации во время выполнения нет. Новый аспект добавляется сюда и
не требует изменений в оркестраторе или рендерерах.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional, Tuple, Union

from .base import BaseComparator
from .build_phases import HeadersComparator, ResourcesComparator, SourcesComparator
from .configurations import ConfigurationsComparator
from .dependencies import DependenciesComparator
from .file_references import FileReferencesComparator
from .resolved_settings import ResolvedSettingsComparator
from .settings import SettingsComparator
from .source_trees import SourceTreesComparator
from .targets import TargetsComparator
from ..core.constants import COMPARATOR_SETS
from ..core.exceptions import ConfigurationError

ComparatorFactory = Callable[[], BaseComparator]


@dataclass(frozen=True)
class ComparatorType:
    """
    Элемент реестра: либо готовый компаратор, либо конструктор без аргументов,
    вызываемый лениво в comparator().
    """
    tag: str
    instance: Optional[BaseComparator] = None
    factory: Optional[ComparatorFactory] = None

    def __post_init__(self):
        if (self.instance is None) == (self.factory is None):
            raise ValueError("ComparatorType: нужен ровно один из instance/factory")
        if not self.tag:
            raise ValueError("ComparatorType: пустой tag")

    @classmethod
    def of(cls, comparator: BaseComparator) -> "ComparatorType":
        if not isinstance(comparator, BaseComparator):
            raise TypeError(f"{comparator!r} должен быть экземпляром BaseComparator")
        return cls(tag=comparator.tag, instance=comparator)

    @classmethod
    def lazy(cls, factory: ComparatorFactory) -> "ComparatorType":
        # для классов tag известен без создания экземпляра
        tag = getattr(factory, "TAG", None) or factory().tag
        return cls(tag=tag, factory=factory)

    @property
    def requires_external_tool(self) -> bool:
        source = self.instance if self.instance is not None else self.factory
        return bool(getattr(source, "REQUIRES_EXTERNAL_TOOL", False))

    def comparator(self) -> BaseComparator:
        if self.instance is not None:
            return self.instance
        return self.factory()


FILE_REFERENCES = ComparatorType.of(FileReferencesComparator())
TARGETS = ComparatorType.of(TargetsComparator())
HEADERS = ComparatorType.of(HeadersComparator())
SOURCES = ComparatorType.of(SourcesComparator())
RESOURCES = ComparatorType.of(ResourcesComparator())
CONFIGURATIONS = ComparatorType.of(ConfigurationsComparator())
SETTINGS = ComparatorType.of(SettingsComparator())
RESOLVED_SETTINGS = ComparatorType.lazy(ResolvedSettingsComparator)
SOURCE_TREES = ComparatorType.of(SourceTreesComparator())
DEPENDENCIES = ComparatorType.of(DependenciesComparator())

ALL_AVAILABLE_COMPARATORS: Tuple[ComparatorType, ...] = (
    FILE_REFERENCES,
    TARGETS,
    HEADERS,
    SOURCES,
    RESOURCES,
    CONFIGURATIONS,
    SETTINGS,
    RESOLVED_SETTINGS,
    SOURCE_TREES,
    DEPENDENCIES,
)

# компараторы, запускающие внешний инструмент, в набор по умолчанию не входят
DEFAULT_COMPARATORS: Tuple[ComparatorType, ...] = tuple(
    c for c in ALL_AVAILABLE_COMPARATORS if not c.requires_external_tool
)

_BY_TAG: Dict[str, ComparatorType] = {c.tag: c for c in ALL_AVAILABLE_COMPARATORS}


def available_tags() -> Tuple[str, ...]:
    return tuple(c.tag for c in ALL_AVAILABLE_COMPARATORS)


def get_comparator_type(tag: str) -> ComparatorType:
    try:
        return _BY_TAG[tag]
    except KeyError:
        raise ConfigurationError(
            f"Неизвестный компаратор: {tag}. Доступные: {', '.join(available_tags())}",
            config_key="comparison.comparators",
            config_value=tag,
        ) from None


def select_comparators(selection: Union[str, Iterable[str]]) -> Tuple[ComparatorType, ...]:
    """
    "all" | "default" | список тегов (порядок списка сохраняется).
    """
    if isinstance(selection, str):
        if selection == COMPARATOR_SETS["ALL"]:
            return ALL_AVAILABLE_COMPARATORS
        if selection == COMPARATOR_SETS["DEFAULT"]:
            return DEFAULT_COMPARATORS
        selection = [selection]

    return tuple(get_comparator_type(tag) for tag in selection)
