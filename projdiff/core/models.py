from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from .constants import NIL
from .exceptions import CannotFindError, ConfigurationError, ProjDiffError


class Format(Enum):
    CONSOLE = "console"
    MARKDOWN = "markdown"
    JSON = "json"
    HTML = "html"

    @classmethod
    def parse(cls, value: Union[str, "Format"]) -> "Format":
        if isinstance(value, Format):
            return value
        try:
            return cls(str(value).lower().strip())
        except ValueError:
            available = ", ".join(f.value for f in cls)
            raise ConfigurationError(
                f"Неподдерживаемый формат: {value}. Доступные: {available}",
                config_key="output.format",
                config_value=str(value),
            ) from None


@dataclass(frozen=True)
class Mode:
    format: Format = Format.CONSOLE
    verbose: bool = False
    differences_only: bool = False
    continue_after_error: bool = False

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "Mode":
        output = config.get("output", {}) or {}
        comparison = config.get("comparison", {}) or {}
        return cls(
            format=Format.parse(output.get("format", Format.CONSOLE)),
            verbose=_flag(output, "output", "verbose"),
            differences_only=_flag(comparison, "comparison", "differences_only"),
            continue_after_error=_flag(comparison, "comparison", "continue_after_error"),
        )


def _flag(section: Dict[str, Any], section_name: str, key: str) -> bool:
    """Булев параметр конфигурации; строки вроде "false" не принимаются."""
    value = section.get(key, False)
    if not isinstance(value, bool):
        raise ConfigurationError(
            f"Параметр {section_name}.{key} должен быть true или false, получено: {value!r}",
            config_key=f"{section_name}.{key}",
            config_value=str(value),
        )
    return value


@dataclass(frozen=True)
class Option:
    """
    Область сравнения: все элементы (names=None) или явный именованный набор.
    """
    names: Optional[Tuple[str, ...]] = None

    @classmethod
    def all(cls) -> "Option":
        return cls(None)

    @classmethod
    def only(cls, *names: str) -> "Option":
        return cls(tuple(names))

    @property
    def is_all(self) -> bool:
        return self.names is None

    def contains(self, name: str) -> bool:
        return self.is_all or name in self.names

    def filter(self, available: Sequence[str], kind: str) -> List[str]:
        """
        Оставляет из available только запрошенные элементы (в порядке available).
        Запрошенный, но отсутствующий элемент приводит к CannotFindError.
        """
        if self.is_all:
            return list(available)

        for name in self.names:
            if name not in available:
                raise CannotFindError(kind, name)

        return [name for name in available if name in self.names]


@dataclass(frozen=True)
class ComparatorParameters:
    targets: Option = field(default_factory=Option.all)
    configurations: Option = field(default_factory=Option.all)

    @classmethod
    def from_names(
        cls,
        targets: Optional[Iterable[str]] = None,
        configurations: Optional[Iterable[str]] = None,
    ) -> "ComparatorParameters":
        return cls(
            targets=Option.only(*targets) if targets else Option.all(),
            configurations=Option.only(*configurations) if configurations else Option.all(),
        )


@dataclass(frozen=True)
class ProjectDescriptor:
    path: Path
    tree: Any


# ==========================================================
# РЕЗУЛЬТАТЫ СРАВНЕНИЯ
# ==========================================================

@dataclass(frozen=True)
class DifferentValue:
    """
    Несовпадение значения. Отсутствующее значение хранится как строка "nil".
    """
    context: str
    first: Optional[str] = None
    second: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "first", NIL if self.first is None else str(self.first))
        object.__setattr__(self, "second", NIL if self.second is None else str(self.second))

    def to_dict(self) -> Dict[str, str]:
        return {"context": self.context, "first": self.first, "second": self.second}


@dataclass(frozen=True)
class CompareDetails:
    tag: str
    context: Tuple[str, ...] = ()
    description: Optional[str] = None
    only_in_first: Tuple[str, ...] = ()
    only_in_second: Tuple[str, ...] = ()
    different_values: Tuple[DifferentValue, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "context", tuple(self.context))
        object.__setattr__(self, "only_in_first", tuple(self.only_in_first))
        object.__setattr__(self, "only_in_second", tuple(self.only_in_second))
        object.__setattr__(self, "different_values", tuple(self.different_values))

    def same(self) -> bool:
        return not self.only_in_first and not self.only_in_second and not self.different_values

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tag": self.tag,
            "context": list(self.context),
            "description": self.description,
            "onlyInFirst": list(self.only_in_first),
            "onlyInSecond": list(self.only_in_second),
            "differentValues": [v.to_dict() for v in self.different_values],
        }


@dataclass(frozen=True)
class CompareError:
    tag: str
    context: Tuple[str, ...] = ()
    errors: Tuple[ProjDiffError, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "context", tuple(self.context))
        object.__setattr__(self, "errors", tuple(self.errors))
        if not self.errors:
            raise ValueError("CompareError должен содержать хотя бы одну ошибку")

    def same(self) -> bool:
        return False

    @property
    def description(self) -> str:
        return "\n".join(
            f"- {e.description}" for e in self.errors if e.description
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tag": self.tag,
            "context": list(self.context),
            "errors": [e.description for e in self.errors],
        }


CompareResult = Union[CompareDetails, CompareError]


@dataclass(frozen=True)
class ProjectCompareResult:
    first: ProjectDescriptor
    second: ProjectDescriptor
    results: Tuple[CompareResult, ...] = ()

    def same(self) -> bool:
        return all(r.same() for r in self.results)


@dataclass(frozen=True)
class Result:
    success: bool
    output: str
