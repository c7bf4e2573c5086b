"""
projdiff: сравнение двух описаний проектов по независимым аспектам
(таргеты, файлы, настройки сборки, зависимости) с отчётом о различиях.
"""

from .core.constants import VERSION
from .core.models import ComparatorParameters, Format, Mode, Option, Result
from .comparators.registry import (
    ALL_AVAILABLE_COMPARATORS,
    DEFAULT_COMPARATORS,
    ComparatorType,
    select_comparators,
)
from .engine import ProjectComparatorFactory

__version__ = VERSION

__all__ = [
    "ComparatorParameters",
    "Format",
    "Mode",
    "Option",
    "Result",
    "ALL_AVAILABLE_COMPARATORS",
    "DEFAULT_COMPARATORS",
    "ComparatorType",
    "select_comparators",
    "ProjectComparatorFactory",
]
