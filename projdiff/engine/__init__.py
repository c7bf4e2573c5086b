# __init__.py для пакета engine
"""
Пакет engine: оркестрация сравнения проектов.

- ProjectComparator: контракт сравнения двух проектов
- DefaultProjectComparator: конвейер загрузка → компараторы → отчёт
- ProjectComparatorFactory: сборка конвейера по набору компараторов и Mode
"""

from .orchestrator import (
    ProjectComparator,
    DefaultProjectComparator,
    ProjectComparatorFactory,
)

__all__ = [
    "ProjectComparator",
    "DefaultProjectComparator",
    "ProjectComparatorFactory",
]
