"""
Пакет utils: вспомогательные утилиты системы сравнения проектов.

Состав пакета:
- diffing: упорядоченные разности списков и словарей
- paths: вычисление полных путей ссылок на файлы
- system: запуск внешних инструментов
"""

from .diffing import (
    unique,
    ordered_difference,
    common,
    stringify,
    diff_mappings,
)

from .paths import PathHelper

from .system import System, DefaultSystem

__all__ = [
    # diffing
    "unique",
    "ordered_difference",
    "common",
    "stringify",
    "diff_mappings",

    # paths
    "PathHelper",

    # system
    "System",
    "DefaultSystem",
]
