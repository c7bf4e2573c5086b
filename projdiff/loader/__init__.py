"""
Пакет loader: загрузка описаний проектов
"""

from .loader import ProjectLoader, JsonProjectLoader
from .tree import ProjectTree

__all__ = [
    "ProjectLoader",
    "JsonProjectLoader",
    "ProjectTree",
]
