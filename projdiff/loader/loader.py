"""
loader.py

Загрузка описаний проектов. Ошибка загрузки всегда фатальна для сравнения.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Union

from ..core.constants import PROJECT_FILE_NAME
from ..core.exceptions import LoadError, ProjectNotFoundError
from ..core.models import ProjectDescriptor
from .tree import ProjectTree

logger = logging.getLogger(__name__)

# раздел -> ожидаемый тип
_SECTION_TYPES = {
    "configurations": list,
    "settings": dict,
    "files": list,
    "targets": dict,
}

_TARGET_SECTION_TYPES = {
    "sources": list,
    "headers": list,
    "resources": list,
    "dependencies": list,
    "settings": dict,
}


class ProjectLoader(ABC):
    """Контракт загрузчика: load(path) -> ProjectDescriptor или LoadError."""

    @abstractmethod
    def load(self, path: Union[str, Path]) -> ProjectDescriptor:
        raise NotImplementedError


class JsonProjectLoader(ProjectLoader):
    """
    Загрузчик JSON-описаний. path указывает на файл или каталог с project.json.
    """

    def load(self, path: Union[str, Path]) -> ProjectDescriptor:
        path = Path(path)
        source = self._resolve(path)

        try:
            with open(source, encoding="utf-8") as f:
                data = json.load(f)
        except UnicodeDecodeError as e:
            raise LoadError(f"Некорректная кодировка в {source}: {e}", str(source)) from e
        except json.JSONDecodeError as e:
            raise LoadError(f"Некорректный JSON в {source}: {e}", str(source)) from e
        except OSError as e:
            raise LoadError(f"Не удалось прочитать файл {source}: {e}", str(source)) from e

        self._validate(data, source)
        logger.debug("Загружен проект %s (%d таргетов)", source, len(data.get("targets", {})))

        return ProjectDescriptor(path=path, tree=ProjectTree(data))

    # ==========================================================
    # INTERNAL METHODS
    # ==========================================================

    @staticmethod
    def _resolve(path: Path) -> Path:
        if path.is_dir():
            path = path / PROJECT_FILE_NAME
        if not path.is_file():
            raise ProjectNotFoundError(str(path))
        return path

    @staticmethod
    def _validate(data: Any, source: Path) -> None:
        if not isinstance(data, dict):
            raise LoadError(f"Описание проекта {source} должно быть JSON-объектом", str(source))

        for section, expected in _SECTION_TYPES.items():
            if section in data and not isinstance(data[section], expected):
                raise LoadError(
                    f"Раздел '{section}' в {source} имеет неверный тип",
                    str(source),
                )

        for index, item in enumerate(data.get("files", [])):
            if not isinstance(item, dict):
                raise LoadError(
                    f"Элемент {index} раздела 'files' в {source} должен быть объектом",
                    str(source),
                )

        JsonProjectLoader._validate_settings(data.get("settings", {}), "'settings'", source)

        targets: Dict[str, Any] = data.get("targets", {})
        for name, target in targets.items():
            if not isinstance(target, dict):
                raise LoadError(f"Таргет '{name}' в {source} должен быть объектом", str(source))
            for section, expected in _TARGET_SECTION_TYPES.items():
                if section in target and not isinstance(target[section], expected):
                    raise LoadError(
                        f"Раздел '{section}' таргета '{name}' в {source} имеет неверный тип",
                        str(source),
                    )
            JsonProjectLoader._validate_settings(
                target.get("settings", {}), f"'settings' таргета '{name}'", source
            )

    @staticmethod
    def _validate_settings(settings: Dict[str, Any], section: str, source: Path) -> None:
        # конфигурация -> объект настроек
        for configuration, values in settings.items():
            if values is not None and not isinstance(values, dict):
                raise LoadError(
                    f"Настройки конфигурации '{configuration}' раздела {section} в {source} "
                    f"должны быть объектом",
                    str(source),
                )
