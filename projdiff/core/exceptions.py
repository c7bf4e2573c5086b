"""
Пользовательские исключения системы сравнения проектов.

Иерархия:
- LoadError: проект не найден или не разбирается; всегда фатальна
- ComparatorError: ошибка конкретного аспекта (компаратора)
- GenericError: обёртка над посторонним исключением
- ConfigurationError
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class ProjDiffError(Exception):
    """Базовое исключение системы сравнения проектов."""

    def __init__(self, message: str, code: str = "UNKNOWN", details: Optional[dict] = None):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    @property
    def description(self) -> Optional[str]:
        """Человекочитаемое описание; None, если сообщения нет."""
        return self.message or None

    def to_dict(self) -> dict:
        return {
            "error": self.message,
            "code": self.code,
            "details": self.details,
        }


class LoadError(ProjDiffError):
    """Ошибка загрузки описания проекта."""

    def __init__(self, message: str, path: str = None):
        details: Dict[str, Any] = {}
        if path:
            details["path"] = path
        super().__init__(message, "LOAD_ERROR", details)


class ProjectNotFoundError(LoadError):
    """Описание проекта не найдено."""

    def __init__(self, path: str):
        super().__init__(f"Проект не найден: {path}", path)
        self.code = "PROJECT_NOT_FOUND"


class ComparatorError(ProjDiffError):
    """Ошибка сравнения конкретного аспекта проекта."""

    def __init__(self, message: str, tag: str = None, details: Optional[dict] = None):
        det: Dict[str, Any] = dict(details or {})
        if tag:
            det["tag"] = tag
        super().__init__(message, "COMPARATOR_ERROR", det)


class CannotFindError(ComparatorError):
    """Запрошенный таргет или конфигурация отсутствует в проекте."""

    def __init__(self, kind: str, value: str):
        super().__init__(
            f'Не удалось найти {kind} "{value}"',
            details={"kind": kind, "value": value},
        )
        self.code = "CANNOT_FIND"


class GenericError(ProjDiffError):
    """Обёртка над непредвиденной ошибкой."""

    def __init__(self, message: str, exception_type: str = None):
        details: Dict[str, Any] = {}
        if exception_type:
            details["exception_type"] = exception_type
        super().__init__(message, "GENERIC_ERROR", details)

    @classmethod
    def wrap(cls, exception: BaseException) -> "GenericError":
        return cls(str(exception), exception.__class__.__name__)


class ConfigurationError(ProjDiffError):
    """Ошибка конфигурации системы."""

    def __init__(self, message: str, config_key: str = None, config_value: str = None):
        details: Dict[str, Any] = {}
        if config_key:
            details["config_key"] = config_key
        if config_value:
            details["config_value"] = config_value
        super().__init__(message, "CONFIGURATION_ERROR", details)


def handle_exception(exception: Exception) -> dict:
    if isinstance(exception, ProjDiffError):
        return exception.to_dict()
    return {
        "error": str(exception),
        "code": "UNKNOWN_ERROR",
        "details": {
            "exception_type": exception.__class__.__name__,
        },
    }

