"""
Загрузка конфигурации: значения по умолчанию + JSON-файл + переопределения.
"""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .constants import DEFAULT_CONFIG
from .exceptions import ConfigurationError


def merge_config(base: Dict[str, Any], overrides: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Рекурсивное слияние словарей; base не изменяется."""
    merged = copy.deepcopy(base)
    for key, value in (overrides or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def load_config(
    path: Optional[Union[str, Path]] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    config = copy.deepcopy(DEFAULT_CONFIG)

    if path:
        try:
            with open(path, encoding="utf-8") as f:
                file_config = json.load(f)
        except OSError as e:
            raise ConfigurationError(f"Не удалось прочитать файл конфигурации {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Некорректный JSON в файле конфигурации {path}: {e}") from e

        if not isinstance(file_config, dict):
            raise ConfigurationError(f"Конфигурация {path} должна быть JSON-объектом")

        config = merge_config(config, file_config)

    return merge_config(config, overrides)
