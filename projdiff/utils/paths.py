"""
utils/paths.py

Вычисление полного пути ссылки на файл относительно корня проекта.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

from ..core.exceptions import ComparatorError

# source_tree, для которых путь уже задан относительно корня проекта
_RELATIVE_TREES = {"<group>", "group", "SOURCE_ROOT"}

# source_tree, которые раскрываются переменной сборки
_VARIABLE_TREES = {"BUILT_PRODUCTS_DIR", "SDKROOT", "DEVELOPER_DIR"}


class PathHelper:

    def full_path(self, element: Optional[Dict[str, Any]], source_root: Path) -> Optional[str]:
        if element is None:
            return None

        path = element.get("path")
        name = element.get("name")
        source_tree = element.get("source_tree", "<group>")

        if path is None:
            if name is None:
                raise ComparatorError("Determining full path failed. Element has neither path nor name.")
            path = name

        if source_tree in ("absolute", "<absolute>"):
            root = os.path.abspath(str(source_root))
            return os.path.relpath(str(path), root)

        if source_tree in _RELATIVE_TREES:
            return str(path)

        if source_tree in _VARIABLE_TREES:
            return f"$({source_tree})/{path}"

        raise ComparatorError(
            f'Determining full path to "{element.get("path") or name}" failed. '
            f'Unsupported source tree "{source_tree}".'
        )
