"""
tree.py

Разобранное описание проекта и доступ к его разделам.
Дерево неизменяемо с точки зрения компараторов: все методы возвращают копии.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class ProjectTree:
    """
    Обёртка над JSON-описанием проекта.

    Элементы списков sources/headers/resources/dependencies могут быть строками
    или объектами {"path": ..., ...}; нормализация выполняется в entries().
    """

    def __init__(self, data: Dict[str, Any]):
        self._data = data

    @property
    def name(self) -> str:
        return str(self._data.get("name", ""))

    @property
    def project_file(self) -> Optional[str]:
        return self._data.get("project_file")

    @property
    def configurations(self) -> List[str]:
        return [str(c) for c in self._data.get("configurations", [])]

    @property
    def files(self) -> List[Dict[str, Any]]:
        return [dict(f) for f in self._data.get("files", [])]

    @property
    def target_names(self) -> List[str]:
        return list(self._data.get("targets", {}).keys())

    def target(self, name: str) -> Dict[str, Any]:
        return dict(self._data.get("targets", {}).get(name) or {})

    def entries(self, target: str, section: str) -> List[Dict[str, Any]]:
        """Элементы раздела таргета в виде словарей с ключом path."""
        result: List[Dict[str, Any]] = []
        for item in self.target(target).get(section, []):
            if isinstance(item, dict):
                result.append(dict(item))
            else:
                result.append({"path": str(item)})
        return result

    def project_settings(self, configuration: str) -> Dict[str, Any]:
        return dict(self._data.get("settings", {}).get(configuration) or {})

    def target_settings(self, target: str, configuration: str) -> Dict[str, Any]:
        return dict(self.target(target).get("settings", {}).get(configuration) or {})

    def __repr__(self) -> str:
        return f"<ProjectTree {self.name!r}: {len(self.target_names)} targets>"
