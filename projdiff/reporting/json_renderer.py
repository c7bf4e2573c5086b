"""
json_renderer.py

Машиночитаемый отчёт: все поля каждого результата без изменений,
включая "nil" для отсутствующих значений. Флаг verbose не влияет на вывод.
"""

from __future__ import annotations

import json

from .composer import ProjectCompareResultRenderer
from ..core.models import ProjectCompareResult


class JsonProjectCompareResultRenderer(ProjectCompareResultRenderer):

    def __init__(self, indent: int = 2):
        self.indent = indent

    def render(self, result: ProjectCompareResult) -> str:
        payload = [r.to_dict() for r in result.results]
        return json.dumps(payload, indent=self.indent, ensure_ascii=False) + "\n"
