"""
utils/diffing.py

Упорядоченные разности списков и словарей для компараторов.
Порядок результатов детерминирован: порядок первого появления во входных данных.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..core.models import DifferentValue


def unique(items: Iterable[str]) -> List[str]:
    """Удаляет повторы, сохраняя порядок."""
    seen = set()
    result: List[str] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def ordered_difference(first: Iterable[str], second: Iterable[str]) -> Tuple[List[str], List[str]]:
    """
    Возвращает (only_in_first, only_in_second) с сохранением порядка.
    """
    first_list = unique(first)
    second_list = unique(second)
    first_set = set(first_list)
    second_set = set(second_list)

    only_in_first = [x for x in first_list if x not in second_set]
    only_in_second = [x for x in second_list if x not in first_set]
    return only_in_first, only_in_second


def common(first: Iterable[str], second: Iterable[str]) -> List[str]:
    """Элементы, присутствующие в обоих списках (в порядке first)."""
    second_set = set(second)
    return [x for x in unique(first) if x in second_set]


def stringify(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return " ".join(str(v) for v in value)
    if isinstance(value, bool):
        return "YES" if value else "NO"
    if isinstance(value, dict):
        return json.dumps(value, sort_keys=True, ensure_ascii=False)
    return str(value)


def diff_mappings(
    first: Dict[str, Any],
    second: Dict[str, Any],
) -> Tuple[List[str], List[str], List[DifferentValue]]:
    """
    Сравнивает два словаря ключ -> значение.

    Returns:
        (ключи только в first, ключи только в second, несовпадения по общим ключам)
    """
    only_in_first, only_in_second = ordered_difference(first.keys(), second.keys())

    different: List[DifferentValue] = []
    for key in common(first.keys(), second.keys()):
        a = stringify(first[key])
        b = stringify(second[key])
        if a != b:
            different.append(DifferentValue(context=key, first=a, second=b))

    return only_in_first, only_in_second, different
