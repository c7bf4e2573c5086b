# projdiff/comparators/source_trees.py
from typing import Dict, List, Optional

from projdiff.comparators.base import BaseComparator
from projdiff.core.models import (
    ComparatorParameters,
    CompareResult,
    DifferentValue,
    ProjectDescriptor,
)
from projdiff.utils.diffing import unique


class SourceTreesComparator(BaseComparator):
    """
    source_tree каждой ссылки на файл.
    Ссылка, отсутствующая в одном из проектов, даёт несовпадение с "nil".
    """

    TAG = "source_trees"
    DESCRIPTION = "Compares the source tree of every file reference."

    def compare(
        self,
        first: ProjectDescriptor,
        second: ProjectDescriptor,
        parameters: ComparatorParameters,
    ) -> List[CompareResult]:
        first_trees = self._source_trees(first)
        second_trees = self._source_trees(second)

        different_values = []
        for path in unique(list(first_trees) + list(second_trees)):
            a = first_trees.get(path)
            b = second_trees.get(path)
            if a != b:
                different_values.append(DifferentValue(context=path, first=a, second=b))

        return [self.result(different_values=different_values)]

    @staticmethod
    def _source_trees(descriptor: ProjectDescriptor) -> Dict[str, Optional[str]]:
        trees: Dict[str, Optional[str]] = {}
        for element in descriptor.tree.files:
            key = element.get("path") or element.get("name")
            if key is None:
                continue
            trees[str(key)] = element.get("source_tree", "<group>")
        return trees
