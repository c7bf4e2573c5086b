# projdiff/comparators/dependencies.py
from typing import List

from projdiff.comparators.base import BaseComparator
from projdiff.core.models import ComparatorParameters, CompareResult, ProjectDescriptor
from projdiff.utils.diffing import ordered_difference


class DependenciesComparator(BaseComparator):
    TAG = "dependencies"
    DESCRIPTION = "Compares target dependencies."

    def compare(
        self,
        first: ProjectDescriptor,
        second: ProjectDescriptor,
        parameters: ComparatorParameters,
    ) -> List[CompareResult]:
        results = []

        for target in self.common_targets(first, second, parameters):
            only_in_first, only_in_second = ordered_difference(
                self._names(first, target),
                self._names(second, target),
            )
            results.append(
                self.result([target], only_in_first=only_in_first, only_in_second=only_in_second)
            )

        return results

    @staticmethod
    def _names(descriptor: ProjectDescriptor, target: str) -> List[str]:
        names = []
        for item in descriptor.tree.entries(target, "dependencies"):
            name = item.get("name") or item.get("target") or item.get("path")
            if name:
                names.append(str(name))
        return names
