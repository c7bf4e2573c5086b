# projdiff/comparators/targets.py
from typing import List

from projdiff.comparators.base import BaseComparator
from projdiff.core.models import (
    ComparatorParameters,
    CompareResult,
    DifferentValue,
    ProjectDescriptor,
)
from projdiff.utils.diffing import common, ordered_difference


class TargetsComparator(BaseComparator):
    """
    Состав таргетов и их тип (application, framework, ...).
    """

    TAG = "targets"
    DESCRIPTION = "Compares target names and product types."

    def compare(
        self,
        first: ProjectDescriptor,
        second: ProjectDescriptor,
        parameters: ComparatorParameters,
    ) -> List[CompareResult]:
        first_names = [t for t in first.tree.target_names if parameters.targets.contains(t)]
        second_names = [t for t in second.tree.target_names if parameters.targets.contains(t)]

        only_in_first, only_in_second = ordered_difference(first_names, second_names)

        different_values = []
        for name in common(first_names, second_names):
            first_type = first.tree.target(name).get("type")
            second_type = second.tree.target(name).get("type")
            if first_type != second_type:
                different_values.append(
                    DifferentValue(context=name, first=first_type, second=second_type)
                )

        return [
            self.result(
                only_in_first=only_in_first,
                only_in_second=only_in_second,
                different_values=different_values,
            )
        ]
