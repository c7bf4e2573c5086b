# projdiff/comparators/configurations.py
from typing import List

from projdiff.comparators.base import BaseComparator
from projdiff.core.models import ComparatorParameters, CompareResult, ProjectDescriptor
from projdiff.utils.diffing import ordered_difference


class ConfigurationsComparator(BaseComparator):
    TAG = "configurations"
    DESCRIPTION = "Compares build configuration names."

    def compare(
        self,
        first: ProjectDescriptor,
        second: ProjectDescriptor,
        parameters: ComparatorParameters,
    ) -> List[CompareResult]:
        only_in_first, only_in_second = ordered_difference(
            first.tree.configurations,
            second.tree.configurations,
        )
        return [self.result(only_in_first=only_in_first, only_in_second=only_in_second)]
