# projdiff/comparators/file_references.py
from typing import List

from projdiff.comparators.base import BaseComparator
from projdiff.core.models import ComparatorParameters, CompareResult, ProjectDescriptor
from projdiff.utils.diffing import ordered_difference
from projdiff.utils.paths import PathHelper


class FileReferencesComparator(BaseComparator):
    TAG = "file_references"
    DESCRIPTION = "Compares the full paths of all file references."

    def __init__(self, path_helper: PathHelper = None):
        self.path_helper = path_helper or PathHelper()

    def compare(
        self,
        first: ProjectDescriptor,
        second: ProjectDescriptor,
        parameters: ComparatorParameters,
    ) -> List[CompareResult]:
        first_paths = self._paths(first)
        second_paths = self._paths(second)
        only_in_first, only_in_second = ordered_difference(first_paths, second_paths)
        return [self.result(only_in_first=only_in_first, only_in_second=only_in_second)]

    def _paths(self, descriptor: ProjectDescriptor) -> List[str]:
        root = self.source_root(descriptor)
        paths = []
        for element in descriptor.tree.files:
            path = self.path_helper.full_path(element, root)
            if path is not None:
                paths.append(path)
        return paths
