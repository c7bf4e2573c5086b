from .base import BaseComparator
from .registry import (
    ComparatorType,
    ALL_AVAILABLE_COMPARATORS,
    DEFAULT_COMPARATORS,
    available_tags,
    get_comparator_type,
    select_comparators,
)

from .file_references import FileReferencesComparator
from .targets import TargetsComparator
from .build_phases import (
    BuildPhaseComparator,
    HeadersComparator,
    SourcesComparator,
    ResourcesComparator,
)
from .configurations import ConfigurationsComparator
from .settings import SettingsComparator
from .resolved_settings import ResolvedSettingsComparator
from .source_trees import SourceTreesComparator
from .dependencies import DependenciesComparator

__all__ = [
    "BaseComparator",
    "ComparatorType",
    "ALL_AVAILABLE_COMPARATORS",
    "DEFAULT_COMPARATORS",
    "available_tags",
    "get_comparator_type",
    "select_comparators",
    "FileReferencesComparator",
    "TargetsComparator",
    "BuildPhaseComparator",
    "HeadersComparator",
    "SourcesComparator",
    "ResourcesComparator",
    "ConfigurationsComparator",
    "SettingsComparator",
    "ResolvedSettingsComparator",
    "SourceTreesComparator",
    "DependenciesComparator",
]
