# projdiff/core/__init__.py

from .models import (
    Format,
    Mode,
    Option,
    ComparatorParameters,
    ProjectDescriptor,
    DifferentValue,
    CompareDetails,
    CompareError,
    CompareResult,
    ProjectCompareResult,
    Result,
)

from .exceptions import (
    ProjDiffError,
    LoadError,
    ProjectNotFoundError,
    ComparatorError,
    CannotFindError,
    GenericError,
    ConfigurationError,
    handle_exception,
)

from .config import load_config, merge_config

__all__ = [
    # models
    "Format",
    "Mode",
    "Option",
    "ComparatorParameters",
    "ProjectDescriptor",
    "DifferentValue",
    "CompareDetails",
    "CompareError",
    "CompareResult",
    "ProjectCompareResult",
    "Result",

    # exceptions
    "ProjDiffError",
    "LoadError",
    "ProjectNotFoundError",
    "ComparatorError",
    "CannotFindError",
    "GenericError",
    "ConfigurationError",
    "handle_exception",

    # config
    "load_config",
    "merge_config",
]
