"""Tests for the facet comparators."""

from __future__ import annotations

import json

import pytest

from projdiff.comparators import (
    ConfigurationsComparator,
    DependenciesComparator,
    FileReferencesComparator,
    HeadersComparator,
    ResolvedSettingsComparator,
    ResourcesComparator,
    SettingsComparator,
    SourcesComparator,
    SourceTreesComparator,
    TargetsComparator,
)
from projdiff.core.constants import ROOT_PROJECT_CONTEXT
from projdiff.core.exceptions import CannotFindError, ComparatorError, ConfigurationError
from projdiff.core.models import ComparatorParameters, DifferentValue, Option
from projdiff.utils.system import System


class FakeSystem(System):
    """Answers with canned settings keyed by (project, target, configuration)."""

    def __init__(self, responses):
        self.responses = responses
        self.commands = []

    def execute(self, command):
        self.commands.append(command)
        key = (command[2], command[4], command[6])
        return self.responses[key]


FIRST_PROJECT = {
    "name": "App",
    "configurations": ["Debug", "Release"],
    "settings": {
        "Debug": {"SWIFT_VERSION": "5.0", "ONLY_ACTIVE_ARCH": True},
        "Release": {"SWIFT_VERSION": "5.0"},
    },
    "files": [
        {"path": "App/main.swift"},
        {"path": "App/Legacy.m", "source_tree": "SOURCE_ROOT"},
        {"path": "/absolute/path", "source_tree": "<absolute>"},
        {"path": "App.app", "source_tree": "BUILT_PRODUCTS_DIR"},
    ],
    "targets": {
        "App": {
            "type": "application",
            "sources": [{"path": "main.swift", "flags": "-O"}, "Legacy.m"],
            "headers": [{"path": "App.h", "attributes": ["Public"]}],
            "resources": ["Assets.xcassets", "Main.storyboard"],
            "dependencies": ["Core"],
            "settings": {"Debug": {"PRODUCT_NAME": "App"}},
        },
        "Core": {"type": "framework"},
        "Old": {"type": "framework"},
    },
}

SECOND_PROJECT = {
    "name": "App",
    "configurations": ["Debug", "Release", "Beta"],
    "settings": {
        "Debug": {"SWIFT_VERSION": "5.9", "ONLY_ACTIVE_ARCH": True},
        "Release": {"SWIFT_VERSION": "5.0", "STRIP": "YES"},
    },
    "files": [
        {"path": "App/main.swift"},
        {"path": "App/Legacy.m", "source_tree": "<group>"},
        {"path": "App/New.swift"},
    ],
    "targets": {
        "App": {
            "type": "application",
            "sources": [{"path": "main.swift", "flags": "-Onone"}, "New.swift"],
            "headers": [{"path": "App.h", "attributes": ["Project"]}],
            "resources": ["Assets.xcassets"],
            "dependencies": [{"name": "Core"}, {"target": "Analytics"}],
            "settings": {"Debug": {"PRODUCT_NAME": "App2"}},
        },
        "Core": {"type": "static_library"},
        "Widget": {"type": "app_extension"},
    },
}


@pytest.fixture
def projects(descriptor):
    return descriptor(FIRST_PROJECT), descriptor(SECOND_PROJECT, "/project/other/project.json")


def test_file_references(projects, parameters_all):
    first, second = projects

    [result] = FileReferencesComparator().compare(first, second, parameters_all)

    assert result.tag == "file_references"
    assert result.only_in_first == ("../../absolute/path", "$(BUILT_PRODUCTS_DIR)/App.app")
    assert result.only_in_second == ("App/New.swift",)
    assert result.different_values == ()


def test_file_references_unsupported_source_tree_fails(descriptor, parameters_all):
    broken = descriptor({"files": [{"path": "x", "source_tree": "CUSTOM"}]})

    with pytest.raises(ComparatorError, match="Unsupported source tree"):
        FileReferencesComparator().compare(broken, broken, parameters_all)


def test_targets(projects, parameters_all):
    first, second = projects

    [result] = TargetsComparator().compare(first, second, parameters_all)

    assert result.only_in_first == ("Old",)
    assert result.only_in_second == ("Widget",)
    assert result.different_values == (DifferentValue("Core", "framework", "static_library"),)


def test_targets_respects_target_filter(projects):
    first, second = projects
    parameters = ComparatorParameters(targets=Option.only("App", "Old"))

    [result] = TargetsComparator().compare(first, second, parameters)

    assert result.only_in_first == ("Old",)
    assert result.only_in_second == ()
    assert result.same() is False


def test_sources_compares_paths_and_flags(projects, parameters_all):
    first, second = projects

    results = SourcesComparator().compare(first, second, parameters_all)

    assert [r.context for r in results] == [("App",), ("Core",)]
    app, core = results
    assert app.only_in_first == ("Legacy.m",)
    assert app.only_in_second == ("New.swift",)
    assert app.different_values == (DifferentValue("main.swift (flags)", "-O", "-Onone"),)
    assert core.same()


def test_headers_compares_attributes(projects, parameters_all):
    first, second = projects

    app = HeadersComparator().compare(first, second, parameters_all)[0]

    assert app.tag == "headers"
    assert app.different_values == (DifferentValue("App.h (attributes)", "Public", "Project"),)


def test_resources_compare_paths_only(projects, parameters_all):
    first, second = projects

    app = ResourcesComparator().compare(first, second, parameters_all)[0]

    assert app.only_in_first == ("Main.storyboard",)
    assert app.only_in_second == ()
    assert app.different_values == ()


def test_named_missing_target_raises_cannot_find(projects):
    first, second = projects
    parameters = ComparatorParameters(targets=Option.only("Widget"))

    with pytest.raises(CannotFindError) as exc_info:
        SourcesComparator().compare(first, second, parameters)

    assert exc_info.value.description == 'Не удалось найти target "Widget"'


def test_configurations(projects, parameters_all):
    first, second = projects

    [result] = ConfigurationsComparator().compare(first, second, parameters_all)

    assert result.only_in_first == ()
    assert result.only_in_second == ("Beta",)


def test_dependencies(projects, parameters_all):
    first, second = projects

    app = DependenciesComparator().compare(first, second, parameters_all)[0]

    assert app.context == ("App",)
    assert app.only_in_first == ()
    assert app.only_in_second == ("Analytics",)


def test_source_trees_reports_nil_for_missing_files(projects, parameters_all):
    first, second = projects

    [result] = SourceTreesComparator().compare(first, second, parameters_all)

    assert result.different_values == (
        DifferentValue("App/Legacy.m", "SOURCE_ROOT", "<group>"),
        DifferentValue("/absolute/path", "<absolute>", None),
        DifferentValue("App.app", "BUILT_PRODUCTS_DIR", None),
        DifferentValue("App/New.swift", None, "<group>"),
    )
    assert result.different_values[1].second == "nil"


def test_settings_project_scope_first_then_targets(projects, parameters_all):
    first, second = projects

    results = SettingsComparator().compare(first, second, parameters_all)

    assert [r.context for r in results] == [
        (ROOT_PROJECT_CONTEXT, "Debug"),
        (ROOT_PROJECT_CONTEXT, "Release"),
        ("App", "Debug"),
        ("App", "Release"),
        ("Core", "Debug"),
        ("Core", "Release"),
    ]
    root_debug, root_release, app_debug = results[:3]
    assert root_debug.different_values == (DifferentValue("SWIFT_VERSION", "5.0", "5.9"),)
    assert root_release.only_in_second == ("STRIP",)
    assert app_debug.different_values == (DifferentValue("PRODUCT_NAME", "App", "App2"),)
    assert all(r.same() for r in results[3:])


def test_settings_configuration_filter(projects):
    first, second = projects
    parameters = ComparatorParameters.from_names(configurations=["Release"])

    results = SettingsComparator().compare(first, second, parameters)

    assert {r.context[1] for r in results} == {"Release"}


def _settings(values):
    return json.dumps([{"target": "App", "buildSettings": values}])


def test_resolved_settings_uses_external_tool(descriptor):
    first = descriptor({"project_file": "App.xcodeproj", "configurations": ["Debug"],
                        "targets": {"App": {}}}, "/work/first/project.json")
    second = descriptor({"project_file": "App.xcodeproj", "configurations": ["Debug"],
                         "targets": {"App": {}}}, "/work/second/project.json")
    system = FakeSystem({
        ("/work/first/App.xcodeproj", "App", "Debug"): _settings({"A": "1", "B": "x"}),
        ("/work/second/App.xcodeproj", "App", "Debug"): _settings({"A": "2", "C": "y"}),
    })

    [result] = ResolvedSettingsComparator(system=system).compare(
        first, second, ComparatorParameters()
    )

    assert result.context == ("App", "Debug")
    assert result.only_in_first == ("B",)
    assert result.only_in_second == ("C",)
    assert result.different_values == (DifferentValue("A", "1", "2"),)
    assert system.commands[0][0] == "xcodebuild"


def test_resolved_settings_invalid_output(descriptor):
    project = descriptor({"configurations": ["Debug"], "targets": {"App": {}}})
    system = FakeSystem({("/project/test-project/project.json", "App", "Debug"): "not json"})

    with pytest.raises(ComparatorError):
        ResolvedSettingsComparator(system=system).compare(project, project, ComparatorParameters())


def test_resolved_settings_bad_command_template(descriptor):
    project = descriptor({"configurations": ["Debug"], "targets": {"App": {}}})
    comparator = ResolvedSettingsComparator(
        system=FakeSystem({}), config={"command": ["tool", "{unknown}"]}
    )

    with pytest.raises(ConfigurationError):
        comparator.compare(project, project, ComparatorParameters())

