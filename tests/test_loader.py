"""Tests for project loading and path helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from projdiff.core.exceptions import ComparatorError, LoadError, ProjectNotFoundError
from projdiff.loader import JsonProjectLoader, ProjectTree
from projdiff.utils.diffing import diff_mappings, ordered_difference, stringify
from projdiff.utils.paths import PathHelper

PROJECT = {
    "name": "App",
    "configurations": ["Debug"],
    "settings": {"Debug": {"A": "1"}},
    "targets": {"App": {"sources": ["main.swift", {"path": "util.swift", "flags": "-O"}]}},
}


# ==========================================================
# LOADER
# ==========================================================

def test_load_file(write_project):
    path = write_project("first", PROJECT)

    descriptor = JsonProjectLoader().load(path)

    assert descriptor.path == path
    assert descriptor.tree.name == "App"
    assert descriptor.tree.target_names == ["App"]


def test_load_directory(write_project):
    path = write_project("first", PROJECT)

    descriptor = JsonProjectLoader().load(path.parent)

    assert descriptor.tree.configurations == ["Debug"]


def test_load_missing(tmp_path):
    with pytest.raises(ProjectNotFoundError):
        JsonProjectLoader().load(tmp_path / "nothing")


def test_load_invalid_json(tmp_path):
    path = tmp_path / "project.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(LoadError):
        JsonProjectLoader().load(path)


@pytest.mark.parametrize("data", [
    [],
    {"targets": []},
    {"targets": {"App": "oops"}},
    {"targets": {"App": {"sources": "main.swift"}}},
    {"settings": ["Debug"]},
])
def test_load_invalid_structure(write_project, data):
    path = write_project("broken", data)

    with pytest.raises(LoadError):
        JsonProjectLoader().load(path)


def test_tree_normalizes_entries():
    tree = ProjectTree(PROJECT)

    assert tree.entries("App", "sources") == [
        {"path": "main.swift"},
        {"path": "util.swift", "flags": "-O"},
    ]
    assert tree.entries("Missing", "sources") == []


def test_tree_returns_copies():
    tree = ProjectTree(PROJECT)

    tree.project_settings("Debug")["A"] = "changed"
    tree.target("App")["sources"] = []

    assert tree.project_settings("Debug") == {"A": "1"}
    assert len(tree.entries("App", "sources")) == 2
    assert tree.target_settings("App", "Debug") == {}


# ==========================================================
# PATHS
# ==========================================================

ROOT = Path("/project/test-project")


def test_full_path_absolute():
    element = {"path": "/absolute/path", "source_tree": "absolute"}

    assert PathHelper().full_path(element, ROOT) == "../../absolute/path"


def test_full_path_none():
    assert PathHelper().full_path(None, ROOT) is None


@pytest.mark.parametrize("element, expected", [
    ({"path": "App/main.swift"}, "App/main.swift"),
    ({"name": "main.swift", "source_tree": "<group>"}, "main.swift"),
    ({"path": "lib.a", "source_tree": "SOURCE_ROOT"}, "lib.a"),
    ({"path": "App.app", "source_tree": "BUILT_PRODUCTS_DIR"}, "$(BUILT_PRODUCTS_DIR)/App.app"),
    ({"path": "UIKit.framework", "source_tree": "SDKROOT"}, "$(SDKROOT)/UIKit.framework"),
])
def test_full_path_source_trees(element, expected):
    assert PathHelper().full_path(element, ROOT) == expected


def test_full_path_unsupported_source_tree():
    element = {"path": "test/path", "source_tree": "CUSTOM_TREE"}

    with pytest.raises(ComparatorError) as exc_info:
        PathHelper().full_path(element, ROOT)

    assert exc_info.value.description.startswith('Determining full path to "test/path" failed.')


def test_full_path_without_path_or_name():
    with pytest.raises(ComparatorError):
        PathHelper().full_path({"source_tree": "<group>"}, ROOT)


# ==========================================================
# DIFFING
# ==========================================================

def test_ordered_difference_keeps_first_appearance():
    assert ordered_difference(["c", "a", "c", "b"], ["b", "d"]) == (["c", "a"], ["d"])


def test_stringify():
    assert stringify(["-O", "-g"]) == "-O -g"
    assert stringify(True) == "YES"
    assert stringify(None) is None
    assert stringify({"b": 1, "a": 2}) == '{"a": 2, "b": 1}'


def test_diff_mappings():
    only_first, only_second, different = diff_mappings(
        {"A": "1", "B": ["x", "y"], "C": "same"},
        {"B": "x y", "C": "same", "D": False},
    )

    assert only_first == ["A"]
    assert only_second == ["D"]
    assert different == []


# ==========================================================
# MALFORMED PROJECTS
# ==========================================================

def test_load_non_utf8_file(tmp_path):
    path = tmp_path / "project.json"
    path.write_bytes(b'{"name": "\xff\xfe"}')

    with pytest.raises(LoadError, match="Некорректная кодировка"):
        JsonProjectLoader().load(path)


def test_load_rejects_string_file_entries(write_project):
    path = write_project("broken", {"files": [{"path": "a.swift"}, "main.swift"]})

    with pytest.raises(LoadError, match="'files'"):
        JsonProjectLoader().load(path)


@pytest.mark.parametrize("data", [
    {"settings": {"Debug": "x"}},
    {"targets": {"App": {"settings": {"Release": ["A=1"]}}}},
])
def test_load_rejects_non_object_configuration_settings(write_project, data):
    path = write_project("broken", data)

    with pytest.raises(LoadError, match="должны быть объектом"):
        JsonProjectLoader().load(path)


def test_load_accepts_null_configuration_settings(write_project):
    path = write_project("first", {"settings": {"Debug": None}, "configurations": ["Debug"]})

    descriptor = JsonProjectLoader().load(path)

    assert descriptor.tree.project_settings("Debug") == {}
