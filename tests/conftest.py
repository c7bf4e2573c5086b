"""Shared fixtures for projdiff tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import pytest

from projdiff.comparators.base import BaseComparator
from projdiff.core.exceptions import ProjectNotFoundError
from projdiff.core.models import ComparatorParameters, ProjectDescriptor
from projdiff.loader import ProjectLoader, ProjectTree


class StubLoader(ProjectLoader):
    """Returns pre-built trees keyed by path; unknown paths fail like a missing file."""

    def __init__(self, projects: Optional[Dict[str, Dict[str, Any]]] = None):
        self.projects = projects
        self.loaded: List[str] = []

    def load(self, path) -> ProjectDescriptor:
        self.loaded.append(str(path))
        if self.projects is None:
            return ProjectDescriptor(path=Path(path), tree=ProjectTree({}))
        if str(path) not in self.projects:
            raise ProjectNotFoundError(str(path))
        return ProjectDescriptor(path=Path(path), tree=ProjectTree(self.projects[str(path)]))


class StubComparator(BaseComparator):
    """Comparator whose results come from a callable."""

    def __init__(self, tag: str, compare: Callable[..., list]):
        self._tag = tag
        self._compare = compare
        self.calls = 0

    @property
    def tag(self) -> str:
        return self._tag

    def compare(self, first, second, parameters):
        self.calls += 1
        return self._compare(first, second, parameters)


@pytest.fixture
def parameters_all() -> ComparatorParameters:
    return ComparatorParameters()


@pytest.fixture
def stub_loader() -> StubLoader:
    return StubLoader()


@pytest.fixture
def descriptor() -> Callable[..., ProjectDescriptor]:
    def _make(data: Dict[str, Any], path: str = "/project/test-project/project.json") -> ProjectDescriptor:
        return ProjectDescriptor(path=Path(path), tree=ProjectTree(data))

    return _make


@pytest.fixture
def write_project(tmp_path: Path) -> Callable[..., Path]:
    def _write(name: str, data: Any) -> Path:
        directory = tmp_path / name
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / "project.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
