from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from convscout.detectors import DetectionContext
from convscout.sampler import Sampler
from tests._fixtures.repo_builder import RepoBuilder


@pytest.fixture
def repo_builder(tmp_path: Path) -> RepoBuilder:
    """Provide a reusable repo builder rooted at the pytest tmp_path."""
    return RepoBuilder(tmp_path)


@pytest.fixture
def make_context(repo_builder: RepoBuilder) -> Callable[[], DetectionContext]:
    """Scan the builder's repository and wrap it in a detection context."""

    def _make() -> DetectionContext:
        root = repo_builder.path()
        files = repo_builder.scan()
        return DetectionContext(root=root, files=files, sampler=Sampler(root, files))

    return _make
