"""Runs every detector over one repository and assembles the report."""

from __future__ import annotations

import posixpath
from pathlib import Path
from typing import Iterable, List, Optional, Protocol, Sequence

from .commands import prioritize, quick_reference
from .detectors import DetectionContext, Detector, default_detectors
from .git import GitPorcelain, detect_git_conventions
from .logging import get_logger
from .models import Command, Convention, FileInfo, GitConventions, Report
from .sampler import MAX_FILE_BYTES, AnalysisCancelled, CancellationSignal, Sampler

DEFAULT_COMMIT_LIMIT = 100

_LOGGER = get_logger("engine")


class InvalidInputError(ValueError):
    """Raised when the root path or the file inventory cannot be trusted."""


class GitSource(Protocol):
    def recent_commits(self, root: Path, limit: int) -> List[str]:
        ...

    def local_branches(self, root: Path) -> List[str]:
        ...


def analyze(
    root_path: str | Path,
    files: Iterable[FileInfo],
    commands: Iterable[Command],
    *,
    git: Optional[GitSource] = None,
    commit_limit: int = DEFAULT_COMMIT_LIMIT,
    quick_reference_size: Optional[int] = None,
    detectors: Optional[Sequence[Detector]] = None,
    cancel: Optional[CancellationSignal] = None,
    max_file_bytes: int = MAX_FILE_BYTES,
) -> Report:
    """Infer conventions and rank commands for the repository at ``root_path``.

    Args:
        root_path: Absolute path of the repository root.
        files: Inventory entries relative to ``root_path``.
        commands: Candidate developer commands.
        git: Source of commit subjects and branch names; ``GitPorcelain`` when omitted.
        commit_limit: Number of recent commits handed to the commit style detector.
        quick_reference_size: When set, trim commands to a quick reference of this size.
        detectors: Override the built-in detector list.
        cancel: Checked between file reads; once set, a partial report is returned.
        max_file_bytes: Files above this size contribute no evidence.

    Returns:
        The assembled report. When cancelled, ``Report.cancelled`` is True and only the
        conventions of detectors that finished are present.

    Raises:
        InvalidInputError: ``root_path`` is not absolute or the inventory is malformed.
    """
    root = _validate_root(root_path)
    inventory = _validate_inventory(files)
    command_list = tuple(commands)
    _LOGGER.info("Analyzing %s (%d entries, %d commands)", root, len(inventory), len(command_list))

    sampler = Sampler(root, inventory, max_bytes=max_file_bytes, cancel=cancel)
    context = DetectionContext(root=root, files=inventory, sampler=sampler)

    conventions: List[Convention] = []
    active = list(detectors) if detectors is not None else default_detectors()
    for detector in active:
        try:
            sampler.check_cancelled()
            found = detector.detect(context)
        except AnalysisCancelled:
            _LOGGER.warning("Analysis cancelled during %s; returning partial report", detector.name)
            return Report(conventions=tuple(conventions), cancelled=True)
        _LOGGER.debug("Detector %s produced %d conventions", detector.name, len(found))
        conventions.extend(found)

    git_conventions = _detect_git(root, git or GitPorcelain(), commit_limit)

    if quick_reference_size is None:
        ranked = prioritize(command_list)
    else:
        ranked = quick_reference(command_list, quick_reference_size)

    _LOGGER.info("Found %d conventions and %d commands", len(conventions), len(ranked))
    return Report(conventions=tuple(conventions), git=git_conventions, commands=tuple(ranked))


def _detect_git(root: Path, git: GitSource, commit_limit: int) -> GitConventions:
    commits = git.recent_commits(root, commit_limit)
    branches = git.local_branches(root)
    _LOGGER.debug("Git sample: %d commits, %d branches", len(commits), len(branches))
    return detect_git_conventions(commits, branches)


def _validate_root(root_path: str | Path) -> Path:
    root = Path(root_path)
    if not root.is_absolute():
        raise InvalidInputError(f"Repository root must be an absolute path: {root_path}")
    return root


def _validate_inventory(files: Iterable[FileInfo]) -> tuple[FileInfo, ...]:
    inventory = tuple(files)
    for info in inventory:
        if not isinstance(info, FileInfo):
            raise InvalidInputError(f"Inventory entry is not a FileInfo: {info!r}")
        path = info.path
        if not path or posixpath.isabs(path) or Path(path).is_absolute():
            raise InvalidInputError(f"Inventory path must be relative to the root: {path!r}")
        segments = path.split("/")
        if ".." in segments:
            raise InvalidInputError(f"Inventory path escapes the root: {path!r}")
        if segments[-1] != info.name:
            raise InvalidInputError(f"Inventory name {info.name!r} does not match path {path!r}")
    return inventory


__all__ = ["DEFAULT_COMMIT_LIMIT", "GitSource", "InvalidInputError", "analyze"]
