"""Repository walking and file inventory construction."""

from __future__ import annotations

import os
from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence

from .config import ConfigError, load_config
from .logging import get_logger
from .models import FileInfo

# Never descended into, whatever the ignore rules say.
_SKIPPED_DIRS = frozenset(
    {
        ".git",
        ".hg",
        ".svn",
        ".idea",
        ".vscode",
        ".venv",
        "venv",
        ".tox",
        "__pycache__",
        ".pytest_cache",
        ".mypy_cache",
        ".ruff_cache",
        "node_modules",
        ".next",
        "dist",
        "target",
        "vendor",
    }
)
_SKIPPED_FILES = frozenset({".DS_Store", "Thumbs.db"})

_LOGGER = get_logger("scanner")


@dataclass(frozen=True)
class IgnoreRule:
    """One gitignore-style pattern from .gitignore, .convscout.yml or the caller."""

    pattern: str
    directory_only: bool = False
    anchored: bool = False
    negate: bool = False

    @classmethod
    def parse(cls, line: str) -> Optional["IgnoreRule"]:
        """Parse a single ignore line; blank lines and comments yield None."""
        text = line.strip()
        if not text or text.startswith("#"):
            return None
        negate = text.startswith("!")
        if negate:
            text = text[1:]
        directory_only = text.endswith("/")
        anchored = text.startswith("/")
        text = text.strip("/")
        if not text:
            return None
        return cls(pattern=text, directory_only=directory_only, anchored=anchored, negate=negate)

    def matches(self, rel_path: str, is_dir: bool) -> bool:
        if self.directory_only and not is_dir:
            return False
        if self.anchored or "/" in self.pattern:
            return fnmatchcase(rel_path, self.pattern)
        return any(fnmatchcase(segment, self.pattern) for segment in rel_path.split("/"))


def _parse_lines(lines: Iterable[str]) -> List[IgnoreRule]:
    return [rule for rule in map(IgnoreRule.parse, lines) if rule is not None]


def _gitignore_rules(root: Path) -> List[IgnoreRule]:
    try:
        text = (root / ".gitignore").read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return []
    return _parse_lines(text.splitlines())


def _configured_patterns(root: Path) -> List[str]:
    try:
        return load_config(root).exclude_paths
    except ConfigError as exc:
        _LOGGER.warning("Ignoring exclude_paths from invalid config: %s", exc)
        return []


def _is_ignored(rel_path: str, is_dir: bool, rules: Sequence[IgnoreRule]) -> bool:
    # Last matching rule decides, as in git.
    ignored = False
    for rule in rules:
        if rule.matches(rel_path, is_dir):
            ignored = not rule.negate
    return ignored


def _walk(root: Path, rules: Sequence[IgnoreRule]) -> Iterator[FileInfo]:
    for dirpath, dirnames, filenames in os.walk(root):
        prefix = Path(dirpath).relative_to(root).as_posix()
        prefix = "" if prefix == "." else prefix + "/"

        descend: List[str] = []
        for name in sorted(dirnames):
            rel_path = prefix + name
            if name in _SKIPPED_DIRS or _is_ignored(rel_path, True, rules):
                continue
            descend.append(name)
            yield FileInfo.from_path(rel_path, is_dir=True)
        dirnames[:] = descend

        for name in sorted(filenames):
            rel_path = prefix + name
            if name in _SKIPPED_FILES or _is_ignored(rel_path, False, rules):
                continue
            yield FileInfo.from_path(rel_path)


class RepoScanner:
    """Walks the repository to produce a deterministic file inventory."""

    def __init__(self, exclude_paths: Sequence[str] = ()) -> None:
        self.exclude_paths = list(exclude_paths)

    def scan(self, root: str | Path) -> List[FileInfo]:
        """Return inventory entries for every non-ignored file and directory."""
        root_path = Path(root).expanduser().resolve()
        if not root_path.is_dir():
            if root_path.exists():
                raise NotADirectoryError(f"Not a directory: {root}")
            raise FileNotFoundError(f"Repository not found: {root}")

        rules = _gitignore_rules(root_path)
        rules += _parse_lines(self.exclude_paths + _configured_patterns(root_path))
        entries = list(_walk(root_path, rules))
        _LOGGER.debug("Scanner found %d entries under %s", len(entries), root_path)
        return entries


__all__ = ["IgnoreRule", "RepoScanner"]
