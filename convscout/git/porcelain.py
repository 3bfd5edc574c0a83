"""Thin wrapper over the git command line."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable, Iterable, List

from ..logging import get_logger

_LOGGER = get_logger("git")


class GitPorcelain:
    """Lists commit subjects and branch names; empty results outside a repository."""

    def __init__(self, runner: Callable[..., str] | None = None) -> None:
        self._runner = runner or self._default_runner

    def recent_commits(self, root: Path, limit: int) -> List[str]:
        """Return up to ``limit`` recent commit subjects, newest first."""
        if limit <= 0 or not self.is_repository(root):
            return []
        output = self._try_run(["git", "log", f"-n{limit}", "--format=%s"], cwd=root)
        return [line.strip() for line in output.splitlines() if line.strip()]

    def local_branches(self, root: Path) -> List[str]:
        if not self.is_repository(root):
            return []
        output = self._try_run(["git", "branch", "--format=%(refname:short)"], cwd=root)
        return [line.strip() for line in output.splitlines() if line.strip()]

    def is_repository(self, root: Path) -> bool:
        try:
            self._runner(["git", "rev-parse", "--git-dir"], cwd=root)
        except (OSError, subprocess.CalledProcessError):
            return False
        return True

    def _try_run(self, args: Iterable[str], *, cwd: Path) -> str:
        try:
            return self._runner(list(args), cwd=cwd)
        except (OSError, subprocess.CalledProcessError) as exc:
            # A fresh repository without commits fails `git log`.
            _LOGGER.debug("git command failed in %s: %s", cwd, exc)
            return ""

    @staticmethod
    def _default_runner(args: Iterable[str], *, cwd: Path) -> str:
        completed = subprocess.run(
            list(args),
            cwd=str(cwd),
            check=True,
            text=True,
            capture_output=True,
        )
        return completed.stdout


__all__ = ["GitPorcelain"]
