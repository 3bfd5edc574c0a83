"""Tests for the git command wrapper."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List

from convscout.git import GitPorcelain


def test_reads_commit_subjects_and_branches(tmp_path: Path) -> None:
    calls: List[List[str]] = []

    def runner(args, cwd):
        calls.append(list(args))
        if args[1] == "log":
            return "feat: one\n\nfix: two\n"
        if args[1] == "branch":
            return "main\nfeat/login\n"
        return ".git\n"

    git = GitPorcelain(runner=runner)

    assert git.recent_commits(tmp_path, 5) == ["feat: one", "fix: two"]
    assert git.local_branches(tmp_path) == ["main", "feat/login"]
    assert ["git", "log", "-n5", "--format=%s"] in calls
    assert ["git", "branch", "--format=%(refname:short)"] in calls


def test_non_repository_returns_empty_lists(tmp_path: Path) -> None:
    def runner(args, cwd):
        raise subprocess.CalledProcessError(128, args, stderr="not a git repository")

    git = GitPorcelain(runner=runner)

    assert git.is_repository(tmp_path) is False
    assert git.recent_commits(tmp_path, 100) == []
    assert git.local_branches(tmp_path) == []


def test_missing_git_binary_is_not_fatal(tmp_path: Path) -> None:
    def runner(args, cwd):
        raise FileNotFoundError("git")

    assert GitPorcelain(runner=runner).recent_commits(tmp_path, 10) == []


def test_failed_log_in_fresh_repository_yields_no_commits(tmp_path: Path) -> None:
    def runner(args, cwd):
        if args[1] == "log":
            raise subprocess.CalledProcessError(128, args)
        return ".git\n"

    git = GitPorcelain(runner=runner)

    assert git.recent_commits(tmp_path, 10) == []


def test_zero_limit_skips_git_entirely(tmp_path: Path) -> None:
    def runner(args, cwd):  # pragma: no cover - must not be called
        raise AssertionError("runner should not be invoked")

    assert GitPorcelain(runner=runner).recent_commits(tmp_path, 0) == []
