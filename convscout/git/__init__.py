"""Git history inspection."""

from __future__ import annotations

from .conventions import detect_branch_convention, detect_commit_convention, detect_git_conventions
from .porcelain import GitPorcelain

__all__ = [
    "GitPorcelain",
    "detect_branch_convention",
    "detect_commit_convention",
    "detect_git_conventions",
]
