"""Infer repository conventions and rank developer commands."""

from __future__ import annotations

from .commands import categorize, group_by_category, prioritize, quick_reference
from .engine import InvalidInputError, analyze
from .models import (
    BranchConvention,
    Command,
    CommitConvention,
    Convention,
    FileInfo,
    GitConventions,
    Report,
)

__version__ = "0.3.0"

__all__ = [
    "BranchConvention",
    "Command",
    "CommitConvention",
    "Convention",
    "FileInfo",
    "GitConventions",
    "InvalidInputError",
    "Report",
    "analyze",
    "categorize",
    "group_by_category",
    "prioritize",
    "quick_reference",
]
