"""Commit message and branch naming conventions."""

from __future__ import annotations

import re
from collections import Counter
from typing import List, Optional, Sequence

from ..models import BranchConvention, CommitConvention, GitConventions

CONVENTIONAL_TYPES = (
    "feat",
    "fix",
    "docs",
    "style",
    "refactor",
    "test",
    "chore",
    "perf",
    "ci",
    "build",
    "revert",
)

TOP_TYPES = 8
TOP_SCOPES = 5
MIN_PREFIX_BRANCHES = 2
MAX_BRANCH_EXAMPLES = 3

_CONVENTIONAL_RE = re.compile(
    r"^(" + "|".join(CONVENTIONAL_TYPES) + r")(\(([^)]+)\))?!?:\s"
)
_GITMOJI_RE = re.compile(
    r"^(?::[\w+-]+:"
    r"|[\u2600-\u27bf\u2b00-\u2bff\u231a-\u23ff\U0001f000-\U0001faff])"
)

_FORMATS = {
    "conventional": "<type>(<scope>): <description>",
    "gitmoji": ":<emoji>: <description>",
    "freeform": "<description>",
}

_BRANCH_EXAMPLE_SUFFIXES = ("user-auth", "login-bug", "update-deps")


def detect_commit_convention(messages: Sequence[str]) -> Optional[CommitConvention]:
    """Classify commit subjects as conventional, gitmoji, or freeform."""
    subjects = [message.strip() for message in messages if message.strip()]
    if not subjects:
        return None

    types: Counter[str] = Counter()
    scopes: Counter[str] = Counter()
    conventional = 0
    for subject in subjects:
        match = _CONVENTIONAL_RE.match(subject)
        if match is None:
            continue
        conventional += 1
        types[match.group(1)] += 1
        if match.group(3):
            scopes[match.group(3)] += 1

    if _is_majority(conventional, len(subjects)):
        top_types = tuple(name for name, _ in types.most_common(TOP_TYPES))
        top_scopes = tuple(name for name, _ in scopes.most_common(TOP_SCOPES))
        if top_scopes:
            example = f"{top_types[0]}({top_scopes[0]}): add new feature"
        else:
            example = f"{top_types[0]}: add new feature"
        return CommitConvention(
            style="conventional",
            format=_FORMATS["conventional"],
            types=top_types,
            scopes=top_scopes,
            example=example,
        )

    gitmoji = sum(1 for subject in subjects if _GITMOJI_RE.match(subject))
    if _is_majority(gitmoji, len(subjects)):
        return CommitConvention(
            style="gitmoji",
            format=_FORMATS["gitmoji"],
            example=":sparkles: add new feature",
        )

    return CommitConvention(style="freeform", format=_FORMATS["freeform"], example=subjects[0])


def detect_branch_convention(branches: Sequence[str]) -> Optional[BranchConvention]:
    """Return the branch prefixes used at least twice, most frequent first."""
    counts: Counter[str] = Counter()
    for branch in branches:
        name = branch.strip()
        if "/" not in name:
            continue
        prefix = name.split("/", 1)[0]
        if prefix:
            counts[prefix] += 1

    prefixes = tuple(
        prefix for prefix, count in counts.most_common() if count >= MIN_PREFIX_BRANCHES
    )
    if not prefixes:
        return None

    examples: List[str] = []
    for index, prefix in enumerate(prefixes[:MAX_BRANCH_EXAMPLES]):
        suffix = _BRANCH_EXAMPLE_SUFFIXES[index % len(_BRANCH_EXAMPLE_SUFFIXES)]
        examples.append(f"{prefix}/{suffix}")
    return BranchConvention(prefixes=prefixes, examples=tuple(examples))


def detect_git_conventions(commits: Sequence[str], branches: Sequence[str]) -> GitConventions:
    return GitConventions(
        commit=detect_commit_convention(commits),
        branch=detect_branch_convention(branches),
    )


def _is_majority(count: int, total: int) -> bool:
    return total > 0 and count * 2 >= total


__all__ = [
    "CONVENTIONAL_TYPES",
    "detect_branch_convention",
    "detect_commit_convention",
    "detect_git_conventions",
]
