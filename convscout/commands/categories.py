"""Command categories and the ordered categorization table."""

from __future__ import annotations

import re
from enum import Enum
from typing import Pattern, Sequence, Tuple

from ..models import Command


class Category(Enum):
    """Command category; ``value`` is the display name."""

    BUILD = "Build"
    TEST = "Test"
    LINT = "Lint"
    FORMAT = "Format"
    RUN = "Run"
    INSTALL = "Install"
    CLEAN = "Clean"
    GENERATE = "Generate"
    DEPLOY = "Deploy"
    DOCKER = "Docker"
    DATABASE = "Database"
    OTHER = "Other"

    @property
    def priority(self) -> int:
        """Lower sorts first."""
        return _PRIORITIES[self]


_PRIORITIES = {
    Category.BUILD: 1,
    Category.TEST: 2,
    Category.LINT: 3,
    Category.FORMAT: 4,
    Category.RUN: 5,
    Category.INSTALL: 6,
    Category.CLEAN: 7,
    Category.GENERATE: 8,
    Category.DEPLOY: 9,
    Category.DOCKER: 10,
    Category.DATABASE: 11,
    Category.OTHER: 99,
}

IMPORTANT_CATEGORIES: Tuple[Category, ...] = (
    Category.BUILD,
    Category.TEST,
    Category.LINT,
    Category.FORMAT,
    Category.RUN,
    Category.INSTALL,
)


def _rows(category: Category, *patterns: str) -> Tuple[Tuple[Pattern[str], Category], ...]:
    return tuple((re.compile(pattern, re.IGNORECASE), category) for pattern in patterns)


# First match wins, so row order matters.
COMMAND_PATTERNS: Sequence[Tuple[Pattern[str], Category]] = (
    *_rows(
        Category.BUILD,
        r"^(make\s+)?(build|compile|dist|release|bundle)$",
        r"^go\s+build",
        r"^cargo\s+build",
        r"^(npm|yarn|pnpm|bun)\s+(run\s+)?build",
        r"^python\s+setup\.py\s+build",
        r"^poetry\s+build",
        r"^gradle\s+build",
        r"^mvn\s+(compile|package)",
        r"^dotnet\s+build",
    ),
    *_rows(
        Category.TEST,
        r"^(make\s+)?test",
        r"^go\s+test",
        r"^cargo\s+test",
        r"^(npm|yarn|pnpm|bun)\s+(run\s+)?test",
        r"^pytest",
        r"^python\s+-m\s+(pytest|unittest)",
        r"^poetry\s+run\s+(pytest|python\s+-m\s+pytest)",
        r"^jest",
        r"^vitest",
        r"^gradle\s+test",
        r"^mvn\s+test",
        r"^dotnet\s+test",
        r"^rspec",
        r"^bundle\s+exec\s+rspec",
        r"coverage",
    ),
    *_rows(
        Category.LINT,
        r"^(make\s+)?lint",
        r"^golangci-lint",
        r"^cargo\s+clippy",
        r"^(npm|yarn|pnpm|bun)\s+(run\s+)?lint",
        r"^eslint",
        r"^(ruff|flake8|pylint|mypy)\s+check",
        r"^poetry\s+run\s+(ruff|flake8|pylint|mypy)",
        r"^rubocop",
        r"^check",
    ),
    *_rows(
        Category.FORMAT,
        r"^(make\s+)?(format|fmt)$",
        r"^go\s+fmt",
        r"^gofmt",
        r"^goimports",
        r"^cargo\s+fmt",
        r"^(npm|yarn|pnpm|bun)\s+(run\s+)?format",
        r"^prettier",
        r"^(black|ruff\s+format|autopep8|yapf)",
        r"^poetry\s+run\s+(black|ruff\s+format)",
    ),
    *_rows(
        Category.RUN,
        r"^(make\s+)?(run|start|serve|dev)$",
        r"^go\s+run",
        r"^cargo\s+run",
        r"^(npm|yarn|pnpm|bun)\s+(run\s+)?(start|dev|serve)",
        r"^python\s+(app|main|run|manage)\.py",
        r"^(flask|uvicorn|gunicorn|django)",
        r"^poetry\s+run\s+(python|flask|uvicorn)",
        r"^rails\s+s",
        r"^bundle\s+exec\s+rails",
        r"runserver",
    ),
    *_rows(
        Category.INSTALL,
        r"^(make\s+)?install$",
        r"^(npm|yarn|pnpm|bun)\s+install",
        r"^(npm|yarn|pnpm|bun)\s+ci",
        r"^pip\s+install",
        r"^poetry\s+install",
        r"^cargo\s+install",
        r"^bundle\s+install",
        r"^go\s+mod\s+(download|tidy)",
        r"^setup",
    ),
    *_rows(
        Category.CLEAN,
        r"^(make\s+)?clean",
        r"^cargo\s+clean",
        r"^go\s+clean",
        r"^(npm|yarn|pnpm|bun)\s+(run\s+)?clean",
    ),
    *_rows(
        Category.GENERATE,
        r"^(make\s+)?(generate|gen|codegen|proto)",
        r"^go\s+generate",
        r"^protoc",
    ),
    *_rows(
        Category.DEPLOY,
        r"^(make\s+)?deploy",
        r"^(npm|yarn|pnpm|bun)\s+(run\s+)?deploy",
        r"^kubectl",
        r"^helm",
        r"^terraform",
    ),
    *_rows(
        Category.DOCKER,
        r"^(make\s+)?docker",
        r"^docker\s+(build|compose|run)",
    ),
    *_rows(
        Category.DATABASE,
        r"^(make\s+)?migrate",
        r"^(make\s+)?seed",
        r"migrations",
        r"^(npx\s+)?prisma",
        r"^alembic",
        r"^rails\s+db:",
    ),
)

# Checked in order against the lowercased description when no pattern matched.
DESCRIPTION_KEYWORDS: Sequence[Tuple[Tuple[str, ...], Category]] = (
    (("build", "compile"), Category.BUILD),
    (("test",), Category.TEST),
    (("lint", "check"), Category.LINT),
    (("format",), Category.FORMAT),
    (("install", "dependencies"), Category.INSTALL),
    (("clean",), Category.CLEAN),
    (("run", "start", "dev"), Category.RUN),
)


def categorize(command: Command) -> Category:
    """Return the category of ``command`` by name pattern, then by description."""
    name = command.name.strip()
    for pattern, category in COMMAND_PATTERNS:
        if pattern.search(name):
            return category

    description = command.description.lower()
    for keywords, category in DESCRIPTION_KEYWORDS:
        if any(keyword in description for keyword in keywords):
            return category
    return Category.OTHER


__all__ = [
    "COMMAND_PATTERNS",
    "Category",
    "DESCRIPTION_KEYWORDS",
    "IMPORTANT_CATEGORIES",
    "categorize",
]
