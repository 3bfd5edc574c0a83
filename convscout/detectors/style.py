"""Formatter and linter configuration detector."""

from __future__ import annotations

from typing import List, Sequence

from .base import DetectionContext, Detector
from ..models import Convention

_ESLINT_FILES: Sequence[str] = (
    ".eslintrc",
    ".eslintrc.js",
    ".eslintrc.cjs",
    ".eslintrc.json",
    ".eslintrc.yml",
    ".eslintrc.yaml",
    "eslint.config.js",
    "eslint.config.mjs",
    "eslint.config.cjs",
)

_PRETTIER_FILES: Sequence[str] = (
    ".prettierrc",
    ".prettierrc.js",
    ".prettierrc.cjs",
    ".prettierrc.json",
    ".prettierrc.yml",
    ".prettierrc.yaml",
    "prettier.config.js",
    "prettier.config.mjs",
)


class StyleToolingDetector(Detector):
    """Checks the repository root for style tooling configuration."""

    name = "code-style"

    def detect(self, context: DetectionContext) -> List[Convention]:
        root = context.root
        conventions: List[Convention] = []

        if any((root / name).is_file() for name in _ESLINT_FILES):
            conventions.append(
                Convention(category="code-style", description="ESLint configured - follow linting rules")
            )
        if any((root / name).is_file() for name in _PRETTIER_FILES):
            conventions.append(
                Convention(
                    category="code-style",
                    description="Prettier configured - code formatting is automated",
                )
            )
        if (root / ".editorconfig").is_file():
            conventions.append(
                Convention(
                    category="code-style",
                    description="EditorConfig present - editor settings are standardized",
                )
            )
        if any(not info.is_dir and info.extension == ".go" for info in context.files):
            conventions.append(
                Convention(
                    category="code-style",
                    description="Go project - use 'go fmt' or 'gofmt' for formatting",
                )
            )
        return conventions
