"""Shared helpers for detector implementations."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, FrozenSet, Optional

SOURCE_EXTENSIONS: FrozenSet[str] = frozenset(
    {".js", ".jsx", ".ts", ".tsx", ".go", ".py", ".rs", ".rb", ".vue", ".svelte"}
)

DOCUMENTABLE_EXTENSIONS: FrozenSet[str] = SOURCE_EXTENSIONS | frozenset(
    {".java", ".kt", ".scala", ".cs", ".cpp", ".c", ".h", ".hpp", ".swift", ".php"}
)


def is_source_file(extension: str) -> bool:
    return extension in SOURCE_EXTENSIONS


def is_documentable_file(extension: str) -> bool:
    return extension in DOCUMENTABLE_EXTENSIONS


def load_compiler_options(root: Path) -> Optional[Dict[str, Any]]:
    """Return ``compilerOptions`` from the root tsconfig.json, or None when unusable."""
    tsconfig = root / "tsconfig.json"
    try:
        data = json.loads(tsconfig.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return None
    if not isinstance(data, dict):
        return None
    options = data.get("compilerOptions")
    if not isinstance(options, dict):
        return {}
    return options
