"""Developer command categorization, ranking and discovery."""

from __future__ import annotations

from .categories import Category, categorize
from .discovery import discover_commands
from .prioritizer import group_by_category, normalize_command, prioritize, quick_reference

__all__ = [
    "Category",
    "categorize",
    "discover_commands",
    "group_by_category",
    "normalize_command",
    "prioritize",
    "quick_reference",
]
