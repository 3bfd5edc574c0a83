"""Ordering, de-duplication and quick-reference selection of commands."""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Set

from .categories import IMPORTANT_CATEGORIES, Category, categorize
from ..models import Command

_SUBDIR_MARKER = " (in "
_ALIASED_MANAGERS = ("yarn ", "pnpm ", "bun ")


def normalize_command(name: str) -> str:
    """Return the key used to detect duplicate commands."""
    key = name.lower().strip()

    index = key.find(_SUBDIR_MARKER)
    if index > 0:
        key = key[:index]

    for manager in _ALIASED_MANAGERS:
        if key.startswith(manager):
            key = "npm " + key[len(manager):]
            break
    # Aliases are leading prefixes; "npm run " is dropped wherever it appears.
    return key.replace("npm run ", "npm ")


def prioritize(commands: Iterable[Command]) -> List[Command]:
    """Sort by category priority then name, dropping later duplicates."""
    ranked = sorted(commands, key=lambda command: (categorize(command).priority, command.name))

    seen: Set[str] = set()
    result: List[Command] = []
    for command in ranked:
        key = normalize_command(command.name)
        if key in seen:
            continue
        seen.add(key)
        result.append(command)
    return result


def quick_reference(commands: Iterable[Command], max_n: int) -> List[Command]:
    """Return at most ``max_n`` commands, covering the important categories first."""
    if max_n <= 0:
        return []
    prioritized = prioritize(commands)
    if len(prioritized) <= max_n:
        return prioritized

    result: List[Command] = []
    covered: Set[Category] = set()
    for command in prioritized:
        category = categorize(command)
        if category in IMPORTANT_CATEGORIES and category not in covered:
            result.append(command)
            covered.add(category)
        if len(result) >= max_n:
            break

    added = {normalize_command(command.name) for command in result}
    for command in prioritized:
        if len(result) >= max_n:
            break
        key = normalize_command(command.name)
        if key not in added:
            result.append(command)
            added.add(key)
    return result


def group_by_category(commands: Sequence[Command]) -> Dict[str, List[Command]]:
    """Group commands under category display names, in first-seen order."""
    groups: Dict[str, List[Command]] = {}
    for command in commands:
        groups.setdefault(categorize(command).value, []).append(command)
    return groups


__all__ = ["group_by_category", "normalize_command", "prioritize", "quick_reference"]
