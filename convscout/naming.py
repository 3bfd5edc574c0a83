"""Filename stem classification."""

from __future__ import annotations

from enum import Enum
from typing import Sequence


class NamingPattern(str, Enum):
    PASCAL_CASE = "PascalCase"
    CAMEL_CASE = "camelCase"
    KEBAB_CASE = "kebab-case"
    SNAKE_CASE = "snake_case"
    UNKNOWN = "unknown"


COMPONENT_EXAMPLE_WORDS = (("user", "card"), ("date", "picker"))
UTILITY_EXAMPLE_WORDS = (("format", "date"), ("use", "auth"))


def _is_ascii_upper(char: str) -> bool:
    return "A" <= char <= "Z"


def _is_ascii_lower(char: str) -> bool:
    return "a" <= char <= "z"


def classify_name(stem: str) -> NamingPattern:
    """Return the naming pattern of a bare filename stem."""
    if len(stem) < 2:
        return NamingPattern.UNKNOWN

    has_hyphen = "-" in stem
    has_underscore = "_" in stem

    if has_hyphen and not has_underscore:
        return NamingPattern.KEBAB_CASE
    if has_underscore and not has_hyphen:
        if stem == stem.lower():
            return NamingPattern.SNAKE_CASE
        return NamingPattern.UNKNOWN
    if has_hyphen or has_underscore:
        return NamingPattern.UNKNOWN

    first = stem[0]
    if _is_ascii_upper(first):
        return NamingPattern.PASCAL_CASE
    if _is_ascii_lower(first) and any(_is_ascii_upper(char) for char in stem[1:]):
        return NamingPattern.CAMEL_CASE
    return NamingPattern.UNKNOWN


def _join_words(pattern: NamingPattern, words: Sequence[str]) -> str:
    if pattern is NamingPattern.PASCAL_CASE:
        return "".join(word.capitalize() for word in words)
    if pattern is NamingPattern.CAMEL_CASE:
        return words[0] + "".join(word.capitalize() for word in words[1:])
    if pattern is NamingPattern.KEBAB_CASE:
        return "-".join(words)
    return "_".join(words)


def pattern_example(
    pattern: NamingPattern,
    names: Sequence[Sequence[str]] = COMPONENT_EXAMPLE_WORDS,
    extension: str = ".tsx",
) -> str:
    """Filenames built from ``names`` (lowercase word lists) in the style of ``pattern``."""
    if pattern is NamingPattern.UNKNOWN:
        return ""
    return ", ".join(_join_words(pattern, words) + extension for words in names)


__all__ = [
    "COMPONENT_EXAMPLE_WORDS",
    "NamingPattern",
    "UTILITY_EXAMPLE_WORDS",
    "classify_name",
    "pattern_example",
]
