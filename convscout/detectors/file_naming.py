"""File naming convention detector."""

from __future__ import annotations

from collections import Counter
from typing import List, Optional, Tuple

from .base import DetectionContext, Detector
from .utils import is_source_file
from ..models import Convention
from ..naming import (
    COMPONENT_EXAMPLE_WORDS,
    UTILITY_EXAMPLE_WORDS,
    NamingPattern,
    classify_name,
    pattern_example,
)

_COMPONENT_DIRS = {"components", "ui", "views", "pages", "layouts", "features", "modules"}
_UTILITY_DIRS = {"utils", "lib", "helpers", "hooks", "services", "api"}
_TEST_DIRS = {"test", "tests", "__tests__"}
_SKIPPED_STEMS = {"index", "main"}

MIN_FILES = 3


class FileNamingDetector(Detector):
    """Finds the dominant naming style for component and utility files."""

    name = "file-naming"

    def detect(self, context: DetectionContext) -> List[Convention]:
        components: Counter[NamingPattern] = Counter()
        utilities: Counter[NamingPattern] = Counter()

        for info in context.files:
            if info.is_dir or not is_source_file(info.extension):
                continue
            stem = info.stem
            if stem in _SKIPPED_STEMS:
                continue
            pattern = classify_name(stem)
            if pattern is NamingPattern.UNKNOWN:
                continue

            parts = {part.lower() for part in info.directory.split("/") if part}
            if parts & _TEST_DIRS or _looks_like_test_stem(stem):
                continue
            if parts & _COMPONENT_DIRS:
                components[pattern] += 1
            elif parts & _UTILITY_DIRS:
                utilities[pattern] += 1

        conventions: List[Convention] = []
        buckets = (
            ("Components", components, COMPONENT_EXAMPLE_WORDS, ".tsx"),
            ("Utility files", utilities, UTILITY_EXAMPLE_WORDS, ".ts"),
        )
        for label, counts, example_words, extension in buckets:
            winner = dominant_pattern(counts)
            if winner is None:
                continue
            pattern, count = winner
            if count >= MIN_FILES:
                conventions.append(
                    Convention(
                        category="naming",
                        description=f"{label} use {pattern.value} naming",
                        example=pattern_example(pattern, example_words, extension),
                    )
                )
        return conventions


def _looks_like_test_stem(stem: str) -> bool:
    return ".test" in stem or ".spec" in stem or stem.endswith("_test")


def dominant_pattern(counts: Counter[NamingPattern]) -> Optional[Tuple[NamingPattern, int]]:
    """Return the pattern holding the unique maximum count, if any."""
    if not counts:
        return None
    ranked = counts.most_common(2)
    if len(ranked) > 1 and ranked[0][1] == ranked[1][1]:
        return None
    return ranked[0]
