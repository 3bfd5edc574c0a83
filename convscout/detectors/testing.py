"""Test naming and placement detector."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .base import DetectionContext, Detector
from ..models import Convention

MIN_NAMED_TESTS = 2
MIN_LOCATED_TESTS = 3

_NAMING_CONVENTIONS: Tuple[Tuple[str, str, str], ...] = (
    (".test", "Test files use .test suffix", "Button.test.tsx, utils.test.ts"),
    (".spec", "Test files use .spec suffix", "Button.spec.tsx, utils.spec.ts"),
    ("_test", "Test files use _test suffix (Go style)", "handler_test.go, utils_test.go"),
)


class TestLayoutDetector(Detector):
    """Detects how test files are named and where they live."""

    name = "testing"
    __test__ = False

    def detect(self, context: DetectionContext) -> List[Convention]:
        suffix_counts = [0] * len(_NAMING_CONVENTIONS)
        dedicated = 0
        colocated = 0

        for info in context.files:
            if info.is_dir:
                continue
            stem = info.stem
            for index, (suffix, _, _) in enumerate(_NAMING_CONVENTIONS):
                if stem.endswith(suffix):
                    suffix_counts[index] += 1
                    break
            else:
                continue

            if _in_dedicated_test_dir(info.directory):
                dedicated += 1
            else:
                colocated += 1

        conventions: List[Convention] = []
        winner = _strict_max(suffix_counts)
        if winner is not None and suffix_counts[winner] >= MIN_NAMED_TESTS:
            _, description, example = _NAMING_CONVENTIONS[winner]
            conventions.append(Convention(category="testing", description=description, example=example))

        if colocated > dedicated and colocated >= MIN_LOCATED_TESTS:
            conventions.append(
                Convention(category="testing", description="Tests are colocated with source files")
            )
        elif dedicated > colocated and dedicated >= MIN_LOCATED_TESTS:
            conventions.append(
                Convention(category="testing", description="Tests are in dedicated test directories")
            )
        return conventions


def _in_dedicated_test_dir(directory: str) -> bool:
    padded = f"{directory}/"
    return (
        "__tests__" in directory
        or "/test/" in padded
        or "/tests/" in padded
        or directory.startswith("test")
    )


def _strict_max(counts: Sequence[int]) -> Optional[int]:
    best = max(counts, default=0)
    if best == 0 or counts.count(best) > 1:
        return None
    return counts.index(best)
