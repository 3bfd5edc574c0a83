"""Documentation comment style detector."""

from __future__ import annotations

import re
from typing import Dict, List, Pattern, Sequence, Tuple

from .base import DetectionContext, Detector
from .utils import is_documentable_file
from ..logging import get_logger
from ..models import Convention

MAX_SAMPLES = 50
MIN_DOC_FILES = 5
MIN_TODO_MARKERS = 10

_LOGGER = get_logger("detectors.comments")

# (style key, extensions, regex, description, example)
_DOC_STYLES: Sequence[Tuple[str, frozenset, Pattern[str], str, str]] = (
    (
        "jsdoc",
        frozenset({".js", ".jsx", ".ts", ".tsx"}),
        re.compile(r"/\*\*[\s\S]*?@(param|returns|type|example)"),
        "JSDoc comments for function documentation",
        "/** @param {string} name - User name */",
    ),
    (
        "javadoc",
        frozenset({".java", ".kt"}),
        re.compile(r"/\*\*[\s\S]*?@(param|return|throws|see)"),
        "Javadoc comments for class and method documentation",
        "/** @param name the user name */",
    ),
    (
        "python",
        frozenset({".py"}),
        re.compile(r'"""[\s\S]*?(Args|Returns|Raises|Example):'),
        "Google-style Python docstrings",
        '"""Args:\\n    name: User name\\n"""',
    ),
    (
        "go",
        frozenset({".go"}),
        re.compile(r"^// [A-Z][a-z]+ (is|returns|creates|handles)", re.MULTILINE),
        "Go doc comments (start with function name)",
        "// HandleRequest processes incoming HTTP requests",
    ),
    (
        "xmldoc",
        frozenset({".cs"}),
        re.compile(r"/// <(summary|param|returns)>"),
        "XML documentation comments (C#)",
        "/// <summary>Handles the request</summary>",
    ),
)

_TODO_RE = re.compile(r"(TODO|FIXME|HACK|XXX)[\s:]+", re.IGNORECASE)


class CommentingDetector(Detector):
    """Counts documentation-comment styles and work-item markers."""

    name = "documentation"

    def detect(self, context: DetectionContext) -> List[Convention]:
        style_counts: Dict[str, int] = {key: 0 for key, *_ in _DOC_STYLES}
        todo_count = 0
        fixme_count = 0

        for sample in context.sample(MAX_SAMPLES, is_documentable_file):
            text = sample.text
            for key, extensions, pattern, _, _ in _DOC_STYLES:
                if sample.extension in extensions and pattern.search(text):
                    style_counts[key] += 1
                    break

            for match in _TODO_RE.finditer(text):
                todo_count += 1
                if match.group(1).upper() == "FIXME":
                    fixme_count += 1

        _LOGGER.debug("Work-item markers: %d total, %d FIXME", todo_count, fixme_count)

        conventions: List[Convention] = []
        for key, _, _, description, example in _DOC_STYLES:
            if style_counts[key] >= MIN_DOC_FILES:
                conventions.append(
                    Convention(category="documentation", description=description, example=example)
                )
        if todo_count >= MIN_TODO_MARKERS:
            conventions.append(
                Convention(
                    category="documentation",
                    description="TODO/FIXME comments used for tracking work items",
                )
            )
        return conventions
