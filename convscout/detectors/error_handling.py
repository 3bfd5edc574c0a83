"""Error handling and async idiom detector."""

from __future__ import annotations

import re
from typing import List

from .base import DetectionContext, Detector
from .utils import is_source_file
from ..logging import get_logger
from ..models import Convention

MAX_SAMPLES = 30
MIN_GO_ERROR_FILES = 5
MIN_RESULT_FILES = 3
MIN_ASYNC_FILES = 5

_TRY_RE = re.compile(r"\btry\s*[{:]")
_GO_ERROR_RE = re.compile(r"if\s+err\s*!=\s*nil")
_RESULT_RE = re.compile(r"Result<|Result::")
_ASYNC_RE = re.compile(r"async\s+(function|def|\(|=>)|await\s+")

_LOGGER = get_logger("detectors.error_handling")


class ErrorHandlingDetector(Detector):
    """Counts files using each error-handling idiom."""

    name = "error-handling"

    def detect(self, context: DetectionContext) -> List[Convention]:
        try_blocks = 0
        go_errors = 0
        result_types = 0
        async_await = 0

        for sample in context.sample(MAX_SAMPLES, is_source_file):
            text = sample.text
            if _TRY_RE.search(text):
                try_blocks += 1
            if _GO_ERROR_RE.search(text):
                go_errors += 1
            if _RESULT_RE.search(text):
                result_types += 1
            if _ASYNC_RE.search(text):
                async_await += 1

        _LOGGER.debug(
            "Error idioms: try=%d go=%d result=%d async=%d",
            try_blocks,
            go_errors,
            result_types,
            async_await,
        )

        conventions: List[Convention] = []
        if go_errors >= MIN_GO_ERROR_FILES:
            conventions.append(
                Convention(
                    category="error-handling",
                    description="Go-style explicit error checking (if err != nil)",
                    example='if err != nil { return fmt.Errorf("context: %w", err) }',
                )
            )
        if result_types >= MIN_RESULT_FILES:
            conventions.append(
                Convention(
                    category="error-handling",
                    description="Result/Option types for error handling (Rust-style)",
                )
            )
        if async_await >= MIN_ASYNC_FILES:
            conventions.append(
                Convention(
                    category="async",
                    description="Async/await pattern for asynchronous operations",
                )
            )
        return conventions
