"""Convention detector implementations and the built-in registry."""

from __future__ import annotations

from typing import Callable, List, Sequence

from .architecture import ArchitectureDetector
from .base import DetectionContext, Detector
from .comments import CommentingDetector
from .components import ComponentStyleDetector
from .error_handling import ErrorHandlingDetector
from .file_naming import FileNamingDetector
from .imports import ImportStyleDetector
from .logs import LoggingDetector
from .style import StyleToolingDetector
from .testing import TestLayoutDetector
from .typescript import TypedConfigDetector

# Run order determines the order of conventions in the report.
_BUILTIN_FACTORIES: Sequence[Callable[[], Detector]] = (
    FileNamingDetector,
    ImportStyleDetector,
    TypedConfigDetector,
    TestLayoutDetector,
    StyleToolingDetector,
    ComponentStyleDetector,
    CommentingDetector,
    LoggingDetector,
    ErrorHandlingDetector,
    ArchitectureDetector,
)


def default_detectors() -> List[Detector]:
    """Return fresh instances of every built-in detector in run order."""
    return [factory() for factory in _BUILTIN_FACTORIES]


__all__ = [
    "ArchitectureDetector",
    "CommentingDetector",
    "ComponentStyleDetector",
    "DetectionContext",
    "Detector",
    "ErrorHandlingDetector",
    "FileNamingDetector",
    "ImportStyleDetector",
    "LoggingDetector",
    "StyleToolingDetector",
    "TestLayoutDetector",
    "TypedConfigDetector",
    "default_detectors",
]
