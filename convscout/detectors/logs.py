"""Logging framework detector."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Pattern, Sequence

from .base import DetectionContext, Detector
from .utils import is_source_file
from ..models import Convention

MAX_SAMPLES = 30
MIN_LOGGING_FILES = 3

_JS = frozenset({".js", ".jsx", ".ts", ".tsx"})
_JAVA = frozenset({".java"})
_PY = frozenset({".py"})
_GO = frozenset({".go"})


@dataclass(frozen=True)
class LoggingPattern:
    name: str
    extensions: FrozenSet[str]
    regex: Pattern[str]


# Row order is the tie-break: at equal counts the earlier row wins.
LOGGING_PATTERNS: Sequence[LoggingPattern] = (
    LoggingPattern("console", _JS, re.compile(r"console\.(log|info|warn|error|debug)\(")),
    LoggingPattern("winston", _JS, re.compile(r"(logger|log)\.(info|warn|error|debug)\(")),
    LoggingPattern("pino", _JS, re.compile(r"(logger|log)\.(info|warn|error|debug|fatal)\(")),
    LoggingPattern("log4j", _JAVA, re.compile(r"(logger|log)\.(info|warn|error|debug|trace)\(")),
    LoggingPattern("slf4j", _JAVA, re.compile(r"(log|logger)\.(info|warn|error|debug)\(")),
    LoggingPattern("python", _PY, re.compile(r"logging\.(info|warning|error|debug|critical)\(")),
    LoggingPattern(
        "python-logger",
        _PY,
        re.compile(
            r"logging\.getLogger\(|\b(?:logger|log|_logger|LOGGER)\."
            r"(?:debug|info|warning|error|exception|critical)\("
        ),
    ),
    LoggingPattern("go-log", _GO, re.compile(r"log\.(Print|Printf|Println|Fatal|Panic)\(")),
    LoggingPattern("go-slog", _GO, re.compile(r"slog\.(Info|Warn|Error|Debug)\(")),
    LoggingPattern("go-zap", _GO, re.compile(r"(logger|zap)\.(Info|Warn|Error|Debug)\(")),
    LoggingPattern(
        "go-zerolog", _GO, re.compile(r"(log|logger)\.(Info|Warn|Error|Debug)\(\)\.(Msg|Msgf)\(")
    ),
    LoggingPattern("rust-log", frozenset({".rs"}), re.compile(r"(info|warn|error|debug|trace)!\(")),
    LoggingPattern(
        "csharp",
        frozenset({".cs"}),
        re.compile(r"(logger|_logger)\.(Log|LogInformation|LogWarning|LogError)\("),
    ),
    LoggingPattern(
        "ruby", frozenset({".rb"}), re.compile(r"(logger|Rails\.logger)\.(info|warn|error|debug)\(")
    ),
)

LOGGER_DESCRIPTIONS: Dict[str, str] = {
    "console": "console.log/warn/error for logging",
    "winston": "Winston logger with structured logging",
    "pino": "Pino logger (fast JSON logging)",
    "log4j": "Log4j logging framework",
    "slf4j": "SLF4J logging facade",
    "python": "Python logging module",
    "go-log": "Go standard library log package",
    "go-slog": "Go structured logging (slog)",
    "go-zap": "Uber's Zap logger",
    "go-zerolog": "Zerolog (zero-allocation JSON logging)",
    "rust-log": "Rust log crate macros",
    "csharp": "Microsoft.Extensions.Logging",
    "ruby": "Ruby Logger / Rails.logger",
}

_REPORTED_AS = {"python-logger": "python"}


class LoggingDetector(Detector):
    """Picks the logging framework used by the most sampled files."""

    name = "logging"

    def detect(self, context: DetectionContext) -> List[Convention]:
        counts: Dict[str, int] = {pattern.name: 0 for pattern in LOGGING_PATTERNS}
        for sample in context.sample(MAX_SAMPLES, is_source_file):
            text = sample.text
            for pattern in LOGGING_PATTERNS:
                if sample.extension in pattern.extensions and pattern.regex.search(text):
                    counts[pattern.name] += 1

        winner = choose_logger(counts)
        if winner is None:
            return []
        reported = _REPORTED_AS.get(winner, winner)
        return [Convention(category="logging", description=LOGGER_DESCRIPTIONS[reported])]


def choose_logger(counts: Dict[str, int]) -> Optional[str]:
    """Return the first pattern, in table order, holding the maximum qualifying count."""
    best_name: Optional[str] = None
    best_count = 0
    for pattern in LOGGING_PATTERNS:
        count = counts.get(pattern.name, 0)
        if count > best_count and count >= MIN_LOGGING_FILES:
            best_name = pattern.name
            best_count = count
    return best_name
