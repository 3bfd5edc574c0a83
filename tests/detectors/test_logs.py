"""Tests for the logging framework detector."""

from __future__ import annotations

from convscout.detectors import LoggingDetector
from convscout.detectors.logs import LOGGING_PATTERNS, choose_logger

_PY_LOGGER = """
import logging

logger = logging.getLogger(__name__)


def run():
    logger.info("running")
"""


def test_table_order_breaks_ties() -> None:
    counts = {pattern.name: 0 for pattern in LOGGING_PATTERNS}
    counts.update({"winston": 4, "pino": 4, "console": 3})

    assert choose_logger(counts) == "winston"


def test_choose_logger_requires_three_files() -> None:
    assert choose_logger({"console": 2}) is None
    assert choose_logger({}) is None


def test_module_loggers_are_reported_as_python_logging(repo_builder, make_context) -> None:
    repo_builder.write({f"app/mod{i}.py": _PY_LOGGER for i in range(3)})

    conventions = LoggingDetector().detect(make_context())

    assert [(c.category, c.description) for c in conventions] == [
        ("logging", "Python logging module")
    ]


def test_two_logging_files_are_not_enough(repo_builder, make_context) -> None:
    repo_builder.write({f"app/mod{i}.py": _PY_LOGGER for i in range(2)})

    assert LoggingDetector().detect(make_context()) == []


def test_java_files_are_not_sampled(repo_builder, make_context) -> None:
    body = 'class Svc { void run() { logger.info("x"); } }\n'
    repo_builder.write({f"src/Svc{i}.java": body for i in range(3)})

    assert LoggingDetector().detect(make_context()) == []


def test_non_source_files_do_not_use_up_the_sample(repo_builder, make_context) -> None:
    files = {f"android/A{i:02d}.java": "class A {}\n" for i in range(30)}
    files.update({f"web/s{i}.ts": "console.log('ready');\n" for i in range(3)})
    repo_builder.write(files)

    conventions = LoggingDetector().detect(make_context())

    assert [c.description for c in conventions] == ["console.log/warn/error for logging"]


def test_javascript_logger_calls_resolve_to_winston(repo_builder, make_context) -> None:
    body = "export function go() { logger.info('x'); }\n"
    repo_builder.write({f"src/svc{i}.ts": body for i in range(3)})

    conventions = LoggingDetector().detect(make_context())

    assert [c.description for c in conventions] == ["Winston logger with structured logging"]
