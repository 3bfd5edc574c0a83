"""Tests for the error handling detector."""

from __future__ import annotations

import pytest

from convscout.detectors import ErrorHandlingDetector

_GO = """
package svc

func Load() error {
    if err != nil {
        return err
    }
    return nil
}
"""


def test_detects_go_error_checks(repo_builder, make_context) -> None:
    repo_builder.write({f"svc/file{i}.go": _GO for i in range(5)})

    conventions = ErrorHandlingDetector().detect(make_context())

    assert [(c.category, c.description) for c in conventions] == [
        ("error-handling", "Go-style explicit error checking (if err != nil)")
    ]


def test_go_error_checks_need_five_files(repo_builder, make_context) -> None:
    repo_builder.write({f"svc/file{i}.go": _GO for i in range(4)})

    assert ErrorHandlingDetector().detect(make_context()) == []


def test_detects_result_types_and_async_await(repo_builder, make_context) -> None:
    files = {f"src/lib{i}.rs": "fn f() -> Result<(), Error> { Ok(()) }\n" for i in range(3)}
    files.update(
        {f"web/api{i}.ts": "export async function load() { await fetch('/x'); }\n" for i in range(5)}
    )
    repo_builder.write(files)

    conventions = ErrorHandlingDetector().detect(make_context())

    assert [(c.category, c.description) for c in conventions] == [
        ("error-handling", "Result/Option types for error handling (Rust-style)"),
        ("async", "Async/await pattern for asynchronous operations"),
    ]


@pytest.mark.parametrize(("count", "detected"), [(3, True), (2, False)])
def test_result_types_need_three_files(repo_builder, make_context, count: int, detected: bool) -> None:
    repo_builder.write(
        {f"src/lib{i}.rs": "fn f() -> Result<(), Error> { Ok(()) }\n" for i in range(count)}
    )

    conventions = ErrorHandlingDetector().detect(make_context())

    expected = ["Result/Option types for error handling (Rust-style)"] if detected else []
    assert [c.description for c in conventions] == expected


@pytest.mark.parametrize(("count", "detected"), [(5, True), (4, False)])
def test_async_await_needs_five_files(repo_builder, make_context, count: int, detected: bool) -> None:
    repo_builder.write(
        {f"web/api{i}.ts": "export async function load() { await fetch('/x'); }\n" for i in range(count)}
    )

    conventions = ErrorHandlingDetector().detect(make_context())

    expected = [("async", "Async/await pattern for asynchronous operations")] if detected else []
    assert [(c.category, c.description) for c in conventions] == expected
