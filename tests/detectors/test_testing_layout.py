"""Tests for the test layout detector."""

from __future__ import annotations

from convscout.detectors import TestLayoutDetector


def test_detects_colocated_dot_test_files(repo_builder, make_context) -> None:
    repo_builder.write(
        {
            "src/Button.test.tsx": "",
            "src/utils.test.ts": "",
            "src/api/client.test.ts": "",
            "src/api/client.ts": "",
        }
    )

    conventions = TestLayoutDetector().detect(make_context())

    assert [c.description for c in conventions] == [
        "Test files use .test suffix",
        "Tests are colocated with source files",
    ]
    assert conventions[0].example == "Button.test.tsx, utils.test.ts"


def test_detects_dedicated_test_directories(repo_builder, make_context) -> None:
    repo_builder.write(
        {
            "tests/unit/a.spec.ts": "",
            "tests/unit/b.spec.ts": "",
            "packages/core/__tests__/c.spec.ts": "",
            "pkg/handler_test.go": "",
        }
    )

    conventions = TestLayoutDetector().detect(make_context())

    assert [c.description for c in conventions] == [
        "Test files use .spec suffix",
        "Tests are in dedicated test directories",
    ]


def test_tied_suffixes_and_small_samples_yield_nothing(repo_builder, make_context) -> None:
    repo_builder.write({"src/a.test.ts": "", "src/b.spec.ts": ""})

    assert TestLayoutDetector().detect(make_context()) == []
