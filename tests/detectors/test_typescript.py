"""Tests for the TypeScript strictness detector."""

from __future__ import annotations

import json

from convscout.detectors import TypedConfigDetector


def test_reports_each_strictness_flag(repo_builder, make_context) -> None:
    repo_builder.write(
        {
            "tsconfig.json": json.dumps(
                {"compilerOptions": {"strict": True, "noImplicitAny": True, "noUnusedParameters": True}}
            )
        }
    )

    conventions = TypedConfigDetector().detect(make_context())

    assert [c.category for c in conventions] == ["typescript"] * 3
    assert conventions[0].description.startswith("TypeScript strict mode enabled")


def test_ignores_false_or_missing_flags(repo_builder, make_context) -> None:
    repo_builder.write({"tsconfig.json": json.dumps({"compilerOptions": {"strict": False}})})

    assert TypedConfigDetector().detect(make_context()) == []


def test_missing_or_invalid_tsconfig_yields_nothing(repo_builder, make_context) -> None:
    assert TypedConfigDetector().detect(make_context()) == []

    repo_builder.write({"tsconfig.json": "[1, 2"})
    assert TypedConfigDetector().detect(make_context()) == []
