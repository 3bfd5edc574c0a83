"""Tests for the component style detector."""

from __future__ import annotations

import pytest

from convscout.detectors import ComponentStyleDetector


def test_detects_typescript_functional_components_and_barrels(repo_builder, make_context) -> None:
    repo_builder.write(
        {
            "src/components/Button.tsx": "export function Button() { return null; }\n",
            "src/components/Card.tsx": "export const Card = () => null;\n",
            "src/components/Modal.tsx": "export default function Modal() { return null; }\n",
            "src/components/index.ts": "export * from './Button';\n",
            "src/components/forms/index.ts": "export * from './Input';\n",
            "src/ui/index.js": "export * from './Icon';\n",
        }
    )

    conventions = ComponentStyleDetector().detect(make_context())

    assert [(c.category, c.description) for c in conventions] == [
        ("components", "React components use TypeScript (.tsx)"),
        ("components", "Use functional components (not class components)"),
        ("structure", "Components use barrel exports (index.ts) for cleaner imports"),
    ]


def test_class_components_do_not_count_as_functional(repo_builder, make_context) -> None:
    repo_builder.write(
        {
            "src/A.jsx": "class A extends React.Component {}\n",
            "src/B.jsx": "class B extends React.Component {}\n",
            "src/C.jsx": "export function C() { return null; }\n",
        }
    )

    assert ComponentStyleDetector().detect(make_context()) == []


def test_reports_vue_and_svelte_components(repo_builder, make_context) -> None:
    repo_builder.write({"src/App.vue": "<template />\n", "src/Nav.svelte": "<nav />\n"})

    descriptions = [c.description for c in ComponentStyleDetector().detect(make_context())]

    assert descriptions == [
        "Vue single-file components (.vue)",
        "Svelte components (.svelte)",
    ]


@pytest.mark.parametrize(("count", "detected"), [(3, True), (2, False)])
def test_functional_components_need_three_files(
    repo_builder, make_context, count: int, detected: bool
) -> None:
    repo_builder.write(
        {f"src/components/Widget{i}.tsx": f"export function Widget{i}() {{ return null; }}\n" for i in range(count)}
    )

    descriptions = [c.description for c in ComponentStyleDetector().detect(make_context())]

    expected = ["React components use TypeScript (.tsx)"]
    if detected:
        expected.append("Use functional components (not class components)")
    assert descriptions == expected


@pytest.mark.parametrize(("count", "detected"), [(3, True), (2, False)])
def test_barrel_exports_need_three_index_files(
    repo_builder, make_context, count: int, detected: bool
) -> None:
    repo_builder.write(
        {f"src/components/group{i}/index.ts": "export * from './Item';\n" for i in range(count)}
    )

    descriptions = [c.description for c in ComponentStyleDetector().detect(make_context())]

    expected = ["Components use barrel exports (index.ts) for cleaner imports"] if detected else []
    assert descriptions == expected
