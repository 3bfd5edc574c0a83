"""Markdown and JSON rendering of analysis reports."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List

from jinja2 import Environment, FileSystemLoader

from .commands import group_by_category
from .models import Convention, Report

_TEMPLATES_DIR = Path(__file__).with_name("templates")
_REPORT_TEMPLATE = "report.md.j2"


def render_markdown(report: Report, *, title: str = "Repository conventions") -> str:
    """Render ``report`` as a markdown quick-reference document."""
    template = _create_env().get_template(_REPORT_TEMPLATE)
    rendered = template.render(
        title=title,
        conventions=_group_conventions(report.conventions),
        commit=report.git.commit,
        branch=report.git.branch,
        commands=group_by_category(report.commands),
        cancelled=report.cancelled,
    )
    return rendered.strip() + "\n"


def render_json(report: Report) -> str:
    return json.dumps(report.to_dict(), indent=2, ensure_ascii=False) + "\n"


def _group_conventions(conventions: tuple[Convention, ...]) -> Dict[str, List[Convention]]:
    grouped: Dict[str, List[Convention]] = {}
    for convention in conventions:
        grouped.setdefault(convention.category, []).append(convention)
    return grouped


def _create_env() -> Environment:
    loader = FileSystemLoader(str(_TEMPLATES_DIR))
    return Environment(loader=loader, autoescape=False, trim_blocks=True, lstrip_blocks=True)


__all__ = ["render_json", "render_markdown"]
