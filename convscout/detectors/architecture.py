"""Architectural layout detector."""

from __future__ import annotations

from typing import List, Set

from .base import DetectionContext, Detector
from ..models import Convention


class ArchitectureDetector(Detector):
    """Infers layering from directory names alone."""

    name = "architecture"

    def detect(self, context: DetectionContext) -> List[Convention]:
        dirs = _directory_names(context)
        conventions: List[Convention] = []

        if {"models", "views", "controllers"} <= dirs:
            conventions.append(
                Convention(category="architecture", description="MVC (Model-View-Controller) architecture")
            )
        if "domain" in dirs and dirs & {"infrastructure", "adapters"}:
            conventions.append(
                Convention(
                    category="architecture",
                    description="Clean/Hexagonal architecture (domain separation)",
                )
            )
        if dirs & {"features", "modules"}:
            conventions.append(
                Convention(category="architecture", description="Feature/Module-based architecture")
            )
        if dirs & {"repositories", "repository"}:
            conventions.append(
                Convention(category="architecture", description="Repository pattern for data access")
            )
        if dirs & {"services", "service"}:
            conventions.append(
                Convention(category="architecture", description="Service layer for business logic")
            )
        return conventions


def _directory_names(context: DetectionContext) -> Set[str]:
    names: Set[str] = set()
    for info in context.files:
        if info.is_dir:
            names.add(info.name.lower())
        names.update(part.lower() for part in info.directory.split("/") if part)
    return names
