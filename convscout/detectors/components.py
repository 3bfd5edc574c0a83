"""UI component conventions detector."""

from __future__ import annotations

from collections import Counter
from typing import List

from .base import DetectionContext, Detector
from ..models import Convention

_FUNCTIONAL_MARKERS = ("export function", "export const", "export default function")
_REACT_EXTENSIONS = {".tsx", ".jsx"}
_BARREL_NAMES = {"index.ts", "index.js"}

MAX_COMPONENT_SAMPLES = 5
MIN_FUNCTIONAL_COMPONENTS = 3
MIN_BARREL_EXPORTS = 3


class ComponentStyleDetector(Detector):
    """Detects React/Vue/Svelte component conventions."""

    name = "components"

    def detect(self, context: DetectionContext) -> List[Convention]:
        counts: Counter[str] = Counter()
        barrel_exports = 0
        for info in context.files:
            if info.is_dir:
                continue
            counts[info.extension] += 1
            if info.name in _BARREL_NAMES:
                directory = info.directory
                if "components" in directory or "ui" in directory:
                    barrel_exports += 1

        conventions: List[Convention] = []
        tsx, jsx = counts[".tsx"], counts[".jsx"]
        if tsx > jsx:
            conventions.append(
                Convention(category="components", description="React components use TypeScript (.tsx)")
            )

        if tsx or jsx:
            functional = 0
            for sample in context.sample(MAX_COMPONENT_SAMPLES, _REACT_EXTENSIONS.__contains__):
                text = sample.text
                if any(marker in text for marker in _FUNCTIONAL_MARKERS):
                    functional += 1
            if functional >= MIN_FUNCTIONAL_COMPONENTS:
                conventions.append(
                    Convention(
                        category="components",
                        description="Use functional components (not class components)",
                    )
                )

        if counts[".vue"]:
            conventions.append(
                Convention(category="components", description="Vue single-file components (.vue)")
            )
        if counts[".svelte"]:
            conventions.append(Convention(category="components", description="Svelte components (.svelte)"))

        if barrel_exports >= MIN_BARREL_EXPORTS:
            conventions.append(
                Convention(
                    category="structure",
                    description="Components use barrel exports (index.ts) for cleaner imports",
                    example="import { Button, Card } from '@/components'",
                )
            )
        return conventions
