"""TypeScript compiler strictness detector."""

from __future__ import annotations

from typing import List

from .base import DetectionContext, Detector
from .utils import load_compiler_options
from ..models import Convention


class TypedConfigDetector(Detector):
    """Turns strictness flags in tsconfig.json into conventions."""

    name = "typescript"

    def detect(self, context: DetectionContext) -> List[Convention]:
        options = load_compiler_options(context.root)
        if not options:
            return []

        conventions: List[Convention] = []
        if options.get("strict") is True:
            conventions.append(
                Convention(
                    category="typescript",
                    description="TypeScript strict mode enabled - maintain strict type safety",
                )
            )
        if options.get("noImplicitAny") is True:
            conventions.append(
                Convention(
                    category="typescript",
                    description="Explicit types required - avoid 'any' type",
                )
            )
        if options.get("noUnusedLocals") is True or options.get("noUnusedParameters") is True:
            conventions.append(
                Convention(
                    category="typescript",
                    description="Unused variables/parameters not allowed - clean up dead code",
                )
            )
        return conventions
