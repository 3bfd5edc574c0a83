"""Import style detector."""

from __future__ import annotations

import re
from typing import List

from .base import DetectionContext, Detector
from .utils import is_source_file, load_compiler_options
from ..models import Convention

_IMPORT_RE = re.compile(r"""(?:import|from)\s+['"]([^'"]+)['"]""")

MAX_SAMPLES = 20
MIN_ALIAS_IMPORTS = 5


class ImportStyleDetector(Detector):
    """Reports path aliases from tsconfig.json and the dominant import prefix."""

    name = "imports"

    def detect(self, context: DetectionContext) -> List[Convention]:
        conventions = self._from_tsconfig(context)

        at_imports = 0
        tilde_imports = 0
        relative_imports = 0
        for sample in context.sample(MAX_SAMPLES, is_source_file):
            for target in _IMPORT_RE.findall(sample.text):
                if target.startswith("@"):
                    at_imports += 1
                elif target.startswith("~/"):
                    tilde_imports += 1
                elif target.startswith(("./", "../")):
                    relative_imports += 1

        if at_imports > relative_imports and at_imports >= MIN_ALIAS_IMPORTS:
            conventions.append(
                Convention(
                    category="imports",
                    description="Prefer @/ path alias for imports over relative paths",
                    example="import { utils } from '@/lib/utils'",
                )
            )
        elif tilde_imports > relative_imports and tilde_imports >= MIN_ALIAS_IMPORTS:
            conventions.append(
                Convention(
                    category="imports",
                    description="Prefer ~/ path alias for imports over relative paths",
                    example="import { utils } from '~/lib/utils'",
                )
            )
        return conventions

    @staticmethod
    def _from_tsconfig(context: DetectionContext) -> List[Convention]:
        options = load_compiler_options(context.root)
        if not options:
            return []

        conventions: List[Convention] = []
        paths = options.get("paths")
        if isinstance(paths, dict) and paths:
            aliases = [str(alias).removesuffix("/*") for alias in paths]
            conventions.append(
                Convention(
                    category="imports",
                    description="Path aliases configured: " + ", ".join(aliases),
                    example=f"import {{ Button }} from '{aliases[0]}/components/Button'",
                )
            )

        base_url = options.get("baseUrl")
        if isinstance(base_url, str) and base_url:
            conventions.append(
                Convention(
                    category="imports",
                    description=f"Absolute imports enabled with baseUrl: {base_url}",
                )
            )
        return conventions
