"""Base classes for convention detectors."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator, List, Sequence

from ..models import Convention, FileInfo
from ..sampler import Sample, Sampler


@dataclass(frozen=True)
class DetectionContext:
    """Read-only inputs shared by every detector in one analysis run."""

    root: Path
    files: Sequence[FileInfo]
    sampler: Sampler

    def sample(self, max_samples: int, accept: Callable[[str], bool]) -> Iterator[Sample]:
        """Start a fresh bounded sampler pass."""
        return self.sampler.samples(max_samples, accept)


class Detector(ABC):
    """Contract for detectors that turn repository evidence into conventions."""

    name: str = ""

    @abstractmethod
    def detect(self, context: DetectionContext) -> List[Convention]:
        """Return the conventions whose evidence met this detector's thresholds."""
