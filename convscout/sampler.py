"""Bounded sampling of repository file contents for detectors."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator, Optional, Protocol, Sequence

from .logging import get_logger
from .models import FileInfo
from .reader import read_bytes

MAX_FILE_BYTES = 500_000

_LOGGER = get_logger("sampler")


class CancellationSignal(Protocol):
    """Anything exposing ``is_set()``, e.g. :class:`threading.Event`."""

    def is_set(self) -> bool:
        ...


class AnalysisCancelled(RuntimeError):
    """Raised inside a sampler pass once the caller requests cancellation."""


@dataclass(frozen=True)
class Sample:
    """One sampled file."""

    path: str
    extension: str
    content: bytes

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


class Sampler:
    """Yields bounded passes over the inventory, one pass per detector."""

    def __init__(
        self,
        root: Path,
        files: Sequence[FileInfo],
        *,
        max_bytes: int = MAX_FILE_BYTES,
        reader: Callable[[Path, int], bytes] = read_bytes,
        cancel: Optional[CancellationSignal] = None,
    ) -> None:
        self.root = root
        self.files = files
        self.max_bytes = max_bytes
        self._reader = reader
        self._cancel = cancel

    def samples(self, max_samples: int, accept: Callable[[str], bool]) -> Iterator[Sample]:
        """Yield up to ``max_samples`` readable files whose extension passes ``accept``."""
        count = 0
        if max_samples <= 0:
            return
        for info in self.files:
            if info.is_dir or not accept(info.extension):
                continue
            self.check_cancelled()
            try:
                content = self._reader(self.root / info.path, self.max_bytes)
            except OSError as exc:
                _LOGGER.debug("Skipping %s: %s", info.path, exc)
                continue
            if len(content) > self.max_bytes:
                continue
            yield Sample(path=info.path, extension=info.extension, content=content)
            count += 1
            if count >= max_samples:
                return

    def check_cancelled(self) -> None:
        if self._cancel is not None and self._cancel.is_set():
            raise AnalysisCancelled("analysis cancelled by caller")


__all__ = [
    "AnalysisCancelled",
    "CancellationSignal",
    "MAX_FILE_BYTES",
    "Sample",
    "Sampler",
]
