"""Bounded file reads used by the sampler."""

from __future__ import annotations

from pathlib import Path


class FileTooLargeError(OSError):
    """Raised when a file exceeds the caller's byte limit."""


def read_bytes(path: Path, limit: int) -> bytes:
    """Return the contents of ``path``, refusing files larger than ``limit`` bytes."""
    size = path.stat().st_size
    if size > limit:
        raise FileTooLargeError(f"{path} is {size} bytes (limit {limit})")
    with path.open("rb") as handle:
        # The file may grow between stat and read.
        data = handle.read(limit + 1)
    if len(data) > limit:
        raise FileTooLargeError(f"{path} exceeds {limit} bytes")
    return data


__all__ = ["FileTooLargeError", "read_bytes"]
