"""Core data models shared across convscout components."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class FileInfo:
    """A single inventory entry, relative to the repository root."""

    path: str
    name: str
    extension: str
    is_dir: bool = False

    @classmethod
    def from_path(cls, path: str, *, is_dir: bool = False) -> "FileInfo":
        """Build an entry from a forward-slash relative path."""
        normalized = path.replace("\\", "/").strip("/")
        name = posixpath.basename(normalized)
        extension = "" if is_dir else posixpath.splitext(name)[1]
        return cls(path=normalized, name=name, extension=extension, is_dir=is_dir)

    @property
    def stem(self) -> str:
        if self.extension and self.name.endswith(self.extension):
            return self.name[: -len(self.extension)]
        return self.name

    @property
    def directory(self) -> str:
        """Parent directory of the entry; empty for root-level entries."""
        return posixpath.dirname(self.path)


@dataclass(frozen=True)
class Command:
    """A developer command as typed in a shell."""

    name: str
    description: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "description": self.description}


@dataclass(frozen=True)
class Convention:
    """Observation about the codebase backed by threshold evidence."""

    category: str
    description: str
    example: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"category": self.category, "description": self.description}
        if self.example:
            payload["example"] = self.example
        return payload


@dataclass(frozen=True)
class CommitConvention:
    """Commit message style inferred from recent history."""

    style: str
    format: str
    types: Tuple[str, ...] = ()
    scopes: Tuple[str, ...] = ()
    example: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "style": self.style,
            "format": self.format,
            "types": list(self.types),
            "scopes": list(self.scopes),
            "example": self.example,
        }


@dataclass(frozen=True)
class BranchConvention:
    """Branch prefix vocabulary inferred from local branches."""

    prefixes: Tuple[str, ...]
    format: str = "<prefix>/<description>"
    examples: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "prefixes": list(self.prefixes),
            "format": self.format,
            "examples": list(self.examples),
        }


@dataclass(frozen=True)
class GitConventions:
    """Git-derived conventions; either half may be absent."""

    commit: Optional[CommitConvention] = None
    branch: Optional[BranchConvention] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "commit": self.commit.to_dict() if self.commit else None,
            "branch": self.branch.to_dict() if self.branch else None,
        }


@dataclass(frozen=True)
class Report:
    """Result of a single analysis run."""

    conventions: Tuple[Convention, ...] = ()
    git: GitConventions = field(default_factory=GitConventions)
    commands: Tuple[Command, ...] = ()
    cancelled: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "conventions": [convention.to_dict() for convention in self.conventions],
            "git": self.git.to_dict(),
            "commands": [command.to_dict() for command in self.commands],
            "cancelled": self.cancelled,
        }


__all__ = [
    "BranchConvention",
    "Command",
    "CommitConvention",
    "Convention",
    "FileInfo",
    "GitConventions",
    "Report",
]
