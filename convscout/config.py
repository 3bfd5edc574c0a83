"""Configuration loading for convscout (.convscout.yml)."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .models import Command

CONFIG_FILENAME = ".convscout.yml"

_OUTPUT_FORMATS = {"markdown", "json"}


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class GitConfig:
    """Git collaborator settings."""

    enabled: bool = True
    commit_limit: int = 100


@dataclass
class CommandsConfig:
    """Quick-reference size and extra commands to rank alongside discovered ones."""

    quick_reference: int = 10
    extra: List[Command] = field(default_factory=list)


@dataclass
class ConvScoutConfig:
    """Represents the settings defined in .convscout.yml."""

    root: Path
    exclude_paths: List[str] = field(default_factory=list)
    git: GitConfig = field(default_factory=GitConfig)
    commands: CommandsConfig = field(default_factory=CommandsConfig)
    output_format: str = "markdown"


def load_config(config_path: Path) -> ConvScoutConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return ConvScoutConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    git_data = _as_dict(data.get("git"))
    git = GitConfig()
    if git_data:
        enabled = _as_bool(git_data.get("enabled"))
        if enabled is not None:
            git.enabled = enabled
        limit = _as_int(git_data.get("commit_limit"))
        if limit is not None and limit >= 0:
            git.commit_limit = limit

    commands_data = _as_dict(data.get("commands"))
    commands = CommandsConfig()
    if commands_data:
        size = _as_int(commands_data.get("quick_reference"))
        if size is not None and size >= 0:
            commands.quick_reference = size
        commands.extra = _as_commands(commands_data.get("extra"))

    output_data = _as_dict(data.get("output"))
    output_format = "markdown"
    if output_data:
        requested = _as_str(output_data.get("format"))
        if requested and requested.lower() in _OUTPUT_FORMATS:
            output_format = requested.lower()

    return ConvScoutConfig(
        root=root,
        exclude_paths=_as_str_list(data.get("exclude_paths")),
        git=git,
        commands=commands,
        output_format=output_format,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, (str, int, float, bool)):
        return str(value)
    return None


def _as_int(value: Any) -> Optional[int]:
    # bool is an int subclass; `commit_limit: yes` is not a number.
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and re.fullmatch(r"\s*-?\d+\s*", value):
        return int(value)
    return None


_BOOL_WORDS = {"true": True, "yes": True, "1": True, "false": False, "no": False, "0": False}


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return _BOOL_WORDS.get(value.strip().lower())
    return None


def _as_str_list(value: Any) -> List[str]:
    items = [value] if isinstance(value, str) else value
    if not isinstance(items, Sequence):
        return []
    return [text for text in map(_as_str, items) if text]


def _as_commands(value: Any) -> List[Command]:
    if not isinstance(value, list):
        return []
    commands: List[Command] = []
    for item in value:
        if isinstance(item, str) and item.strip():
            commands.append(Command(name=item.strip()))
        elif isinstance(item, dict):
            name = _as_str(item.get("name"))
            if name and name.strip():
                commands.append(
                    Command(name=name.strip(), description=_as_str(item.get("description")) or "")
                )
    return commands


__all__ = [
    "CONFIG_FILENAME",
    "CommandsConfig",
    "ConfigError",
    "ConvScoutConfig",
    "GitConfig",
    "load_config",
]
