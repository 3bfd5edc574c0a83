"""Collects developer commands from build manifests at the repository root."""

from __future__ import annotations

import json
import re
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Sequence, Set, Tuple

from ..logging import get_logger
from ..models import Command, FileInfo

_LOGGER = get_logger("commands.discovery")

_MAKE_TARGET_RE = re.compile(r"^([a-zA-Z_][a-zA-Z0-9_-]*)\s*:(?!=)", re.MULTILINE)

_MAKE_DESCRIPTIONS: Dict[str, str] = {
    "build": "Build the project",
    "test": "Run tests",
    "clean": "Clean build artifacts",
    "install": "Install dependencies/binary",
    "run": "Run the application",
    "dev": "Start development mode",
    "lint": "Run linter",
    "format": "Format code",
    "fmt": "Format code",
    "check": "Run checks",
    "all": "Build all targets",
    "help": "Show available targets",
    "docker": "Build Docker image",
    "deploy": "Deploy the application",
    "release": "Create a release",
    "coverage": "Run tests with coverage",
    "bench": "Run benchmarks",
    "generate": "Generate code",
    "proto": "Generate protobuf code",
    "migrate": "Run database migrations",
    "seed": "Seed the database",
}

_REQUIREMENTS_FILES = ("requirements.txt", "requirements-dev.txt")
_REQUIREMENT_NAME_RE = re.compile(r"[\s<>=!~;\[@(]")

# (package name, command, description), checked against declared dependencies.
_PYTHON_TOOLS: Sequence[Tuple[str, str, str]] = (
    ("pytest", "pytest", "Run tests"),
    ("ruff", "ruff check .", "Run linter"),
    ("black", "black .", "Format code"),
)

_SCRIPT_DESCRIPTIONS: Dict[str, str] = {
    "build": "Build for production",
    "dev": "Start development server",
    "start": "Start the application",
    "serve": "Serve the application",
    "test": "Run tests",
    "lint": "Run linter",
    "format": "Format code",
    "typecheck": "Run type checks",
    "clean": "Clean build artifacts",
    "deploy": "Deploy the application",
}


def discover_commands(root: Path, files: Sequence[FileInfo]) -> List[Command]:
    """Return commands implied by manifests found at ``root``."""
    root_names: Set[str] = {info.path for info in files if not info.is_dir and "/" not in info.path}
    commands: List[Command] = []

    if "package.json" in root_names:
        commands.extend(_node_commands(root, root_names))
    if "Makefile" in root_names:
        commands.extend(_make_commands(root / "Makefile"))
    if "go.mod" in root_names:
        commands.extend(_go_commands(files))
    if "Cargo.toml" in root_names:
        commands.extend(_cargo_commands())
    commands.extend(_python_commands(root, root_names))
    commands.extend(_docker_commands(root_names))

    _LOGGER.debug("Discovered %d commands under %s", len(commands), root)
    return commands


def detect_node_package_manager(root_names: Set[str]) -> str:
    """Infer the preferred Node package manager based on lockfiles."""
    if "pnpm-lock.yaml" in root_names:
        return "pnpm"
    if "yarn.lock" in root_names:
        return "yarn"
    if "bun.lockb" in root_names or "bun.lock" in root_names:
        return "bun"
    return "npm"


def build_node_script_command(script: str, manager: str) -> str:
    if manager != "npm":
        return f"{manager} {script}"
    # npm has first-class aliases for start and test.
    if script in {"start", "test"}:
        return f"npm {script}"
    return f"npm run {script}"


def _node_commands(root: Path, root_names: Set[str]) -> List[Command]:
    try:
        data = json.loads((root / "package.json").read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return []
    if not isinstance(data, dict):
        return []

    manager = detect_node_package_manager(root_names)
    commands = [Command(name=f"{manager} install", description="Install dependencies")]
    scripts = data.get("scripts")
    if isinstance(scripts, dict):
        for script, body in scripts.items():
            if not isinstance(body, str):
                continue
            commands.append(
                Command(
                    name=build_node_script_command(script, manager),
                    description=_SCRIPT_DESCRIPTIONS.get(script, body),
                )
            )
    return commands


def _make_commands(makefile: Path) -> List[Command]:
    try:
        content = makefile.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return []

    commands: List[Command] = []
    seen: Set[str] = set()
    for target in _MAKE_TARGET_RE.findall(content):
        if target in seen:
            continue
        seen.add(target)
        commands.append(Command(name=f"make {target}", description=_MAKE_DESCRIPTIONS.get(target, "")))
    return commands


def _go_commands(files: Sequence[FileInfo]) -> List[Command]:
    commands = [Command(name="go build ./...", description="Build all packages")]
    if any(info.name.endswith("_test.go") for info in files if not info.is_dir):
        commands.append(Command(name="go test ./...", description="Run all tests"))
    commands.append(Command(name="go fmt ./...", description="Format all Go files"))
    return commands


def _cargo_commands() -> List[Command]:
    return [
        Command(name="cargo build", description="Build the project"),
        Command(name="cargo build --release", description="Build for release"),
        Command(name="cargo test", description="Run tests"),
        Command(name="cargo fmt", description="Format code"),
        Command(name="cargo clippy", description="Run linter"),
    ]


def _python_commands(root: Path, root_names: Set[str]) -> List[Command]:
    pyproject = _load_pyproject(root) if "pyproject.toml" in root_names else {}
    tool = pyproject.get("tool")
    poetry = isinstance(tool, dict) and isinstance(tool.get("poetry"), dict)
    prefix = "poetry run " if poetry else ""

    commands: List[Command] = []
    if poetry:
        commands.append(Command(name="poetry install", description="Install dependencies"))
    elif "requirements.txt" in root_names:
        commands.append(
            Command(name="pip install -r requirements.txt", description="Install dependencies")
        )
    elif "pyproject.toml" in root_names:
        commands.append(
            Command(name="pip install -e .", description="Install the package in editable mode")
        )

    if "manage.py" in root_names:
        commands.extend(
            [
                Command(
                    name=f"{prefix}python manage.py runserver",
                    description="Start Django development server",
                ),
                Command(name=f"{prefix}python manage.py migrate", description="Run database migrations"),
                Command(name=f"{prefix}python manage.py test", description="Run tests"),
            ]
        )

    dependencies = _pyproject_dependencies(pyproject)
    for name in _REQUIREMENTS_FILES:
        if name in root_names:
            dependencies.update(_parse_requirements(root / name))
    for package, command, description in _PYTHON_TOOLS:
        if package in dependencies:
            commands.append(Command(name=f"{prefix}{command}", description=description))
    return commands


def _load_pyproject(root: Path) -> Dict[str, Any]:
    try:
        return tomllib.loads((root / "pyproject.toml").read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        _LOGGER.debug("Ignoring unreadable pyproject.toml: %s", exc)
        return {}


def _requirement_name(spec: str) -> str:
    return _REQUIREMENT_NAME_RE.split(spec.strip(), 1)[0].strip().lower()


def _parse_requirements(path: Path) -> Set[str]:
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError):
        return set()
    packages: Set[str] = set()
    for line in lines:
        stripped = line.split(" #", 1)[0].strip()
        if not stripped or stripped.startswith(("#", "-")):
            continue
        name = _requirement_name(stripped)
        if name:
            packages.add(name)
    return packages


def _pyproject_dependencies(data: Dict[str, Any]) -> Set[str]:
    specs: List[Any] = []
    project = data.get("project")
    if isinstance(project, dict):
        specs.extend(project.get("dependencies") or [])
        for values in (project.get("optional-dependencies") or {}).values():
            specs.extend(values or [])
    groups = data.get("dependency-groups")
    if isinstance(groups, dict):
        for values in groups.values():
            specs.extend(values or [])

    tool = data.get("tool")
    poetry = tool.get("poetry") if isinstance(tool, dict) else None
    if isinstance(poetry, dict):
        tables = [poetry.get("dependencies"), poetry.get("dev-dependencies")]
        for group in (poetry.get("group") or {}).values():
            if isinstance(group, dict):
                tables.append(group.get("dependencies"))
        for table in tables:
            if isinstance(table, dict):
                specs.extend(table.keys())

    packages = {_requirement_name(spec) for spec in specs if isinstance(spec, str)}
    packages.discard("python")
    packages.discard("")
    return packages


def _docker_commands(root_names: Set[str]) -> List[Command]:
    commands: List[Command] = []
    if "Dockerfile" in root_names:
        commands.append(Command(name="docker build -t <image> .", description="Build Docker image"))
    if root_names & {"docker-compose.yml", "docker-compose.yaml", "compose.yaml", "compose.yml"}:
        commands.append(Command(name="docker compose up", description="Start services with Docker Compose"))
    return commands


__all__ = ["build_node_script_command", "detect_node_package_manager", "discover_commands"]
