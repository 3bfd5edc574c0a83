"""Tests for convscout.repo_scanner."""

from __future__ import annotations

from pathlib import Path

import pytest

from convscout.repo_scanner import RepoScanner


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def test_scan_lists_files_and_directories_in_sorted_order(tmp_path: Path) -> None:
    _write(tmp_path / "src" / "b.ts", "")
    _write(tmp_path / "src" / "a.ts", "")
    _write(tmp_path / "README.md", "# hi\n")
    _write(tmp_path / "node_modules" / "dep" / "index.js", "")
    _write(tmp_path / ".git" / "HEAD", "ref: refs/heads/main\n")

    entries = RepoScanner().scan(tmp_path)

    assert [(entry.path, entry.is_dir) for entry in entries] == [
        ("src", True),
        ("README.md", False),
        ("src/a.ts", False),
        ("src/b.ts", False),
    ]
    assert entries[2].extension == ".ts"
    assert entries[2].name == "a.ts"


def test_scan_honours_gitignore_and_negation(tmp_path: Path) -> None:
    _write(tmp_path / ".gitignore", "# build output\nbuild/\n*.log\n!keep.log\n")
    _write(tmp_path / "build" / "out.js", "")
    _write(tmp_path / "debug.log", "")
    _write(tmp_path / "keep.log", "")
    _write(tmp_path / "src" / "main.go", "")

    paths = {entry.path for entry in RepoScanner().scan(tmp_path)}

    assert "build" not in paths
    assert "build/out.js" not in paths
    assert "debug.log" not in paths
    assert "keep.log" in paths
    assert "src/main.go" in paths


def test_scan_applies_config_and_constructor_excludes(tmp_path: Path) -> None:
    _write(tmp_path / ".convscout.yml", "exclude_paths:\n  - fixtures/\n")
    _write(tmp_path / "fixtures" / "sample.ts", "")
    _write(tmp_path / "docs" / "guide.md", "")
    _write(tmp_path / "src" / "app.ts", "")

    paths = {entry.path for entry in RepoScanner(exclude_paths=["/docs"]).scan(tmp_path)}

    assert "fixtures/sample.ts" not in paths
    assert "docs/guide.md" not in paths
    assert "src/app.ts" in paths


def test_scan_survives_invalid_config(tmp_path: Path) -> None:
    _write(tmp_path / ".convscout.yml", "exclude_paths: [broken\n")
    _write(tmp_path / "main.py", "")

    paths = {entry.path for entry in RepoScanner().scan(tmp_path)}

    assert "main.py" in paths


def test_scan_rejects_missing_directory(tmp_path: Path) -> None:
    missing = tmp_path / "missing"

    with pytest.raises(FileNotFoundError) as excinfo:
        RepoScanner().scan(missing)

    assert str(missing) in str(excinfo.value)


def test_scan_rejects_file_path(tmp_path: Path) -> None:
    target = tmp_path / "file.txt"
    target.write_text("x", encoding="utf-8")

    with pytest.raises(NotADirectoryError):
        RepoScanner().scan(target)
