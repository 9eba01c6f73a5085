"""Shared fixtures for collector tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


def write_files(base: Path, files: dict[str, str]) -> None:
    """Create each relative file path under base with the given content."""
    for rel_path, content in files.items():
        full_path = base / rel_path
        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_text(content, encoding="utf-8")


def list_files(base: Path) -> set[str]:
    """All file paths under base, relative and in posix form."""
    return {p.relative_to(base).as_posix() for p in base.rglob("*") if p.is_file()}


@pytest.fixture()
def source_root(tmp_path: Path) -> Path:
    root = tmp_path / "source"
    root.mkdir()
    return root


@pytest.fixture()
def dest_root(tmp_path: Path) -> Path:
    """Destination path; not created."""
    return tmp_path / "out"


@pytest.fixture()
def make_tree(source_root: Path) -> Callable[[dict[str, str]], Path]:
    """Populate the source root with files and return it."""

    def _make(files: dict[str, str]) -> Path:
        write_files(source_root, files)
        return source_root

    return _make
