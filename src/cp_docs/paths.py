"""Scan-root resolution and destination path reconstruction."""

from __future__ import annotations

import re
from pathlib import Path, PurePosixPath

from .errors import RootResolutionError


def resolve_root(path: str | Path) -> Path:
    """Resolve the scan root to an absolute, canonical directory path."""
    try:
        resolved = Path(path).expanduser().resolve(strict=True)
    except (OSError, RuntimeError) as err:
        raise RootResolutionError(f"Could not resolve path: {path} --err={err}", path) from err
    if not resolved.is_dir():
        raise RootResolutionError(f"Scan root is not a directory: {resolved}", resolved)
    return resolved


def strip_target_segments(relative: PurePosixPath | Path, target_name: str) -> Path:
    """Collapse every ``/<target>/`` occurrence in a relative path to ``/``."""
    pattern = re.compile(rf"/(?:{re.escape(target_name)}/)+", re.IGNORECASE)
    wrapped = f"/{PurePosixPath(*relative.parts).as_posix()}/"
    collapsed = pattern.sub("/", wrapped).strip("/")
    return Path(*collapsed.split("/")) if collapsed and collapsed != "." else Path()


def reconstruct_destination(
    match_path: Path,
    scan_root: Path,
    destination_root: Path,
    target_name: str,
) -> Path:
    """Map a match under scan_root onto destination_root, dropping the target segment.

    ``root/proj/src/docs`` becomes ``dest/proj/src``; a match directly under the
    root maps to ``dest`` itself. Only the part below destination_root is
    rewritten. Raises ValueError if match_path is not under scan_root.
    """
    relative = match_path.relative_to(scan_root)
    return destination_root / strip_target_segments(relative.parent, target_name)


def ensure_parent(destination: Path) -> None:
    """Create every ancestor directory of destination."""
    destination.parent.mkdir(parents=True, exist_ok=True)


def is_within(path: Path, ancestor: Path) -> bool:
    """True if path is ancestor itself or lies beneath it."""
    return path == ancestor or ancestor in path.parents
