"""Top-down directory walk with early pruning."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from .logger import logger
from .types import CandidateEntry, CollectorConfig, FileType

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from .progress import ProgressReporter


def file_type_of(path: Path) -> FileType:
    """Classify a path without following symlinks."""
    if path.is_symlink():
        return FileType.SYMLINK
    if path.is_dir():
        return FileType.DIRECTORY
    if path.is_file():
        return FileType.FILE
    return FileType.OTHER


def should_traverse(entry: CandidateEntry, config: CollectorConfig) -> bool:
    """Decide whether the walk descends into an entry.

    Files and symlinks are leaves. Hidden/private prefixes and any name
    containing an ignore pattern (substring, not equality) are pruned.
    """
    if not entry.is_dir:
        return False
    if entry.name.startswith(tuple(config.skip_prefixes)):
        return False
    return not any(pattern in entry.name for pattern in config.ignore_patterns)


def _log_walk_error(err: OSError) -> None:
    logger.warning("Skipping unreadable directory", path=err.filename, error=err.strerror or str(err))


def walk_directories(
    root: Path,
    config: CollectorConfig,
    reporter: ProgressReporter | None = None,
    is_leaf: Callable[[CandidateEntry], bool] | None = None,
    exclude: Path | None = None,
) -> Iterator[CandidateEntry]:
    """Yield every directory under root that passes ``should_traverse``.

    Entries are yielded parent first, siblings in name order. Pruned entries
    are never yielded and nothing beneath them is visited. When
    ``is_leaf`` returns True for a yielded entry, it is not descended
    into. ``exclude`` (the output directory) is skipped with its subtree.
    The root itself is neither checked nor yielded.
    """
    root_depth = len(root.parts)

    for dirpath, dirnames, _filenames in os.walk(root, topdown=True, onerror=_log_walk_error, followlinks=False):
        parent = Path(dirpath)
        depth = len(parent.parts) - root_depth + 1
        descend: list[str] = []

        for name in sorted(dirnames):
            if reporter is not None:
                reporter.scanning(name)
            path = parent / name
            if exclude is not None and path == exclude:
                continue
            entry = CandidateEntry(path=path, name=name, depth=depth, file_type=file_type_of(path))
            if not should_traverse(entry, config):
                continue
            yield entry
            if is_leaf is None or not is_leaf(entry):
                descend.append(name)

        # Modifying dirnames in place tells os.walk which children to visit
        dirnames[:] = descend
