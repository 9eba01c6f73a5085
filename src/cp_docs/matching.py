"""Match collection over the pruned walk."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .traversal import walk_directories
from .types import CandidateEntry, CollectorConfig, DocsMatch

if TYPE_CHECKING:
    from pathlib import Path

    from .progress import ProgressReporter


def is_docs_dir(entry: CandidateEntry, config: CollectorConfig) -> bool:
    """True for a directory whose name equals the target name, ignoring case."""
    return entry.is_dir and entry.name.casefold() == config.target_name.casefold()


def collect_matches(
    root: Path,
    config: CollectorConfig,
    reporter: ProgressReporter | None = None,
    exclude: Path | None = None,
) -> list[DocsMatch]:
    """Collect every target-name directory under root in discovery order.

    The first match along a path wins: a matched directory is copied whole,
    so it is not searched for nested matches. ``exclude`` is never scanned.
    """
    matches: list[DocsMatch] = []

    def is_match(entry: CandidateEntry) -> bool:
        return is_docs_dir(entry, config)

    for entry in walk_directories(root, config, reporter, is_leaf=is_match, exclude=exclude):
        if not is_match(entry):
            continue
        matches.append(DocsMatch(path=entry.path, relative=entry.path.relative_to(root)))
        if reporter is not None:
            reporter.found(len(matches))

    if reporter is not None:
        reporter.scan_complete(len(matches))
    return matches
