"""Scan a tree for target-name directories and copy them into a flattened output tree."""

from __future__ import annotations

from pathlib import Path

from .fs_utils import copy_tree, reset_destination
from .logger import logger, run_context
from .matching import collect_matches
from .paths import ensure_parent, is_within, reconstruct_destination, resolve_root
from .progress import NullReporter, ProgressReporter
from .types import CollectorConfig, CopyOutcome, DocsMatch, RunSummary


def copy_match(match: DocsMatch, root: Path, destination: Path, config: CollectorConfig) -> CopyOutcome:
    """Reconstruct the destination for one match and copy it there.

    Failures are logged and returned as an unsuccessful outcome.
    """
    target = reconstruct_destination(match.path, root, destination, config.target_name)

    # Copying a directory into its own subtree never terminates
    if is_within(target.resolve(), match.path.resolve()):
        error = f"cannot copy a directory into itself: {match.path} -> {target}"
        logger.error("Failed copying", source=str(match.path), destination=str(target), error=error)
        return CopyOutcome(source=match.path, destination=target, success=False, error=error)

    try:
        ensure_parent(target)
    except OSError as err:
        logger.error("Failed to create parent", parent=str(target.parent), error=str(err))
        return CopyOutcome(source=match.path, destination=target, success=False, error=str(err))

    try:
        copy_tree(match.path, target, follow_symlinks=config.follow_symlinks)
    except OSError as err:
        logger.error("Failed copying", source=str(match.path), destination=str(target), error=str(err))
        return CopyOutcome(source=match.path, destination=target, success=False, error=str(err))

    return CopyOutcome(source=match.path, destination=target, success=True)


def collect_docs(
    root: str | Path,
    destination: str | Path,
    config: CollectorConfig | None = None,
    reporter: ProgressReporter | None = None,
) -> RunSummary:
    """Run the full pipeline: resolve, reset, collect, then copy each match.

    Raises RootResolutionError or DestinationResetError before anything is
    copied; per-match failures only show up in the summary.
    """
    config = config or CollectorConfig()
    reporter = reporter or NullReporter()

    # Resolve first so a bad root never touches the destination
    scan_root = resolve_root(root)
    reporter.cleaning(Path(destination))
    target_root = reset_destination(Path(destination), protect=scan_root)
    reporter.paths(scan_root, target_root)

    summary = RunSummary(root=scan_root, destination=target_root)

    with run_context(scan_root, target_root):
        matches = collect_matches(scan_root, config, reporter, exclude=target_root.resolve())
        summary.total = len(matches)
        logger.debug("Collected matches", count=summary.total, target_name=config.target_name)

        for match in matches:
            outcome = copy_match(match, scan_root, target_root, config)
            if not outcome.success:
                summary.failures.append(outcome)
                continue
            summary.copied += 1
            reporter.copied(summary.copied, summary.total, match.relative)

        logger.info("Collection complete", copied=summary.copied, total=summary.total)

    reporter.finished(summary.copied, summary.total)
    return summary
