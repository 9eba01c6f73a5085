"""Consolidate scattered documentation directories into one flattened tree."""

from __future__ import annotations

from .collector import collect_docs, copy_match
from .config import load_config
from .constants import DEFAULT_IGNORE_PATTERNS, DEFAULT_SKIP_PREFIXES, TARGET_NAME
from .errors import CollectorError, ConfigError, DestinationResetError, RootResolutionError
from .fs_utils import copy_tree, reset_destination
from .matching import collect_matches, is_docs_dir
from .paths import ensure_parent, reconstruct_destination, resolve_root, strip_target_segments
from .progress import NullReporter, ProgressReporter
from .traversal import should_traverse, walk_directories
from .types import CandidateEntry, CollectorConfig, CopyOutcome, DocsMatch, FileType, RunSummary

__all__ = [
    # collector
    "collect_docs",
    "copy_match",
    # config
    "load_config",
    # constants
    "DEFAULT_IGNORE_PATTERNS",
    "DEFAULT_SKIP_PREFIXES",
    "TARGET_NAME",
    # errors
    "CollectorError",
    "ConfigError",
    "DestinationResetError",
    "RootResolutionError",
    # fs_utils
    "copy_tree",
    "reset_destination",
    # matching
    "collect_matches",
    "is_docs_dir",
    # paths
    "ensure_parent",
    "reconstruct_destination",
    "resolve_root",
    "strip_target_segments",
    # progress
    "NullReporter",
    "ProgressReporter",
    # traversal
    "should_traverse",
    "walk_directories",
    # types
    "CandidateEntry",
    "CollectorConfig",
    "CopyOutcome",
    "DocsMatch",
    "FileType",
    "RunSummary",
]
