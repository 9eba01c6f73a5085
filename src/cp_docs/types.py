"""Collector domain types."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import DEFAULT_IGNORE_PATTERNS, DEFAULT_SKIP_PREFIXES, TARGET_NAME


class CollectorConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    target_name: str = TARGET_NAME
    ignore_patterns: list[str] = Field(default_factory=lambda: list(DEFAULT_IGNORE_PATTERNS))
    skip_prefixes: list[str] = Field(default_factory=lambda: list(DEFAULT_SKIP_PREFIXES))
    follow_symlinks: bool = False  # copy link targets instead of recreating links

    @field_validator("target_name")
    @classmethod
    def _single_segment(cls, value: str) -> str:
        if not value or value in (".", ".."):
            raise ValueError("target_name must be a directory name")
        if any(sep and sep in value for sep in ("/", os.sep, os.altsep)):
            raise ValueError(f"target_name must not contain a path separator: {value!r}")
        return value

    @field_validator("ignore_patterns", "skip_prefixes")
    @classmethod
    def _no_empty_entries(cls, value: list[str]) -> list[str]:
        # An empty substring matches every name and would prune the whole tree
        if any(not entry for entry in value):
            raise ValueError("entries must be non-empty strings")
        return value


class FileType(str, Enum):
    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"
    OTHER = "other"


@dataclass(frozen=True)
class CandidateEntry:
    path: Path
    name: str
    depth: int  # 1 for direct children of the scan root
    file_type: FileType

    @property
    def is_dir(self) -> bool:
        return self.file_type is FileType.DIRECTORY


class DocsMatch(BaseModel):
    path: Path  # absolute
    relative: Path  # relative to the scan root, ends with the matched segment


class CopyOutcome(BaseModel):
    source: Path
    destination: Path | None = None
    success: bool
    error: str | None = None


class RunSummary(BaseModel):
    root: Path
    destination: Path
    total: int = 0
    copied: int = 0
    failures: list[CopyOutcome] = Field(default_factory=list)

    @property
    def all_copied(self) -> bool:
        return self.copied == self.total
