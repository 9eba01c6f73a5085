"""Collector defaults."""

from __future__ import annotations

TARGET_NAME = "docs"

# Substring matches: "my-build-cache" is pruned because it contains "build".
DEFAULT_IGNORE_PATTERNS = (
    "venv",
    "site-packages",
    "__pycache__",
    "node_modules",
    ".git",
    "target",
    "build",
    "third_party",
    "tests",
)

# Hidden and private directories
DEFAULT_SKIP_PREFIXES = (".", "_")
