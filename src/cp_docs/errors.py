"""Fatal collector errors."""

from __future__ import annotations

from pathlib import Path


class CollectorError(Exception):
    """A precondition failed and the run cannot continue."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = path


class RootResolutionError(CollectorError):
    """The scan root does not exist, is not a directory, or cannot be stat'ed."""


class DestinationResetError(CollectorError):
    """The destination could not be cleared and recreated."""


class ConfigError(CollectorError):
    """The configuration file is missing or invalid."""
