"""Structured diagnostics on stderr.

Progress lines belong on stdout (see ``cp_docs.progress``); everything a user
may need to act on (skipped directories, failed copies, fatal errors) goes
through this logger so it stays out of the progress stream.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import structlog


def setup_logging(level: str | None = None) -> structlog.typing.FilteringBoundLogger:
    """Configure structlog with a console renderer on stderr.

    The level comes from ``LOG_LEVEL`` unless given explicitly.
    """
    log_level = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    numeric_level = getattr(logging, log_level, None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(level=numeric_level, stream=sys.stderr, format="%(message)s")

    return structlog.get_logger("cp_docs")


logger: structlog.typing.FilteringBoundLogger = setup_logging()


@contextmanager
def run_context(root: Path, destination: Path) -> Iterator[None]:
    """Attach the scan root and destination to every event logged inside the block."""
    tokens = structlog.contextvars.bind_contextvars(root=str(root), destination_root=str(destination))
    try:
        yield
    finally:
        structlog.contextvars.reset_contextvars(**tokens)


def install_exception_hooks() -> None:
    """Route uncaught exceptions through structlog."""

    def handle_exception(exc_type, exc_value, exc_traceback):  # type: ignore[no-untyped-def]
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return
        logger.critical("Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback))

    sys.excepthook = handle_exception


install_exception_hooks()
