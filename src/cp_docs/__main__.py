"""Entry point: python -m cp_docs <root> <target>"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .collector import collect_docs
from .config import load_config
from .errors import CollectorError
from .logger import logger, setup_logging
from .progress import ProgressReporter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cp-docs",
        description=(
            "Copy every 'docs' directory under <root> into <target>, "
            "rebuilding each one's relative path without the 'docs' segment."
        ),
    )
    parser.add_argument("root", help="Directory to scan")
    parser.add_argument("target", help="Output directory; cleared and recreated on every run")
    parser.add_argument("--config", type=Path, help="YAML file overriding the target name and ignore rules")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug detail to stderr (overrides LOG_LEVEL)")
    return parser


def main(argv: list[str] | None = None) -> int:
    # Wrong argument count: argparse prints usage to stderr and exits 2
    args = build_parser().parse_args(argv)

    if args.verbose:
        setup_logging("DEBUG")

    try:
        config = load_config(args.config)
        collect_docs(
            args.root,
            args.target,
            config=config,
            reporter=ProgressReporter(label=config.target_name),
        )
    except CollectorError as err:
        logger.critical("Aborting", error=str(err), path=str(err.path) if err.path else None)
        return 1

    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
