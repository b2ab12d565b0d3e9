from __future__ import annotations

import argparse
import logging
from pathlib import Path

from rich.console import Console

from remarc.cli.commands import delete_cmd, documents_cmd, init_cmd, upload_cmd
from remarc.cli.context import CLIContext
from remarc.core.config import ContentSettings, load_paths
from remarc.core.errors import RemarcError
from remarc.core.logging import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="remarc",
        description="Remarc content ingestion CLI",
    )
    parser.add_argument(
        "--project-root",
        type=Path,
        default=Path.cwd(),
        help="Project root to use for .remarc data (default: current working directory)",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0)

    subparsers = parser.add_subparsers(dest="command", required=True)
    init_cmd.register(subparsers)
    upload_cmd.register(subparsers)
    delete_cmd.register(subparsers)
    documents_cmd.register(subparsers)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)
    console = Console()

    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        return 2

    try:
        ctx = CLIContext(
            paths=load_paths(args.project_root),
            settings=ContentSettings.from_env(),
            console=console,
        )
        return handler(args, ctx)
    except RemarcError as exc:
        logger.error(str(exc))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
