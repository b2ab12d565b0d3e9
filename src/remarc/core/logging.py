from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def level_for_verbosity(verbosity: int) -> int:
    return _LEVELS[max(0, min(verbosity, len(_LEVELS) - 1))]


def configure_logging(verbosity: int = 0, console: Console | None = None) -> None:
    """Route log records through rich; -v enables INFO, -vv enables DEBUG."""
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=verbosity > 1,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=level_for_verbosity(verbosity),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
