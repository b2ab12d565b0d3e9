from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console

from remarc.core.config import AppPaths, ContentSettings


@dataclass(slots=True)
class CLIContext:
    paths: AppPaths
    settings: ContentSettings
    console: Console
