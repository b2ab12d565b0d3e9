from __future__ import annotations

from remarc.application.services.project_service import ProjectService
from remarc.cli.context import CLIContext
from remarc.core.errors import ProjectNotInitializedError


def require_initialized(ctx: CLIContext) -> None:
    if not ProjectService(ctx.paths, ctx.settings).is_initialized():
        raise ProjectNotInitializedError(
            f"Project is not initialized. Run 'remarc init' first in {ctx.paths.project_root}"
        )
