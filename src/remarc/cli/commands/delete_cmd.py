from __future__ import annotations

import argparse
from pathlib import Path

from remarc.application.services.upload_service import UploadService
from remarc.cli.commands._common import require_initialized
from remarc.cli.context import CLIContext
from remarc.domain.models.resource_kind import CONTENT_KINDS, ResourceKind
from remarc.infrastructure.db.repos.document_repo import DocumentRepo


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("delete", help="Delete stored content files for an item id")
    parser.add_argument(
        "kind",
        type=ResourceKind.parse,
        help="Content kind: " + ", ".join(k.name.lower() for k in CONTENT_KINDS),
    )
    parser.add_argument("item_id", help="Item identifier (filename without extension)")
    parser.add_argument("--resources-root", type=Path, help="Override the resources root directory")
    parser.set_defaults(handler=run)


def run(args: argparse.Namespace, ctx: CLIContext) -> int:
    require_initialized(ctx)

    resources_root = args.resources_root or ctx.paths.resources_dir
    service = UploadService(DocumentRepo(ctx.paths.db_path), ctx.settings)

    if service.delete_resource_for_id(resources_root, args.kind, args.item_id):
        ctx.console.print(f"[green]Deleted[/green] {args.kind.name.lower()} files for {args.item_id}")
        return 0

    ctx.console.print(f"[red]Failed[/red] to delete {args.kind.name.lower()} files for {args.item_id}")
    return 1
