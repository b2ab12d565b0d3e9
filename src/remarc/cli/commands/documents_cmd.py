from __future__ import annotations

import argparse

from rich.table import Table

from remarc.cli.commands._common import require_initialized
from remarc.cli.context import CLIContext
from remarc.domain.models.resource_kind import COLLECTION_NAMES
from remarc.infrastructure.db.repos.document_repo import DocumentRepo


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("documents", help="List stored documents in a collection")
    parser.add_argument("collection", choices=sorted(COLLECTION_NAMES.values()))
    parser.add_argument("--limit", type=int, default=50)
    parser.set_defaults(handler=run)


def run(args: argparse.Namespace, ctx: CLIContext) -> int:
    require_initialized(ctx)

    repo = DocumentRepo(ctx.paths.db_path)
    documents = repo.list(args.collection, limit=args.limit)

    table = Table(title=f"{args.collection} ({len(documents)})")
    table.add_column("ID")
    table.add_column("Theme")
    table.add_column("Decade")
    table.add_column("Content", overflow="fold")
    table.add_column("Inserted")

    for d in documents:
        content = ", ".join(sorted(d.content))
        table.add_row(d.item_id, d.theme or "", d.decade or "", content, d.inserted_at)

    ctx.console.print(table)
    return 0
