from __future__ import annotations

import argparse
from pathlib import Path

from rich.table import Table

from remarc.application.services.upload_service import UploadService
from remarc.cli.commands._common import require_initialized
from remarc.cli.context import CLIContext
from remarc.infrastructure.archive.unpacker import extract_upload_archive
from remarc.infrastructure.db.repos.document_repo import DocumentRepo


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser(
        "upload", help="Ingest an upload directory into the document store and content folders"
    )
    parser.add_argument(
        "upload_dir",
        nargs="?",
        type=Path,
        help="Upload directory to process (default: .remarc/upload)",
    )
    parser.add_argument("--archive", type=Path, help="Zip archive to unpack into the upload directory first")
    parser.add_argument("--resources-root", type=Path, help="Override the resources root directory")
    parser.set_defaults(handler=run)


def run(args: argparse.Namespace, ctx: CLIContext) -> int:
    require_initialized(ctx)

    upload_dir = args.upload_dir or ctx.paths.upload_dir
    resources_root = args.resources_root or ctx.paths.resources_dir

    if args.archive is not None:
        count = extract_upload_archive(args.archive, upload_dir)
        ctx.console.print(f"[green]Unpacked[/green] {count} files from {args.archive}")

    service = UploadService(DocumentRepo(ctx.paths.db_path), ctx.settings)
    with ctx.console.status(f"Processing {upload_dir}"):
        report = service.process_upload_dir(upload_dir, resources_root)

    table = Table(title="Upload Results")
    table.add_column("Metric")
    table.add_column("Count", justify="right")
    table.add_row("Directories scanned", str(report.directories_scanned))
    table.add_row("Directories aborted", str(report.directories_aborted))
    table.add_row("Item groups", str(report.groups_seen))
    table.add_row("Documents inserted", str(report.documents_inserted))
    table.add_row("Inserts skipped", str(report.inserts_skipped))
    table.add_row("Insert failures", str(report.insert_failures))
    table.add_row("Files copied", str(report.files_copied))
    table.add_row("Copy failures", str(report.copy_failures))
    table.add_row("Metadata failures", str(report.metadata_failures))
    table.add_row("Upload directory cleaned", "yes" if report.cleaned else "no")
    ctx.console.print(table)

    if not report.ok:
        ctx.console.print("[yellow]Upload completed with errors, see log for details[/yellow]")
        return 1
    return 0
