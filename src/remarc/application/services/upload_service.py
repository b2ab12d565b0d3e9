from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from remarc.application.services.assembly_service import DocumentAssembler
from remarc.application.services.scan_service import UploadScanner
from remarc.core.config import ContentSettings
from remarc.core.errors import DirectoryPropertiesError, DocumentSinkError, UploadError
from remarc.core.files import force_delete
from remarc.domain.models.item import AssembledDocument, ItemGroup
from remarc.domain.models.resource_kind import COLLECTION_NAMES, ResourceKind
from remarc.infrastructure.db.repos.document_repo import DocumentSink
from remarc.infrastructure.properties.loader import load_directory_attributes
from remarc.infrastructure.storage.content_store import ContentStore

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UploadReport:
    directories_scanned: int = 0
    directories_aborted: int = 0
    groups_seen: int = 0
    documents_inserted: int = 0
    inserts_skipped: int = 0
    insert_failures: int = 0
    files_copied: int = 0
    copy_failures: int = 0
    metadata_failures: int = 0
    cleaned: bool = False

    @property
    def ok(self) -> bool:
        return (
            self.directories_aborted == 0
            and self.insert_failures == 0
            and self.copy_failures == 0
            and self.metadata_failures == 0
            and self.cleaned
        )


class UploadService:
    """Turns an upload tree into stored documents and relocated content files.

    Each directory is handled completely (properties, assembly, insert,
    copy) before its subdirectories. Per-directory and per-file failures are
    logged and counted in the returned report; they never stop the batch.
    """

    def __init__(self, sink: DocumentSink, settings: ContentSettings | None = None) -> None:
        self.sink = sink
        self.settings = settings or ContentSettings()
        self.scanner = UploadScanner()
        self.assembler = DocumentAssembler(self.settings)

    def process_upload_dir(self, upload_root: Path, resources_root: Path) -> UploadReport:
        if not upload_root.is_dir():
            raise UploadError(f"Upload directory not found: {upload_root}")

        logger.info(
            "Processing upload directory %s with resources directory %s",
            upload_root,
            resources_root,
        )
        store = ContentStore(resources_root, self.settings)
        report = UploadReport()

        pending = [upload_root]
        while pending:
            directory = pending.pop()
            subdirectories = self._process_directory(directory, store, report)
            pending.extend(reversed(subdirectories))

        report.cleaned = self._clean_directory(upload_root)
        logger.info(
            "Upload finished: %d documents, %d files copied, %d directories aborted",
            report.documents_inserted,
            report.files_copied,
            report.directories_aborted,
        )
        return report

    def delete_resource_for_id(
        self, resources_root: Path, kind: ResourceKind, identifier: str
    ) -> bool:
        return ContentStore(resources_root, self.settings).delete_for_id(kind, identifier)

    def _process_directory(
        self, directory: Path, store: ContentStore, report: UploadReport
    ) -> list[Path]:
        logger.debug("Processing resources within %s", directory)
        try:
            scan = self.scanner.scan(directory)
        except OSError as exc:
            logger.error("Could not list %s: %s. Abort directory.", directory, exc)
            report.directories_aborted += 1
            return []
        report.directories_scanned += 1
        report.groups_seen += len(scan.groups)

        if not scan.groups:
            logger.debug("No item groups in %s", directory)
            return scan.subdirectories

        try:
            attributes = load_directory_attributes(scan.properties_file)
        except DirectoryPropertiesError as exc:
            logger.error("%s in %s. Abort directory.", exc, directory)
            report.directories_aborted += 1
            return scan.subdirectories

        for group in scan.groups.values():
            logger.debug("processing [%s]", group.identifier)
            document = self.assembler.assemble(group, attributes)
            report.metadata_failures += len(document.unread_files)
            self._insert(document, report)
            self._copy_files(group, store, report)

        logger.debug("Upload finished for %s", directory)
        return scan.subdirectories

    def _insert(self, document: AssembledDocument, report: UploadReport) -> None:
        collection = COLLECTION_NAMES.get(document.dominant_kind)
        if collection is None:
            logger.warning("No collection for %s, document not stored", document.identifier)
            report.inserts_skipped += 1
            return

        record = document.to_record()
        logger.debug("Writing document to collection (%s): %s", collection, record)
        try:
            self.sink.insert(collection, record)
        except DocumentSinkError as exc:
            logger.error("Could not store document %s: %s", document.identifier, exc)
            report.insert_failures += 1
            return
        report.documents_inserted += 1

    def _copy_files(self, group: ItemGroup, store: ContentStore, report: UploadReport) -> None:
        if group.dominant_kind not in COLLECTION_NAMES:
            return
        destination = store.folder_for(group.dominant_kind)
        logger.debug("Copying resources into %s", destination)

        for item_file in group.files:
            # Metadata is inlined into the document, never stored as a file.
            if item_file.kind is ResourceKind.INFORMATION:
                continue
            try:
                store.copy_into(item_file.path, group.dominant_kind)
            except OSError as exc:
                logger.error("Couldn't copy %s to %s: %s", item_file.path, destination, exc)
                report.copy_failures += 1
                continue
            report.files_copied += 1

    @staticmethod
    def _clean_directory(directory: Path) -> bool:
        try:
            children = list(directory.iterdir())
        except OSError as exc:
            logger.error("Could not clean upload directory %s: %s", directory, exc)
            return False

        cleaned = True
        for child in children:
            try:
                force_delete(child)
            except OSError as exc:
                logger.error("Could not clean %s: %s", child, exc)
                cleaned = False
        return cleaned
