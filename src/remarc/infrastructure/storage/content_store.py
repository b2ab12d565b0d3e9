from __future__ import annotations

import logging
from pathlib import Path

from remarc.core.config import ContentSettings
from remarc.core.errors import InvalidIdentifierError, InvalidResourceKindError
from remarc.core.files import copy_file_to_directory, ensure_directory, force_delete
from remarc.domain.models.resource_kind import CONTENT_KINDS, ResourceKind

logger = logging.getLogger(__name__)


class ContentStore:
    """Flat per-kind folders under a resources root."""

    def __init__(self, base_dir: Path, settings: ContentSettings | None = None) -> None:
        self.base_dir = base_dir
        self.settings = settings or ContentSettings()

    def ensure_layout(self) -> list[Path]:
        created: list[Path] = []
        for kind in CONTENT_KINDS:
            folder = self.folder_for(kind)
            if not folder.exists():
                created.append(folder)
            ensure_directory(folder)
        return created

    def folder_for(self, kind: ResourceKind) -> Path:
        folder = self.settings.destination_dir(self.base_dir, kind)
        if folder is None:
            raise InvalidResourceKindError(f"Trying to use content folder for invalid kind {kind.name}")
        return folder

    def copy_into(self, src: Path, kind: ResourceKind) -> Path:
        """Copy ``src`` into the folder for ``kind``; raises OSError on failure."""
        return copy_file_to_directory(src, self.folder_for(kind))

    def files_for_id(self, kind: ResourceKind, identifier: str) -> list[Path]:
        """Entries named ``<identifier>.<anything>``; the identifier is matched literally."""
        if "/" in identifier or "\\" in identifier:
            raise InvalidIdentifierError(f"Identifier must not contain a path separator: {identifier!r}")
        folder = self.folder_for(kind)
        if not folder.is_dir():
            return []
        prefix = identifier + "."
        return sorted(p for p in folder.iterdir() if p.name.startswith(prefix))

    def delete_for_id(self, kind: ResourceKind, identifier: str) -> bool:
        """Delete every ``<identifier>.*`` entry; stops at the first failure."""
        logger.debug("Deleting resources for id %s (%s)", identifier, kind.name)
        for path in self.files_for_id(kind, identifier):
            try:
                force_delete(path)
            except OSError as exc:
                logger.error("Could not delete %s: %s", path, exc)
                return False
            logger.debug("Deleted %s", path)
        return True
