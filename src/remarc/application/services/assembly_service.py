from __future__ import annotations

import logging
from pathlib import Path

from remarc.core.config import ContentSettings
from remarc.domain.models.item import AssembledDocument, DirectoryAttributes, ItemGroup
from remarc.domain.models.resource_kind import ResourceKind

logger = logging.getLogger(__name__)


class DocumentAssembler:
    def __init__(self, settings: ContentSettings) -> None:
        self.settings = settings

    def assemble(self, group: ItemGroup, attributes: DirectoryAttributes) -> AssembledDocument:
        document = AssembledDocument(
            identifier=group.identifier,
            theme=attributes.theme,
            decade=attributes.decade,
            dominant_kind=group.dominant_kind,
        )
        base_url = self.settings.base_url_for(group.dominant_kind)

        for item_file in group.files:
            logger.debug("--- processing [%s]", item_file.name)
            key = self.content_key(item_file.kind, item_file.extension)
            if item_file.kind is ResourceKind.INFORMATION:
                metadata = self._read_metadata(item_file.path)
                if metadata is None:
                    document.unread_files.append(item_file.path)
                    metadata = ""
                document.content[key] = metadata
            else:
                document.content[key] = base_url + item_file.name

        return document

    @staticmethod
    def content_key(kind: ResourceKind, extension: str) -> str:
        if kind is ResourceKind.IMAGE:
            return "imageUrl"
        if kind is ResourceKind.INFORMATION:
            return "metadata"
        return f"{extension}ContentUrl"

    def _read_metadata(self, path: Path) -> str | None:
        try:
            return path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            logger.error("Unable to read metadata %s: %s", path, exc)
            return None
