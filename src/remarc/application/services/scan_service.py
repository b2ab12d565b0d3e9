from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from remarc.core.files import split_filename
from remarc.domain.models.item import ItemGroup
from remarc.domain.models.resource_kind import ResourceKind, kind_for_extension

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DirectoryScan:
    directory: Path
    groups: dict[str, ItemGroup] = field(default_factory=dict)
    properties_file: Path | None = None
    subdirectories: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)


class UploadScanner:
    def scan(self, directory: Path) -> DirectoryScan:
        """Classify the immediate children of ``directory``.

        Subdirectories are returned for later processing, never descended into
        here. Children are visited in name order.
        """
        result = DirectoryScan(directory=directory)

        for child in sorted(directory.iterdir(), key=lambda p: p.name):
            if child.is_dir():
                if child.is_symlink():
                    logger.warning("Not following symlinked directory %s", child)
                    result.skipped.append(child)
                    continue
                logger.debug("directory: %s", child.name)
                result.subdirectories.append(child)
                continue

            name_id, extension = split_filename(child.name)
            kind = kind_for_extension(extension)
            logger.debug("file: %s (%s)", name_id, extension)

            if kind is None:
                logger.debug("Unrecognised extension (%s), skipping %s", extension, child.name)
                result.skipped.append(child)
            elif kind is ResourceKind.PROPERTIES:
                if result.properties_file is not None:
                    logger.warning(
                        "Multiple properties files in %s, using %s", directory, child.name
                    )
                result.properties_file = child
            else:
                group = result.groups.get(name_id)
                if group is None:
                    group = ItemGroup(identifier=name_id)
                    result.groups[name_id] = group
                group.add(child, kind)

        return result
