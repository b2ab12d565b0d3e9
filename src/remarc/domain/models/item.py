from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from remarc.core.files import split_filename
from remarc.domain.models.resource_kind import ResourceKind, dominant_kind, kind_for_extension


@dataclass(slots=True)
class ItemFile:
    path: Path
    kind: ResourceKind

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def extension(self) -> str:
        return split_filename(self.path.name)[1]


@dataclass(slots=True)
class ItemGroup:
    """Sibling files sharing one base filename, in the order they were scanned."""

    identifier: str
    files: list[ItemFile] = field(default_factory=list)
    dominant_kind: ResourceKind | None = None

    def add(self, path: Path, kind: ResourceKind | None = None) -> None:
        if kind is None:
            kind = kind_for_extension(split_filename(path.name)[1])
        if kind is None or kind is ResourceKind.PROPERTIES:
            raise ValueError(f"{path.name} cannot join an item group")
        self.files.append(ItemFile(path=path, kind=kind))
        self.dominant_kind = dominant_kind(self.dominant_kind, kind)


@dataclass(slots=True)
class DirectoryAttributes:
    theme: str | None
    decade: str | None
    extra: dict[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class AssembledDocument:
    identifier: str
    theme: str | None
    decade: str | None
    dominant_kind: ResourceKind | None
    content: dict[str, str] = field(default_factory=dict)
    unread_files: list[Path] = field(default_factory=list)

    def to_record(self) -> dict[str, Any]:
        record: dict[str, Any] = {
            "id": self.identifier,
            "theme": self.theme,
            "decade": self.decade,
        }
        record.update(self.content)
        return record


@dataclass(slots=True)
class StoredDocument:
    row_id: str
    collection: str
    item_id: str
    theme: str | None
    decade: str | None
    content: dict[str, Any]
    inserted_at: str
