from __future__ import annotations

from enum import Enum


class ResourceKind(Enum):
    """Kind of an uploaded file, ordered by rank.

    The rank only decides which kind dominates an item group; VIDEO beats
    AUDIO beats IMAGE.
    """

    PROPERTIES = 0
    INFORMATION = 1
    IMAGE = 2
    AUDIO = 3
    VIDEO = 4

    @property
    def rank(self) -> int:
        return self.value

    @property
    def is_content(self) -> bool:
        return self in CONTENT_KINDS

    @classmethod
    def parse(cls, name: str) -> ResourceKind:
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown resource kind: {name!r}") from None


CONTENT_KINDS = (ResourceKind.IMAGE, ResourceKind.AUDIO, ResourceKind.VIDEO)

EXTENSION_KIND_MAP = {
    "properties": ResourceKind.PROPERTIES,
    "jpg": ResourceKind.IMAGE,
    "jpeg": ResourceKind.IMAGE,
    "mp3": ResourceKind.AUDIO,
    "ogg": ResourceKind.AUDIO,
    "mp4": ResourceKind.VIDEO,
    "ogv": ResourceKind.VIDEO,
    "metadata": ResourceKind.INFORMATION,
}
"""dict: Mapping of lower-cased file extensions to resource kinds."""

COLLECTION_NAMES = {
    ResourceKind.IMAGE: "images",
    ResourceKind.AUDIO: "audio",
    ResourceKind.VIDEO: "video",
}
"""dict: Document store collection for each content kind."""


def kind_for_extension(extension: str) -> ResourceKind | None:
    """Classify an extension (without the dot, any case); unknown gives None."""
    return EXTENSION_KIND_MAP.get(extension.lower())


def dominant_kind(current: ResourceKind | None, candidate: ResourceKind) -> ResourceKind:
    if current is None or candidate.rank > current.rank:
        return candidate
    return current
