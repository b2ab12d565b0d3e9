from pathlib import Path

import pytest

from remarc.domain.models.item import ItemGroup
from remarc.domain.models.resource_kind import ResourceKind, kind_for_extension


@pytest.mark.parametrize(
    ("extension", "expected"),
    [
        ("jpg", ResourceKind.IMAGE),
        ("JPEG", ResourceKind.IMAGE),
        ("mp3", ResourceKind.AUDIO),
        ("Ogg", ResourceKind.AUDIO),
        ("mp4", ResourceKind.VIDEO),
        ("ogv", ResourceKind.VIDEO),
        ("properties", ResourceKind.PROPERTIES),
        ("METADATA", ResourceKind.INFORMATION),
    ],
)
def test_known_extensions_classify(extension: str, expected: ResourceKind) -> None:
    assert kind_for_extension(extension) is expected


@pytest.mark.parametrize("extension", ["png", "txt", "", "jpg.bak", "mpeg"])
def test_unknown_extensions_have_no_kind(extension: str) -> None:
    assert kind_for_extension(extension) is None


def test_dominant_kind_never_decreases() -> None:
    group = ItemGroup(identifier="CLIP1")
    group.add(Path("CLIP1.mp4"))
    assert group.dominant_kind is ResourceKind.VIDEO

    group.add(Path("CLIP1.jpg"))
    group.add(Path("CLIP1.mp3"))
    group.add(Path("CLIP1.metadata"))
    assert group.dominant_kind is ResourceKind.VIDEO
    assert [f.name for f in group.files] == ["CLIP1.mp4", "CLIP1.jpg", "CLIP1.mp3", "CLIP1.metadata"]


def test_dominant_kind_is_max_rank_of_files() -> None:
    group = ItemGroup(identifier="SONG")
    group.add(Path("SONG.metadata"))
    assert group.dominant_kind is ResourceKind.INFORMATION
    group.add(Path("SONG.jpg"))
    assert group.dominant_kind is ResourceKind.IMAGE
    group.add(Path("SONG.ogg"))
    assert group.dominant_kind is ResourceKind.AUDIO


def test_properties_and_unknown_files_cannot_join_a_group() -> None:
    group = ItemGroup(identifier="X")
    with pytest.raises(ValueError):
        group.add(Path("X.properties"))
    with pytest.raises(ValueError):
        group.add(Path("X.txt"))


def test_parse_kind_name() -> None:
    assert ResourceKind.parse(" image ") is ResourceKind.IMAGE
    with pytest.raises(ValueError):
        ResourceKind.parse("document")
