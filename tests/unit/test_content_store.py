from pathlib import Path

import pytest

from remarc.core.config import ContentSettings
from remarc.core.errors import InvalidIdentifierError, InvalidResourceKindError
from remarc.domain.models.resource_kind import ResourceKind
from remarc.infrastructure.storage.content_store import ContentStore


def test_folders_follow_configured_names(tmp_path: Path) -> None:
    settings = ContentSettings.from_env({"REMARC_VIDEO_DIR_NAME": "films"})
    store = ContentStore(tmp_path, settings)

    assert store.folder_for(ResourceKind.IMAGE) == tmp_path / "images"
    assert store.folder_for(ResourceKind.AUDIO) == tmp_path / "audio"
    assert store.folder_for(ResourceKind.VIDEO) == tmp_path / "films"

    created = store.ensure_layout()
    assert sorted(p.name for p in created) == ["audio", "films", "images"]


def test_non_content_kinds_have_no_folder(tmp_path: Path) -> None:
    store = ContentStore(tmp_path)

    with pytest.raises(InvalidResourceKindError):
        store.folder_for(ResourceKind.INFORMATION)
    with pytest.raises(InvalidResourceKindError):
        store.delete_for_id(ResourceKind.PROPERTIES, "X1")


def test_copy_then_delete_round_trip(tmp_path: Path) -> None:
    source = tmp_path / "upload" / "X1.jpg"
    source.parent.mkdir()
    source.write_bytes(b"jpeg bytes")
    store = ContentStore(tmp_path / "resources")

    copied = store.copy_into(source, ResourceKind.IMAGE)

    assert copied == tmp_path / "resources" / "images" / "X1.jpg"
    assert copied.read_bytes() == b"jpeg bytes"
    assert source.exists()

    assert store.delete_for_id(ResourceKind.IMAGE, "X1") is True
    assert store.files_for_id(ResourceKind.IMAGE, "X1") == []


def test_delete_removes_every_match_for_the_id_only(tmp_path: Path) -> None:
    store = ContentStore(tmp_path)
    images = store.folder_for(ResourceKind.IMAGE)
    images.mkdir(parents=True)
    for name in ("X1.jpg", "X1.jpeg", "X10.jpg", "Y1.jpg"):
        (images / name).write_bytes(b"x")

    assert store.delete_for_id(ResourceKind.IMAGE, "X1") is True

    assert sorted(p.name for p in images.iterdir()) == ["X10.jpg", "Y1.jpg"]


def test_delete_stops_at_first_failure(tmp_path: Path, monkeypatch) -> None:
    store = ContentStore(tmp_path)
    images = store.folder_for(ResourceKind.IMAGE)
    images.mkdir(parents=True)
    (images / "X1.jpeg").write_bytes(b"x")
    (images / "X1.jpg").write_bytes(b"x")

    attempts: list[str] = []

    def failing_delete(path: Path) -> None:
        attempts.append(path.name)
        raise PermissionError("read-only")

    monkeypatch.setattr("remarc.infrastructure.storage.content_store.force_delete", failing_delete)

    assert store.delete_for_id(ResourceKind.IMAGE, "X1") is False
    assert attempts == ["X1.jpeg"]
    assert (images / "X1.jpg").exists()


def test_delete_with_missing_folder_succeeds(tmp_path: Path) -> None:
    assert ContentStore(tmp_path).delete_for_id(ResourceKind.AUDIO, "nothing") is True


def test_delete_matches_identifier_literally(tmp_path: Path) -> None:
    store = ContentStore(tmp_path)
    images = store.folder_for(ResourceKind.IMAGE)
    images.mkdir(parents=True)
    for name in ("IMG[1].jpg", "IMG1.jpg", "IMG*.jpg", "IMGX.jpg"):
        (images / name).write_bytes(b"x")

    assert store.delete_for_id(ResourceKind.IMAGE, "IMG[1]") is True
    assert store.delete_for_id(ResourceKind.IMAGE, "IMG*") is True

    assert sorted(p.name for p in images.iterdir()) == ["IMG1.jpg", "IMGX.jpg"]


def test_identifier_with_path_separator_is_rejected(tmp_path: Path) -> None:
    store = ContentStore(tmp_path)
    (tmp_path / "X1.jpg").write_bytes(b"x")
    store.folder_for(ResourceKind.IMAGE).mkdir()

    with pytest.raises(InvalidIdentifierError):
        store.delete_for_id(ResourceKind.IMAGE, "../X1")
    assert (tmp_path / "X1.jpg").exists()
