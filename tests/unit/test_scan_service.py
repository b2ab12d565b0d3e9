from pathlib import Path

from remarc.application.services.scan_service import UploadScanner
from remarc.domain.models.resource_kind import ResourceKind


def test_scan_groups_files_by_basename_and_defers_subdirectories(tmp_path: Path) -> None:
    (tmp_path / "IMG1.jpg").write_bytes(b"jpg")
    (tmp_path / "IMG1.metadata").write_text("meta", encoding="utf-8")
    (tmp_path / "CLIP1.mp4").write_bytes(b"mp4")
    (tmp_path / "CLIP1.jpg").write_bytes(b"jpg")
    (tmp_path / "notes.txt").write_text("skip me", encoding="utf-8")
    (tmp_path / "dir.properties").write_text("theme=space\n", encoding="utf-8")
    (tmp_path / "nested").mkdir()
    (tmp_path / "nested" / "IMG2.jpg").write_bytes(b"jpg")

    scan = UploadScanner().scan(tmp_path)

    assert set(scan.groups) == {"IMG1", "CLIP1"}
    assert scan.groups["IMG1"].dominant_kind is ResourceKind.IMAGE
    assert scan.groups["CLIP1"].dominant_kind is ResourceKind.VIDEO
    assert [f.name for f in scan.groups["CLIP1"].files] == ["CLIP1.jpg", "CLIP1.mp4"]
    assert scan.properties_file == tmp_path / "dir.properties"
    assert scan.subdirectories == [tmp_path / "nested"]
    assert scan.skipped == [tmp_path / "notes.txt"]


def test_scan_of_empty_directory_yields_nothing(tmp_path: Path) -> None:
    scan = UploadScanner().scan(tmp_path)

    assert scan.groups == {}
    assert scan.properties_file is None
    assert scan.subdirectories == []


def test_last_properties_file_wins(tmp_path: Path) -> None:
    (tmp_path / "a.properties").write_text("theme=a\n", encoding="utf-8")
    (tmp_path / "b.properties").write_text("theme=b\n", encoding="utf-8")

    scan = UploadScanner().scan(tmp_path)

    assert scan.properties_file == tmp_path / "b.properties"


def test_symlinked_directories_are_not_followed(tmp_path: Path) -> None:
    real = tmp_path / "real"
    real.mkdir()
    upload = tmp_path / "upload"
    upload.mkdir()
    (upload / "loop").symlink_to(real, target_is_directory=True)

    scan = UploadScanner().scan(upload)

    assert scan.subdirectories == []
    assert scan.skipped == [upload / "loop"]
