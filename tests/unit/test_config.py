from pathlib import Path

import pytest

from remarc.core.config import ContentSettings, load_paths
from remarc.core.errors import ConfigurationError
from remarc.domain.models.resource_kind import ResourceKind


def test_load_paths_defaults_to_project_root(tmp_path: Path) -> None:
    paths = load_paths(tmp_path, env={})

    assert paths.remarc_dir == tmp_path.resolve() / ".remarc"
    assert paths.db_path == paths.remarc_dir / "remarc.db"
    assert paths.resources_dir == paths.remarc_dir / "resources"
    assert paths.upload_dir == paths.remarc_dir / "upload"


def test_load_paths_honours_environment_overrides(tmp_path: Path) -> None:
    env = {"REMARC_HOME": str(tmp_path / "home"), "REMARC_RESOURCES_DIR": str(tmp_path / "public")}

    paths = load_paths(tmp_path, env=env)

    assert paths.remarc_dir == (tmp_path / "home").resolve()
    assert paths.resources_dir == (tmp_path / "public").resolve()


def test_base_url_resolution() -> None:
    default = ContentSettings.from_env({})
    override = ContentSettings.from_env({"REMARC_BASE_URL": "https://cdn.example"})

    assert default.base_url_for(ResourceKind.IMAGE) == "content/images/"
    assert default.base_url_for(ResourceKind.AUDIO) == "content/audio/"
    assert override.base_url_for(ResourceKind.VIDEO) == "https://cdn.example/content/video/"


def test_folder_names_must_be_plain(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError):
        ContentSettings.from_env({"REMARC_IMAGE_DIR_NAME": "../escape"})

    settings = ContentSettings.from_env({"REMARC_AUDIO_DIR_NAME": "sound"})
    assert settings.destination_dir(tmp_path, ResourceKind.AUDIO) == tmp_path / "sound"
    assert settings.destination_dir(tmp_path, ResourceKind.INFORMATION) is None
