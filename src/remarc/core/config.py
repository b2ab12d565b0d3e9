from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from remarc.core.errors import ConfigurationError
from remarc.domain.models.resource_kind import ResourceKind


@dataclass(frozen=True)
class AppPaths:
    project_root: Path
    remarc_dir: Path
    db_path: Path
    resources_dir: Path
    upload_dir: Path


DEFAULT_REMARC_DIRNAME = ".remarc"

BASE_URL_ENV = "REMARC_BASE_URL"
DEFAULT_RELATIVE_BASE_URL = "content"
CONTENT_DIR = "/content"


def load_paths(project_root: Path | None = None, env: Mapping[str, str] | None = None) -> AppPaths:
    env = os.environ if env is None else env
    root = (project_root or Path.cwd()).expanduser().resolve()

    remarc_home_raw = env.get("REMARC_HOME")
    if remarc_home_raw:
        remarc_dir = Path(remarc_home_raw).expanduser().resolve()
    else:
        remarc_dir = root / DEFAULT_REMARC_DIRNAME

    resources_raw = env.get("REMARC_RESOURCES_DIR")
    if resources_raw:
        resources_dir = Path(resources_raw).expanduser().resolve()
    else:
        resources_dir = remarc_dir / "resources"

    return AppPaths(
        project_root=root,
        remarc_dir=remarc_dir,
        db_path=remarc_dir / "remarc.db",
        resources_dir=resources_dir,
        upload_dir=remarc_dir / "upload",
    )


@dataclass(frozen=True)
class ContentSettings:
    """Destination folders and public URLs for each content kind."""

    image_dir_name: str = "images"
    audio_dir_name: str = "audio"
    video_dir_name: str = "video"
    image_url_path: str = "/images/"
    audio_url_path: str = "/audio/"
    video_url_path: str = "/video/"
    base_url_override: str | None = None
    default_base_url: str = DEFAULT_RELATIVE_BASE_URL
    content_dir: str = CONTENT_DIR

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> ContentSettings:
        env = os.environ if env is None else env
        settings = cls(
            image_dir_name=env.get("REMARC_IMAGE_DIR_NAME") or cls.image_dir_name,
            audio_dir_name=env.get("REMARC_AUDIO_DIR_NAME") or cls.audio_dir_name,
            video_dir_name=env.get("REMARC_VIDEO_DIR_NAME") or cls.video_dir_name,
            base_url_override=env.get(BASE_URL_ENV) or None,
        )
        for name in (settings.image_dir_name, settings.audio_dir_name, settings.video_dir_name):
            if Path(name).name != name or name in (".", ".."):
                raise ConfigurationError(f"Destination folder name must be a plain name: {name!r}")
        return settings

    def dir_name_for(self, kind: ResourceKind) -> str | None:
        return {
            ResourceKind.IMAGE: self.image_dir_name,
            ResourceKind.AUDIO: self.audio_dir_name,
            ResourceKind.VIDEO: self.video_dir_name,
        }.get(kind)

    def destination_dir(self, resources_root: Path, kind: ResourceKind) -> Path | None:
        name = self.dir_name_for(kind)
        return resources_root / name if name else None

    def base_url_for(self, kind: ResourceKind | None) -> str:
        if self.base_url_override:
            base = self.base_url_override + self.content_dir
        else:
            base = self.default_base_url
        subpath = {
            ResourceKind.IMAGE: self.image_url_path,
            ResourceKind.AUDIO: self.audio_url_path,
            ResourceKind.VIDEO: self.video_url_path,
        }.get(kind, "")
        return base + subpath
