from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from remarc.core.config import AppPaths, ContentSettings
from remarc.core.files import ensure_directory
from remarc.infrastructure.db.sqlite import initialize_schema
from remarc.infrastructure.storage.content_store import ContentStore


@dataclass(slots=True)
class InitResult:
    paths_created: list[Path]
    db_path: Path


class ProjectService:
    def __init__(self, paths: AppPaths, settings: ContentSettings | None = None) -> None:
        self.paths = paths
        self.settings = settings or ContentSettings()

    def init_project(self) -> InitResult:
        paths_created: list[Path] = []

        for path in (self.paths.remarc_dir, self.paths.resources_dir, self.paths.upload_dir):
            if not path.exists():
                paths_created.append(path)
            ensure_directory(path)

        paths_created.extend(ContentStore(self.paths.resources_dir, self.settings).ensure_layout())
        initialize_schema(self.paths.db_path)

        return InitResult(paths_created=paths_created, db_path=self.paths.db_path)

    def is_initialized(self) -> bool:
        return self.paths.db_path.exists()
