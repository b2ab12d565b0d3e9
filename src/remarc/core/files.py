from __future__ import annotations

import os
import shutil
from pathlib import Path


def ensure_directory(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def split_filename(filename: str) -> tuple[str, str]:
    """Split ``name`` into (base, extension) on the last dot.

    ``"a.b.jpg"`` gives ``("a.b", "jpg")``; a name without a dot has an empty
    extension.
    """
    base, dot, extension = filename.rpartition(".")
    if not dot:
        return filename, ""
    return base, extension


def copy_file_to_directory(src: Path, dest_dir: Path) -> Path:
    """Copy ``src`` into ``dest_dir`` under its own name, replacing any existing file."""
    ensure_directory(dest_dir)
    dst = dest_dir / src.name
    temp_path = dest_dir / f".{src.name}.tmp"
    try:
        shutil.copy2(src, temp_path)
        os.replace(temp_path, dst)
    except OSError:
        temp_path.unlink(missing_ok=True)
        raise
    return dst


def force_delete(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()
