from __future__ import annotations

import logging
import zipfile
import zlib
from pathlib import Path

from remarc.core.errors import UploadError
from remarc.core.files import ensure_directory

logger = logging.getLogger(__name__)


def extract_upload_archive(archive: Path, upload_root: Path) -> int:
    """Extract a zip upload into ``upload_root`` and return the number of files written."""
    if not archive.is_file():
        raise UploadError(f"Archive not found: {archive}")

    ensure_directory(upload_root)
    root = upload_root.resolve()
    extracted = 0

    try:
        with zipfile.ZipFile(archive) as zf:
            members = zf.infolist()
            for member in members:
                target = (root / member.filename).resolve()
                if target != root and root not in target.parents:
                    raise UploadError(f"Archive entry escapes upload directory: {member.filename}")
            for member in members:
                zf.extract(member, root)
                if not member.is_dir():
                    extracted += 1
    except (zipfile.BadZipFile, zlib.error, EOFError) as exc:
        raise UploadError(f"Invalid zip archive {archive.name}: {exc}") from exc
    except (NotImplementedError, RuntimeError) as exc:
        # unsupported compression method or encrypted entry
        raise UploadError(f"Cannot extract {archive.name}: {exc}") from exc
    except OSError as exc:
        raise UploadError(f"Could not extract {archive.name} into {root}: {exc}") from exc

    logger.info("Extracted %d files from %s into %s", extracted, archive, root)
    return extracted
