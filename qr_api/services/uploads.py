# qr_api/services/uploads.py
"""Logo upload storage on the local filesystem."""
from __future__ import annotations

from pathlib import Path, PurePosixPath, PureWindowsPath
from typing import BinaryIO, Optional
from uuid import uuid4

from loguru import logger

from qr_api.core.config import Settings
from qr_api.core.fs import upload_path

IMAGE_MIME = frozenset(
    {"image/jpeg", "image/png", "image/gif", "image/webp", "image/svg+xml"}
)
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10 MiB
CHUNK_SIZE = 64 * 1024
FALLBACK_EXT = ".bin"


class UploadError(Exception):
    """A rejected upload. The message is shown to the client."""


def storage_filename(original: Optional[str]) -> str:
    """uuid4 name keeping the original extension (".bin" when there is none)."""
    ext = PureWindowsPath(original or "").suffix or FALLBACK_EXT
    return f"{uuid4()}{ext}"


def is_safe_filename(filename: str) -> bool:
    if not filename or ".." in filename:
        return False
    # bare names only, no subdirectories
    if "/" in filename or "\\" in filename:
        return False
    if PurePosixPath(filename).is_absolute() or PureWindowsPath(filename).is_absolute():
        return False
    return True


def save_logo(
    settings: Settings,
    stream: BinaryIO,
    original_filename: Optional[str],
    content_type: Optional[str],
) -> str:
    """
    Store an uploaded logo and return its generated filename.

    Raises UploadError for non-image content types and files over MAX_FILE_SIZE;
    a partially written file is removed.
    """
    if content_type not in IMAGE_MIME:
        raise UploadError("Only image files (jpeg, png, gif, webp, svg) are allowed")

    filename = storage_filename(original_filename)
    dest = upload_path(settings, filename)
    dest.parent.mkdir(parents=True, exist_ok=True)

    size = 0
    try:
        with dest.open("wb") as out:
            while True:
                chunk = stream.read(CHUNK_SIZE)
                if not chunk:
                    break
                size += len(chunk)
                if size > MAX_FILE_SIZE:
                    raise UploadError("File too large: maximum file size is 10 MB")
                out.write(chunk)
    except UploadError:
        dest.unlink(missing_ok=True)
        raise

    logger.info("Stored logo {} ({} bytes, {})", filename, size, content_type)
    return filename


def find_upload(settings: Settings, filename: str) -> Optional[Path]:
    """Path of a stored upload, or None if there is no such file."""
    path = upload_path(settings, filename)
    if path.is_file():
        return path
    return None
