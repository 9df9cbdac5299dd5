# qr_api/core/fs.py

from pathlib import Path
from typing import List

from loguru import logger

from qr_api.core.config import Settings


def ensure_dirs(settings: Settings) -> List[Path]:
    """Create the database and uploads directories. Returns the ones created."""
    dirs = [settings.uploads_dir]
    if settings.DB_PATH != ":memory:":
        dirs.append(Path(settings.DB_PATH).resolve().parent)

    created = []
    for d in dirs:
        if not d.exists():
            d.mkdir(parents=True, exist_ok=True)
            logger.info("Created directory {}", d)
            created.append(d)
    return created


def upload_path(settings: Settings, filename: str) -> Path:
    return settings.uploads_dir / filename
