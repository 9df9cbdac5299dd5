# qr_api/core/logger.py
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from qr_api.core.config import Settings

LOG_FILE_NAME = "qr_api.log"


def setup_logging(settings: Settings) -> Optional[str]:
    """
    Configure loguru.
    - Console: settings.LOG_LEVEL and above, on stderr
    - File: DEBUG and above, only when LOG_DIR is set

    Returns the log file path, if any.
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=settings.LOG_LEVEL.upper(),
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
    )

    if not settings.LOG_DIR:
        return None

    log_dir = Path(settings.LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    # rotate daily, keep 10 days, zip old files
    logger.add(
        str(log_file),
        rotation="00:00",
        retention="10 days",
        compression="zip",
        level="DEBUG",
        enqueue=True,
        encoding="utf-8",
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{line} - {message}",
    )

    return str(log_file)
