# qr_api/api/deps.py
from __future__ import annotations

from typing import Annotated, Optional

from fastapi import Depends, Path
from sqlalchemy.orm import Session

from qr_api.core.config import Settings, get_settings
from qr_api.db.session import get_db
from qr_api.schemas import ID_PATTERN
from qr_api.services.shorten import ShortenClient

# Malformed ids fail here (400) before any lookup; unknown ones are 404 later.
ResourceId = Annotated[str, Path(pattern=ID_PATTERN, description="Resource UUID")]

DbSession = Annotated[Session, Depends(get_db)]
AppSettings = Annotated[Settings, Depends(get_settings)]


def public_url(settings: Settings, filename: Optional[str]) -> Optional[str]:
    """`{PUBLIC_BASE_URL}/uploads/{filename}`, or None without a filename."""
    if not filename:
        return None
    return f"{settings.PUBLIC_BASE_URL}/uploads/{filename}"


def get_shorten_client(settings: AppSettings) -> ShortenClient:
    return ShortenClient(settings)
