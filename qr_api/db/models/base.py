# qr_api/db/models/base.py
from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def new_id() -> str:
    return str(uuid4())


def utcnow_iso() -> str:
    """Current UTC time as `YYYY-MM-DDTHH:MM:SS.mmmZ` (sorts lexicographically)."""
    return (
        datetime.now(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


class Base(DeclarativeBase):
    pass


class UUIDMixin:
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)


class TimestampMixin:
    # Stored as ISO-8601 text; existing databases already hold these columns.
    created_at: Mapped[str] = mapped_column("createdAt", String, nullable=False)
    updated_at: Mapped[str] = mapped_column("updatedAt", String, nullable=False)
