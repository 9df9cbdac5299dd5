# qr_api/db/models/project.py

from __future__ import annotations
from typing import Optional

from sqlalchemy import Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column
from .base import Base, UUIDMixin, TimestampMixin

DEFAULT_PROJECT_NAME = "Untitled QR"
DEFAULT_RECIPE_JSON = "{}"


class Project(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "projects"

    name: Mapped[str] = mapped_column(
        String, nullable=False, server_default=text(f"'{DEFAULT_PROJECT_NAME}'")
    )
    original_url: Mapped[str] = mapped_column(
        "originalUrl", Text, nullable=False, server_default=text("''")
    )
    # 0/1; the API exposes it as a bool
    shorten_enabled: Mapped[int] = mapped_column(
        "shortenEnabled", Integer, nullable=False, server_default=text("0")
    )
    short_url: Mapped[Optional[str]] = mapped_column("shortUrl", Text)
    # Opaque styling recipe for the client-side renderer, never parsed here.
    recipe_json: Mapped[str] = mapped_column(
        "recipeJson", Text, nullable=False, server_default=text("'{}'")
    )
    logo_filename: Mapped[Optional[str]] = mapped_column("logoFilename", Text)
    # Soft reference to folders.id (no FK: folder delete detaches projects).
    folder_id: Mapped[Optional[str]] = mapped_column("folderId", Text)
