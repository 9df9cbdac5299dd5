# qr_api/db/models/folder.py

from __future__ import annotations
from typing import Union

from sqlalchemy import Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column
from .base import Base, UUIDMixin

DEFAULT_FOLDER_NAME = "Folder"


class Folder(UUIDMixin, Base):
    __tablename__ = "folders"

    name: Mapped[str] = mapped_column(
        String, nullable=False, server_default=text(f"'{DEFAULT_FOLDER_NAME}'")
    )
    # INTEGER affinity; fractional values are kept as sent
    sort_order: Mapped[Union[int, float]] = mapped_column(
        "sortOrder", Integer, nullable=False, server_default=text("0")
    )
