# qr_api/db/models/__init__.py

from .base import Base, UUIDMixin, TimestampMixin, new_id, utcnow_iso
from .project import Project, DEFAULT_PROJECT_NAME, DEFAULT_RECIPE_JSON
from .folder import Folder, DEFAULT_FOLDER_NAME

__all__ = [
    "Base", "UUIDMixin", "TimestampMixin", "new_id", "utcnow_iso",
    "Project", "Folder",
    "DEFAULT_PROJECT_NAME", "DEFAULT_RECIPE_JSON", "DEFAULT_FOLDER_NAME",
]
