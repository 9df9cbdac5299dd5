# qr_api/schemas/__init__.py

from .common import AppBaseModel, ID_PATTERN
from .project import ProjectCreate, ProjectUpdate, ProjectOut, ProjectListItem
from .folder import FolderCreate, FolderUpdate, FolderOut
from .upload import UploadOut
from .shorten import ShortenRequest, ShortenOut

__all__ = [
    "AppBaseModel", "ID_PATTERN",
    "ProjectCreate", "ProjectUpdate", "ProjectOut", "ProjectListItem",
    "FolderCreate", "FolderUpdate", "FolderOut",
    "UploadOut",
    "ShortenRequest", "ShortenOut",
]
