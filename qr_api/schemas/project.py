# qr_api/schemas/project.py
from __future__ import annotations

from typing import Annotated, Any, Dict, Optional

from pydantic import StrictBool, StringConstraints, field_validator

from .common import ID_PATTERN, AppBaseModel, reject_null

ResourceIdStr = Annotated[str, StringConstraints(pattern=ID_PATTERN)]


class ProjectCreate(AppBaseModel):
    name: Optional[str] = None
    original_url: Optional[str] = None
    shorten_enabled: Optional[StrictBool] = None
    short_url: Optional[str] = None
    recipe_json: Optional[str] = None
    logo_filename: Optional[str] = None
    folder_id: Optional[ResourceIdStr] = None

    @field_validator(
        "name", "original_url", "shorten_enabled", "recipe_json", mode="before"
    )
    @classmethod
    def not_null(cls, v):
        return reject_null(v)

    def to_patch(self) -> Dict[str, Any]:
        """
        Only the fields the client actually sent (explicit nulls included),
        with shortenEnabled converted to its 0/1 storage form.
        """
        patch = self.model_dump(exclude_unset=True)
        if "shorten_enabled" in patch:
            patch["shorten_enabled"] = 1 if patch["shorten_enabled"] else 0
        return patch


class ProjectUpdate(ProjectCreate):
    pass


class ProjectOut(AppBaseModel):
    id: str
    name: str
    created_at: str
    updated_at: str
    original_url: str
    shorten_enabled: bool
    short_url: Optional[str] = None
    recipe_json: str
    logo_filename: Optional[str] = None
    folder_id: Optional[str] = None
    logo_url: Optional[str] = None


class ProjectListItem(AppBaseModel):
    id: str
    name: str
    created_at: str
    updated_at: str
    logo_filename: Optional[str] = None
    folder_id: Optional[str] = None
    logo_url: Optional[str] = None
