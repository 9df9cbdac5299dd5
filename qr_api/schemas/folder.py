# qr_api/schemas/folder.py
from __future__ import annotations

from typing import Any, Dict, Optional, Union

from pydantic import StrictFloat, StrictInt, field_validator

from .common import AppBaseModel, reject_null


class FolderCreate(AppBaseModel):
    name: Optional[str] = None
    # any JSON number; strings and booleans are rejected
    sort_order: Optional[Union[StrictInt, StrictFloat]] = None

    @field_validator("name", "sort_order", mode="before")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)

    @field_validator("sort_order")
    @classmethod
    def integral_as_int(cls, v):
        if isinstance(v, float) and v.is_integer():
            return int(v)
        return v

    def to_patch(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class FolderUpdate(FolderCreate):
    pass


class FolderOut(AppBaseModel):
    id: str
    name: str
    sort_order: Union[int, float]
