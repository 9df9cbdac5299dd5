# qr_api/schemas/shorten.py
from __future__ import annotations

from typing import Optional

from pydantic import AnyUrl, TypeAdapter, field_validator

from .common import AppBaseModel

_URL = TypeAdapter(AnyUrl)


class ShortenRequest(AppBaseModel):
    target_url: str
    custom_slug: Optional[str] = None

    @field_validator("target_url")
    @classmethod
    def check_url(cls, v: str) -> str:
        # validate only; the upstream receives the URL exactly as sent
        _URL.validate_python(v)
        return v


class ShortenOut(AppBaseModel):
    short_url: str
