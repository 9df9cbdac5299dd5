# qr_api/api/endpoints/shorten.py
from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from loguru import logger

from qr_api.api.deps import get_shorten_client
from qr_api.schemas import ShortenOut, ShortenRequest
from qr_api.services.shorten import ShortenClient, ShortenError, ShortenNotConfiguredError

router = APIRouter()


@router.post("", response_model=ShortenOut)
def shorten(
    payload: ShortenRequest,
    client: Annotated[ShortenClient, Depends(get_shorten_client)],
):
    try:
        result = client.shorten(payload.target_url, payload.custom_slug)
    except ShortenNotConfiguredError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except ShortenError as e:
        logger.warning("Shortening {} failed: {}", payload.target_url, e)
        raise HTTPException(status_code=502, detail=str(e))
    return ShortenOut(short_url=result.short_url)
