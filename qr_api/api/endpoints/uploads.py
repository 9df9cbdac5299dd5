# qr_api/api/endpoints/uploads.py
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, File, HTTPException, UploadFile
from fastapi.responses import FileResponse

from qr_api.api.deps import AppSettings, public_url
from qr_api.schemas import UploadOut
from qr_api.services.uploads import find_upload, is_safe_filename, save_logo

router = APIRouter()


@router.post("/logo", response_model=UploadOut)
def upload_logo(settings: AppSettings, file: Optional[UploadFile] = File(default=None)):
    if file is None:
        raise HTTPException(status_code=400, detail="No file uploaded")
    # UploadError propagates to the global handler (400)
    filename = save_logo(settings, file.file, file.filename, file.content_type)
    return UploadOut(filename=filename, url=public_url(settings, filename))


# `:path` so that encoded slashes reach the check below instead of a 404
@router.get("/{filename:path}")
def get_upload(filename: str, settings: AppSettings):
    if not is_safe_filename(filename):
        raise HTTPException(status_code=400, detail="Invalid filename")
    path = find_upload(settings, filename)
    if path is None:
        raise HTTPException(status_code=404, detail="Not found")
    return FileResponse(path)
