# qr_api/schemas/upload.py
from .common import AppBaseModel


class UploadOut(AppBaseModel):
    filename: str
    url: str
