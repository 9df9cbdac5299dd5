# qr_api/api/routes.py
from fastapi import APIRouter

from qr_api.api.endpoints import (
    folders,
    health,
    projects,
    shorten,
    uploads,
)

api_router = APIRouter()

# ==============================================================================
# 1. Designs
# ==============================================================================
api_router.include_router(projects.router, prefix="/projects", tags=["Projects"])
api_router.include_router(folders.router, prefix="/folders", tags=["Folders"])

# ==============================================================================
# 2. Assets & links
# ==============================================================================
api_router.include_router(uploads.router, prefix="/uploads", tags=["Uploads"])
api_router.include_router(shorten.router, prefix="/shorten", tags=["Shorten"])

# ==============================================================================
# 3. System
# ==============================================================================
api_router.include_router(health.router, tags=["Health"])
