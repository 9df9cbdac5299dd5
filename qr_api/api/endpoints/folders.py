# qr_api/api/endpoints/folders.py
from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException, Response, status
from loguru import logger

from qr_api.api.deps import DbSession, ResourceId
from qr_api.db import crud
from qr_api.schemas import FolderCreate, FolderOut, FolderUpdate

router = APIRouter()

NOT_FOUND = "Folder not found"


@router.get("", response_model=List[FolderOut])
def list_folders(db: DbSession):
    return crud.list_folders(db)


@router.post("", response_model=FolderOut, status_code=status.HTTP_201_CREATED)
def create_folder(payload: FolderCreate, db: DbSession):
    folder = crud.create_folder(db, payload.to_patch())
    logger.info("Created folder {} (sortOrder={})", folder.id, folder.sort_order)
    return folder


@router.get("/{folder_id}", response_model=FolderOut)
def get_folder(folder_id: ResourceId, db: DbSession):
    folder = crud.get_folder(db, folder_id)
    if folder is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return folder


@router.put("/{folder_id}", response_model=FolderOut)
def update_folder(folder_id: ResourceId, payload: FolderUpdate, db: DbSession):
    folder = crud.update_folder(db, folder_id, payload.to_patch())
    if folder is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return folder


@router.delete("/{folder_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_folder(folder_id: ResourceId, db: DbSession):
    # projects in the folder become uncategorized, they are not deleted
    if not crud.delete_folder(db, folder_id):
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    logger.info("Deleted folder {}", folder_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
