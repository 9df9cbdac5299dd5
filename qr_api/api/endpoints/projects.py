# qr_api/api/endpoints/projects.py
from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException, Response, status
from loguru import logger

from qr_api.api.deps import AppSettings, DbSession, ResourceId, public_url
from qr_api.core.config import Settings
from qr_api.db import crud
from qr_api.db.models import Project
from qr_api.schemas import ProjectCreate, ProjectListItem, ProjectOut, ProjectUpdate

router = APIRouter()

NOT_FOUND = "Project not found"


def _to_out(project: Project, settings: Settings) -> ProjectOut:
    out = ProjectOut.model_validate(project)
    out.logo_url = public_url(settings, project.logo_filename)
    return out


@router.post("", response_model=ProjectOut, status_code=status.HTTP_201_CREATED)
def create_project(payload: ProjectCreate, db: DbSession, settings: AppSettings):
    project = crud.create_project(db, payload.to_patch())
    logger.info("Created project {}", project.id)
    return _to_out(project, settings)


@router.get("", response_model=List[ProjectListItem])
def list_projects(db: DbSession, settings: AppSettings):
    items = []
    for row in crud.list_projects(db):
        item = ProjectListItem.model_validate(row)
        item.logo_url = public_url(settings, row.logo_filename)
        items.append(item)
    return items


@router.get("/{project_id}", response_model=ProjectOut)
def get_project(project_id: ResourceId, db: DbSession, settings: AppSettings):
    project = crud.get_project(db, project_id)
    if project is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return _to_out(project, settings)


@router.put("/{project_id}", response_model=ProjectOut)
def update_project(
    project_id: ResourceId,
    payload: ProjectUpdate,
    db: DbSession,
    settings: AppSettings,
):
    project = crud.update_project(db, project_id, payload.to_patch())
    if project is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return _to_out(project, settings)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_project(project_id: ResourceId, db: DbSession):
    if not crud.delete_project(db, project_id):
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    logger.info("Deleted project {}", project_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
