# qr_api/db/crud.py
"""
Storage access for projects and folders.

Every function takes an explicit Session. Lookups by id return None (or False
for deletes) when the row does not exist; SQLAlchemy errors propagate.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy import delete, func, select, update
from sqlalchemy.engine import Row
from sqlalchemy.orm import Session

from qr_api.db.models import (
    DEFAULT_FOLDER_NAME,
    DEFAULT_PROJECT_NAME,
    DEFAULT_RECIPE_JSON,
    Folder,
    Project,
    new_id,
    utcnow_iso,
)

# Fields a patch may clear by sending an explicit None.
NULLABLE_PROJECT_FIELDS = ("short_url", "logo_filename", "folder_id")
# Fields where None is treated as "not supplied".
REQUIRED_PROJECT_FIELDS = ("name", "original_url", "shorten_enabled", "recipe_json")

PROJECT_DEFAULTS: Dict[str, Any] = {
    "name": DEFAULT_PROJECT_NAME,
    "original_url": "",
    "shorten_enabled": 0,
    "short_url": None,
    "recipe_json": DEFAULT_RECIPE_JSON,
    "logo_filename": None,
    "folder_id": None,
}


# -----------------------------------------------------------------------------
# Projects
# -----------------------------------------------------------------------------
def create_project(db: Session, data: Dict[str, Any]) -> Project:
    now = utcnow_iso()
    values = {
        key: data[key] if data.get(key) is not None else default
        for key, default in PROJECT_DEFAULTS.items()
    }
    project = Project(id=new_id(), created_at=now, updated_at=now, **values)
    db.add(project)
    db.commit()
    db.refresh(project)
    return project


def get_project(db: Session, project_id: str) -> Optional[Project]:
    return db.get(Project, project_id)


def list_projects(db: Session) -> List[Row]:
    """Light rows for the project list (no recipe / url fields)."""
    stmt = select(
        Project.id,
        Project.name,
        Project.created_at,
        Project.updated_at,
        Project.logo_filename,
        Project.folder_id,
    ).order_by(
        Project.updated_at.desc(),
        Project.created_at.desc(),
        Project.id.desc(),
    )
    return list(db.execute(stmt).all())


def update_project(
    db: Session, project_id: str, patch: Dict[str, Any]
) -> Optional[Project]:
    """
    Partial update. Keys missing from `patch` keep their stored value; the
    nullable fields are cleared by an explicit None. updatedAt always moves.
    """
    project = get_project(db, project_id)
    if project is None:
        return None

    for key in REQUIRED_PROJECT_FIELDS:
        if patch.get(key) is not None:
            setattr(project, key, patch[key])
    for key in NULLABLE_PROJECT_FIELDS:
        if key in patch:
            setattr(project, key, patch[key])
    project.updated_at = utcnow_iso()

    db.commit()
    db.refresh(project)
    return project


def delete_project(db: Session, project_id: str) -> bool:
    result = db.execute(delete(Project).where(Project.id == project_id))
    db.commit()
    return result.rowcount > 0


# -----------------------------------------------------------------------------
# Folders
# -----------------------------------------------------------------------------
def count_folders(db: Session) -> int:
    return db.scalar(select(func.count()).select_from(Folder)) or 0


def list_folders(db: Session) -> List[Folder]:
    stmt = select(Folder).order_by(Folder.sort_order.asc(), Folder.name.asc())
    return list(db.scalars(stmt).all())


def create_folder(db: Session, data: Dict[str, Any]) -> Folder:
    name = data.get("name")
    sort_order = data.get("sort_order")
    folder = Folder(
        id=new_id(),
        name=name if name is not None else DEFAULT_FOLDER_NAME,
        # append after the existing folders by default
        sort_order=sort_order if sort_order is not None else count_folders(db),
    )
    db.add(folder)
    db.commit()
    db.refresh(folder)
    return folder


def get_folder(db: Session, folder_id: str) -> Optional[Folder]:
    return db.get(Folder, folder_id)


def update_folder(
    db: Session, folder_id: str, patch: Dict[str, Any]
) -> Optional[Folder]:
    folder = get_folder(db, folder_id)
    if folder is None:
        return None

    if patch.get("name") is not None:
        folder.name = patch["name"]
    if patch.get("sort_order") is not None:
        folder.sort_order = patch["sort_order"]

    db.commit()
    db.refresh(folder)
    return folder


def delete_folder(db: Session, folder_id: str) -> bool:
    """
    Detach the folder's projects, then delete the folder. Both statements
    commit together.
    """
    try:
        db.execute(
            update(Project)
            .where(Project.folder_id == folder_id)
            .values(folder_id=None)
        )
        result = db.execute(delete(Folder).where(Folder.id == folder_id))
        db.commit()
    except Exception:
        db.rollback()
        raise
    return result.rowcount > 0
