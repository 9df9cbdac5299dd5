# qr_api/db/session.py

from __future__ import annotations
from typing import Generator

from fastapi import Request
from loguru import logger
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from qr_api.db.models import Base


def build_engine(db_url: str) -> Engine:
    if db_url in ("sqlite://", "sqlite:///:memory:"):
        # one shared connection, otherwise every session sees an empty DB
        return create_engine(
            db_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            future=True,
        )
    return create_engine(
        db_url,
        connect_args={"check_same_thread": False} if db_url.startswith("sqlite") else {},
        future=True,
    )


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        bind=engine,
        autoflush=False,
        autocommit=False,
        future=True,
        expire_on_commit=False,
    )


def init_db(engine: Engine) -> None:
    """
    Create the tables if missing, then add projects.folderId for databases
    created before folders existed. Safe to run on every startup.
    """
    Base.metadata.create_all(bind=engine)
    try:
        with engine.begin() as conn:
            conn.exec_driver_sql("ALTER TABLE projects ADD COLUMN folderId TEXT")
        logger.info("Migrated projects table: added folderId column")
    except OperationalError:
        # duplicate column: already migrated
        logger.debug("projects.folderId already present")


def get_db(request: Request) -> Generator[Session, None, None]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
