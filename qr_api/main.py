# qr_api/main.py
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

# Config & Logger
from qr_api.core.config import Settings, get_settings
from qr_api.core.errors import register_exception_handlers
from qr_api.core.fs import ensure_dirs
from qr_api.core.logger import setup_logging
from qr_api.db.session import build_engine, build_session_factory, init_db

# Routers
from qr_api.api.routes import api_router


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the API. Passing `settings` pins them for every request
    (tests, embedding); otherwise they come from the environment.
    """
    cfg = settings or get_settings()

    # ==========================================================================
    # 1. Lifespan
    # ==========================================================================
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # [Startup]
        setup_logging(cfg)
        ensure_dirs(cfg)
        engine = build_engine(cfg.DB_URL)
        init_db(engine)
        app.state.engine = engine
        app.state.session_factory = build_session_factory(engine)
        logger.info(
            "QR API starting (env={}, db={}, uploads={})",
            cfg.APP_ENV,
            cfg.DB_PATH,
            cfg.UPLOADS_PATH,
        )

        yield

        # [Shutdown]
        engine.dispose()
        logger.info("QR API shutting down")

    app = FastAPI(
        title=cfg.PROJECT_NAME,
        version="0.1.0",
        lifespan=lifespan,
    )
    if settings is not None:
        app.dependency_overrides[get_settings] = lambda: settings

    # ==========================================================================
    # 2. Middleware & error handlers
    # ==========================================================================
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.BACKEND_CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    # ==========================================================================
    # 3. Routers
    # ==========================================================================
    app.include_router(api_router)

    return app


app = create_app()
