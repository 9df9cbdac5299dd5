# qr_api/cli.py

from __future__ import annotations
from typing import Optional

import typer
import uvicorn

from qr_api.core.config import get_settings
from qr_api.core.fs import ensure_dirs
from qr_api.core.logger import setup_logging
from qr_api.db.session import build_engine, init_db

app = typer.Typer(help="QR Studio API")


@app.command("serve")
def serve(host: str = "0.0.0.0", port: Optional[int] = None, reload: bool = False):
    """Run the HTTP API (port defaults to PORT)."""
    settings = get_settings()
    uvicorn.run(
        "qr_api.main:app",
        host=host,
        port=port or settings.PORT,
        reload=reload,
    )


@app.command("init-db")
def init_database():
    """Create or migrate the database schema, then exit."""
    settings = get_settings()
    setup_logging(settings)
    ensure_dirs(settings)
    engine = build_engine(settings.DB_URL)
    try:
        init_db(engine)
    finally:
        engine.dispose()
    typer.echo(f"Database ready: {settings.DB_PATH}")


if __name__ == "__main__":
    app()
