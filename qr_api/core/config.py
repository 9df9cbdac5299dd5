# qr_api/core/config.py
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Annotated, List, Literal, Optional, Union

from pydantic import AnyHttpUrl, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, read from the environment and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    # =========================================================
    # 1. Project info
    # =========================================================
    PROJECT_NAME: str = Field(default="QR Studio API", description="OpenAPI title")
    APP_ENV: Literal["local", "dev", "test", "prod"] = Field(
        default="local",
        description="Runtime environment (local/dev/test/prod)",
    )
    PORT: int = Field(default=8080, description="HTTP port for `qr-api serve`")

    # Prefix used when building public URLs (logoUrl, upload url).
    # Empty means same-origin relative URLs; a gateway may set e.g. "/api".
    PUBLIC_BASE_URL: str = Field(default="", description="Prefix for derived URLs")

    # =========================================================
    # 2. CORS
    # =========================================================
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = Field(
        default=["*"], description="Allowed CORS origins"
    )

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        """Accept a comma separated string as well as a JSON list."""
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, (list, str)):
            return v
        raise ValueError(v)

    # =========================================================
    # 3. Storage
    # =========================================================
    DB_PATH: str = Field(
        default="./.data/db.sqlite",
        description="SQLite database file (':memory:' for an in-memory DB)",
    )
    UPLOADS_PATH: str = Field(
        default="./.data/uploads",
        description="Directory where uploaded logos are stored",
    )

    # =========================================================
    # 4. URL shortening (Kutt)
    # =========================================================
    KUTT_API_KEY: Optional[str] = Field(default=None, description="Kutt API key")
    KUTT_BASE_URL: AnyHttpUrl = Field(
        default="http://kutt:3000", description="Kutt base URL"
    )
    SHORT_DOMAIN: str = Field(
        default="https://mifi.me", description="Public domain of short links"
    )

    # =========================================================
    # 5. Logging
    # =========================================================
    LOG_LEVEL: str = Field(default="INFO")
    LOG_DIR: Optional[str] = Field(
        default=None, description="If set, a rotating log file is written here"
    )

    # =========================================================
    # 6. Helper properties
    # =========================================================
    @property
    def DB_URL(self) -> str:
        """SQLAlchemy URL for DB_PATH."""
        if self.DB_PATH == ":memory:":
            return "sqlite://"
        return f"sqlite:///{self.DB_PATH}"

    @property
    def uploads_dir(self) -> Path:
        return Path(self.UPLOADS_PATH).resolve()

    @property
    def kutt_base(self) -> str:
        return str(self.KUTT_BASE_URL).rstrip("/")

    @property
    def short_domain_base(self) -> str:
        """SHORT_DOMAIN without a trailing slash."""
        return self.SHORT_DOMAIN.rstrip("/")

    @property
    def short_domain_host(self) -> str:
        """Host part of SHORT_DOMAIN (https://mifi.me/ -> mifi.me)."""
        host = self.short_domain_base
        for scheme in ("https://", "http://"):
            if host.startswith(scheme):
                return host[len(scheme):]
        return host


@lru_cache
def get_settings() -> Settings:
    """Cached Settings instance for FastAPI Depends."""
    return Settings()
