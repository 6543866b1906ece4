# File: yorkrealty/core/config.py

import os
from functools import lru_cache
from typing import List

from pydantic import BaseModel, Field, field_validator


class Settings(BaseModel):
    PROJECT_NAME: str = "York Realty API"
    VERSION: str = "0.1.0"

    # Routes are served at the root (/listings, /register, /login) unless overridden
    api_prefix: str = os.getenv("API_PREFIX", "")
    debug: bool = os.getenv("DEBUG", "false").lower() == "true"

    # CORS ("*" mirrors the permissive default of the browser front-end)
    backend_cors_origins: List[str] = Field(
        default=os.getenv("BACKEND_CORS_ORIGINS", "*"), validate_default=True
    )

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./yorkrealty.db")

    # Image uploads
    upload_dir: str = os.getenv("UPLOAD_DIR", "uploads")
    upload_url_prefix: str = Field(
        default=os.getenv("UPLOAD_URL_PREFIX", "/uploads"), validate_default=True
    )
    max_upload_bytes: int = int(os.getenv("MAX_UPLOAD_BYTES", str(5 * 1024 * 1024)))
    allowed_image_extensions: List[str] = ["jpeg", "jpg", "png", "gif"]

    # Credential hashing (bcrypt cost factor)
    bcrypt_rounds: int = int(os.getenv("BCRYPT_ROUNDS", "10"))

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
    log_format: str = os.getenv("LOG_FORMAT", "json").lower()

    @field_validator("backend_cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, list):
            return v
        return []

    @field_validator("upload_url_prefix")
    @classmethod
    def normalize_url_prefix(cls, v: str) -> str:
        return "/" + v.strip("/")


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
