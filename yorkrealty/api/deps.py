# File: yorkrealty/api/deps.py

from collections.abc import Generator
from functools import lru_cache
from pathlib import Path

from sqlalchemy.orm import Session

from yorkrealty.core.config import settings
from yorkrealty.db.session import SessionLocal
from yorkrealty.services.upload_staging import UploadStaging


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a SQLAlchemy session.

    Usage in route functions:
        db: Session = Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@lru_cache
def get_upload_staging() -> UploadStaging:
    """Process-wide upload staging area configured from settings."""
    return UploadStaging(
        directory=Path(settings.upload_dir),
        url_prefix=settings.upload_url_prefix,
        max_bytes=settings.max_upload_bytes,
        allowed_extensions=settings.allowed_image_extensions,
    )
