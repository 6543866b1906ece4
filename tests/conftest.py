# File: tests/conftest.py

"""Shared pytest fixtures and configuration."""

import os
import tempfile
from pathlib import Path

import pytest

# Environment must be in place before yorkrealty.core.config is imported
_TMP_ROOT = Path(tempfile.mkdtemp(prefix="yorkrealty-tests-"))
os.environ.setdefault("DATABASE_URL", f"sqlite:///{_TMP_ROOT / 'test.db'}")
os.environ.setdefault("UPLOAD_DIR", str(_TMP_ROOT / "uploads"))
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_FORMAT", "text")

from fastapi.testclient import TestClient  # noqa: E402

from factories import make_image_bytes  # noqa: E402
from yorkrealty.api.deps import get_upload_staging  # noqa: E402
from yorkrealty.db.session import SessionLocal, engine  # noqa: E402
from yorkrealty.main import app  # noqa: E402
from yorkrealty.models.base import Base  # noqa: E402
from yorkrealty.models import listing, user  # noqa: E402,F401


@pytest.fixture
def upload_dir() -> Path:
    staging = get_upload_staging()
    staging.provision()
    for path in staging.directory.iterdir():
        path.unlink()
    return staging.directory


@pytest.fixture
def reset_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db_session(reset_db):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(reset_db, upload_dir):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def staging(upload_dir):
    return get_upload_staging()


@pytest.fixture
def jpeg_bytes() -> bytes:
    return make_image_bytes("JPEG")


@pytest.fixture
def png_bytes() -> bytes:
    return make_image_bytes("PNG")
