"""
Database initialization helpers.

Models are imported here so their tables get registered on Base.metadata
before create_all runs.
"""

import logging

from yorkrealty.db.session import engine
from yorkrealty.models.base import Base
from yorkrealty.models import listing, user  # noqa: F401

logger = logging.getLogger(__name__)


def init_db() -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ensured", extra={"tables": sorted(Base.metadata.tables)})
