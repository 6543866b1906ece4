# File: yorkrealty/db/session.py

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from yorkrealty.core.config import settings

SQLALCHEMY_DATABASE_URL = settings.database_url

# One engine (and pool) for the lifetime of the process
engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False} if SQLALCHEMY_DATABASE_URL.startswith("sqlite") else {},
    pool_pre_ping=True,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
