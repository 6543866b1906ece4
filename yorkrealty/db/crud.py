# File: yorkrealty/db/crud.py

"""
Persistence operations for listings and users.

Every SQLAlchemy failure is rolled back and re-raised as PersistenceError,
except a unique-email violation on insert_user, which becomes DuplicateEmail.
The duplicate check relies on the database constraint; there is no
select-then-insert pre-check.
"""

import logging
from typing import Any, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from yorkrealty.core.errors import DuplicateEmail, PersistenceError
from yorkrealty.models.listing import Listing
from yorkrealty.models.user import User

logger = logging.getLogger(__name__)


def _persistence_error(db: Session, action: str, exc: Exception) -> PersistenceError:
    db.rollback()
    err = PersistenceError(f"Failed to {action}")
    logger.error(
        "Persistence failure",
        exc_info=exc,
        extra={"action": action, "incident": err.details},
    )
    return err


# -----------------------------
# Listings
# -----------------------------
def insert_listing(db: Session, **fields: Any) -> Listing:
    listing = Listing(**fields)
    try:
        db.add(listing)
        db.commit()
        db.refresh(listing)
    except SQLAlchemyError as exc:
        raise _persistence_error(db, "insert listing", exc) from exc
    return listing


def select_all_listings(db: Session) -> List[Listing]:
    stmt = select(Listing).order_by(Listing.created_at.desc(), Listing.id.desc())
    try:
        return list(db.execute(stmt).scalars().all())
    except SQLAlchemyError as exc:
        raise _persistence_error(db, "fetch listings", exc) from exc


def select_listing_by_id(db: Session, listing_id: int) -> Optional[Listing]:
    try:
        return db.get(Listing, listing_id)
    except SQLAlchemyError as exc:
        raise _persistence_error(db, "fetch listing", exc) from exc


# -----------------------------
# Users
# -----------------------------
def insert_user(db: Session, *, full_name: str, email: str, password_hash: str) -> User:
    user = User(full_name=full_name, email=email, password_hash=password_hash)
    try:
        db.add(user)
        db.commit()
        db.refresh(user)
    except IntegrityError as exc:
        db.rollback()
        # users.email is the only unique column besides the primary key
        logger.info("Duplicate registration rejected")
        raise DuplicateEmail() from exc
    except SQLAlchemyError as exc:
        raise _persistence_error(db, "insert user", exc) from exc
    return user


def select_users_by_email(db: Session, email: str) -> List[User]:
    """All users with this email, oldest first."""
    stmt = select(User).where(User.email == email).order_by(User.id.asc())
    try:
        return list(db.execute(stmt).scalars().all())
    except SQLAlchemyError as exc:
        raise _persistence_error(db, "fetch users", exc) from exc
