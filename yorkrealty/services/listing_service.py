# yorkrealty/services/listing_service.py
"""
Listing ingestion pipeline and listing lookups.

submit_listing runs its gates in order, each one short-circuiting the rest:

    1. stage the image (validation happens before anything is written)
    2. required fields present and non-blank
    3. numeric fields coerce (and sit inside the data model's ranges)
    4. listing_type is sale or rent
    5. insert the row with the public image path

Once step 1 has written a file, every failure exit deletes it again, so a
listing row never exists without its image. A file left behind by a failed
delete is tolerated.
"""

import logging
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List, Mapping, Optional, Tuple

from sqlalchemy.orm import Session

from yorkrealty.core.errors import (
    InvalidNumericField,
    InvalidUpload,
    MissingFields,
    NotFound,
    ValidationError,
)
from yorkrealty.db import crud
from yorkrealty.models.listing import Listing
from yorkrealty.services.upload_staging import UploadStaging

logger = logging.getLogger(__name__)

REQUIRED_FIELDS: Tuple[str, ...] = (
    "title",
    "listing_type",
    "housing_type",
    "campus",
    "bedrooms",
    "bathrooms",
    "square_footage",
    "address",
    "postal_code",
    "property_description",
    "price",
    "agent_name",
    "agent_email",
    "agent_phone",
)

INTEGER_FIELDS: Tuple[str, ...] = ("bedrooms", "square_footage")
DECIMAL_FIELDS: Tuple[str, ...] = ("bathrooms", "price")
NUMERIC_FIELDS = frozenset(INTEGER_FIELDS + DECIMAL_FIELDS)

LISTING_TYPES = ("sale", "rent")

MAX_BATHROOMS = Decimal("1000")
MAX_PRICE = Decimal("10000000000")
INTEGER_MAX = 2**31 - 1

# ASCII digits only; int() and Decimal() also take "1_000" and other scripts' digits
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)")


@dataclass(frozen=True)
class IncomingUpload:
    """Raw image as received by the HTTP layer."""

    content: bytes
    content_type: Optional[str]
    filename: str


@dataclass(frozen=True)
class SubmittedListing:
    listing_id: int
    image_path: str


# -----------------------------
# Field gates
# -----------------------------
def find_missing_fields(form_fields: Mapping[str, object]) -> List[str]:
    """Every required field that is absent or blank, in declaration order."""
    missing = []
    for name in REQUIRED_FIELDS:
        value = form_fields.get(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            missing.append(name)
    return missing


def _parse_int(raw: object) -> Optional[int]:
    text = str(raw).strip()
    if not _INTEGER_RE.fullmatch(text):
        return None
    return int(text)


def _parse_decimal(raw: object) -> Optional[Decimal]:
    text = str(raw).strip()
    if not _DECIMAL_RE.fullmatch(text):
        return None
    return Decimal(text)


def coerce_numeric_fields(form_fields: Mapping[str, object]) -> Dict[str, object]:
    """
    Parse bedrooms/square_footage as integers and bathrooms/price as decimals.

    Raises InvalidNumericField naming every field that does not parse or
    falls outside the listing data model (bedrooms >= 0, bathrooms >= 0 in
    half steps, square_footage > 0, price > 0).
    """
    values: Dict[str, object] = {}
    invalid: List[str] = []

    for name in INTEGER_FIELDS:
        parsed = _parse_int(form_fields[name])
        if parsed is None:
            invalid.append(name)
        else:
            values[name] = parsed

    for name in DECIMAL_FIELDS:
        parsed = _parse_decimal(form_fields[name])
        if parsed is None:
            invalid.append(name)
        else:
            values[name] = parsed

    # Upper bounds follow column sizes and precision
    range_checks = {
        "bedrooms": lambda v: 0 <= v <= INTEGER_MAX,
        "bathrooms": lambda v: 0 <= v < MAX_BATHROOMS and (v * 2) % 1 == 0,
        "square_footage": lambda v: 0 < v <= INTEGER_MAX,
        "price": lambda v: 0 < v < MAX_PRICE,
    }
    for name, ok in range_checks.items():
        if name in values and not ok(values[name]):
            invalid.append(name)

    if invalid:
        ordered = [name for name in REQUIRED_FIELDS if name in invalid]
        raise InvalidNumericField(ordered)

    values["price"] = values["price"].quantize(Decimal("0.01"))
    return values


def normalize_listing_type(raw: str) -> str:
    value = raw.strip().lower()
    if value not in LISTING_TYPES:
        raise ValidationError("listing_type must be one of: sale, rent")
    return value


# -----------------------------
# Pipeline
# -----------------------------
def submit_listing(
    db: Session,
    staging: UploadStaging,
    form_fields: Mapping[str, object],
    upload: Optional[IncomingUpload],
) -> SubmittedListing:
    if upload is None:
        raise InvalidUpload()

    staged = staging.stage(upload.content, upload.content_type, upload.filename)

    try:
        missing = find_missing_fields(form_fields)
        if missing:
            raise MissingFields(missing)

        numbers = coerce_numeric_fields(form_fields)
        listing_type = normalize_listing_type(str(form_fields["listing_type"]))

        row = {
            name: str(form_fields[name]).strip()
            for name in REQUIRED_FIELDS
            if name not in NUMERIC_FIELDS
        }
        row.update(numbers)
        row["listing_type"] = listing_type

        image_path = staging.public_path(staged.filename)
        listing = crud.insert_listing(db, image_path=image_path, **row)
    except Exception as exc:
        staging.unstage(staged.path)
        logger.info(
            "Listing submission rejected",
            extra={"reason": type(exc).__name__, "upload_filename": staged.filename},
        )
        raise

    logger.info("Listing created", extra={"listing_id": listing.id, "image_path": image_path})
    return SubmittedListing(listing_id=listing.id, image_path=image_path)


# -----------------------------
# Reads
# -----------------------------
def list_listings(db: Session) -> List[Listing]:
    """All listings, newest first."""
    return crud.select_all_listings(db)


def get_listing(db: Session, listing_id: object) -> Listing:
    """Look up one listing; ids that cannot name a row are simply not found."""
    parsed = _parse_int(listing_id)
    if parsed is None or not 0 < parsed <= INTEGER_MAX:
        raise NotFound("Listing not found")
    listing = crud.select_listing_by_id(db, parsed)
    if listing is None:
        raise NotFound("Listing not found")
    return listing
