# yorkrealty/client/filters.py
"""
Listing filter predicates used by the browse page.

Listings are plain mappings as returned by GET /listings. All predicates
are ANDed; an unset criterion (None or empty string) matches everything.
"beds" and "baths" accept the sentinel "4+" meaning "four or more".
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, List, Mapping, Optional, Sequence

FOUR_PLUS = "4+"
FEATURED_COUNT = 3

Listing = Mapping[str, Any]


@dataclass(frozen=True)
class ListingFilter:
    text: str = ""
    listing_type: Optional[str] = None
    housing_type: Optional[str] = None
    campus: Optional[str] = None
    beds: Optional[str] = None
    baths: Optional[str] = None


def _unset(value: Optional[str]) -> bool:
    return value is None or str(value).strip() == ""


def _as_decimal(value: Any) -> Optional[Decimal]:
    if value is None:
        return None
    try:
        result = Decimal(str(value).strip())
    except InvalidOperation:
        return None
    return result if result.is_finite() else None


def _matches_text(listing: Listing, text: str) -> bool:
    needle = text.strip().lower()
    if not needle:
        return True
    for key in ("address", "postal_code", "title", "property_description"):
        value = listing.get(key)
        if value and needle in str(value).lower():
            return True
    return False


def _matches_category(listing: Listing, key: str, wanted: Optional[str]) -> bool:
    if _unset(wanted):
        return True
    value = listing.get(key)
    return bool(value) and str(value).strip().lower() == str(wanted).strip().lower()


def _matches_count(listing: Listing, key: str, wanted: Optional[str], integral: bool) -> bool:
    if _unset(wanted):
        return True
    actual = _as_decimal(listing.get(key))
    if actual is None:
        return False

    wanted = str(wanted).strip()
    if wanted == FOUR_PLUS:
        return actual >= 4

    target = _as_decimal(wanted)
    if target is None or (integral and target != target.to_integral_value()):
        return False
    return actual == target


def listing_matches(listing: Listing, criteria: ListingFilter) -> bool:
    return (
        _matches_text(listing, criteria.text or "")
        and _matches_category(listing, "listing_type", criteria.listing_type)
        and _matches_category(listing, "housing_type", criteria.housing_type)
        and _matches_category(listing, "campus", criteria.campus)
        and _matches_count(listing, "bedrooms", criteria.beds, integral=True)
        and _matches_count(listing, "bathrooms", criteria.baths, integral=False)
    )


def apply_filters(collection: Sequence[Listing], criteria: ListingFilter) -> List[Listing]:
    """Listings matching every criterion, in their original order."""
    return [listing for listing in collection if listing_matches(listing, criteria)]


def _created_at(listing: Listing) -> datetime:
    value = listing.get("created_at")
    if isinstance(value, datetime):
        created = value
    elif value:
        created = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    else:
        return datetime.min
    # Naive timestamps are taken as UTC
    if created.tzinfo is not None:
        created = created.astimezone(timezone.utc)
    return created.replace(tzinfo=None)


def featured_listings(collection: Sequence[Listing], count: int = FEATURED_COUNT) -> List[Listing]:
    """The `count` most recently created listings, newest first."""
    return sorted(collection, key=_created_at, reverse=True)[:count]
