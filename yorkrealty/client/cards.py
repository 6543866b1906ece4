# yorkrealty/client/cards.py
"""
Card view models for the listings grid, the featured strip and the detail page.

Prices are shown in Canadian dollars with en-CA digit grouping; rentals get
a "/Mo" suffix.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, List, Mapping, Optional, Sequence

PLACEHOLDER_IMAGE = "placeholder.png"
EMPTY_MESSAGE = "No listings match your criteria."
DETAIL_PAGE = "property-detail.html"


@dataclass(frozen=True)
class ListingCard:
    listing_id: Any
    image_src: str
    image_alt: str
    price_label: str
    title: str
    summary: str
    housing_type: str
    campus: str
    location: str
    detail_href: str
    featured: bool = False


def format_amount(value: Any) -> str:
    """en-CA style: thousands separators, at most three fraction digits."""
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        return str(value)
    text = f"{amount:,.3f}".rstrip("0").rstrip(".")
    return text


def format_price(price: Any, listing_type: Optional[str]) -> str:
    suffix = "/Mo" if (listing_type or "").lower() == "rent" else ""
    return f"C${format_amount(price)}{suffix}"


def capitalize_or_na(value: Optional[str]) -> str:
    if not value:
        return "N/A"
    return value[0].upper() + value[1:]


def _number(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def render_card(listing: Mapping[str, Any], featured: bool = False) -> ListingCard:
    title = listing.get("title") or ""
    return ListingCard(
        listing_id=listing.get("id"),
        image_src=listing.get("image_path") or PLACEHOLDER_IMAGE,
        image_alt=title or "Property Image",
        price_label=format_price(listing.get("price"), listing.get("listing_type")),
        title=title,
        summary=(
            f"{_number(listing.get('bedrooms'))} Beds | "
            f"{_number(listing.get('bathrooms'))} Baths | "
            f"{_number(listing.get('square_footage'))} Sq Ft"
        ),
        housing_type=capitalize_or_na(listing.get("housing_type")),
        campus=capitalize_or_na(listing.get("campus")),
        location=f"{listing.get('address', '')}, {listing.get('postal_code', '')}",
        detail_href=f"{DETAIL_PAGE}?id={listing.get('id')}",
        featured=featured,
    )


def render_cards(listings: Sequence[Mapping[str, Any]], featured: bool = False) -> List[ListingCard] | str:
    """Cards for each listing, or the empty-state message when there are none."""
    if not listings:
        return EMPTY_MESSAGE
    return [render_card(listing, featured=featured) for listing in listings]
