# yorkrealty/client/browser.py
"""
Browse-page engine: fetch the listing collection once, then filter locally.

Part of the client library for front-ends and scripts; the API does not
import it.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from yorkrealty.client.cards import ListingCard, render_cards
from yorkrealty.client.filters import ListingFilter, apply_filters, featured_listings

logger = logging.getLogger(__name__)


class ListingBrowser:
    """
    Holds the collection fetched from GET /listings for one page load.

    `http` is any httpx.Client pointed at the API (FastAPI's TestClient is one).
    """

    def __init__(self, http: httpx.Client, listings_path: str = "/listings"):
        self.http = http
        self.listings_path = listings_path
        self._listings: Optional[List[Dict[str, Any]]] = None

    def load(self) -> List[Dict[str, Any]]:
        if self._listings is None:
            response = self.http.get(self.listings_path)
            response.raise_for_status()
            self._listings = response.json()
            logger.debug("Listings fetched", extra={"count": len(self._listings)})
        return self._listings

    def reload(self) -> List[Dict[str, Any]]:
        self._listings = None
        return self.load()

    def filter(self, criteria: ListingFilter) -> List[Dict[str, Any]]:
        return apply_filters(self.load(), criteria)

    def featured(self) -> List[Dict[str, Any]]:
        return featured_listings(self.load())

    def filtered_cards(self, criteria: ListingFilter) -> List[ListingCard] | str:
        return render_cards(self.filter(criteria))

    def featured_cards(self) -> List[ListingCard] | str:
        return render_cards(self.featured(), featured=True)
