# File: tests/factories.py

"""Builders for request payloads and in-memory images."""

import io
import os

from PIL import Image


def make_image_bytes(fmt: str = "JPEG", size=(32, 32), noise: bool = False) -> bytes:
    """Encode a real image in memory; noise=True produces a large, incompressible one."""
    if noise:
        img = Image.frombytes("RGB", size, os.urandom(size[0] * size[1] * 3))
    else:
        img = Image.new("RGB", size, color=(200, 30, 30))
    buf = io.BytesIO()
    img.save(buf, format=fmt)
    return buf.getvalue()


def listing_form(**overrides) -> dict:
    form = {
        "title": "Studio A",
        "listing_type": "rent",
        "housing_type": "apartment",
        "campus": "keele",
        "bedrooms": "1",
        "bathrooms": "1",
        "square_footage": "400",
        "address": "123 Main St",
        "postal_code": "M3J 1P3",
        "property_description": "Bright studio close to campus.",
        "price": "900",
        "agent_name": "Jordan Lee",
        "agent_email": "jordan@example.com",
        "agent_phone": "416-555-0123",
    }
    form.update(overrides)
    return form


def listing_row(listing_id, **overrides) -> dict:
    """A listing as the browser receives it from GET /listings."""
    row = {
        "id": listing_id,
        "title": f"Listing {listing_id}",
        "listing_type": "rent",
        "housing_type": "apartment",
        "campus": "keele",
        "bedrooms": 1,
        "bathrooms": 1.0,
        "square_footage": 500,
        "address": f"{listing_id} Main St",
        "postal_code": "M3J 1P3",
        "property_description": "Close to campus.",
        "image_path": f"/uploads/{listing_id}.jpg",
        "price": 1000.0,
        "agent_name": "Jordan Lee",
        "agent_email": "jordan@example.com",
        "agent_phone": "416-555-0123",
        "created_at": f"2024-01-{listing_id:02d}T12:00:00",
    }
    row.update(overrides)
    return row
