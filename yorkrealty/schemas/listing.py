# File: yorkrealty/schemas/listing.py

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


# -----------------------------
# DB-layer serializers
# -----------------------------

class ListingRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    listing_type: str
    housing_type: str
    campus: str
    bedrooms: int
    bathrooms: float
    square_footage: int
    address: str
    postal_code: str
    property_description: str
    image_path: str
    price: float
    agent_name: str
    agent_email: str
    agent_phone: str
    created_at: datetime


# -----------------------------
# Create response
# -----------------------------

class ListingCreateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str = "Listing created successfully"
    listing_id: int = Field(serialization_alias="listingId")
    image_url: str = Field(serialization_alias="imageUrl")
