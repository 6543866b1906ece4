# File: yorkrealty/models/listing.py

"""
Listing model.

A row is only ever inserted after its image was written to the upload
directory; image_path is the public path of that file (e.g. /uploads/<name>).
Listings are never updated or deleted through the API.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, Integer, Numeric, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from yorkrealty.models.base import Base


class Listing(Base):
    __tablename__ = "listings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)

    # "sale" | "rent"
    listing_type: Mapped[str] = mapped_column(String(10), nullable=False)
    housing_type: Mapped[str] = mapped_column(String(50), nullable=False)
    campus: Mapped[str] = mapped_column(String(100), nullable=False)

    bedrooms: Mapped[int] = mapped_column(Integer, nullable=False)
    bathrooms: Mapped[Decimal] = mapped_column(Numeric(4, 1), nullable=False)
    square_footage: Mapped[int] = mapped_column(Integer, nullable=False)

    address: Mapped[str] = mapped_column(String(255), nullable=False)
    postal_code: Mapped[str] = mapped_column(String(20), nullable=False)
    property_description: Mapped[str] = mapped_column(Text, nullable=False)

    image_path: Mapped[str] = mapped_column(String(1024), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)

    agent_name: Mapped[str] = mapped_column(String(255), nullable=False)
    agent_email: Mapped[str] = mapped_column(String(255), nullable=False)
    agent_phone: Mapped[str] = mapped_column(String(50), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        index=True,
    )
