# yorkrealty/api/v1/routes_listings.py
"""
Listing endpoints: create (multipart with one image), list, search, featured, detail.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from yorkrealty.api.deps import get_db, get_upload_staging
from yorkrealty.client.filters import ListingFilter, apply_filters, featured_listings
from yorkrealty.core.errors import InvalidUpload
from yorkrealty.schemas.listing import ListingCreateResponse, ListingRead
from yorkrealty.services.listing_service import (
    IncomingUpload,
    get_listing,
    list_listings,
    submit_listing,
)
from yorkrealty.services.upload_staging import UploadStaging

router = APIRouter(tags=["listings"])

IMAGE_FIELD = "image_file"


async def _read_single_upload(form, max_bytes: int) -> Optional[IncomingUpload]:
    """
    Pull the one image out of the multipart form.

    At most max_bytes + 1 bytes are read so an oversized body is refused
    without being held or written in full.
    """
    uploads = [value for _, value in form.multi_items() if isinstance(value, UploadFile)]
    if not uploads:
        return None
    if len(uploads) != 1 or uploads[0] is not form.get(IMAGE_FIELD):
        raise InvalidUpload("Exactly one image file must be uploaded in the 'image_file' field.")

    upload = uploads[0]
    content = await upload.read(max_bytes + 1)
    return IncomingUpload(
        content=content,
        content_type=upload.content_type,
        filename=upload.filename or "",
    )


@router.post(
    "/listings",
    response_model=ListingCreateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a listing with its image",
)
async def create_listing(
    request: Request,
    db: Session = Depends(get_db),
    staging: UploadStaging = Depends(get_upload_staging),
):
    """
    Form data (multipart/form-data):
    - image_file: JPEG, JPG, PNG or GIF, max 5MB
    - title, listing_type, housing_type, campus, bedrooms, bathrooms,
      square_footage, address, postal_code, property_description, price,
      agent_name, agent_email, agent_phone

    Response JSON:
    {
      "success": true,
      "message": "Listing created successfully",
      "listingId": 12,
      "imageUrl": "/uploads/1718000000000-ab12cd3.jpg"
    }
    """
    async with request.form() as form:
        upload = await _read_single_upload(form, staging.max_bytes)
        fields = {name: value for name, value in form.multi_items() if isinstance(value, str)}

    result = await run_in_threadpool(submit_listing, db, staging, fields, upload)
    return ListingCreateResponse(listing_id=result.listing_id, image_url=result.image_path)


@router.get("/listings", response_model=list[ListingRead], summary="All listings, newest first")
def read_listings(db: Session = Depends(get_db)):
    return list_listings(db)


@router.get("/listings/featured", response_model=list[ListingRead], summary="Three newest listings")
def read_featured_listings(db: Session = Depends(get_db)):
    rows = [ListingRead.model_validate(row).model_dump() for row in list_listings(db)]
    return featured_listings(rows)


@router.get("/listings/search", response_model=list[ListingRead], summary="Filter listings")
def search_listings(
    text: str = "",
    listing_type: Optional[str] = None,
    housing_type: Optional[str] = None,
    campus: Optional[str] = None,
    beds: Optional[str] = None,
    baths: Optional[str] = None,
    db: Session = Depends(get_db),
):
    criteria = ListingFilter(
        text=text,
        listing_type=listing_type,
        housing_type=housing_type,
        campus=campus,
        beds=beds,
        baths=baths,
    )
    rows = [ListingRead.model_validate(row).model_dump() for row in list_listings(db)]
    return apply_filters(rows, criteria)


@router.get("/listings/{listing_id}", response_model=ListingRead, summary="One listing")
def read_listing(listing_id: str, db: Session = Depends(get_db)):
    return get_listing(db, listing_id)
