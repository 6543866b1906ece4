# File: tests/test_listing_pipeline.py

"""Listing ingestion pipeline, exercised below the HTTP layer."""

from decimal import Decimal

import pytest
from sqlalchemy import func, select

from factories import listing_form
from yorkrealty.core.errors import (
    InvalidNumericField,
    InvalidUpload,
    MissingFields,
    PersistenceError,
    ValidationError,
)
from yorkrealty.db import crud
from yorkrealty.models.listing import Listing
from yorkrealty.services.listing_service import (
    IncomingUpload,
    coerce_numeric_fields,
    find_missing_fields,
    submit_listing,
)


def _listing_count(db) -> int:
    return db.execute(select(func.count()).select_from(Listing)).scalar_one()


@pytest.fixture
def jpeg_upload(jpeg_bytes):
    return IncomingUpload(content=jpeg_bytes, content_type="image/jpeg", filename="front.jpg")


def test_valid_submission_persists_one_row_with_existing_image(db_session, staging, upload_dir, jpeg_upload):
    result = submit_listing(db_session, staging, listing_form(), jpeg_upload)

    assert _listing_count(db_session) == 1
    row = crud.select_listing_by_id(db_session, result.listing_id)
    assert row.image_path == result.image_path
    assert result.image_path.startswith("/uploads/")

    files = list(upload_dir.iterdir())
    assert len(files) == 1
    assert result.image_path.endswith(files[0].name)


def test_values_are_coerced_and_trimmed(db_session, staging, jpeg_upload):
    form = listing_form(title="  Loft B  ", listing_type="RENT", bathrooms="1.5", price="1250.5")
    result = submit_listing(db_session, staging, form, jpeg_upload)

    row = crud.select_listing_by_id(db_session, result.listing_id)
    assert row.title == "Loft B"
    assert row.listing_type == "rent"
    assert row.bedrooms == 1
    assert Decimal(row.bathrooms) == Decimal("1.5")
    assert Decimal(row.price) == Decimal("1250.50")
    assert row.created_at is not None


def test_missing_upload_is_rejected_without_touching_storage(db_session, staging, upload_dir):
    with pytest.raises(InvalidUpload):
        submit_listing(db_session, staging, listing_form(), None)
    assert _listing_count(db_session) == 0
    assert list(upload_dir.iterdir()) == []


def test_invalid_upload_short_circuits_field_checks(db_session, staging, upload_dir):
    bad = IncomingUpload(content=b"not an image", content_type="image/png", filename="x.png")
    # fields are also missing, but the file gate runs first
    with pytest.raises(InvalidUpload):
        submit_listing(db_session, staging, {}, bad)
    assert list(upload_dir.iterdir()) == []


def test_missing_fields_lists_all_and_removes_staged_file(db_session, staging, upload_dir, jpeg_upload):
    form = listing_form(title="   ", campus="")
    del form["price"]

    with pytest.raises(MissingFields) as exc_info:
        submit_listing(db_session, staging, form, jpeg_upload)

    assert exc_info.value.fields == ["title", "campus", "price"]
    assert _listing_count(db_session) == 0
    assert list(upload_dir.iterdir()) == []


@pytest.mark.parametrize(
    "field,value",
    [
        ("bedrooms", "two"),
        ("bathrooms", "lots"),
        ("square_footage", "400sqft"),
        ("price", "free"),
        ("price", "NaN"),
        ("bedrooms", "1.5"),
        ("bedrooms", "99999999999999999999"),
        ("square_footage", "2147483648"),
        ("square_footage", "1_000"),
        ("bedrooms", "\u0663"),
        ("price", "9\uff10\uff10"),
    ],
)
def test_non_numeric_values_reject_and_clean_up(db_session, staging, upload_dir, jpeg_upload, field, value):
    with pytest.raises(InvalidNumericField) as exc_info:
        submit_listing(db_session, staging, listing_form(**{field: value}), jpeg_upload)

    assert exc_info.value.fields == [field]
    assert field in exc_info.value.message
    assert _listing_count(db_session) == 0
    assert list(upload_dir.iterdir()) == []


def test_bad_listing_type_rejects_and_cleans_up(db_session, staging, upload_dir, jpeg_upload):
    with pytest.raises(ValidationError):
        submit_listing(db_session, staging, listing_form(listing_type="lease"), jpeg_upload)
    assert _listing_count(db_session) == 0
    assert list(upload_dir.iterdir()) == []


def test_persistence_failure_removes_staged_file(db_session, staging, upload_dir, jpeg_upload, monkeypatch):
    def failing_insert(db, **fields):
        raise PersistenceError("Failed to insert listing")

    monkeypatch.setattr(crud, "insert_listing", failing_insert)

    with pytest.raises(PersistenceError):
        submit_listing(db_session, staging, listing_form(), jpeg_upload)

    assert _listing_count(db_session) == 0
    assert list(upload_dir.iterdir()) == []


def test_find_missing_fields_accepts_complete_form():
    assert find_missing_fields(listing_form()) == []


def test_coerce_numeric_fields_names_every_bad_field():
    form = listing_form(bedrooms="-1", bathrooms="1.25", square_footage="0", price="-5")
    with pytest.raises(InvalidNumericField) as exc_info:
        coerce_numeric_fields(form)
    assert exc_info.value.fields == ["bedrooms", "bathrooms", "square_footage", "price"]


def test_coerce_numeric_fields_allows_zero_bedrooms_and_half_baths():
    values = coerce_numeric_fields(listing_form(bedrooms="0", bathrooms="2.5"))
    assert values["bedrooms"] == 0
    assert values["bathrooms"] == Decimal("2.5")
    assert values["square_footage"] == 400
    assert values["price"] == Decimal("900.00")
