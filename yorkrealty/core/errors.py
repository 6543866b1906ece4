# File: yorkrealty/core/errors.py

"""
Error taxonomy for the listings API.

Validation errors carry enough detail for the caller to fix the request.
Persistence and internal errors only expose an opaque reference; the full
cause is logged server-side under the same reference.
"""

import uuid
from typing import Any, Dict, Iterable, List, Optional


def new_incident_ref() -> str:
    return uuid.uuid4().hex[:12]


class YorkRealtyError(Exception):
    """Base exception for the York Realty backend."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.message}


class InvalidUpload(YorkRealtyError):
    """Missing, oversized, or non-image upload."""

    status_code = 400
    default_message = (
        "No image file uploaded or invalid file type. "
        "Please upload a JPEG, JPG, PNG, or GIF image (Max 5MB)."
    )


class _FieldListError(YorkRealtyError):
    status_code = 400
    prefix = ""

    def __init__(self, fields: Iterable[str], message: Optional[str] = None):
        self.fields: List[str] = list(fields)
        super().__init__(message or f"{self.prefix}: {', '.join(self.fields)}")

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.message, "fields": self.fields}


class MissingFields(_FieldListError):
    """One or more required form fields are absent or blank."""

    prefix = "Missing or empty required fields"


class InvalidNumericField(_FieldListError):
    """A numeric form field did not parse or is out of range."""

    prefix = "Invalid numeric value for"


class ValidationError(YorkRealtyError):
    status_code = 400
    default_message = "Invalid request."


class DuplicateEmail(YorkRealtyError):
    status_code = 409
    default_message = "Email already registered. Please use a different email or log in."


class NotFound(YorkRealtyError):
    status_code = 404
    default_message = "Not found"


class InvalidCredential(YorkRealtyError):
    status_code = 401
    default_message = "Invalid email or password"


class _ServerError(YorkRealtyError):
    status_code = 500

    def __init__(self, message: Optional[str] = None, details: Optional[str] = None):
        super().__init__(message)
        self.details = details or new_incident_ref()

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.message, "details": self.details}


class PersistenceError(_ServerError):
    """Wraps any storage-layer failure."""

    default_message = "Storage operation failed"


class InternalError(_ServerError):
    """Unexpected failure outside the storage layer."""

    default_message = "Internal server error"
