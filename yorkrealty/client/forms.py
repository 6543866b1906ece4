# yorkrealty/client/forms.py
"""
Form checks the browser runs before submitting.

These only improve the user experience; the API validates again.
Part of the client library; the API does not import it.
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Any, List, Mapping, Optional

PHONE_PATTERN = re.compile(r"^[0-9]{3}-[0-9]{3}-[0-9]{4}$")

# field -> (minimum, message)
NUMERIC_MINIMUMS = {
    "bedrooms": (1, "Bedrooms must be a number greater than or equal to 1."),
    "bathrooms": (1, "Bathrooms must be a number greater than or equal to 1."),
    "square_footage": (100, "Square Footage must be a number greater than or equal to 100."),
    "price": (1, "Price must be a number greater than or equal to 1."),
}


def _to_decimal(value: Any) -> Optional[Decimal]:
    try:
        result = Decimal(str(value).strip())
    except InvalidOperation:
        return None
    return result if result.is_finite() else None


def validate_listing_form(fields: Mapping[str, Any]) -> List[str]:
    """Messages for every problem found; an empty list means the form may be sent."""
    errors: List[str] = []

    phone = str(fields.get("agent_phone") or "")
    if not PHONE_PATTERN.match(phone):
        errors.append("Agent Phone must be in 123-456-7890 format.")

    for name, (minimum, message) in NUMERIC_MINIMUMS.items():
        value = _to_decimal(fields.get(name, ""))
        if value is None or value < minimum:
            errors.append(message)

    return errors


def passwords_match(password: str, confirm_password: str) -> bool:
    return password == confirm_password
