"""Donor Schemas: registration payload.

Invariants:
    - All DONOR_REQUIRED fields must be truthy (weight 0 counts as missing)
    - weight accepts numbers or numeric strings; coerced later by to_float
    - Flags accept any JSON scalar; coerced later by to_bool
"""

from datetime import date

from lifelink.core.domain_types import DONOR_REQUIRED
from lifelink.core.errors import FieldValidationError
from lifelink.core.field_rules import missing_fields
from lifelink.schemas.common import CamelModel

Flag = bool | int | float | str | None


class DonorCreate(CamelModel):
    """POST /donors body."""
    full_name: str | None = None
    email: str | None = None
    phone: str | None = None
    date_of_birth: date | None = None
    blood_type: str | None = None
    weight: float | str | None = None
    gender: str | None = None
    last_donation: date | None = None
    has_disease: Flag = None
    disease_details: str | None = None
    is_on_medication: Flag = None
    had_recent_surgery: Flag = None
    district: str | None = None
    area: str | None = None
    address: str | None = None
    emergency_contact: str | None = None
    terms: Flag = None

    def check_required(self) -> None:
        missing = missing_fields(self.model_dump(), DONOR_REQUIRED)
        if missing:
            raise FieldValidationError(
                "All required fields must be filled", missing,
            )
