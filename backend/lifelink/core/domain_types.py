"""Domain Types: activity enum and the per-resource update allow-lists.

Invariants:
    - Allow-lists are ordered tuples of column names (order fixes bound-value order)
    - Donor allow-list never contains email, blood_type, date_of_birth, gender, terms_accepted
    - Required-field tuples list payload attribute names, not column names
"""

from enum import Enum


class ActivityType(str, Enum):
    """Kind of event recorded in the users table."""
    LOGIN = "login"
    REGISTER = "register"


# ─── Allow-lists ─────────────────────────────────────────────────

USER_UPDATABLE_FIELDS: tuple[str, ...] = ("name", "phone", "email")

DONOR_UPDATABLE_FIELDS: tuple[str, ...] = (
    "full_name", "phone", "weight", "last_donation_date", "has_disease",
    "disease_details", "is_on_medication", "had_recent_surgery", "district",
    "area", "address", "emergency_contact",
)


# ─── Required fields at creation ─────────────────────────────────

USER_ACTIVITY_REQUIRED: tuple[str, ...] = (
    "user_id", "email", "login_method", "activity_type",
)

DONOR_REQUIRED: tuple[str, ...] = (
    "full_name", "email", "phone", "date_of_birth", "blood_type", "weight",
    "gender", "district", "area", "address", "emergency_contact",
)
