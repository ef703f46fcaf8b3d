"""User Activity Schemas: login/register event payload.

Invariants:
    - activity_type limited to ActivityType values
    - userId, email, loginMethod, activityType required; name required for register
"""

from datetime import datetime

from lifelink.core.domain_types import ActivityType, USER_ACTIVITY_REQUIRED
from lifelink.core.errors import FieldValidationError
from lifelink.core.field_rules import missing_fields
from lifelink.schemas.common import CamelModel


class UserActivityCreate(CamelModel):
    """POST /users body."""
    user_id: str | None = None
    email: str | None = None
    login_method: str | None = None
    activity_type: ActivityType | None = None
    name: str | None = None
    phone: str | None = None
    timestamp: datetime | None = None
    user_agent: str | None = None
    platform: str | None = None

    @property
    def is_registration(self) -> bool:
        return self.activity_type == ActivityType.REGISTER

    def check_required(self) -> None:
        missing = missing_fields(self.model_dump(), USER_ACTIVITY_REQUIRED)
        if missing:
            raise FieldValidationError(
                "User ID, email, login method, and activity type are required",
                missing,
            )
        if self.is_registration and not self.name:
            raise FieldValidationError(
                "Name is required for registration", ["name"],
            )
