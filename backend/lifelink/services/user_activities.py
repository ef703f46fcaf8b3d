"""User Activity Service: record and read login/register events.

Invariants:
    - Required-field checks run before any statement executes
    - timestamp defaults to the moment the request was received
    - timestamp is stored in UTC whatever offset the client sent
    - Listings are ordered newest first by timestamp
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from lifelink.core.domain_types import USER_UPDATABLE_FIELDS
from lifelink.core.field_rules import to_utc
from lifelink.infrastructure.database import translate_storage_errors
from lifelink.models.user_activity import UserActivity
from lifelink.schemas.user_activity import UserActivityCreate
from lifelink.services.row_gateway import RowGateway

logger = logging.getLogger(__name__)

users = RowGateway(UserActivity, "user", USER_UPDATABLE_FIELDS)
_table = users.table


async def record_activity(db: AsyncSession, body: UserActivityCreate) -> dict:
    """Insert one activity row. Returns the echo payload for the response."""
    body.check_required()

    stmt = insert(_table).values(
        user_id=body.user_id,
        email=body.email,
        login_method=body.login_method,
        activity_type=body.activity_type.value,
        name=body.name,
        phone=body.phone,
        timestamp=to_utc(body.timestamp or datetime.now(timezone.utc)),
        user_agent=body.user_agent,
        platform=body.platform,
    )
    with translate_storage_errors(
        "Failed to record user activity",
        conflict_message="User activity already exists",
    ):
        result = await db.execute(stmt)
        await db.commit()

    row_id = result.inserted_primary_key[0]
    logger.info(
        f"Recorded {body.activity_type.value} for {body.user_id}",
        extra={"resource": _table.name, "row_id": row_id},
    )
    data = {
        "id": row_id,
        "userId": body.user_id,
        "email": body.email,
        "activityType": body.activity_type.value,
    }
    if body.is_registration:
        data["name"] = body.name
    return data


async def list_activities(db: AsyncSession) -> list[dict]:
    return await users.list_all(db, _table.c.timestamp.desc())


async def activities_for_user(db: AsyncSession, user_id: str) -> list[dict]:
    """All rows for a business-level user id, newest first. Never 404s."""
    stmt = (
        select(_table)
        .where(_table.c.user_id == user_id)
        .order_by(_table.c.timestamp.desc())
    )
    return await users.fetch_rows(db, stmt, "Failed to fetch user activities")
