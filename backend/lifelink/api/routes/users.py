"""User Activity Routes: record, list, fetch, update and delete activity rows.

Invariants:
    - POST returns 201; all other successes return 200
    - PUT applies only name/phone/email; anything else in the body is ignored
    - GET /users/activities/{user_id} returns an empty list, never 404
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from lifelink.core.envelope import success, success_listing
from lifelink.infrastructure.database import get_db
from lifelink.schemas.user_activity import UserActivityCreate
from lifelink.services import user_activities
from lifelink.services.user_activities import users

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_activity(
    body: UserActivityCreate, db: AsyncSession = Depends(get_db),
):
    """Record a login or registration event."""
    data = await user_activities.record_activity(db, body)
    message = (
        "User registration recorded successfully!"
        if body.is_registration
        else "Login activity recorded successfully!"
    )
    return success(data, message)


@router.get("")
async def list_activities(db: AsyncSession = Depends(get_db)):
    rows = await user_activities.list_activities(db)
    return success_listing(rows)


@router.get("/activities/{user_id}")
async def list_user_activities(user_id: str, db: AsyncSession = Depends(get_db)):
    """Activity history for one business-level user id."""
    rows = await user_activities.activities_for_user(db, user_id)
    return success_listing(rows)


@router.get("/{row_id}")
async def get_activity(row_id: str, db: AsyncSession = Depends(get_db)):
    return success(await users.get(db, row_id))


@router.put("/{row_id}")
async def update_user(
    row_id: str,
    updates: dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
):
    """Partial profile update limited to name, phone and email."""
    await users.update(db, row_id, updates)
    return success(message="User updated successfully")


@router.delete("/{row_id}")
async def delete_user(row_id: str, db: AsyncSession = Depends(get_db)):
    await users.delete(db, row_id)
    return success(message="User deleted successfully")
