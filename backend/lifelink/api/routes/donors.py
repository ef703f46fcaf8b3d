"""Donor Routes: register, search, fetch, update and delete donors.

Invariants:
    - /donors/search is registered before /donors/{row_id}
    - POST returns 201; all other successes return 200
    - PUT keys are column names and are filtered through the donor allow-list
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from lifelink.core.envelope import success, success_listing
from lifelink.infrastructure.database import get_db
from lifelink.schemas.donor import DonorCreate
from lifelink.services import donors as donor_service
from lifelink.services.donors import donors

router = APIRouter(prefix="/donors", tags=["donors"])


@router.get("")
async def list_donors(db: AsyncSession = Depends(get_db)):
    rows = await donor_service.list_donors(db)
    return success_listing(rows)


@router.get("/search")
async def search_donors(
    blood_type: str | None = Query(None, alias="bloodType"),
    district: str | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """Filter by blood type and/or district; no filters returns everyone."""
    rows = await donor_service.search_donors(db, blood_type, district)
    return success_listing(rows)


@router.get("/{row_id}")
async def get_donor(row_id: str, db: AsyncSession = Depends(get_db)):
    return success(await donors.get(db, row_id))


@router.post("", status_code=status.HTTP_201_CREATED)
async def register_donor(body: DonorCreate, db: AsyncSession = Depends(get_db)):
    data = await donor_service.register_donor(db, body)
    return success(data, "Donor registered successfully!")


@router.put("/{row_id}")
async def update_donor(
    row_id: str,
    updates: dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
):
    await donors.update(db, row_id, updates)
    return success(message="Donor updated successfully")


@router.delete("/{row_id}")
async def delete_donor(row_id: str, db: AsyncSession = Depends(get_db)):
    await donors.delete(db, row_id)
    return success(message="Donor deleted successfully")
