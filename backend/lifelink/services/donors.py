"""Donor Service: register, search and read blood donors.

Invariants:
    - weight stored as float, flags stored as JS-truthiness booleans
    - lastDonation / diseaseDetails default to NULL, flags default to False
    - Allow-listed updates are coerced to column types before binding
    - search ANDs the filters that are present; newest registrations first
"""

import logging
from functools import partial

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from lifelink.core.domain_types import DONOR_UPDATABLE_FIELDS
from lifelink.core.field_rules import to_bool, to_date, to_float
from lifelink.infrastructure.database import translate_storage_errors
from lifelink.models.donor import Donor
from lifelink.schemas.donor import DonorCreate
from lifelink.services.row_gateway import RowGateway

logger = logging.getLogger(__name__)

_UPDATE_COERCERS = {
    "weight": to_float,
    "last_donation_date": partial(to_date, field="last_donation_date"),
    "has_disease": to_bool,
    "is_on_medication": to_bool,
    "had_recent_surgery": to_bool,
}

donors = RowGateway(Donor, "donor", DONOR_UPDATABLE_FIELDS, _UPDATE_COERCERS)
_table = donors.table


async def register_donor(db: AsyncSession, body: DonorCreate) -> dict:
    """Insert one donor row. Returns the echo payload for the response."""
    body.check_required()

    stmt = insert(_table).values(
        full_name=body.full_name,
        email=body.email,
        phone=body.phone,
        date_of_birth=body.date_of_birth,
        blood_type=body.blood_type,
        weight=to_float(body.weight),
        gender=body.gender,
        last_donation_date=body.last_donation,
        has_disease=to_bool(body.has_disease),
        disease_details=body.disease_details,
        is_on_medication=to_bool(body.is_on_medication),
        had_recent_surgery=to_bool(body.had_recent_surgery),
        district=body.district,
        area=body.area,
        address=body.address,
        emergency_contact=body.emergency_contact,
        terms_accepted=to_bool(body.terms),
    )
    with translate_storage_errors(
        "Failed to register donor",
        conflict_message="Email already exists in our system",
    ):
        result = await db.execute(stmt)
        await db.commit()

    row_id = result.inserted_primary_key[0]
    logger.info(
        f"Registered donor {row_id} ({body.blood_type}, {body.district})",
        extra={"resource": _table.name, "row_id": row_id},
    )
    return {
        "id": row_id,
        "fullName": body.full_name,
        "email": body.email,
        "bloodType": body.blood_type,
    }


async def list_donors(db: AsyncSession) -> list[dict]:
    return await donors.list_all(db)


async def search_donors(
    db: AsyncSession,
    blood_type: str | None = None,
    district: str | None = None,
) -> list[dict]:
    stmt = select(_table)
    if blood_type:
        stmt = stmt.where(_table.c.blood_type == blood_type)
    if district:
        stmt = stmt.where(_table.c.district == district)
    stmt = stmt.order_by(_table.c.created_at.desc())
    return await donors.fetch_rows(db, stmt, "Failed to search donors")
