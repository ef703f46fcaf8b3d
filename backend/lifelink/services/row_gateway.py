"""Row Gateway: parameter-bound fetch/update/delete by row id for one table.

Invariants:
    - Every statement is a single-table Core statement with bound parameters
    - update() rejects an empty allow-list intersection BEFORE touching storage
    - get()/update()/delete() raise ResourceNotFoundError when no row is matched,
      including ids that are not unsigned integers
    - Rows leave as plain dicts keyed by column name

Design Decisions:
    - Core statements on Model.__table__ instead of ORM objects: rowcount and
      inserted_primary_key come straight from the cursor, no identity map
    - One gateway instance per resource, messages derived from its noun
"""

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy import Select, delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from lifelink.core.errors import FieldValidationError, ResourceNotFoundError
from lifelink.core.field_rules import Coercer, build_update, parse_row_id
from lifelink.infrastructure.database import translate_storage_errors

logger = logging.getLogger(__name__)


class RowGateway:
    """Generic CRUD-by-id operations shared by users and donors."""

    def __init__(
        self,
        model,
        noun: str,
        allowed: tuple[str, ...],
        coercers: Mapping[str, Coercer] | None = None,
    ):
        self.table = model.__table__
        self.noun = noun
        self.allowed = allowed
        self.coercers = coercers or {}

    @property
    def label(self) -> str:
        return self.noun.capitalize()

    def _key(self, row_id: int | str) -> int:
        """Integer primary key for row_id; a non-numeric id matches no row."""
        key = parse_row_id(row_id)
        if key is None:
            raise ResourceNotFoundError(self.label, row_id)
        return key

    async def fetch_rows(
        self, db: AsyncSession, stmt: Select, failure_message: str,
    ) -> list[dict]:
        """Execute a SELECT and return its rows as dicts."""
        with translate_storage_errors(failure_message):
            result = await db.execute(stmt)
            return [dict(row) for row in result.mappings().all()]

    async def list_all(self, db: AsyncSession, *order_by) -> list[dict]:
        stmt = select(self.table).order_by(*(order_by or (self.table.c.id,)))
        return await self.fetch_rows(db, stmt, f"Failed to fetch {self.noun}s")

    async def get(self, db: AsyncSession, row_id: int | str) -> dict:
        key = self._key(row_id)
        stmt = select(self.table).where(self.table.c.id == key)
        rows = await self.fetch_rows(db, stmt, f"Failed to fetch {self.noun}")
        if not rows:
            raise ResourceNotFoundError(self.label, row_id)
        return rows[0]

    async def update(
        self, db: AsyncSession, row_id: int | str, payload: Mapping[str, Any],
    ) -> None:
        """Apply the allow-listed subset of payload in one UPDATE."""
        plan = build_update(payload, self.allowed, self.coercers)
        if plan.is_empty:
            raise FieldValidationError("No valid fields to update")

        key = self._key(row_id)
        stmt = (
            update(self.table)
            .where(self.table.c.id == key)
            .values(**plan.assignments())
        )
        with translate_storage_errors(f"Failed to update {self.noun}"):
            result = await db.execute(stmt)
            await db.commit()

        if result.rowcount == 0:
            raise ResourceNotFoundError(self.label, row_id)
        logger.info(
            f"{self.label} {key} updated: {', '.join(plan.columns)}",
            extra={"resource": self.table.name, "row_id": key},
        )

    async def delete(self, db: AsyncSession, row_id: int | str) -> None:
        key = self._key(row_id)
        stmt = delete(self.table).where(self.table.c.id == key)
        with translate_storage_errors(f"Failed to delete {self.noun}"):
            result = await db.execute(stmt)
            await db.commit()

        if result.rowcount == 0:
            raise ResourceNotFoundError(self.label, row_id)
        logger.info(
            f"{self.label} {key} deleted",
            extra={"resource": self.table.name, "row_id": key},
        )
