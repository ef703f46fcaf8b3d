"""Donor ORM: blood donor registration record.

Invariants:
    - email is unique across donors (duplicate insert is a conflict, not a failure)
    - Boolean flags are non-nullable and default to False
    - created_at defaults to insertion time and drives search ordering
"""

from datetime import date, datetime, timezone

from sqlalchemy import String, Text, Integer, Float, Boolean, Date, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from lifelink.db.base import Base


class Donor(Base):
    """Registered blood donor."""
    __tablename__ = "donors"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    phone: Mapped[str] = mapped_column(String(50), nullable=False)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    blood_type: Mapped[str] = mapped_column(String(5), nullable=False, index=True)
    weight: Mapped[float] = mapped_column(Float, nullable=False)
    gender: Mapped[str] = mapped_column(String(20), nullable=False)
    last_donation_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    has_disease: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    disease_details: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_on_medication: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    had_recent_surgery: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    district: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    area: Mapped[str] = mapped_column(String(100), nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    emergency_contact: Mapped[str] = mapped_column(String(100), nullable=False)
    terms_accepted: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
