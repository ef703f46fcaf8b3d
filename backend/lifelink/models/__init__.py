"""ORM Models: SQLAlchemy declarative tables for the two gateway resources.

Invariants:
    - All models inherit from Base (db/base.py)
    - Services execute Core statements against Model.__table__; no ORM identity map

Design Decisions:
    - One file per table for locality
    - All models imported here so Base.metadata is complete for create_all
"""

from lifelink.models.user_activity import UserActivity  # noqa: F401
from lifelink.models.donor import Donor  # noqa: F401
