"""Field Rules: required-field checks, value coercion and the partial-update builder.

Invariants:
    - Every function here is pure: same input, same output, no IO
    - to_bool follows JavaScript truthiness, so "false" and [] are True
    - build_update never emits a column outside the allow-list
    - build_update preserves allow-list order for both columns and values
    - A key present with a None value IS applied (sets the column to NULL)

Design Decisions:
    - Truthiness is explicit instead of bool(): Python treats [] and {} as
      falsy, clients of this API were written against JS semantics
    - UpdatePlan is separate from statement execution so it is testable
      without a database
"""

import math
import re
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any

from lifelink.core.errors import FieldValidationError

_LEADING_NUMBER = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

Coercer = Callable[[Any], Any]


def to_bool(value: Any) -> bool:
    """Truthy-to-bool with JavaScript semantics."""
    if value is None or value is False:
        return False
    if value is True:
        return True
    if isinstance(value, (int, float)):
        return value != 0 and not math.isnan(value)
    if isinstance(value, str):
        return value != ""
    return True


def to_float(value: Any, field: str = "weight") -> float | None:
    """Parse the leading number of value, like parseFloat. None stays None."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise FieldValidationError(f"{field} must be a number", [field])
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = _LEADING_NUMBER.match(str(value))
        if not match:
            raise FieldValidationError(f"{field} must be a number", [field])
        number = float(match.group(0))
    if not math.isfinite(number):
        raise FieldValidationError(f"{field} must be a number", [field])
    return number


def to_date(value: Any, field: str = "date") -> date | None:
    """Normalize ISO strings and datetimes to a date. Blank becomes None."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    day, clock = text[:10], text[11:]
    try:
        parsed = date.fromisoformat(day)
        if len(text) > 10:
            # Anything after the date must be a full "T"/space time part
            if text[10] not in "T ":
                raise ValueError(text)
            datetime.fromisoformat(f"{day}T{_strip_zulu(clock)}")
        return parsed
    except ValueError:
        raise FieldValidationError(
            f"{field} must be an ISO date (YYYY-MM-DD)", [field],
        )


def _strip_zulu(clock: str) -> str:
    return clock[:-1] + "+00:00" if clock.endswith(("Z", "z")) else clock


def to_utc(value: datetime) -> datetime:
    """Shift an aware datetime to UTC. Naive values are taken as UTC already."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc)


def parse_row_id(value: Any) -> int | None:
    """Row ids are unsigned integers; anything else cannot name a row."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    text = str(value)
    if not text.isascii() or not text.isdigit():
        return None
    return int(text)


def missing_fields(payload: Mapping[str, Any], required: Iterable[str]) -> list[str]:
    """Names of required keys whose values are absent or falsy."""
    return [name for name in required if not to_bool(payload.get(name))]


@dataclass(frozen=True)
class UpdatePlan:
    """Ordered column names and their bound values for one UPDATE."""
    columns: tuple[str, ...]
    values: tuple[Any, ...]

    @property
    def is_empty(self) -> bool:
        return not self.columns

    def assignments(self) -> dict[str, Any]:
        return dict(zip(self.columns, self.values))


def build_update(
    payload: Mapping[str, Any],
    allowed: Iterable[str],
    coercers: Mapping[str, Coercer] | None = None,
) -> UpdatePlan:
    """Intersect payload with the allow-list, in allow-list order."""
    coercers = coercers or {}
    columns: list[str] = []
    values: list[Any] = []
    for name in allowed:
        if name not in payload:
            continue
        value = payload[name]
        if name in coercers:
            value = coercers[name](value)
        columns.append(name)
        values.append(value)
    return UpdatePlan(columns=tuple(columns), values=tuple(values))
