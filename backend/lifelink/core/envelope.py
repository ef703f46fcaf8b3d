"""Response Envelope: success shapes for the uniform {success, data, message, count} body.

Invariants:
    - success_listing always sets count == len(data)
    - Keys with no value are omitted, never sent as null
    - Failure envelopes are built by LifelinkError.to_response (core/errors.py)
"""

from collections.abc import Sequence
from typing import Any


def success(data: Any = None, message: str | None = None) -> dict:
    """Envelope for single-item reads, creates, updates and deletes."""
    body: dict[str, Any] = {"success": True}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return body


def success_listing(rows: Sequence[Any]) -> dict:
    """Envelope for list endpoints."""
    data = list(rows)
    return {"success": True, "data": data, "count": len(data)}
