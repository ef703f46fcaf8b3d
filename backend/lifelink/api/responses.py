"""Pretty JSON Response: two-space indented bodies for every endpoint."""

import json
from typing import Any

from fastapi.responses import JSONResponse


class PrettyJSONResponse(JSONResponse):
    """JSONResponse rendered with indent=2, UTF-8, non-ASCII preserved."""

    def render(self, content: Any) -> bytes:
        return json.dumps(
            content, ensure_ascii=False, allow_nan=False, indent=2,
        ).encode("utf-8")
