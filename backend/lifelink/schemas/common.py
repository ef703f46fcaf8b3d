"""Shared schema base: camelCase wire names over snake_case attributes."""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts camelCase JSON keys (and snake_case), ignores unknown keys."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore",
    )

    @field_validator("*", mode="before")
    @classmethod
    def empty_string_is_absent(cls, v: Any) -> Any:
        return None if v == "" else v
