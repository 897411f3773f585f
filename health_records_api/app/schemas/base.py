"""
Shared model configuration.

Attributes are snake_case in Python and camelCase on the wire and in
storage (``createdAt``, ``userId``).  Either spelling is accepted on
input.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StampedModel(CamelModel):
    """Server-assigned fields shared by every stored entity."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str = Field(..., description="Unique identifier assigned at creation")
    created_at: int = Field(..., description="Creation time in nanoseconds since the Unix epoch")
    updated_at: Optional[int] = Field(None, description="Time of the last update; null until first update")
