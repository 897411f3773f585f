"""
Pydantic schemas for health records.

A health record belongs to a user through ``user_id``.  The reference
is never checked against the user store: a record may point at a user
that does not exist or has been deleted.
"""

from typing import List, Optional

from pydantic import Field

from .base import CamelModel, StampedModel


class HealthRecordPayload(CamelModel):
    """Caller-controlled health record fields.

    ``user_id`` is optional at the schema level so that a missing value
    is reported by the validation pipeline with a readable message.
    """

    user_id: Optional[str] = Field(None, examples=["4c1f3a1e-8d1b-4d8e-9a6c-6f0b2f9d7a10"])
    allergies: List[str] = Field(default_factory=list, examples=[["penicillin"]])
    conditions: List[str] = Field(default_factory=list, examples=[["asthma"]])
    medications: List[str] = Field(default_factory=list, examples=[["salbutamol"]])


class HealthRecord(StampedModel):
    """Stored health record snapshot."""

    user_id: str
    allergies: List[str] = Field(default_factory=list)
    conditions: List[str] = Field(default_factory=list)
    medications: List[str] = Field(default_factory=list)
