"""
Pydantic schema definitions for payloads and stored entities.

Payload schemas carry the caller-controlled fields only; entity schemas
add the server-assigned ``id`` and timestamps.  Entities are frozen:
an update replaces the stored snapshot instead of mutating it.
"""

from .health_record import HealthRecord, HealthRecordPayload
from .user import User, UserPayload

__all__ = ["HealthRecord", "HealthRecordPayload", "User", "UserPayload"]
