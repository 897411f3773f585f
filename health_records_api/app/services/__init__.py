"""
Service layer.

Each service validates payloads, stamps identifiers and timestamps,
and reads or writes its entity's ordered store.  Services return
``Result`` values instead of raising, so API handlers decide how to
present failures.
"""

from .health_record_service import HealthRecordService, health_record_service
from .user_service import UserService, user_service

__all__ = ["HealthRecordService", "UserService", "health_record_service", "user_service"]
