"""
Service layer for health records.

Adds the one relational query, ``list_by_user``, on top of the
generic CRUD operations.  There is no index on ``user_id``: the query
scans every record in key order.  The user reference is never checked,
so records of deleted or unknown users are still returned.
"""

from __future__ import annotations

import logging
from typing import List

from ..core.config import settings
from ..core.errors import Result, StorageError
from ..core.lifecycle import Stamp, lifecycle
from ..core.store import OrderedStore
from ..schemas.health_record import HealthRecord, HealthRecordPayload
from .entity_service import EntityService
from .validation import validate_health_record_payload

logger = logging.getLogger(__name__)


def build_health_record(identity: str, stamp: Stamp, payload: HealthRecordPayload) -> HealthRecord:
    return HealthRecord(
        id=identity,
        user_id=payload.user_id,
        allergies=list(payload.allergies),
        conditions=list(payload.conditions),
        medications=list(payload.medications),
        created_at=stamp.created_at,
        updated_at=stamp.updated_at,
    )


class HealthRecordService(EntityService[HealthRecord, HealthRecordPayload]):
    """Service class for managing health records."""

    def __init__(self, store: OrderedStore[HealthRecord], lifecycle=lifecycle) -> None:
        super().__init__("HealthRecord", store, lifecycle, validate_health_record_payload, build_health_record)

    async def list_by_user(self, user_id: str) -> Result[List[HealthRecord]]:
        """Return the records whose ``user_id`` equals ``user_id``, in key order.

        An empty list is returned when nothing matches, including for
        an empty or unknown ``user_id``.
        """
        try:
            records = self.store.values()
        except StorageError as exc:
            logger.error("Failed to scan health records for user %s: %s", user_id, exc.message)
            return Result.err(StorageError(f"Failed to get health records for user: {exc.message}"))
        return Result.ok([record for record in records if record.user_id == user_id])


health_record_store: OrderedStore[HealthRecord] = OrderedStore(
    settings.health_record_region_id,
    HealthRecord,
    max_key_size=settings.max_key_size,
    max_value_size=settings.max_value_size,
)

health_record_service = HealthRecordService(health_record_store)
