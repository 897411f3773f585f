"""
Health record endpoints for API v1.

Besides CRUD under ``/health-records`` this router exposes
``/users/{user_id}/health-records``, so it defines its paths itself and
is included without a prefix.  The per-user listing does not check that
the user exists: an unknown user simply has no records.
"""

from typing import List

from fastapi import APIRouter, status

from health_records_api.app.api.responses import unwrap_or_raise
from health_records_api.app.schemas.health_record import HealthRecord, HealthRecordPayload
from health_records_api.app.services.health_record_service import health_record_service

router = APIRouter()


@router.post("/health-records/", response_model=HealthRecord, status_code=status.HTTP_201_CREATED)
async def create_health_record(payload: HealthRecordPayload) -> HealthRecord:
    """Create a health record; 400 if ``userId`` is missing or empty."""
    return unwrap_or_raise(await health_record_service.create(payload))


@router.get("/health-records/", response_model=List[HealthRecord])
async def list_health_records() -> List[HealthRecord]:
    return unwrap_or_raise(await health_record_service.list_all())


@router.get("/health-records/{record_id}", response_model=HealthRecord)
async def get_health_record(record_id: str) -> HealthRecord:
    return unwrap_or_raise(await health_record_service.get_by_id(record_id))


@router.put("/health-records/{record_id}", response_model=HealthRecord)
async def update_health_record(record_id: str, payload: HealthRecordPayload) -> HealthRecord:
    """Replace all payload fields of an existing health record."""
    return unwrap_or_raise(await health_record_service.update(record_id, payload))


@router.delete("/health-records/{record_id}", response_model=HealthRecord)
async def delete_health_record(record_id: str) -> HealthRecord:
    return unwrap_or_raise(await health_record_service.delete(record_id))


@router.get("/users/{user_id}/health-records", response_model=List[HealthRecord])
async def list_health_records_for_user(user_id: str) -> List[HealthRecord]:
    """Return the health records referencing ``user_id`` in id order."""
    return unwrap_or_raise(await health_record_service.list_by_user(user_id))
