"""
Information endpoint for API v1.

Returns the service name and version together with the number of
stored users and health records.  Useful as a readiness check: it
fails with 500 when the store cannot be read.
"""

from typing import Any, Dict

from fastapi import APIRouter

from health_records_api.app.api.responses import unwrap_or_raise
from health_records_api.app.core.config import settings
from health_records_api.app.services.health_record_service import health_record_service
from health_records_api.app.services.user_service import user_service

router = APIRouter()


@router.get("/", response_model=Dict[str, Any])
async def get_info() -> Dict[str, Any]:
    users = unwrap_or_raise(await user_service.count())
    records = unwrap_or_raise(await health_record_service.count())
    return {
        "name": settings.project_name,
        "version": settings.api_version,
        "users": users,
        "health_records": records,
    }
