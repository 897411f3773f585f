"""
Top-level router for version 1 of the API.

Aggregates the resource routers under a unified prefix.  When new
resources are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import health_records, info, users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
# The health records router defines its own paths (it also serves
# ``/users/{user_id}/health-records``), so it is included without a prefix.
router.include_router(health_records.router, tags=["health-records"])
router.include_router(info.router, prefix="/info", tags=["info"])
