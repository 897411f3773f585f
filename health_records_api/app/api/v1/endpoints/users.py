"""
User endpoints for API v1.

CRUD routes for users.  ``DELETE`` returns the removed user rather
than an empty body so callers get the deleted content back.
"""

from typing import List

from fastapi import APIRouter, status

from health_records_api.app.api.responses import unwrap_or_raise
from health_records_api.app.schemas.user import User, UserPayload
from health_records_api.app.services.user_service import user_service

router = APIRouter()


@router.post("/", response_model=User, status_code=status.HTTP_201_CREATED)
async def create_user(payload: UserPayload) -> User:
    """Create a user; 400 if name or location is empty or age is not positive."""
    return unwrap_or_raise(await user_service.create(payload))


@router.get("/", response_model=List[User])
async def list_users() -> List[User]:
    """Return all users ordered by id."""
    return unwrap_or_raise(await user_service.list_all())


@router.get("/{user_id}", response_model=User)
async def get_user(user_id: str) -> User:
    return unwrap_or_raise(await user_service.get_by_id(user_id))


@router.put("/{user_id}", response_model=User)
async def update_user(user_id: str, payload: UserPayload) -> User:
    """Replace name, age and location of an existing user."""
    return unwrap_or_raise(await user_service.update(user_id, payload))


@router.delete("/{user_id}", response_model=User)
async def delete_user(user_id: str) -> User:
    # Health records of the user are left in place.
    return unwrap_or_raise(await user_service.delete(user_id))
