"""
Business logic for users.

Users live in their own region of the ordered store.  The module-level
``user_service`` is created once at import and shared by every
request.
"""

from ..core.config import settings
from ..core.lifecycle import Stamp, lifecycle
from ..core.store import OrderedStore
from ..schemas.user import User, UserPayload
from .entity_service import EntityService
from .validation import validate_user_payload


def build_user(identity: str, stamp: Stamp, payload: UserPayload) -> User:
    return User(
        id=identity,
        name=payload.name,
        age=payload.age,
        location=payload.location,
        created_at=stamp.created_at,
        updated_at=stamp.updated_at,
    )


class UserService(EntityService[User, UserPayload]):
    """CRUD operations for users."""

    def __init__(self, store: OrderedStore[User], lifecycle=lifecycle) -> None:
        super().__init__("User", store, lifecycle, validate_user_payload, build_user)


user_store: OrderedStore[User] = OrderedStore(
    settings.user_region_id,
    User,
    max_key_size=settings.max_key_size,
    max_value_size=settings.max_value_size,
)

user_service = UserService(user_store)
