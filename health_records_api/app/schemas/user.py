"""
Pydantic models for user data.

``UserPayload`` is what callers send to create or update a user;
``User`` is the stored snapshot returned by every user operation.
Semantic rules (non-empty name, positive age) are enforced by
``services.validation`` so that they surface as service-level
validation errors rather than schema errors.
"""

from pydantic import Field

from .base import CamelModel, StampedModel


class UserPayload(CamelModel):
    """Caller-controlled user fields."""

    name: str = Field(..., examples=["Ana"])
    # Strict so that JSON booleans are not coerced to 0 or 1.
    age: int = Field(..., strict=True, examples=[30])
    location: str = Field(..., examples=["NYC"])


class User(StampedModel):
    """Stored user snapshot."""

    name: str
    age: int
    location: str
