"""
Payload validation.

Validation runs in two stages.  The structural stage coerces the raw
payload (a schema instance or a plain mapping) into its pydantic
schema; the semantic stage applies the field rules that the schema
cannot express.  Both stages raise :class:`ValidationError` and
neither touches the store, so a rejected payload never causes a write.
"""

from collections.abc import Mapping
from typing import Any, Dict, Iterable, Type, TypeVar

from pydantic import BaseModel, ValidationError as SchemaError

from ..core.errors import ValidationError
from ..schemas.health_record import HealthRecordPayload
from ..schemas.user import UserPayload

P = TypeVar("P", bound=BaseModel)

# Leading location segments added by FastAPI for request errors.
_REQUEST_PARTS = {"body", "query", "path"}


def describe_schema_errors(errors: Iterable[Dict[str, Any]]) -> str:
    """Summarise pydantic errors as one message naming the offending fields."""
    fields = set()
    for err in errors:
        loc = list(err.get("loc", ()))
        if len(loc) > 1 and loc[0] in _REQUEST_PARTS:
            loc = loc[1:]
        fields.add(".".join(str(part) for part in loc) or "payload")
    return f"Invalid or missing fields in payload: {', '.join(sorted(fields))}."


def coerce_payload(payload: Any, model: Type[P]) -> P:
    """Return ``payload`` as an instance of ``model`` or raise ``ValidationError``."""
    if isinstance(payload, model):
        return payload
    if isinstance(payload, BaseModel):
        payload = payload.model_dump()
    if not isinstance(payload, Mapping):
        raise ValidationError(f"Payload must be an object, got {type(payload).__name__}.")
    try:
        return model.model_validate(payload)
    except SchemaError as exc:
        raise ValidationError(describe_schema_errors(exc.errors())) from exc


def validate_user_payload(payload: Any) -> UserPayload:
    data = coerce_payload(payload, UserPayload)
    if not data.name.strip():
        raise ValidationError("Missing required field in payload: name.")
    if not data.location.strip():
        raise ValidationError("Missing required field in payload: location.")
    if data.age <= 0:
        raise ValidationError("Age must be greater than zero.")
    return data


def validate_health_record_payload(payload: Any) -> HealthRecordPayload:
    """Only ``user_id`` is required (non-blank); the list fields may be empty."""
    data = coerce_payload(payload, HealthRecordPayload)
    if not data.user_id or not data.user_id.strip():
        raise ValidationError("Missing required field in payload: userId.")
    return data
