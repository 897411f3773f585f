"""
Generic CRUD service over an ordered store.

``EntityService`` implements create, read, update and delete for one
entity kind.  It is parameterised with the store holding the
snapshots, a validator for caller payloads and a ``build`` callable
that combines an identity, a timestamp stamp and a validated payload
into a stored entity.  ``services.user_service`` and
``services.health_record_service`` instantiate it for users and
health records.

Every operation returns a :class:`~health_records_api.app.core.errors.Result`.
Validation and existence checks always complete before the store is
written, so a failed call leaves the store unchanged.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, List, TypeVar

from pydantic import BaseModel

from ..core.errors import NotFoundError, Result, StorageError, ValidationError
from ..core.lifecycle import RecordLifecycle, Stamp
from ..core.store import OrderedStore

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=BaseModel)
P = TypeVar("P", bound=BaseModel)


class EntityService(Generic[E, P]):
    """CRUD operations for one entity kind.

    Parameters
    ----------
    name : str
        Entity name used in error messages (e.g. ``"User"``).
    store : OrderedStore
        Store owning the entity snapshots.
    lifecycle : RecordLifecycle
        Source of identifiers and timestamps.
    validator : Callable[[Any], P]
        Validates a raw payload and returns the normalised payload;
        raises ``ValidationError`` on failure.
    build : Callable[[str, Stamp, P], E]
        Builds the stored entity from an id, a stamp and a payload.
    """

    def __init__(
        self,
        name: str,
        store: OrderedStore[E],
        lifecycle: RecordLifecycle,
        validator: Callable[[Any], P],
        build: Callable[[str, Stamp, P], E],
    ) -> None:
        self.name = name
        self.store = store
        self.lifecycle = lifecycle
        self._validator = validator
        self._build = build

    async def create(self, payload: Any) -> Result[E]:
        """Validate ``payload``, assign id and creation time, and store the entity."""
        try:
            data = self._validator(payload)
        except ValidationError as exc:
            logger.warning("Rejected %s payload on create: %s", self.name, exc.message)
            return Result.err(exc)

        entity = self._build(self.lifecycle.new_identity(), self.lifecycle.stamp_create(), data)
        try:
            self.store.insert(entity.id, entity)
        except StorageError as exc:
            logger.error("Failed to insert %s %s: %s", self.name, entity.id, exc.message)
            return Result.err(StorageError(f"Error occurred during {self.name} insertion: {exc.message}"))
        logger.info("Created %s %s", self.name, entity.id)
        return Result.ok(entity)

    async def get_by_id(self, entity_id: str) -> Result[E]:
        if not entity_id:
            return Result.err(NotFoundError(f"Invalid {self.name} id={entity_id!r}."))
        try:
            entity = self.store.get(entity_id)
        except StorageError as exc:
            logger.error("Failed to read %s %s: %s", self.name, entity_id, exc.message)
            return Result.err(exc)
        if entity is None:
            return Result.err(self._not_found(entity_id))
        return Result.ok(entity)

    async def list_all(self) -> Result[List[E]]:
        """Return every stored entity in ascending id order."""
        try:
            return Result.ok(self.store.values())
        except StorageError as exc:
            logger.error("Failed to list %s records: %s", self.name, exc.message)
            return Result.err(StorageError(f"Failed to get all {self.name} records: {exc.message}"))

    async def update(self, entity_id: str, payload: Any) -> Result[E]:
        """Replace the payload fields of an existing entity.

        ``id`` and ``created_at`` are kept, ``updated_at`` is set to the
        current time.  Returns the new snapshot.
        """
        if not entity_id:
            return Result.err(NotFoundError(f"Invalid {self.name} id={entity_id!r}."))
        try:
            data = self._validator(payload)
        except ValidationError as exc:
            logger.warning("Rejected %s payload on update of %s: %s", self.name, entity_id, exc.message)
            return Result.err(exc)

        try:
            existing = self.store.get(entity_id)
            if existing is None:
                return Result.err(self._not_found(entity_id))
            updated = self._build(existing.id, self.lifecycle.stamp_update(existing), data)
            self.store.insert(updated.id, updated)
        except StorageError as exc:
            logger.error("Failed to update %s %s: %s", self.name, entity_id, exc.message)
            return Result.err(StorageError(f"Error updating {self.name} with id={entity_id}: {exc.message}"))
        logger.info("Updated %s %s", self.name, entity_id)
        return Result.ok(updated)

    async def delete(self, entity_id: str) -> Result[E]:
        """Remove an entity and return the removed snapshot."""
        if not entity_id:
            return Result.err(NotFoundError(f"Invalid {self.name} id={entity_id!r}."))
        try:
            removed = self.store.remove(entity_id)
        except StorageError as exc:
            logger.error("Failed to delete %s %s: %s", self.name, entity_id, exc.message)
            return Result.err(StorageError(f"Error deleting {self.name} with id={entity_id}: {exc.message}"))
        if removed is None:
            return Result.err(self._not_found(entity_id))
        logger.info("Deleted %s %s", self.name, entity_id)
        return Result.ok(removed)

    async def count(self) -> Result[int]:
        try:
            return Result.ok(len(self.store))
        except StorageError as exc:
            logger.error("Failed to count %s records: %s", self.name, exc.message)
            return Result.err(exc)

    def _not_found(self, entity_id: str) -> NotFoundError:
        logger.warning("%s with id=%s not found", self.name, entity_id)
        return NotFoundError(f"{self.name} with id={entity_id} not found.")
