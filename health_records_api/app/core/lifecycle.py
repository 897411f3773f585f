"""
Identifier and timestamp assignment for stored records.

Timestamps are integers counting nanoseconds since the Unix epoch.
``RecordLifecycle.now`` never goes backwards within a process, even if
the wall clock does, so ``updated_at`` is non-decreasing across
successive updates.
"""

from __future__ import annotations

import time
import uuid
from typing import Any, Callable, NamedTuple, Optional


class Stamp(NamedTuple):
    created_at: int
    updated_at: Optional[int]


class RecordLifecycle:
    """Produces ids and audit timestamps for new and updated records."""

    def __init__(
        self,
        clock: Callable[[], int] = time.time_ns,
        id_factory: Callable[[], Any] = uuid.uuid4,
    ) -> None:
        self._clock = clock
        self._id_factory = id_factory
        self._last = 0

    def new_identity(self) -> str:
        # Collisions with existing keys are not checked.
        return str(self._id_factory())

    def now(self) -> int:
        current = self._clock()
        if current < self._last:
            current = self._last
        self._last = current
        return current

    def stamp_create(self) -> Stamp:
        return Stamp(created_at=self.now(), updated_at=None)

    def stamp_update(self, existing: Any) -> Stamp:
        """Keep ``existing.created_at`` and set ``updated_at`` to now."""
        return Stamp(created_at=existing.created_at, updated_at=self.now())


# Process-wide instance shared by every service, so ``now`` stays
# monotonic across entity kinds.
lifecycle = RecordLifecycle()
