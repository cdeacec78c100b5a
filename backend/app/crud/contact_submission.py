from __future__ import annotations

import itertools
import threading
import uuid
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Optional

from app.models.contact_submission import ContactSubmission
from app.schemas.contact import ContactCreate


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SubmissionStore:
    """Process-lifetime collection of contact submissions, keyed by id."""

    def __init__(self, *, clock: Callable[[], datetime] = _utcnow) -> None:
        self._clock = clock
        self._items: dict[str, ContactSubmission] = {}
        self._seq = itertools.count(1)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def create(self, contact_in: ContactCreate) -> ContactSubmission:
        with self._lock:
            submission_id = str(uuid.uuid4())
            while submission_id in self._items:
                submission_id = str(uuid.uuid4())

            submission = ContactSubmission(
                id=submission_id,
                name=contact_in.name,
                email=contact_in.email,
                company=contact_in.company,
                message=contact_in.message,
                submitted_at=self._clock(),
                seq=next(self._seq),
            )
            self._items[submission_id] = submission
        return submission

    def list(self) -> list[ContactSubmission]:
        with self._lock:
            items = list(self._items.values())
        return sorted(items, key=lambda s: (s.submitted_at, s.seq), reverse=True)

    def get(self, submission_id: str) -> Optional[ContactSubmission]:
        with self._lock:
            return self._items.get(submission_id)
