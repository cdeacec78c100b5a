from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class ContactSubmission:
    id: str
    name: str
    email: str
    message: str
    submitted_at: datetime
    company: Optional[str] = None
    # Insertion counter, breaks ties between equal timestamps.
    seq: int = field(default=0, compare=False, repr=False)
