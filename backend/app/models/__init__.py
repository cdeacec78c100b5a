from __future__ import annotations

from app.models.contact_submission import ContactSubmission

__all__ = ["ContactSubmission"]
