"""
Contact submission repository.

Submissions are created unread and can only move to read.
"""
from __future__ import annotations

from typing import List

from sitecms.db import models, schemas
from .base import BaseRepository


class ContactSubmissionRepository(BaseRepository):
    model = models.ContactSubmission
    entity_name = "Contact submission"

    _newest_first = (models.ContactSubmission.created_at.desc(), models.ContactSubmission.id.desc())

    def create(self, submission: schemas.ContactSubmissionCreate) -> models.ContactSubmission:
        values = submission.model_dump()
        values['email'] = str(values['email'])
        values['is_read'] = False
        return self._insert(values)

    def list(self) -> List[models.ContactSubmission]:
        return self._all(order_by=self._newest_first)

    def list_unread(self) -> List[models.ContactSubmission]:
        return self._all(models.ContactSubmission.is_read.is_(False), order_by=self._newest_first)

    def mark_read(self, submission_id: int) -> models.ContactSubmission:
        # Idempotent; the table has no updated_at to touch
        return self._update_by_id(submission_id, {'is_read': True}, touch=False)
