"""Base abstract model shared by catalog entities.

``BaseModel`` carries the identity and timestamp contract of every
persisted entity:

- ``id``: UUIDv7 primary key, assigned once and never edited.
- ``created_at``: set when the row is first written, never changed.
- ``updated_at``: ``NULL`` until the first mutation.

Timestamps are stamped by the Service Layer rather than ``auto_now``
so a freshly created entity keeps ``updated_at`` empty.
"""

from __future__ import annotations

import uuid6
from django.db import models
from django.utils import timezone


class BaseModel(models.Model):
    """Abstract base with UUIDv7 PK and timestamp bookkeeping."""

    id = models.UUIDField(
        primary_key=True,
        default=uuid6.uuid7,
        editable=False,
    )
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(null=True, blank=True, default=None)

    class Meta:
        abstract = True

    def touch(self) -> None:
        """Stamp ``updated_at`` with the current UTC time."""
        self.updated_at = timezone.now()
