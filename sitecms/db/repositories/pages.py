"""
Page repository.

Pages are keyed by a unique, case-sensitive slug.
"""
from __future__ import annotations

from typing import List, Optional

from sitecms.db import models, schemas
from .base import BaseRepository


class PageRepository(BaseRepository):
    model = models.Page
    entity_name = "Page"

    def create(self, page: schemas.PageCreate) -> models.Page:
        return self._insert(page.model_dump())

    def list(self) -> List[models.Page]:
        return self._all(order_by=(models.Page.id,))

    def list_published(self) -> List[models.Page]:
        return self._all(models.Page.is_published.is_(True), order_by=(models.Page.id,))

    def get_by_slug(self, slug: str) -> Optional[models.Page]:
        return self._first(models.Page.slug == slug)

    def update(self, page_id: int, changes: schemas.PageUpdate) -> models.Page:
        return self._update_by_id(page_id, changes.model_dump(exclude_unset=True, exclude={'id'}))
