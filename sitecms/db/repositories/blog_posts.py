"""
Blog post repository.

Lists newest-first. `published_at` is caller-controlled and normalized to UTC;
published posts without one lead the published listing.
"""
from __future__ import annotations

from typing import List, Optional

from sitecms.db import models, schemas
from .base import BaseRepository


class BlogPostRepository(BaseRepository):
    model = models.BlogPost
    entity_name = "Blog post"

    def create(self, post: schemas.BlogPostCreate) -> models.BlogPost:
        return self._insert(post.model_dump())

    def list(self) -> List[models.BlogPost]:
        return self._all(order_by=(models.BlogPost.created_at.desc(), models.BlogPost.id.desc()))

    def list_published(self) -> List[models.BlogPost]:
        return self._all(
            models.BlogPost.is_published.is_(True),
            order_by=(models.BlogPost.published_at.desc().nulls_first(), models.BlogPost.id.desc()),
        )

    def get_by_slug(self, slug: str) -> Optional[models.BlogPost]:
        return self._first(models.BlogPost.slug == slug)

    def update(self, post_id: int, changes: schemas.BlogPostUpdate) -> models.BlogPost:
        return self._update_by_id(post_id, changes.model_dump(exclude_unset=True, exclude={'id'}))
