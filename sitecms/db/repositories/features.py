"""
Feature repository.

Every list is ordered by (sort_order, name).
"""
from __future__ import annotations

from typing import List

from sitecms.db import models, schemas
from .base import BaseRepository


class FeatureRepository(BaseRepository):
    model = models.Feature
    entity_name = "Feature"

    _display_order = (models.Feature.sort_order.asc(), models.Feature.name.asc())

    def create(self, feature: schemas.FeatureCreate) -> models.Feature:
        return self._insert(feature.model_dump())

    def list(self) -> List[models.Feature]:
        return self._all(order_by=self._display_order)

    def list_active(self) -> List[models.Feature]:
        return self._all(models.Feature.is_active.is_(True), order_by=self._display_order)

    def list_highlighted(self) -> List[models.Feature]:
        return self._all(
            models.Feature.is_highlighted.is_(True),
            models.Feature.is_active.is_(True),
            order_by=self._display_order,
        )

    def update(self, feature_id: int, changes: schemas.FeatureUpdate) -> models.Feature:
        return self._update_by_id(feature_id, changes.model_dump(exclude_unset=True, exclude={'id'}))
