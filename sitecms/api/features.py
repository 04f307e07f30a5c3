"""
Feature procedures.

All feature lists come back in display order (sort_order, then name).
"""
from typing import List

from sqlalchemy.orm import Session

from sitecms.db import schemas
from sitecms.db.repositories import FeatureRepository
from sitecms.api.procedures import ProcedureRouter

router = ProcedureRouter()


@router.mutation("createFeature", input=schemas.FeatureCreate, output=schemas.Feature)
def create_feature(db: Session, feature: schemas.FeatureCreate):
    return FeatureRepository(db).create(feature)


@router.query("getFeatures", output=List[schemas.Feature])
def get_features(db: Session):
    return FeatureRepository(db).list()


@router.query("getActiveFeatures", output=List[schemas.Feature])
def get_active_features(db: Session):
    return FeatureRepository(db).list_active()


@router.query("getHighlightedFeatures", output=List[schemas.Feature])
def get_highlighted_features(db: Session):
    return FeatureRepository(db).list_highlighted()


@router.mutation("updateFeature", input=schemas.FeatureUpdate, output=schemas.Feature)
def update_feature(db: Session, changes: schemas.FeatureUpdate):
    return FeatureRepository(db).update(changes.id, changes)
