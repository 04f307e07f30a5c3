"""
Page procedures.

Create, list, look up by slug and partially update website pages.
"""
from typing import List, Optional

from sqlalchemy.orm import Session

from sitecms.db import schemas
from sitecms.db.repositories import PageRepository
from sitecms.api.procedures import ProcedureRouter

router = ProcedureRouter()


@router.mutation("createPage", input=schemas.PageCreate, output=schemas.Page)
def create_page(db: Session, page: schemas.PageCreate):
    return PageRepository(db).create(page)


@router.query("getPages", output=List[schemas.Page])
def get_pages(db: Session):
    return PageRepository(db).list()


@router.query("getPublishedPages", output=List[schemas.Page])
def get_published_pages(db: Session):
    return PageRepository(db).list_published()


@router.query("getPageBySlug", input=schemas.SlugLookup, output=Optional[schemas.Page])
def get_page_by_slug(db: Session, lookup: schemas.SlugLookup):
    return PageRepository(db).get_by_slug(lookup.slug)


@router.mutation("updatePage", input=schemas.PageUpdate, output=schemas.Page)
def update_page(db: Session, changes: schemas.PageUpdate):
    return PageRepository(db).update(changes.id, changes)
