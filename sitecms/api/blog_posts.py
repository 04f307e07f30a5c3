"""
Blog post procedures.
"""
from typing import List, Optional

from sqlalchemy.orm import Session

from sitecms.db import schemas
from sitecms.db.repositories import BlogPostRepository
from sitecms.api.procedures import ProcedureRouter

router = ProcedureRouter()


@router.mutation("createBlogPost", input=schemas.BlogPostCreate, output=schemas.BlogPost)
def create_blog_post(db: Session, post: schemas.BlogPostCreate):
    return BlogPostRepository(db).create(post)


@router.query("getBlogPosts", output=List[schemas.BlogPost])
def get_blog_posts(db: Session):
    return BlogPostRepository(db).list()


@router.query("getPublishedBlogPosts", output=List[schemas.BlogPost])
def get_published_blog_posts(db: Session):
    return BlogPostRepository(db).list_published()


@router.query("getBlogPostBySlug", input=schemas.SlugLookup, output=Optional[schemas.BlogPost])
def get_blog_post_by_slug(db: Session, lookup: schemas.SlugLookup):
    return BlogPostRepository(db).get_by_slug(lookup.slug)


@router.mutation("updateBlogPost", input=schemas.BlogPostUpdate, output=schemas.BlogPost)
def update_blog_post(db: Session, changes: schemas.BlogPostUpdate):
    return BlogPostRepository(db).update(changes.id, changes)
