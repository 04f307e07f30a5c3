import time
from datetime import datetime, timedelta, timezone

import pytest

from sitecms.db import schemas
from sitecms.db.repositories import BlogPostRepository
from sitecms.exceptions import ConstraintViolation, NotFound


def _post(slug, **overrides):
    data = {
        "slug": slug,
        "title": f"Post {slug}",
        "excerpt": None,
        "content": "Body",
        "author": "Jane Doe",
        "featured_image_url": None,
    }
    data.update(overrides)
    return schemas.BlogPostCreate(**data)


def _ts(day):
    return datetime(2024, 1, day, 12, 0, tzinfo=timezone.utc)


def test_create_blog_post_stores_fields(db):
    repo = BlogPostRepository(db)
    post = repo.create(_post(
        "launch",
        featured_image_url="https://cdn.example.com/launch.png",
        meta_keywords="launch",
    ))
    assert post.id is not None
    assert post.featured_image_url == "https://cdn.example.com/launch.png"
    assert post.is_published is False
    assert post.published_at is None


def test_published_at_is_not_derived_from_is_published(db):
    repo = BlogPostRepository(db)
    published_no_date = repo.create(_post("a", is_published=True))
    dated_draft = repo.create(_post("b", is_published=False, published_at=_ts(3)))
    assert published_no_date.published_at is None
    assert dated_draft.is_published is False
    assert dated_draft.published_at is not None


def test_duplicate_slug_rejected(db):
    repo = BlogPostRepository(db)
    repo.create(_post("same"))
    with pytest.raises(ConstraintViolation, match="(?i)unique"):
        repo.create(_post("same"))


def test_list_is_newest_first(db):
    repo = BlogPostRepository(db)
    for slug in ("first", "second", "third"):
        repo.create(_post(slug))
        time.sleep(0.002)
    assert [p.slug for p in repo.list()] == ["third", "second", "first"]


def test_list_published_orders_undated_first_then_newest(db):
    repo = BlogPostRepository(db)
    repo.create(_post("old", is_published=True, published_at=_ts(1)))
    repo.create(_post("draft", is_published=False, published_at=_ts(9)))
    repo.create(_post("new", is_published=True, published_at=_ts(5)))
    repo.create(_post("undated", is_published=True))

    slugs = [p.slug for p in repo.list_published()]
    assert "draft" not in slugs
    assert slugs == ["undated", "new", "old"]


def test_get_by_slug(db):
    repo = BlogPostRepository(db)
    post = repo.create(_post("hello-world"))
    assert repo.get_by_slug("hello-world").id == post.id
    assert repo.get_by_slug("Hello-World") is None


def test_update_partial_and_not_found(db):
    repo = BlogPostRepository(db)
    post = repo.create(_post("edit-me", excerpt="Short"))
    before = post.updated_at
    time.sleep(0.01)

    updated = repo.update(post.id, schemas.BlogPostUpdate(id=post.id, is_published=True))
    assert updated.is_published is True
    assert updated.published_at is None
    assert updated.excerpt == "Short"
    assert updated.updated_at > before

    with pytest.raises(NotFound):
        repo.update(424242, schemas.BlogPostUpdate(id=424242, title="x"))


def _as_utc(value):
    # SQLite hands timestamps back naive; they are stored as UTC
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


def test_published_at_offsets_are_normalized_to_utc(db):
    repo = BlogPostRepository(db)
    plus_five = timezone(timedelta(hours=5))
    early = repo.create(_post(
        "early", is_published=True, published_at=datetime(2024, 1, 1, 10, 0, tzinfo=plus_five),
    ))
    repo.create(_post(
        "late", is_published=True, published_at=datetime(2024, 1, 1, 6, 0, tzinfo=timezone.utc),
    ))

    assert _as_utc(early.published_at) == datetime(2024, 1, 1, 5, 0, tzinfo=timezone.utc)
    assert [p.slug for p in repo.list_published()] == ["late", "early"]


def test_update_published_at_normalizes_offset(db):
    repo = BlogPostRepository(db)
    post = repo.create(_post("moved"))
    changes = schemas.BlogPostUpdate.model_validate(
        {"id": post.id, "published_at": "2024-03-01T09:30:00-02:00"}
    )
    updated = repo.update(post.id, changes)
    assert _as_utc(updated.published_at) == datetime(2024, 3, 1, 11, 30, tzinfo=timezone.utc)
