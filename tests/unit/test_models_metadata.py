from sqlalchemy import UniqueConstraint

from sitecms.db import models


def _unique_names(table):
    return {c.name for c in table.constraints if isinstance(c, UniqueConstraint)}


def test_tables_registered():
    assert set(models.Base.metadata.tables) == {"pages", "blog_posts", "contact_submissions", "features"}


def test_slug_unique_constraints_follow_migration_names():
    assert _unique_names(models.Page.__table__) == {"uq_pages_slug"}
    assert _unique_names(models.BlogPost.__table__) == {"uq_blog_posts_slug"}


def test_contact_submissions_have_no_updated_at():
    assert "updated_at" not in models.ContactSubmission.__table__.c
    assert "updated_at" in models.Feature.__table__.c


def test_now_utc_is_timezone_aware():
    assert models.now_utc().tzinfo is not None
