from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from sitecms.db import schemas


def test_page_create_requires_non_empty_slug_and_title():
    with pytest.raises(ValidationError) as exc:
        schemas.PageCreate(slug="", title="", content="x")
    fields = {err["loc"][0] for err in exc.value.errors()}
    assert fields == {"slug", "title"}


def test_page_update_tracks_which_fields_were_sent():
    update = schemas.PageUpdate.model_validate({"id": 1, "meta_description": None})
    assert update.model_dump(exclude_unset=True, exclude={"id"}) == {"meta_description": None}


def test_page_update_rejects_null_for_required_columns():
    with pytest.raises(ValidationError):
        schemas.PageUpdate.model_validate({"id": 1, "title": None})


def test_blog_post_featured_image_must_be_url():
    with pytest.raises(ValidationError):
        schemas.BlogPostCreate(slug="s", title="t", content="c", author="a", featured_image_url="not a url")


def test_blog_post_featured_image_kept_verbatim():
    post = schemas.BlogPostCreate(
        slug="s", title="t", content="c", author="a", featured_image_url="https://example.com"
    )
    assert post.featured_image_url == "https://example.com"


def test_blog_post_author_required_non_empty():
    with pytest.raises(ValidationError):
        schemas.BlogPostCreate(slug="s", title="t", content="c", author="")


def test_blog_post_published_at_parses_iso_strings():
    post = schemas.BlogPostCreate.model_validate({
        "slug": "s", "title": "t", "content": "c", "author": "a",
        "published_at": "2024-03-01T10:00:00Z",
    })
    assert post.published_at.year == 2024


def test_contact_submission_requires_valid_email():
    with pytest.raises(ValidationError) as exc:
        schemas.ContactSubmissionCreate(name="n", email="nope", message="m")
    assert exc.value.errors()[0]["loc"] == ("email",)


def test_contact_submission_requires_message():
    with pytest.raises(ValidationError):
        schemas.ContactSubmissionCreate(name="n", email="n@example.com", message="")


@pytest.mark.parametrize("value", ["3", 2.5, True])
def test_feature_sort_order_must_be_integer(value):
    with pytest.raises(ValidationError):
        schemas.FeatureCreate(name="n", description="d", sort_order=value)


def test_feature_update_allows_omitting_everything_but_id():
    update = schemas.FeatureUpdate(id=4)
    assert update.model_dump(exclude_unset=True, exclude={"id"}) == {}


@pytest.mark.parametrize("model", [
    schemas.PageUpdate, schemas.BlogPostUpdate, schemas.FeatureUpdate, schemas.ContactSubmissionId,
])
@pytest.mark.parametrize("value", [True, "1", 1.0])
def test_ids_must_be_integers(model, value):
    with pytest.raises(ValidationError) as exc:
        model.model_validate({"id": value})
    assert exc.value.errors()[0]["loc"] == ("id",)


def test_blog_post_published_at_offset_converted_to_utc():
    post = schemas.BlogPostCreate.model_validate({
        "slug": "s", "title": "t", "content": "c", "author": "a",
        "published_at": "2024-01-01T10:00:00+05:00",
    })
    assert post.published_at == datetime(2024, 1, 1, 5, 0, tzinfo=timezone.utc)
    assert post.published_at.utcoffset() == timedelta(0)


def test_blog_post_naive_published_at_taken_as_utc():
    update = schemas.BlogPostUpdate.model_validate({"id": 1, "published_at": "2024-01-01T10:00:00"})
    assert update.published_at == datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)
