from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from sitecms.db import schemas
from sitecms.db.repositories import FeatureRepository, PageRepository
from sitecms.db.repositories.base import constraint_kind
from sitecms.exceptions import ConstraintViolation, StorageUnavailable


def _broken_session():
    session = MagicMock()
    error = OperationalError("SELECT 1", {}, Exception("connection refused"))
    session.query.side_effect = error
    session.commit.side_effect = error
    session.scalars.side_effect = error
    return session


def test_list_failure_becomes_storage_unavailable():
    session = _broken_session()
    with pytest.raises(StorageUnavailable) as exc:
        PageRepository(session).list()
    assert isinstance(exc.value.__cause__, OperationalError)
    session.rollback.assert_called_once()


def test_create_failure_becomes_storage_unavailable():
    session = _broken_session()
    with pytest.raises(StorageUnavailable):
        PageRepository(session).create(schemas.PageCreate(slug="s", title="t", content="c"))
    session.rollback.assert_called_once()


def test_update_failure_becomes_storage_unavailable():
    session = _broken_session()
    with pytest.raises(StorageUnavailable, match="Feature update"):
        FeatureRepository(session).update(1, schemas.FeatureUpdate(id=1, name="n"))


@pytest.mark.parametrize("message,kind", [
    ("UNIQUE constraint failed: pages.slug", "unique"),
    ('duplicate key value violates unique constraint "uq_pages_slug"', "unique"),
    ("NOT NULL constraint failed: pages.content", "not-null"),
    ('null value in column "content" of relation "pages" violates not-null constraint', "not-null"),
    ("CHECK constraint failed: positive_order", "check"),
    ("disk I/O error", None),
])
def test_constraint_kind_from_driver_message(message, kind):
    assert constraint_kind(message) == kind


def test_constraint_violation_message_names_the_kind():
    assert "unique constraint" in ConstraintViolation("Page", "x", "unique").message
    generic = ConstraintViolation("Page", "x")
    assert generic.message == "Page violates a constraint: x"
