"""
Shared repository plumbing.

Each repository wraps one SQLAlchemy `Session` handed in at construction and
translates storage failures into the service's domain exceptions.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from sitecms.db.models import now_utc
from sitecms.exceptions import ConstraintViolation, NotFound, StorageUnavailable

logger = logging.getLogger(__name__)

# Driver message fragments (SQLite, PostgreSQL) by constraint kind
_CONSTRAINT_MARKERS = (
    ("unique", ("unique constraint", "duplicate key")),
    ("not-null", ("not null constraint", "not-null constraint")),
    ("check", ("check constraint",)),
    ("foreign key", ("foreign key constraint",)),
)


def constraint_kind(message: str) -> str | None:
    """Classify a driver integrity error message, or None when unrecognized."""
    lowered = message.lower()
    for kind, markers in _CONSTRAINT_MARKERS:
        if any(marker in lowered for marker in markers):
            return kind
    return None


class BaseRepository:
    model: Any = None
    entity_name: str = "Record"

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _storage(self, operation: str) -> Iterator[None]:
        """Roll back and re-raise storage errors as domain exceptions."""
        try:
            yield
        except IntegrityError as e:
            self.db.rollback()
            logger.warning("%s %s rejected by constraint: %s", self.entity_name, operation, e.orig)
            detail = str(e.orig)
            raise ConstraintViolation(self.entity_name, detail, constraint_kind(detail)) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("%s %s failed", self.entity_name, operation)
            raise StorageUnavailable(f"{self.entity_name} {operation}") from e

    def _insert(self, values: Dict[str, Any]):
        with self._storage("create"):
            row = self.model(**values)
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
        return row

    def _all(self, *criteria, order_by=()):
        with self._storage("list"):
            q = self.db.query(self.model)
            if criteria:
                q = q.filter(*criteria)
            return q.order_by(*order_by).all()

    def _first(self, *criteria):
        with self._storage("get"):
            return self.db.query(self.model).filter(*criteria).first()

    def get(self, record_id: int):
        return self._first(self.model.id == record_id)

    def _update_by_id(self, record_id: int, values: Dict[str, Any], *, touch: bool = True):
        """Apply `values` with one UPDATE ... RETURNING; zero rows means NotFound."""
        if touch:
            values = {**values, "updated_at": now_utc()}
        stmt = (
            update(self.model)
            .where(self.model.id == record_id)
            .values(**values)
            .returning(self.model)
        )
        with self._storage("update"):
            row = self.db.scalars(stmt).one_or_none()
            if row is None:
                self.db.rollback()
                raise NotFound(self.entity_name, record_id)
            self.db.commit()
            self.db.refresh(row)
        return row
