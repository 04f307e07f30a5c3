"""
Shared SQLAlchemy base and helpers.
"""
from datetime import datetime, UTC

from sqlalchemy import MetaData
from sqlalchemy.orm import declarative_base

# Deterministic constraint names so Alembic revisions match the models
NAMING_CONVENTION = {
    "ix": "idx_%(table_name)s_%(column_0_N_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
}


def now_utc():
    """Return an aware UTC datetime for default/updated timestamps."""
    return datetime.now(UTC)


Base = declarative_base(metadata=MetaData(naming_convention=NAMING_CONVENTION))
