"""
Database engine and session management.

Builds the SQLAlchemy engine from environment configuration with an
in-memory SQLite fallback under pytest and exposes the FastAPI session
dependency.
"""
import os
import sys
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool


def _is_pytest_runtime() -> bool:
    """Best-effort detection that we're executing under pytest.

    ``PYTEST_CURRENT_TEST`` is only set while a test runs, so module import
    during collection relies on pytest already being in ``sys.modules``.
    ``PYTEST_RUNNING=1`` forces detection explicitly.
    """
    if os.getenv("PYTEST_RUNNING") == "1":
        return True
    if "PYTEST_CURRENT_TEST" in os.environ:
        return True
    if "pytest" in sys.modules:
        return True
    return False


def _get_database_url() -> str | None:
    """Return DATABASE_URL or compose one from the POSTGRES_* variables."""
    if os.getenv("DATABASE_URL"):
        return os.getenv("DATABASE_URL")

    parts = {
        "POSTGRES_USER": os.getenv("POSTGRES_USER"),
        "POSTGRES_PASSWORD": os.getenv("POSTGRES_PASSWORD"),
        "POSTGRES_HOST": os.getenv("POSTGRES_HOST"),
        "POSTGRES_PORT": os.getenv("POSTGRES_PORT"),
        "POSTGRES_DB": os.getenv("POSTGRES_DB"),
    }
    missing = [name for name, value in parts.items() if not value]
    if missing:
        if _is_pytest_runtime():
            return None
        raise ValueError(f"Missing required database environment variables: {', '.join(missing)}")

    return (
        f"postgresql://{parts['POSTGRES_USER']}:{parts['POSTGRES_PASSWORD']}"
        f"@{parts['POSTGRES_HOST']}:{parts['POSTGRES_PORT']}/{parts['POSTGRES_DB']}"
    )


SQLITE_MEMORY_URL = "sqlite+pysqlite:///:memory:"

# Resolution order:
# 1. SITECMS_TEST_DB when set.
# 2. Under pytest, an in-memory SQLite database shared through StaticPool.
# 3. DATABASE_URL / POSTGRES_* configuration.
explicit_test_db = os.getenv("SITECMS_TEST_DB")

if explicit_test_db:
    DATABASE_URL = explicit_test_db
elif _is_pytest_runtime():
    DATABASE_URL = SQLITE_MEMORY_URL
else:
    DATABASE_URL = _get_database_url()


def _engine_kwargs(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {"pool_pre_ping": True}
    kwargs = {"connect_args": {"check_same_thread": False}}
    if ":memory:" in url:
        # Keep a single connection so the schema survives across sessions
        kwargs["poolclass"] = StaticPool
    return kwargs


engine = create_engine(DATABASE_URL, **_engine_kwargs(DATABASE_URL))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_sqlite_schema() -> None:
    """Create all tables on SQLite engines; PostgreSQL is managed by Alembic."""
    if engine.url.get_backend_name() == "sqlite":
        from sitecms.db import models  # local import to avoid circular import at module load
        models.Base.metadata.create_all(bind=engine)


# Pure in-memory databases are created eagerly so every session sees the tables.
if DATABASE_URL.startswith("sqlite") and ":memory:" in DATABASE_URL:
    init_sqlite_schema()


def get_db():
    """Dependency to get a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
