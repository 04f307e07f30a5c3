"""Runtime configuration sourced from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple


SERVICE_NAME = "site-cms-service"


@dataclass(frozen=True)
class Settings:
    log_level: str
    cors_origins: Tuple[str, ...]
    server_port: int
    version: str
    build_sha: str | None
    build_timestamp: str | None
    image_tag: str | None


def _split_csv(value: str | None, default: Tuple[str, ...]) -> Tuple[str, ...]:
    """Return stripped non-empty items of a comma separated value."""
    if value is None:
        return default
    items = tuple(item.strip() for item in value.split(",") if item.strip())
    return items or default


def _parse_port(value: str | None, default: int = 2022) -> int:
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """Return the cached settings built from environment variables."""
    return Settings(
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        cors_origins=_split_csv(os.getenv("CORS_ORIGINS"), ("*",)),
        server_port=_parse_port(os.getenv("SERVER_PORT")),
        version=os.getenv("VERSION", "unknown"),
        build_sha=os.getenv("BUILD_SHA") or None,
        build_timestamp=os.getenv("BUILD_TIMESTAMP") or None,
        image_tag=os.getenv("IMAGE_TAG") or None,
    )


def refresh_settings_cache() -> None:
    """Invalidate cached settings (useful for tests)."""
    get_settings.cache_clear()
