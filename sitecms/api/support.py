"""
Health and build information.

`healthcheck` is a remote procedure like the content operations; build info
is a plain GET endpoint for deployment tooling.
"""
from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter
from sqlalchemy.orm import Session

from sitecms.api.procedures import ProcedureRouter
from sitecms.utils.config import SERVICE_NAME, get_settings

procedures = ProcedureRouter()

router = APIRouter(tags=["support"])


@procedures.query("healthcheck")
def healthcheck(db: Session):
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


@router.get("/build-info")
def get_build_info():
    """Return build and deployment information for the running service."""
    settings = get_settings()
    return {
        "build_sha": settings.build_sha,
        "build_timestamp": settings.build_timestamp,
        "image_tag": settings.image_tag,
        "service_name": SERVICE_NAME,
        "version": settings.version,
    }
