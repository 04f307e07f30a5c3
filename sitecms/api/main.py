"""
FastAPI app assembly: logging, middleware, error rendering and router wiring.
"""
import logging

from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from sitecms.exceptions import (
    ConstraintViolation,
    NotFound,
    SiteCMSError,
    StorageUnavailable,
    ValidationError,
)
from sitecms.utils.config import get_settings

settings = get_settings()

# Configure logging
LOG_LEVEL = getattr(logging, settings.log_level, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)
logger.info("app_startup: log_level=%s", logging.getLevelName(LOG_LEVEL))

from sitecms.api.rpc import router as rpc_router
from sitecms.api.support import router as support_router

# Database schema is managed by Alembic migrations.

app = FastAPI(
    title="Site CMS Service",
    description="Pages, blog posts, features and contact submissions for the marketing website.",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials="*" not in settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

_STATUS_BY_ERROR = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotFound, status.HTTP_404_NOT_FOUND),
    (ConstraintViolation, status.HTTP_409_CONFLICT),
    (StorageUnavailable, status.HTTP_503_SERVICE_UNAVAILABLE),
)


@app.exception_handler(SiteCMSError)
async def handle_site_cms_error(request: Request, exc: SiteCMSError):
    status_code = next(
        (code for error_type, code in _STATUS_BY_ERROR if isinstance(exc, error_type)),
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    body = {"detail": exc.message, "code": exc.error_code}
    if isinstance(exc, ValidationError):
        body["issues"] = exc.issues
    elif isinstance(exc, StorageUnavailable):
        # Details are in the log; callers get a generic failure
        body["detail"] = "Storage is temporarily unavailable"
    return JSONResponse(body, status_code=status_code)


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    issues = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"),
            "message": err.get("msg", ""),
            "type": err.get("type", ""),
        }
        for err in exc.errors()
    ]
    return await handle_site_cms_error(request, ValidationError(issues))


app.include_router(rpc_router)
app.include_router(support_router)
