"""
HTTP adapter for the procedure router.

Queries are served on `GET /rpc/{operation}` with input taken from the
JSON-encoded `input` query parameter (or, when absent, the plain query
parameters). Mutations are served on `POST /rpc/{operation}` with the JSON
request body as input.
"""
import json
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from sitecms.db.database import get_db
from sitecms.exceptions import ValidationError
from sitecms.api.procedures import MUTATION, QUERY, Procedure, ProcedureRouter
from sitecms.api import blog_posts, contact_submissions, features, pages, support

app_procedures = ProcedureRouter()
app_procedures.include(support.procedures)
app_procedures.include(pages.router)
app_procedures.include(blog_posts.router)
app_procedures.include(contact_submissions.router)
app_procedures.include(features.router)

router = APIRouter(prefix="/rpc", tags=["rpc"])


def _resolve(operation: str, kind: str) -> Procedure:
    procedure = app_procedures.get(operation)
    if procedure is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Procedure '{operation}' not found")
    if procedure.kind != kind:
        verb = "POST" if procedure.kind == MUTATION else "GET"
        raise HTTPException(
            status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
            detail=f"'{operation}' is a {procedure.kind}; use {verb}",
            headers={"Allow": verb},
        )
    return procedure


def _query_input(request: Request) -> Any:
    params = request.query_params
    encoded = params.get("input")
    if encoded is not None:
        try:
            return json.loads(encoded)
        except json.JSONDecodeError:
            raise ValidationError(
                [{"field": "input", "message": "Input must be valid JSON", "type": "json_invalid"}]
            )
    return dict(params) or None


@router.get("/{operation}")
def run_query(operation: str, request: Request, db: Session = Depends(get_db)):
    _resolve(operation, QUERY)
    return app_procedures.call(operation, db, _query_input(request))


@router.post("/{operation}")
def run_mutation(operation: str, payload: Any = Body(default=None), db: Session = Depends(get_db)):
    _resolve(operation, MUTATION)
    return app_procedures.call(operation, db, payload)
