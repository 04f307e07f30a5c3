"""
Named remote procedures.

A `ProcedureRouter` is a dispatch table from operation name to a handler.
Entity modules register their queries and mutations on their own router and
the HTTP layer merges them. Input is validated against the procedure's
Pydantic model before the handler runs, so invalid input never reaches a
repository.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cached_property
from typing import Any, Callable, Dict, Optional, Type

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from sitecms.exceptions import ValidationError

logger = logging.getLogger(__name__)

QUERY = "query"
MUTATION = "mutation"


@dataclass(frozen=True)
class Procedure:
    name: str
    kind: str
    handler: Callable[..., Any]
    input_model: Optional[Type[BaseModel]] = None
    output: Any = None

    def parse_input(self, raw: Any) -> Optional[BaseModel]:
        if self.input_model is None:
            return None
        try:
            return self.input_model.model_validate(raw if raw is not None else {})
        except PydanticValidationError as e:
            raise ValidationError(_issues(e)) from e

    @cached_property
    def _output_adapter(self) -> Optional[TypeAdapter]:
        return TypeAdapter(self.output) if self.output is not None else None

    def serialize(self, result: Any) -> Any:
        adapter = self._output_adapter
        if adapter is None:
            return result
        # ORM rows are read through the response models
        return adapter.dump_python(adapter.validate_python(result, from_attributes=True), mode="json")


def _issues(error: PydanticValidationError):
    return [
        {
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in error.errors()
    ]


class ProcedureRouter:
    def __init__(self):
        self.procedures: Dict[str, Procedure] = {}

    def _register(self, kind: str, name: str, input_model, output):
        def decorator(fn):
            if name in self.procedures:
                raise ValueError(f"Procedure '{name}' is already registered")
            self.procedures[name] = Procedure(name, kind, fn, input_model, output)
            return fn
        return decorator

    def query(self, name: str, *, input: Optional[Type[BaseModel]] = None, output: Any = None):
        return self._register(QUERY, name, input, output)

    def mutation(self, name: str, *, input: Type[BaseModel], output: Any = None):
        return self._register(MUTATION, name, input, output)

    def include(self, other: "ProcedureRouter") -> None:
        for name, procedure in other.procedures.items():
            if name in self.procedures:
                raise ValueError(f"Procedure '{name}' is already registered")
            self.procedures[name] = procedure

    def get(self, name: str) -> Optional[Procedure]:
        return self.procedures.get(name)

    def call(self, name: str, db: Session, raw_input: Any = None) -> Any:
        """Validate input, run the handler and return a JSON-ready result."""
        procedure = self.procedures[name]
        params = procedure.parse_input(raw_input)
        logger.debug("dispatch: procedure=%s kind=%s", name, procedure.kind)
        if params is None:
            result = procedure.handler(db)
        else:
            result = procedure.handler(db, params)
        return procedure.serialize(result)
