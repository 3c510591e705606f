"""
RecordBook Backend — Custom Exception Hierarchy
=================================================

What:  Defines application-specific exceptions for the record endpoints.
Why:   Each failure carries an ErrorKind, and the kind alone decides the HTTP
       status code. Routes and services never pick status codes themselves.
How:   Every exception stores a user-facing message, a kind and an optional
       context dict. A single handler registered in main.py translates the
       kind into a status code and the uniform response envelope.
Who:   Raised by validators, repositories and services; caught by main.py.

Exception Hierarchy:
    RecordBookError (base, INTERNAL)
    ├── ValidationError     → 422 Unprocessable Entity
    ├── NotFoundError       → 404 Not Found (lookup by id)
    ├── EmptyResultError    → 404 Not Found (list returned nothing)
    └── DatabaseError       → 500 Internal Server Error

Messages are Portuguese because they are shown verbatim to end users of the
member-management frontend.
"""

from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorKind(str, Enum):
    """Failure classes understood by the error handler."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    EMPTY_RESULT = "empty_result"
    INTERNAL = "internal"

    @property
    def status_code(self) -> int:
        return _STATUS_BY_KIND[self]


_STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 422,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.EMPTY_RESULT: 404,
    ErrorKind.INTERNAL: 500,
}


class RecordBookError(Exception):
    """
    Base exception for all RecordBook application errors.

    Attributes:
        message:  User-facing error description (returned in the envelope)
        context:  Additional debug info (logged but NOT returned to client)
    """

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(
        self,
        message: str = "Erro interno do servidor",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return self.kind.status_code


class ValidationError(RecordBookError):
    """
    Raised when a request body fails validation.

    What:    Missing, malformed or unexpected fields in the payload.
    HTTP:    422 Unprocessable Entity

    `errors` holds one {"field", "message"} entry per offending field and is
    sent to the client in the envelope's `data`.
    """

    kind = ErrorKind.VALIDATION

    def __init__(
        self,
        message: str = "Dados inválidos",
        errors: Optional[List[Dict[str, str]]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.errors = errors or []
        ctx = context or {}
        if self.errors:
            ctx["fields"] = [e["field"] for e in self.errors]
        super().__init__(message=message, context=ctx)


class NotFoundError(RecordBookError):
    """
    Raised by the store when a lookup by id finds nothing.

    HTTP:    404 Not Found

    Distinct from EmptyResultError: this one names a specific record that
    does not exist, while EmptyResultError means a listing came back empty.
    """

    kind = ErrorKind.NOT_FOUND

    def __init__(
        self,
        resource: str = "registro",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = "Registro não encontrado"
        if resource_id is not None:
            message = f"Registro {resource_id} não encontrado"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class EmptyResultError(RecordBookError):
    """Raised by list operations when no record matches."""

    kind = ErrorKind.EMPTY_RESULT

    def __init__(
        self,
        message: str = "Nenhum registro encontrado",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(RecordBookError):
    """
    Raised when database operations fail unexpectedly.

    What:    A query, insert or flush failed (connection lost, constraint
             violation, deadlock).
    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is always generic. The original
        exception type and the operation are kept in `context` for the logs.
    """

    kind = ErrorKind.INTERNAL

    def __init__(
        self,
        message: str = "Erro ao acessar o banco de dados",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
