"""
RecordBook Backend — Pydantic Request/Response Schemas
=======================================================

What:  Pydantic models defining the API contract for the record endpoints.
Why:   Strict input validation, camelCase serialization and OpenAPI docs.
How:   <Entity>In models validate request bodies (exactly two fields, nothing
       else); <Entity>Out models serialize ORM rows; Envelope wraps every
       response in {status, message, data}.

Design Decision:
    Bodies are validated by validate_payload() inside the service instead of
    by FastAPI's automatic body parsing. The update operation must report a
    missing record before it looks at the body, which automatic parsing would
    not allow.
"""

from datetime import datetime
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from recordbook.exceptions import ValidationError

T = TypeVar("T")
InT = TypeVar("InT", bound="RecordIn")


# ══════════════════════════════════════════════════════════════════════════
# Request Models: the only client-settable fields
# ══════════════════════════════════════════════════════════════════════════


class RecordIn(BaseModel):
    """
    Common part of every record payload.

    Unknown keys are rejected: a client cannot set `active`, `createdBy` or
    any other column through the body. Fields are only accepted under their
    camelCase names; `financial_id` in a body is an unknown key.
    """

    model_config = ConfigDict(
        extra="forbid",
        str_strip_whitespace=True,
    )

    document: str = Field(min_length=1, description="Free-text content of the record")

    @field_validator("*", mode="before")
    @classmethod
    def reject_booleans(cls, v: Any) -> Any:
        """JSON true/false is not a number (lax int would read it as 1/0)."""
        if isinstance(v, bool):
            raise ValueError("Input should be a valid integer, not a boolean")
        return v


class FinancialHistoryIn(RecordIn):
    financial_id: int = Field(alias="financialId", gt=0, description="Financial record id")


class AssociatedFileIn(RecordIn):
    associate_id: int = Field(alias="associateId", gt=0, description="Member id")


class AssociatedHistoryIn(RecordIn):
    history_id: int = Field(alias="historyId", gt=0, description="Member history id")


def validate_payload(schema: Type[InT], body: Any) -> InT:
    """
    Validate a raw request body against an input schema.

    Returns the typed model, or raises ValidationError whose message lists
    the offending fields by their JSON names (e.g. "Dados inválidos:
    document, financialId").
    """
    if not isinstance(body, dict):
        raise ValidationError(
            message="Dados inválidos: o corpo da requisição deve ser um objeto JSON",
            errors=[{"field": "body", "message": "Expected a JSON object"}],
        )
    try:
        return schema.model_validate(body)
    except PydanticValidationError as exc:
        errors = [
            {
                "field": ".".join(str(part) for part in err["loc"]) or "body",
                "message": err["msg"],
            }
            for err in exc.errors()
        ]
        fields = sorted({e["field"] for e in errors})
        raise ValidationError(
            message=f"Dados inválidos: {', '.join(fields)}",
            errors=errors,
        ) from exc


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class RecordOut(BaseModel):
    """Serialized record; attribute names map to camelCase JSON keys."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: int
    document: str
    active: bool
    created_by: Optional[str] = None
    updated_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class FinancialHistoryOut(RecordOut):
    financial_id: int


class AssociatedFileOut(RecordOut):
    associate_id: int


class AssociatedHistoryOut(RecordOut):
    history_id: int


class Envelope(BaseModel, Generic[T]):
    """
    Uniform wrapper returned by every record endpoint, success or failure.

    Example:
        {"status": true, "message": "Registro retornado com sucesso", "data": {...}}
        {"status": false, "message": "Nenhum registro encontrado"}
    """

    status: bool = Field(description="true on success, false on failure")
    message: str = Field(description="Human-readable outcome")
    data: Optional[T] = Field(default=None, description="Record, list of records or field errors")


def error_envelope(message: str, data: Optional[List[Dict[str, str]]] = None) -> Dict[str, Any]:
    """Failure body; `data` is only present when there is something to show."""
    body: Dict[str, Any] = {"status": False, "message": message}
    if data:
        body["data"] = data
    return body


# ══════════════════════════════════════════════════════════════════════════
# Operational Models
# ══════════════════════════════════════════════════════════════════════════


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
