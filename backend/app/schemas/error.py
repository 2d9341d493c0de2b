"""Error response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field


class FieldError(BaseModel):
    """A single rejected request field."""

    field: str
    message: str
    code: str


class ErrorResponse(BaseModel):
    """Body returned for rejected requests."""

    detail: str
    errors: list[FieldError] = Field(default_factory=list)
