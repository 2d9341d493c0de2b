"""Field-level validation rules shared by the wire records."""

from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel


def require_text(value: str) -> str:
    """Reject empty and whitespace-only strings."""
    if not value.strip():
        raise ValueError("must not be blank")
    return value


NameStr = Annotated[
    str, StringConstraints(max_length=30), AfterValidator(require_text)
]
"""Mandatory, non-blank person or pet name."""

DescriptionStr = Annotated[
    str, StringConstraints(max_length=255), AfterValidator(require_text)
]

TelephoneStr = Annotated[str, StringConstraints(max_length=20, pattern=r"^[0-9]*$")]

# Record ids are 32-bit integer keys in the database.
MIN_RECORD_ID = -(2**31)
MAX_RECORD_ID = 2**31 - 1

RecordKey = Annotated[int, Field(ge=MIN_RECORD_ID, le=MAX_RECORD_ID)]


class RecordModel(BaseModel):
    """Base for JSON wire records exchanged with API clients.

    Attributes are snake_case in Python and camelCase on the wire. Records are
    built by name inside the application and parsed by alias from requests.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


__all__ = [
    "DescriptionStr",
    "MAX_RECORD_ID",
    "MIN_RECORD_ID",
    "NameStr",
    "RecordKey",
    "RecordModel",
    "TelephoneStr",
    "require_text",
]
