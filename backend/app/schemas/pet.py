"""Wire schemas for pets and pet types."""

from __future__ import annotations

import datetime as dt

from pydantic import Field

from app.schemas.validation import NameStr, RecordKey, RecordModel
from app.schemas.visit import VisitRecord


class PetTypeRecord(RecordModel):
    """Reference to a pet type, addressed by id."""

    id: RecordKey
    name: str | None = None


class PetRecord(RecordModel):
    """A pet as exchanged with API clients."""

    id: int | None = None
    name: NameStr
    birth_date: dt.date | None = None
    pet_type: PetTypeRecord | None = Field(default=None, alias="type")
    owner_id: int | None = None
    visits: list[VisitRecord] = Field(default_factory=list)
