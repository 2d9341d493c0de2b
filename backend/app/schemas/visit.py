"""Wire schema for pet visits."""

from __future__ import annotations

import datetime as dt

from pydantic import Field

from app.schemas.validation import DescriptionStr, RecordModel


class VisitRecord(RecordModel):
    """A visit as exchanged with API clients."""

    id: int | None = None
    pet_id: int | None = None
    visit_date: dt.date | None = Field(default=None, alias="date")
    description: DescriptionStr
