"""Wire schema for owners."""

from __future__ import annotations

from pydantic import Field

from app.schemas.pet import PetRecord
from app.schemas.validation import NameStr, RecordModel, TelephoneStr


class OwnerRecord(RecordModel):
    """An owner and the pets registered to them.

    ``id`` is assigned by the clinic service; it is ignored on creation and
    the path id always wins on update.
    """

    id: int | None = None
    first_name: NameStr
    last_name: NameStr
    address: str | None = Field(default=None, max_length=255)
    city: str | None = Field(default=None, max_length=80)
    telephone: TelephoneStr | None = None
    pets: list[PetRecord] = Field(default_factory=list)
