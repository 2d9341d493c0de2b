"""Owner record conversions."""

from __future__ import annotations

from collections.abc import Iterable

from app.mappers.pet import to_pet, to_pet_record
from app.models.owner import Owner
from app.schemas.owner import OwnerRecord


def to_owner(record: OwnerRecord) -> Owner:
    """Build an owner domain object, including its pets, from a wire record."""
    return Owner(
        id=record.id,
        first_name=record.first_name,
        last_name=record.last_name,
        address=record.address,
        city=record.city,
        telephone=record.telephone,
        pets=[to_pet(pet) for pet in record.pets],
    )


def to_owner_record(owner: Owner) -> OwnerRecord:
    """Serialize an owner domain object, including its pets."""
    return OwnerRecord(
        id=owner.id,
        first_name=owner.first_name,
        last_name=owner.last_name,
        address=owner.address,
        city=owner.city,
        telephone=owner.telephone,
        pets=[to_pet_record(pet) for pet in owner.pets],
    )


def to_owners(records: Iterable[OwnerRecord]) -> list[Owner]:
    return [to_owner(record) for record in records]


def to_owner_records(owners: Iterable[Owner]) -> list[OwnerRecord]:
    return [to_owner_record(owner) for owner in owners]
