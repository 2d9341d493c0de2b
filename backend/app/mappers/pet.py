"""Pet and pet type record conversions."""

from __future__ import annotations

from app.mappers.visit import to_visit, to_visit_record
from app.models.pet import Pet, PetType
from app.schemas.pet import PetRecord, PetTypeRecord


def to_pet_type(record: PetTypeRecord | None) -> PetType | None:
    if record is None:
        return None
    return PetType(id=record.id, name=record.name)


def to_pet_type_record(pet_type: PetType | None) -> PetTypeRecord | None:
    if pet_type is None:
        return None
    return PetTypeRecord(id=pet_type.id, name=pet_type.name)


def to_pet(record: PetRecord) -> Pet:
    """Build a pet domain object, including its visits, from a wire record."""
    pet_type = to_pet_type(record.pet_type)
    return Pet(
        id=record.id,
        name=record.name,
        birth_date=record.birth_date,
        type_id=pet_type.id if pet_type is not None else None,
        type=pet_type,
        owner_id=record.owner_id,
        visits=[to_visit(visit) for visit in record.visits],
    )


def to_pet_record(pet: Pet) -> PetRecord:
    """Serialize a pet domain object, including its visits."""
    return PetRecord(
        id=pet.id,
        name=pet.name,
        birth_date=pet.birth_date,
        pet_type=to_pet_type_record(pet.type),
        owner_id=pet.owner_id,
        visits=[to_visit_record(visit) for visit in pet.visits],
    )
