"""Conversions between wire records and domain objects.

Every function here is pure: it builds new objects and never touches a
database session.
"""

from app.mappers.owner import to_owner, to_owner_record, to_owner_records, to_owners
from app.mappers.pet import to_pet, to_pet_record, to_pet_type, to_pet_type_record
from app.mappers.visit import to_visit, to_visit_record

__all__ = [
    "to_owner",
    "to_owner_record",
    "to_owner_records",
    "to_owners",
    "to_pet",
    "to_pet_record",
    "to_pet_type",
    "to_pet_type_record",
    "to_visit",
    "to_visit_record",
]
