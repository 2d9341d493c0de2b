"""ORM models package export."""

from app.models.owner import Owner
from app.models.pet import Pet, PetType
from app.models.visit import Visit

__all__ = [
    "Owner",
    "Pet",
    "PetType",
    "Visit",
]
