"""Schema exports."""

from app.schemas.error import ErrorResponse, FieldError
from app.schemas.owner import OwnerRecord
from app.schemas.pet import PetRecord, PetTypeRecord
from app.schemas.visit import VisitRecord

__all__ = [
    "ErrorResponse",
    "FieldError",
    "OwnerRecord",
    "PetRecord",
    "PetTypeRecord",
    "VisitRecord",
]
