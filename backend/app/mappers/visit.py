"""Visit record conversions."""

from __future__ import annotations

from app.models.visit import Visit
from app.schemas.visit import VisitRecord


def to_visit(record: VisitRecord) -> Visit:
    """Build a visit domain object from its wire record."""
    return Visit(
        id=record.id,
        pet_id=record.pet_id,
        visit_date=record.visit_date,
        description=record.description,
    )


def to_visit_record(visit: Visit) -> VisitRecord:
    """Serialize a visit domain object."""
    return VisitRecord(
        id=visit.id,
        pet_id=visit.pet_id,
        visit_date=visit.visit_date,
        description=visit.description,
    )
