"""Service layer exports."""
from app.services import bootstrap_service, clinic_service
from app.services.clinic_service import ClinicService, DatabaseClinicService

__all__ = [
    "ClinicService",
    "DatabaseClinicService",
    "bootstrap_service",
    "clinic_service",
]
