"""Owner, pet, and visit resource API."""

from __future__ import annotations

import logging
from datetime import date
from typing import Annotated

from fastapi import (
    APIRouter,
    Depends,
    HTTPException,
    Path,
    Query,
    Request,
    Response,
    status,
)
from fastapi.exceptions import RequestValidationError

from app import mappers
from app.api import deps
from app.models import Owner, Pet, PetType
from app.schemas.owner import OwnerRecord
from app.schemas.pet import PetRecord, PetTypeRecord
from app.schemas.validation import MAX_RECORD_ID, MIN_RECORD_ID
from app.schemas.visit import VisitRecord
from app.services.clinic_service import ClinicService

logger = logging.getLogger(__name__)

router = APIRouter()

ClinicServiceDep = Annotated[ClinicService, Depends(deps.get_clinic_service)]
RecordId = Annotated[int, Path(ge=MIN_RECORD_ID, le=MAX_RECORD_ID)]

_OWNER_FIELDS = ("first_name", "last_name", "address", "city", "telephone")
_PET_FIELDS = ("name", "birth_date")


def _not_found(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


def _set_location(request: Request, response: Response, resource_id: int) -> None:
    """Point the Location header at the newly created child resource."""
    response.headers["Location"] = f"{request.url.path.rstrip('/')}/{resource_id}"


async def _require_owner(service: ClinicService, owner_id: int) -> Owner:
    owner = await service.find_owner_by_id(owner_id)
    if owner is None:
        logger.debug("Owner %s not found", owner_id)
        raise _not_found("Owner not found")
    return owner


async def _require_owner_pet(
    service: ClinicService, owner_id: int, pet_id: int
) -> tuple[Owner, Pet]:
    """Resolve a pet addressed under an owner.

    A pet that exists but belongs to another owner is reported as missing.
    """
    owner = await _require_owner(service, owner_id)
    pet = await service.find_pet_by_id(pet_id)
    if pet is None or pet.owner_id != owner.id:
        logger.debug("Pet %s not found for owner %s", pet_id, owner_id)
        raise _not_found("Pet not found")
    return owner, pet


async def _resolve_pet_type(
    service: ClinicService, record: PetTypeRecord | None
) -> PetType | None:
    if record is None:
        return None
    pet_type = await service.find_pet_type_by_id(record.id)
    if pet_type is None:
        raise RequestValidationError(
            [
                {
                    "loc": ("body", "type", "id"),
                    "msg": f"Unknown pet type {record.id}",
                    "type": "unknown_pet_type",
                }
            ]
        )
    return pet_type


@router.get("", response_model=list[OwnerRecord], summary="List owners")
async def list_owners(
    service: ClinicServiceDep,
    last_name: Annotated[str | None, Query(alias="lastName")] = None,
) -> list[OwnerRecord]:
    """Return all owners, or those whose last name starts with ``lastName``."""
    if last_name is not None:
        owners = await service.find_owner_by_last_name(last_name)
    else:
        owners = await service.find_all_owners()
    if not owners:
        raise _not_found("No owners found")
    return mappers.to_owner_records(owners)


@router.post(
    "",
    response_model=OwnerRecord,
    status_code=status.HTTP_201_CREATED,
    summary="Create owner",
)
async def create_owner(
    payload: OwnerRecord,
    request: Request,
    response: Response,
    service: ClinicServiceDep,
) -> OwnerRecord:
    """Register a new owner. Any id or pets in the body are ignored."""
    owner = mappers.to_owner(payload.model_copy(update={"id": None, "pets": []}))
    owner = await service.save_owner(owner)
    logger.info("Created owner %s", owner.id)
    _set_location(request, response, owner.id)
    return mappers.to_owner_record(owner)


@router.get("/{owner_id}", response_model=OwnerRecord, summary="Get owner")
async def get_owner(owner_id: RecordId, service: ClinicServiceDep) -> OwnerRecord:
    owner = await _require_owner(service, owner_id)
    return mappers.to_owner_record(owner)


@router.put(
    "/{owner_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Update owner",
)
async def update_owner(
    owner_id: RecordId,
    payload: OwnerRecord,
    service: ClinicServiceDep,
) -> Response:
    """Replace the owner's contact details.

    The owner addressed by the path is updated; an id in the body is ignored.
    """
    owner = await _require_owner(service, owner_id)
    changes = mappers.to_owner(payload.model_copy(update={"pets": []}))
    for field in _OWNER_FIELDS:
        setattr(owner, field, getattr(changes, field))
    await service.save_owner(owner)
    logger.info("Updated owner %s", owner_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{owner_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete owner",
)
async def delete_owner(owner_id: RecordId, service: ClinicServiceDep) -> Response:
    owner = await _require_owner(service, owner_id)
    await service.delete_owner(owner)
    logger.info("Deleted owner %s", owner_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{owner_id}/pets",
    response_model=PetRecord,
    status_code=status.HTTP_201_CREATED,
    summary="Add pet to owner",
)
async def create_owner_pet(
    owner_id: RecordId,
    payload: PetRecord,
    request: Request,
    response: Response,
    service: ClinicServiceDep,
) -> PetRecord:
    """Register a new pet for an existing owner."""
    owner = await _require_owner(service, owner_id)
    pet_type = await _resolve_pet_type(service, payload.pet_type)
    pet = mappers.to_pet(
        payload.model_copy(
            update={"id": None, "owner_id": owner.id, "pet_type": None, "visits": []}
        )
    )
    pet.type = pet_type
    pet = await service.save_pet(pet)
    logger.info("Created pet %s for owner %s", pet.id, owner.id)
    _set_location(request, response, pet.id)
    return mappers.to_pet_record(pet)


@router.get(
    "/{owner_id}/pets/{pet_id}",
    response_model=PetRecord,
    summary="Get owner's pet",
)
async def get_owner_pet(
    owner_id: RecordId, pet_id: RecordId, service: ClinicServiceDep
) -> PetRecord:
    _, pet = await _require_owner_pet(service, owner_id, pet_id)
    return mappers.to_pet_record(pet)


@router.put(
    "/{owner_id}/pets/{pet_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Update owner's pet",
)
async def update_owner_pet(
    owner_id: RecordId,
    pet_id: RecordId,
    payload: PetRecord,
    service: ClinicServiceDep,
) -> Response:
    """Update a pet's name, birth date, and type.

    The stored type is kept when the body carries none.
    """
    _, pet = await _require_owner_pet(service, owner_id, pet_id)
    pet_type = await _resolve_pet_type(service, payload.pet_type)
    changes = mappers.to_pet(
        payload.model_copy(update={"pet_type": None, "visits": []})
    )
    for field in _PET_FIELDS:
        setattr(pet, field, getattr(changes, field))
    if pet_type is not None:
        pet.type = pet_type
    await service.save_pet(pet)
    logger.info("Updated pet %s for owner %s", pet_id, owner_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{owner_id}/pets/{pet_id}/visits",
    response_model=VisitRecord,
    status_code=status.HTTP_201_CREATED,
    summary="Record a visit for an owner's pet",
)
async def create_pet_visit(
    owner_id: RecordId,
    pet_id: RecordId,
    payload: VisitRecord,
    request: Request,
    response: Response,
    service: ClinicServiceDep,
) -> VisitRecord:
    """Record a visit. The visit date defaults to today."""
    _, pet = await _require_owner_pet(service, owner_id, pet_id)
    visit = mappers.to_visit(
        payload.model_copy(
            update={
                "id": None,
                "pet_id": pet.id,
                "visit_date": payload.visit_date or date.today(),
            }
        )
    )
    visit = await service.save_visit(visit)
    logger.info("Recorded visit %s for pet %s", visit.id, pet.id)
    _set_location(request, response, visit.id)
    return mappers.to_visit_record(visit)


@router.get(
    "/{owner_id}/pets/{pet_id}/visits/{visit_id}",
    response_model=VisitRecord,
    summary="Get a pet's visit",
)
async def get_pet_visit(
    owner_id: RecordId,
    pet_id: RecordId,
    visit_id: RecordId,
    service: ClinicServiceDep,
) -> VisitRecord:
    _, pet = await _require_owner_pet(service, owner_id, pet_id)
    visit = await service.find_visit_by_id(visit_id)
    if visit is None or visit.pet_id != pet.id:
        raise _not_found("Visit not found")
    return mappers.to_visit_record(visit)
