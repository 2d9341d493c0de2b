"""Clinic service: lookup and persistence of owners, pets, and visits."""

from __future__ import annotations

import logging
from typing import Protocol, Sequence

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.sql import Select

from app.models.owner import Owner
from app.models.pet import Pet, PetType
from app.models.visit import Visit

logger = logging.getLogger(__name__)


class ClinicService(Protocol):
    """Collaborator consulted by the owner API.

    Lookups return ``None`` (or an empty sequence) when nothing matches and
    never raise for absence. Mutations persist the given domain object and
    return it with its identity assigned.
    """

    async def find_owner_by_id(self, owner_id: int) -> Owner | None: ...

    async def find_owner_by_last_name(self, last_name: str) -> Sequence[Owner]: ...

    async def find_all_owners(self) -> Sequence[Owner]: ...

    async def find_pet_by_id(self, pet_id: int) -> Pet | None: ...

    async def find_pet_type_by_id(self, pet_type_id: int) -> PetType | None: ...

    async def find_visit_by_id(self, visit_id: int) -> Visit | None: ...

    async def save_owner(self, owner: Owner) -> Owner: ...

    async def delete_owner(self, owner: Owner) -> None: ...

    async def save_pet(self, pet: Pet) -> Pet: ...

    async def save_visit(self, visit: Visit) -> Visit: ...


def _base_owner_query() -> Select[tuple[Owner]]:
    """Return owners with their pets, pet types, and visits eagerly loaded."""
    return (
        select(Owner)
        .options(
            selectinload(Owner.pets).selectinload(Pet.type),
            selectinload(Owner.pets).selectinload(Pet.visits),
        )
        .order_by(Owner.id)
    )


def _base_pet_query() -> Select[tuple[Pet]]:
    return select(Pet).options(selectinload(Pet.type), selectinload(Pet.visits))


class DatabaseClinicService:
    """``ClinicService`` backed by an async SQLAlchemy session."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_owner_by_id(self, owner_id: int) -> Owner | None:
        stmt = _base_owner_query().where(Owner.id == owner_id)
        result = await self._session.execute(stmt)
        return result.scalars().unique().one_or_none()

    async def find_owner_by_last_name(self, last_name: str) -> Sequence[Owner]:
        """Return owners whose last name starts with ``last_name``."""
        stmt = _base_owner_query().where(Owner.last_name.startswith(last_name))
        result = await self._session.execute(stmt)
        return result.scalars().unique().all()

    async def find_all_owners(self) -> Sequence[Owner]:
        result = await self._session.execute(_base_owner_query())
        return result.scalars().unique().all()

    async def find_pet_by_id(self, pet_id: int) -> Pet | None:
        stmt = _base_pet_query().where(Pet.id == pet_id)
        result = await self._session.execute(stmt)
        return result.scalars().unique().one_or_none()

    async def find_pet_type_by_id(self, pet_type_id: int) -> PetType | None:
        return await self._session.get(PetType, pet_type_id)

    async def find_visit_by_id(self, visit_id: int) -> Visit | None:
        return await self._session.get(Visit, visit_id)

    async def save_owner(self, owner: Owner) -> Owner:
        """Insert or update an owner."""
        await self._commit(owner)
        return owner

    async def delete_owner(self, owner: Owner) -> None:
        """Delete an owner together with its pets and their visits."""
        await self._session.delete(owner)
        await self._session.commit()
        logger.debug("Deleted owner %s", owner.id)

    async def save_pet(self, pet: Pet) -> Pet:
        await self._commit(pet)
        return pet

    async def save_visit(self, visit: Visit) -> Visit:
        await self._commit(visit)
        return visit

    async def _commit(self, instance: Owner | Pet | Visit) -> None:
        self._session.add(instance)
        try:
            await self._session.commit()
        except IntegrityError:
            await self._session.rollback()
            raise


__all__ = ["ClinicService", "DatabaseClinicService"]
