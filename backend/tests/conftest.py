"""Test fixtures for the pet clinic backend."""
from __future__ import annotations

import os
from collections.abc import AsyncIterator, Sequence
from datetime import date

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test.db")
os.environ.setdefault("SEED_PET_TYPES", "false")

from app.api.deps import get_clinic_service
from app.core.config import get_settings
from app.db.base import Base
from app.db.session import build_engine, dispose_engine, get_sessionmaker
from app.main import app
from app.models import Owner, Pet, PetType, Visit
from app.services.bootstrap_service import ensure_pet_types


class FakeClinicService:
    """In-memory clinic service that records every mutating call."""

    def __init__(self) -> None:
        self.owners: dict[int, Owner] = {}
        self.pets: dict[int, Pet] = {}
        self.pet_types: dict[int, PetType] = {}
        self.visits: dict[int, Visit] = {}
        self.calls: list[str] = []
        self.failure: Exception | None = None
        self._next_id = 100

    def _assign_id(self, instance: Owner | Pet | Visit) -> None:
        if instance.id is None:
            self._next_id += 1
            instance.id = self._next_id

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if self.failure is not None:
            raise self.failure

    def add_owner(self, owner: Owner) -> Owner:
        self.owners[owner.id] = owner
        for pet in owner.pets:
            pet.owner_id = owner.id
            self.pets[pet.id] = pet
        return owner

    async def find_owner_by_id(self, owner_id: int) -> Owner | None:
        return self.owners.get(owner_id)

    async def find_owner_by_last_name(self, last_name: str) -> Sequence[Owner]:
        return [
            owner
            for owner in self.owners.values()
            if owner.last_name.startswith(last_name)
        ]

    async def find_all_owners(self) -> Sequence[Owner]:
        return list(self.owners.values())

    async def find_pet_by_id(self, pet_id: int) -> Pet | None:
        return self.pets.get(pet_id)

    async def find_pet_type_by_id(self, pet_type_id: int) -> PetType | None:
        return self.pet_types.get(pet_type_id)

    async def find_visit_by_id(self, visit_id: int) -> Visit | None:
        return self.visits.get(visit_id)

    async def save_owner(self, owner: Owner) -> Owner:
        self._record("save_owner")
        self._assign_id(owner)
        self.owners[owner.id] = owner
        return owner

    async def delete_owner(self, owner: Owner) -> None:
        self._record("delete_owner")
        self.owners.pop(owner.id, None)
        for pet in owner.pets:
            self.pets.pop(pet.id, None)

    async def save_pet(self, pet: Pet) -> Pet:
        self._record("save_pet")
        self._assign_id(pet)
        self.pets[pet.id] = pet
        return pet

    async def save_visit(self, visit: Visit) -> Visit:
        self._record("save_visit")
        self._assign_id(visit)
        self.visits[visit.id] = visit
        return visit


@pytest.fixture()
def dog() -> PetType:
    return PetType(id=2, name="dog")


@pytest.fixture()
def clinic(dog: PetType) -> FakeClinicService:
    """Provide a fake clinic seeded with the sample owners."""
    service = FakeClinicService()
    service.pet_types[dog.id] = dog
    service.pet_types[1] = PetType(id=1, name="cat")
    service.add_owner(
        Owner(
            id=1,
            first_name="George",
            last_name="Franklin",
            address="110 W. Liberty St.",
            city="Madison",
            telephone="6085551023",
            pets=[
                Pet(
                    id=1,
                    name="Rosy",
                    birth_date=date(2015, 6, 8),
                    type=dog,
                    visits=[
                        Visit(
                            id=1,
                            pet_id=1,
                            visit_date=date(2024, 3, 4),
                            description="test1",
                        )
                    ],
                )
            ],
        )
    )
    service.add_owner(
        Owner(
            id=2,
            first_name="Betty",
            last_name="Davis",
            address="638 Cardinal Ave.",
            city="Sun Prairie",
            telephone="6085551749",
            pets=[],
        )
    )
    service.add_owner(
        Owner(
            id=3,
            first_name="Eduardo",
            last_name="Rodriquez",
            address="2693 Commerce St.",
            city="McFarland",
            telephone="6085558763",
            pets=[],
        )
    )
    service.add_owner(
        Owner(
            id=4,
            first_name="Harold",
            last_name="Davis",
            address="563 Friendly St.",
            city="Windsor",
            telephone="6085553198",
            pets=[],
        )
    )
    service.visits[1] = service.pets[1].visits[0]
    return service


@pytest_asyncio.fixture()
async def client(clinic: FakeClinicService) -> AsyncIterator[AsyncClient]:
    """Yield an async client whose requests are served by the fake clinic."""
    app.dependency_overrides[get_clinic_service] = lambda: clinic
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.pop(get_clinic_service, None)


@pytest.fixture(scope="session")
def db_url(tmp_path_factory: pytest.TempPathFactory) -> str:
    """Provide a temporary SQLite database URL for the test session."""
    db_path = tmp_path_factory.mktemp("db") / "test.db"
    return f"sqlite+aiosqlite:///{db_path}"


@pytest_asyncio.fixture()
async def reset_database(db_url: str) -> AsyncIterator[None]:
    """Drop and recreate the database schema for an isolated test."""
    os.environ["DATABASE_URL"] = db_url
    get_settings.cache_clear()
    get_settings()

    await dispose_engine(db_url)
    engine = build_engine(db_url)
    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.drop_all)
        await connection.run_sync(Base.metadata.create_all)
    await engine.dispose()
    await ensure_pet_types(db_url)
    yield
    await dispose_engine(db_url)


@pytest_asyncio.fixture()
async def db_session(reset_database: None, db_url: str):
    """Yield a session bound to the freshly created test database."""
    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as session:
        yield session


@pytest_asyncio.fixture()
async def db_client(reset_database: None) -> AsyncIterator[AsyncClient]:
    """Yield an async client backed by the real database service."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
