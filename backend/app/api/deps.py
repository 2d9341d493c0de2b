"""Common API dependencies."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_session
from app.services.clinic_service import ClinicService, DatabaseClinicService


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Provide an async database session."""
    async for session in get_session():
        yield session


async def get_clinic_service(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> ClinicService:
    """Provide the clinic service for the current request.

    Tests replace this dependency through ``app.dependency_overrides``.
    """
    return DatabaseClinicService(session)
