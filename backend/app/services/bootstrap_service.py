"""Bootstrap helpers for default data."""

from __future__ import annotations

import logging

from sqlalchemy import select

from app.core.config import get_settings
from app.db.session import get_sessionmaker
from app.models import PetType

logger = logging.getLogger(__name__)

DEFAULT_PET_TYPES = ("cat", "dog", "lizard", "snake", "bird", "hamster")


async def ensure_pet_types(database_url: str | None = None) -> list[str]:
    """Create any missing reference pet types and return the names added."""

    settings = get_settings()
    sessionmaker = get_sessionmaker(database_url or settings.database_url)
    async with sessionmaker() as session:
        result = await session.execute(select(PetType.name))
        existing = set(result.scalars().all())
        missing = [name for name in DEFAULT_PET_TYPES if name not in existing]
        if not missing:
            return []

        session.add_all(PetType(name=name) for name in missing)
        await session.commit()
    logger.info("Seeded pet types: %s", ", ".join(missing))
    return missing
