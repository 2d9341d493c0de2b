"""Visit model."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base

if TYPE_CHECKING:
    from app.models.pet import Pet


class Visit(Base):
    """A clinic visit recorded against a pet."""

    __tablename__ = "visits"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    pet_id: Mapped[int | None] = mapped_column(
        ForeignKey("pets.id", ondelete="CASCADE")
    )
    visit_date: Mapped[date | None] = mapped_column(Date())
    description: Mapped[str | None] = mapped_column(String(255))

    pet: Mapped["Pet | None"] = relationship("Pet", back_populates="visits")
