"""Pet and pet type models."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base

if TYPE_CHECKING:
    from app.models.owner import Owner
    from app.models.visit import Visit


class PetType(Base):
    """Reference data describing a kind of animal."""

    __tablename__ = "types"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(80), nullable=False, unique=True)


class Pet(Base):
    """A pet belonging to exactly one owner."""

    __tablename__ = "pets"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(30), nullable=False, index=True)
    birth_date: Mapped[date | None] = mapped_column(Date())
    type_id: Mapped[int | None] = mapped_column(
        ForeignKey("types.id", ondelete="RESTRICT")
    )
    owner_id: Mapped[int | None] = mapped_column(
        ForeignKey("owners.id", ondelete="CASCADE")
    )

    type: Mapped["PetType | None"] = relationship("PetType")
    owner: Mapped["Owner | None"] = relationship("Owner", back_populates="pets")
    visits: Mapped[list["Visit"]] = relationship(
        "Visit",
        back_populates="pet",
        cascade="all, delete-orphan",
        order_by="Visit.id",
    )
