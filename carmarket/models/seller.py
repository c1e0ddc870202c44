"""
Seller model.
A seller is created once per distinct email during the sell flow and owns many cars.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from carmarket.database import Base
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from carmarket.models.car import Car


class Seller(Base):
    """Seller contact details and the cars they list."""

    __tablename__ = "sellers"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Seller's full name"
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        comment="Seller email address, used to de-duplicate sellers"
    )

    phone: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        comment="Seller phone number"
    )

    owner: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        comment="Subject of the authenticated user who created the row"
    )

    cars: Mapped[List["Car"]] = relationship(
        "Car",
        back_populates="seller",
        cascade="all, delete-orphan",
        lazy="selectin"
    )

    def __repr__(self) -> str:
        return f"<Seller(id={self.id}, email={self.email})>"
