"""
Car model for marketplace listings.
Each car belongs to a seller and carries an optional status and ordered image URLs.
"""

from sqlalchemy import String, Text, Integer, Float, JSON, Enum as SQLEnum, ForeignKey, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship
from carmarket.database import Base
from carmarket.models.enums import CarStatus
import uuid
from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from carmarket.models.seller import Seller


class Car(Base):
    """
    Car listing.
    Owned by the user who listed it; status and price are mutated by the owner.
    """

    __tablename__ = "cars"

    make: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        index=True,
        comment="Manufacturer, e.g. Toyota"
    )

    model: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Model name, e.g. Camry"
    )

    year: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Model year"
    )

    price: Mapped[float] = mapped_column(
        Float,
        nullable=False,
        index=True,
        comment="Asking price"
    )

    mileage: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Odometer reading in miles"
    )

    description: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True
    )

    status: Mapped[Optional[CarStatus]] = mapped_column(
        SQLEnum(CarStatus, name="car_status"),
        nullable=True,
        index=True,
        comment="AVAILABLE, SOLD or PENDING; absent by default"
    )

    images: Mapped[Optional[List[str]]] = mapped_column(
        JSON,
        nullable=True,
        comment="Ordered list of image URLs"
    )

    seller_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("sellers.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    owner: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        comment="Subject of the authenticated user who created the row"
    )

    seller: Mapped["Seller"] = relationship(
        "Seller",
        back_populates="cars",
        lazy="selectin"
    )

    def __repr__(self) -> str:
        return f"<Car(id={self.id}, {self.year} {self.make} {self.model}, price={self.price})>"

    @property
    def title(self) -> str:
        return f"{self.year} {self.make} {self.model}"


status_created_index = Index(
    "idx_cars_status_created",
    Car.status,
    Car.created_at
)
