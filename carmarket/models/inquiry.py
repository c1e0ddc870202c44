"""
Inquiry model.
A prospective buyer's message about a car.
"""

from sqlalchemy import String, Text, Enum as SQLEnum, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship
from carmarket.database import Base
from carmarket.models.enums import InquiryStatus
import uuid
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from carmarket.models.car import Car


class Inquiry(Base):
    """Purchase inquiry sent by a buyer about one car."""

    __tablename__ = "inquiries"

    message: Mapped[str] = mapped_column(
        Text,
        nullable=False
    )

    car_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("cars.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    buyer_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False
    )

    buyer_email: Mapped[str] = mapped_column(
        String(255),
        nullable=False
    )

    buyer_phone: Mapped[Optional[str]] = mapped_column(
        String(50),
        nullable=True
    )

    status: Mapped[Optional[InquiryStatus]] = mapped_column(
        SQLEnum(InquiryStatus, name="inquiry_status"),
        nullable=True,
        index=True
    )

    owner: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        comment="Subject of the caller who created the row"
    )

    car: Mapped["Car"] = relationship("Car", lazy="selectin")

    def __repr__(self) -> str:
        return f"<Inquiry(id={self.id}, car_id={self.car_id}, status={self.status})>"
