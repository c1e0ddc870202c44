"""
Pydantic schemas for car payloads and records.
Handles car create/update payloads and the canonical record shape.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List
from datetime import datetime
from uuid import UUID

from carmarket.models.enums import CarStatus
from carmarket.schemas.seller import SellerRead


class CarBase(BaseModel):
    """Base car schema with the listing fields."""

    make: str = Field(..., max_length=100, description="Manufacturer")
    model: str = Field(..., max_length=100, description="Model name")
    year: int = Field(..., description="Model year")
    price: float = Field(..., description="Asking price")
    mileage: int = Field(..., description="Odometer reading in miles")
    description: Optional[str] = Field(None, description="Free-text description")
    status: Optional[CarStatus] = Field(None, description="AVAILABLE, SOLD or PENDING")
    images: Optional[List[str]] = Field(None, description="Ordered image URLs")


class CarCreate(CarBase):
    """Schema for creating a new car listing."""

    seller_id: UUID = Field(..., description="ID of the seller listing the car")


class CarUpdate(BaseModel):
    """
    Schema for a partial car update.
    Only fields explicitly set are sent to the backend.
    """

    make: Optional[str] = Field(None, max_length=100)
    model: Optional[str] = Field(None, max_length=100)
    year: Optional[int] = None
    price: Optional[float] = Field(None, gt=0)
    mileage: Optional[int] = Field(None, ge=0)
    description: Optional[str] = None
    status: Optional[CarStatus] = None
    images: Optional[List[str]] = None
    seller_id: Optional[UUID] = None

    @field_validator("make", "model")
    @classmethod
    def validate_not_blank(cls, v):
        if v is not None and not v.strip():
            raise ValueError("Value cannot be empty")
        return v


class CarRead(CarBase):
    """Canonical car record, including the seller back-reference."""

    id: UUID
    seller_id: UUID
    owner: str
    seller: Optional[SellerRead] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @property
    def title(self) -> str:
        return f"{self.year} {self.make} {self.model}"
