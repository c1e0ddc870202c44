"""
Pydantic schemas for seller payloads and records.
"""

from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from uuid import UUID


class SellerBase(BaseModel):
    """Fields supplied when creating a seller."""

    name: str = Field(..., max_length=255, description="Seller's full name")
    email: str = Field(..., max_length=255, description="Seller email address")
    phone: str = Field(..., max_length=50, description="Seller phone number")


class SellerCreate(SellerBase):
    """Schema for creating a new seller."""


class SellerRead(SellerBase):
    """Canonical seller record as returned by the data client."""

    id: UUID
    owner: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
