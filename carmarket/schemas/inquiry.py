"""
Pydantic schemas for buyer inquiries.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime
from uuid import UUID

from carmarket.models.enums import InquiryStatus


class InquiryCreate(BaseModel):
    """Schema for creating an inquiry."""

    message: str
    car_id: UUID
    buyer_name: str = Field(..., max_length=255)
    buyer_email: str = Field(..., max_length=255)
    buyer_phone: Optional[str] = Field(None, max_length=50)
    status: Optional[InquiryStatus] = None


class InquiryUpdate(BaseModel):
    """Partial inquiry update; only the status is mutable."""

    status: Optional[InquiryStatus] = None


class InquiryRead(BaseModel):
    id: UUID
    message: str
    car_id: UUID
    buyer_name: str
    buyer_email: str
    buyer_phone: Optional[str] = None
    status: Optional[InquiryStatus] = None
    owner: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
