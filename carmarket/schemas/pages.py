"""
Page models returned by the view endpoints.
Pages carry their own loading/error state so failures render inline.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from carmarket.schemas.car import CarRead
from carmarket.schemas.forms import CarForm, InquiryForm, SellerForm
from carmarket.schemas.inquiry import InquiryRead
from carmarket.services.seeding import SeedState


class HomePage(BaseModel):
    featured: List[CarRead] = Field(default_factory=list)
    seed: SeedState
    loading: bool = False
    error: Optional[str] = None


class CarListPage(BaseModel):
    cars: List[CarRead] = Field(default_factory=list)
    status_filter: str
    status_filters: List[str]
    total: int = 0
    seed: SeedState
    loading: bool = False
    error: Optional[str] = None


class CarDetailPage(BaseModel):
    """Detail view: the car with its seller and the selected carousel image."""

    car: CarRead
    title: str
    status_badge: Optional[str] = None
    image_index: Optional[int] = None
    image_url: Optional[str] = None
    seed: SeedState


class InquiryListPage(BaseModel):
    inquiries: List[InquiryRead] = Field(default_factory=list)
    total: int = 0
    error: Optional[str] = None


class InquiryFormResponse(BaseModel):
    """Inquiry form outcome; entered values are echoed back on failure."""

    submitted: bool = False
    message: Optional[str] = None
    errors: Dict[str, str] = Field(default_factory=dict)
    values: InquiryForm = Field(default_factory=InquiryForm)
    inquiry: Optional[InquiryRead] = None


class SellPage(BaseModel):
    step: int
    seller: SellerForm
    car: CarForm
    error: Optional[str] = None
    listing: Optional[CarRead] = None
    redirect: Optional[str] = None
