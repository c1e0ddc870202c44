"""
Pydantic schemas for records, payloads, forms and pages.
"""

from .seller import SellerBase, SellerCreate, SellerRead
from .car import CarBase, CarCreate, CarUpdate, CarRead
from .inquiry import InquiryCreate, InquiryUpdate, InquiryRead
from .forms import SellerForm, CarForm, InquiryForm

__all__ = [
    "SellerBase",
    "SellerCreate",
    "SellerRead",
    "CarBase",
    "CarCreate",
    "CarUpdate",
    "CarRead",
    "InquiryCreate",
    "InquiryUpdate",
    "InquiryRead",
    "SellerForm",
    "CarForm",
    "InquiryForm",
]
