"""
Database models for the car marketplace.
Includes Car, Seller and Inquiry models with their status enumerations.
"""

from carmarket.models.enums import CarStatus, InquiryStatus
from carmarket.models.seller import Seller
from carmarket.models.car import Car
from carmarket.models.inquiry import Inquiry

__all__ = [
    "CarStatus",
    "InquiryStatus",
    "Seller",
    "Car",
    "Inquiry",
]
