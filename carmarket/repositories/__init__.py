"""
Repository layer for data access operations.
"""

from carmarket.repositories.base import BaseRepository
from carmarket.repositories.car import CarRepository
from carmarket.repositories.seller import SellerRepository
from carmarket.repositories.inquiry import InquiryRepository

__all__ = [
    "BaseRepository",
    "CarRepository",
    "SellerRepository",
    "InquiryRepository",
]
