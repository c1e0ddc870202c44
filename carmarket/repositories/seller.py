"""
Seller repository.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from carmarket.models.seller import Seller
from carmarket.repositories.base import BaseRepository


class SellerRepository(BaseRepository[Seller]):
    """Repository for Seller rows."""

    def __init__(self, db: AsyncSession):
        super().__init__(Seller, db)
