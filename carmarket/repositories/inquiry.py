"""
Inquiry repository.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from carmarket.models.inquiry import Inquiry
from carmarket.repositories.base import BaseRepository


class InquiryRepository(BaseRepository[Inquiry]):
    """Repository for Inquiry rows."""

    def __init__(self, db: AsyncSession):
        super().__init__(Inquiry, db)
