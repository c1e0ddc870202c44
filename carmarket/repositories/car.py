"""
Car repository.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from carmarket.models.car import Car
from carmarket.repositories.base import BaseRepository


class CarRepository(BaseRepository[Car]):
    """Repository for Car rows."""

    def __init__(self, db: AsyncSession):
        super().__init__(Car, db)
