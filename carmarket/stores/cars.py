"""
Car store: the car listing cache used by the list, home and sell views.
"""

from typing import Any, Dict, Optional, Union
import uuid

from carmarket.schemas.car import CarCreate, CarRead, CarUpdate
from carmarket.stores.base import EntityStore


class CarStore(EntityStore[CarRead]):
    """Cars with create, update and delete helpers."""

    async def create(self, car: Union[CarCreate, Dict[str, Any]]) -> Optional[CarRead]:
        return await self._create(car)

    async def update(self, id: uuid.UUID, car: Union[CarUpdate, Dict[str, Any]]) -> Optional[CarRead]:
        """Apply a partial update; only fields set on the patch are sent."""
        if isinstance(car, CarUpdate):
            car = car.model_dump(exclude_unset=True)
        return await self._update(id, car)

    async def delete(self, id: uuid.UUID) -> bool:
        return await self._delete(id)
