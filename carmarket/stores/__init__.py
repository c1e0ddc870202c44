"""
Entity stores: per-entity record caches grouped behind one container.
"""

import logging
from typing import Dict

from carmarket.services.data_client import DataClient
from carmarket.stores.base import EntityStore
from carmarket.stores.cars import CarStore
from carmarket.stores.sellers import SellerStore
from carmarket.stores.inquiries import InquiryStore

logger = logging.getLogger(__name__)


class Stores:
    """
    The three entity caches for one request.

    Stores are mounted lazily by the views that need them; ``invalidate``
    re-lists a single cache after changes made outside its helpers.
    """

    def __init__(self, client: DataClient):
        self.client = client
        self.cars = CarStore(client.cars)
        self.sellers = SellerStore(client.sellers)
        self.inquiries = InquiryStore(client.inquiries)

    @property
    def by_name(self) -> Dict[str, EntityStore]:
        return {"cars": self.cars, "sellers": self.sellers, "inquiries": self.inquiries}

    async def mount(self, *names: str) -> "Stores":
        """Mount the named stores, or all of them when no name is given."""
        for name in names or tuple(self.by_name):
            await self.by_name[name].mount()
        return self

    async def invalidate(self, name: str) -> EntityStore:
        store = self.by_name[name]
        logger.debug(f"Invalidating {name} store")
        await store.refresh()
        return store


__all__ = [
    "EntityStore",
    "CarStore",
    "SellerStore",
    "InquiryStore",
    "Stores",
]
