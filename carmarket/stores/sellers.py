"""
Seller store.
"""

from typing import Any, Dict, Optional, Union

from carmarket.schemas.seller import SellerCreate, SellerRead
from carmarket.stores.base import EntityStore


class SellerStore(EntityStore[SellerRead]):
    """Sellers are only ever created; lookups by email drive de-duplication."""

    async def create(self, seller: Union[SellerCreate, Dict[str, Any]]) -> Optional[SellerRead]:
        return await self._create(seller)

    def find_by_email(self, email: str) -> Optional[SellerRead]:
        """First loaded seller whose email matches exactly."""
        for seller in self.items:
            if seller.email == email:
                return seller
        return None
