"""
Inquiry store.
"""

from typing import Any, Dict, Optional, Union
import uuid

from carmarket.models.enums import InquiryStatus
from carmarket.schemas.inquiry import InquiryCreate, InquiryRead
from carmarket.stores.base import EntityStore


class InquiryStore(EntityStore[InquiryRead]):
    """Inquiries with creation and status transitions."""

    async def create(self, inquiry: Union[InquiryCreate, Dict[str, Any]]) -> Optional[InquiryRead]:
        return await self._create(inquiry)

    async def update_status(self, id: uuid.UUID, status: InquiryStatus) -> Optional[InquiryRead]:
        return await self._update(id, {"status": status})
