"""
Owner-facing inquiry endpoints.
"""

from fastapi import APIRouter, Depends, status
from uuid import UUID

from carmarket.schemas.inquiry import InquiryRead, InquiryUpdate
from carmarket.schemas.pages import InquiryListPage
from carmarket.stores import Stores
from carmarket.utils.dependencies import get_owner_stores
from carmarket.utils.exceptions import BadRequestError, store_failure

router = APIRouter(prefix="/inquiries", tags=["Inquiries"])


@router.get(
    "",
    response_model=InquiryListPage,
    status_code=status.HTTP_200_OK,
    summary="List inquiries",
    description="All inquiries in the order they were received. Requires sign-in."
)
async def list_inquiries(stores: Stores = Depends(get_owner_stores)) -> InquiryListPage:
    await stores.mount("inquiries")
    inquiries = stores.inquiries
    return InquiryListPage(
        inquiries=inquiries.items,
        total=len(inquiries.items),
        error=str(inquiries.error) if inquiries.error else None,
    )


@router.patch(
    "/{inquiry_id}",
    response_model=InquiryRead,
    status_code=status.HTTP_200_OK,
    summary="Change inquiry status",
    description="Move an inquiry through NEW, RESPONDED and CLOSED. Owner only."
)
async def update_inquiry_status(
    inquiry_id: UUID,
    inquiry_update: InquiryUpdate,
    stores: Stores = Depends(get_owner_stores)
) -> InquiryRead:
    if inquiry_update.status is None:
        raise BadRequestError("status is required")
    inquiry = await stores.inquiries.update_status(inquiry_id, inquiry_update.status)
    if inquiry is None:
        raise store_failure("Inquiry", stores.inquiries.error)
    return inquiry
