"""
Car listing endpoints: browse, detail, buyer inquiries and owner edits.
"""

from fastapi import APIRouter, Depends, Query, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response
from typing import Dict
from uuid import UUID
import logging

from carmarket.models.enums import InquiryStatus
from carmarket.schemas.car import CarRead, CarUpdate
from carmarket.schemas.forms import InquiryForm
from carmarket.schemas.inquiry import InquiryCreate
from carmarket.schemas.pages import CarDetailPage, CarListPage, InquiryFormResponse
from carmarket.services.listing import ALL_STATUSES, STATUS_FILTERS, filter_by_status, select_image
from carmarket.services.seeding import SeedState
from carmarket.stores import Stores
from carmarket.utils.dependencies import get_owner_stores, get_seed_state, get_stores
from carmarket.utils.exceptions import MISSING_REFERENCE, CarNotFoundError, ValidationError, store_failure
from carmarket.utils.validators import validate_inquiry_form

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cars", tags=["Cars"])

INQUIRY_SENT = "Your inquiry has been sent to the seller. They will contact you soon."
INQUIRY_FAILED = "Failed to submit inquiry. Please try again."


@router.get(
    "",
    response_model=CarListPage,
    status_code=status.HTTP_200_OK,
    summary="List cars",
    description="All cars in listing order, optionally filtered by exact status"
)
async def list_cars(
    status_filter: str = Query(ALL_STATUSES, alias="status", description="ALL, AVAILABLE, PENDING or SOLD"),
    seed: SeedState = Depends(get_seed_state),
    stores: Stores = Depends(get_stores)
) -> CarListPage:
    """
    Browse listings.

    Raises:
        ValidationError: If the status filter is not recognised
    """
    if status_filter not in STATUS_FILTERS:
        raise ValidationError(
            f"Unknown status filter '{status_filter}'",
            field_errors=[{
                "field": "status",
                "message": f"Must be one of: {', '.join(STATUS_FILTERS)}",
            }]
        )

    await stores.mount("cars")
    cars = filter_by_status(stores.cars.items, status_filter)
    return CarListPage(
        cars=cars,
        status_filter=status_filter,
        status_filters=list(STATUS_FILTERS),
        total=len(cars),
        seed=seed,
        loading=stores.cars.loading,
        error=str(stores.cars.error) if stores.cars.error else None,
    )


@router.get(
    "/{car_id}",
    response_model=CarDetailPage,
    status_code=status.HTTP_200_OK,
    summary="Car detail",
    description="One car with its seller and the selected carousel image"
)
async def car_detail(
    car_id: UUID,
    image: int = Query(0, description="Carousel index, clamped into range"),
    seed: SeedState = Depends(get_seed_state),
    stores: Stores = Depends(get_stores)
) -> CarDetailPage:
    car = await stores.cars.get(car_id)
    if stores.cars.error:
        raise store_failure("Car", stores.cars.error)
    if car is None:
        raise CarNotFoundError()

    image_index = select_image(car.images, image)
    return CarDetailPage(
        car=car,
        title=car.title,
        status_badge=car.status.value if car.status else None,
        image_index=image_index,
        image_url=car.images[image_index] if image_index is not None else None,
        seed=seed,
    )


@router.post(
    "/{car_id}/inquiries",
    response_model=InquiryFormResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Send an inquiry",
    description="Validate the inquiry form and send it to the seller. Requires sign-in."
)
async def submit_inquiry(
    car_id: UUID,
    form: InquiryForm,
    stores: Stores = Depends(get_owner_stores)
):
    """
    Submit the buyer inquiry form.

    Validation failures return 422 with per-field messages and the entered
    values; nothing is sent to the backend in that case.
    """
    errors: Dict[str, str] = validate_inquiry_form(form)
    if errors:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=jsonable_encoder(InquiryFormResponse(errors=errors, values=form)),
        )

    inquiry = await stores.inquiries.create(InquiryCreate(
        car_id=car_id,
        buyer_name=form.buyer_name,
        buyer_email=form.buyer_email,
        buyer_phone=form.buyer_phone or None,
        message=form.message,
        status=InquiryStatus.NEW,
    ))
    if inquiry is None:
        error = stores.inquiries.error
        if getattr(error, "code", None) == MISSING_REFERENCE:
            raise CarNotFoundError()
        logger.warning(f"Inquiry for car {car_id} failed: {error}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=jsonable_encoder(InquiryFormResponse(message=INQUIRY_FAILED, values=form)),
        )

    return InquiryFormResponse(submitted=True, message=INQUIRY_SENT, inquiry=inquiry)


@router.patch(
    "/{car_id}",
    response_model=CarRead,
    status_code=status.HTTP_200_OK,
    summary="Update a car",
    description="Partial update of a listing (status, price, ...). Owner only."
)
async def update_car(
    car_id: UUID,
    car_update: CarUpdate,
    stores: Stores = Depends(get_owner_stores)
) -> CarRead:
    car = await stores.cars.update(car_id, car_update)
    if car is None:
        raise store_failure("Car", stores.cars.error)
    return car


@router.delete(
    "/{car_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a car",
    description="Remove a listing. Owner only."
)
async def delete_car(
    car_id: UUID,
    stores: Stores = Depends(get_owner_stores)
) -> Response:
    if not await stores.cars.delete(car_id):
        raise store_failure("Car", stores.cars.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
