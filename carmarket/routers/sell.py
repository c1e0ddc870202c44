"""
Sell wizard endpoints. Every step requires a signed-in owner.
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from typing import Optional

from carmarket.schemas.car import CarRead
from carmarket.schemas.forms import CarForm, SellerForm
from carmarket.schemas.pages import SellPage
from carmarket.services.sell_wizard import BACKEND_FAILURES, SellWizard, WizardState
from carmarket.stores import Stores
from carmarket.utils.auth import Identity
from carmarket.utils.dependencies import get_current_owner, get_owner_stores

router = APIRouter(prefix="/sell", tags=["Sell"])


def _page(state: WizardState, listing: Optional[CarRead] = None) -> SellPage:
    return SellPage(
        step=state.step,
        seller=state.seller,
        car=state.car,
        error=state.error,
        listing=listing,
        redirect=f"/cars/{listing.id}" if listing else None,
    )


def _failure(state: WizardState) -> JSONResponse:
    code = (
        status.HTTP_400_BAD_REQUEST
        if state.error in BACKEND_FAILURES
        else status.HTTP_422_UNPROCESSABLE_ENTITY
    )
    return JSONResponse(status_code=code, content=jsonable_encoder(_page(state)))


@router.get("", response_model=SellPage, summary="Sell wizard state")
async def sell_page(
    request: Request,
    owner: Identity = Depends(get_current_owner)
) -> SellPage:
    return _page(SellWizard(request.session).state)


@router.post("/seller", response_model=SellPage, summary="Submit seller details")
async def submit_seller(
    request: Request,
    form: SellerForm,
    owner: Identity = Depends(get_current_owner)
):
    state = SellWizard(request.session).submit_seller(form)
    if state.error:
        return _failure(state)
    return _page(state)


@router.post("/back", response_model=SellPage, summary="Back to seller details")
async def back(
    request: Request,
    owner: Identity = Depends(get_current_owner)
) -> SellPage:
    return _page(SellWizard(request.session).back())


@router.post(
    "/car",
    response_model=SellPage,
    status_code=status.HTTP_201_CREATED,
    summary="Submit car details",
    description="Create the seller (unless one with the same email exists) and the AVAILABLE car listing"
)
async def submit_car(
    request: Request,
    form: CarForm,
    stores: Stores = Depends(get_owner_stores)
):
    state, car = await SellWizard(request.session).submit_car(form, stores)
    if car is None:
        return _failure(state)
    return _page(state, car)
