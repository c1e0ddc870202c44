"""
Two-step sell wizard: seller details, then car details.

Wizard state lives in the browser session between requests. The final step
reuses an existing seller with the same email when the seller store has one,
otherwise creates the seller, then creates the car listing as AVAILABLE.
A successful listing clears the wizard, so replaying the final request fails
seller validation instead of creating a second listing.
"""

from typing import Any, MutableMapping, Optional, Tuple
import logging

from pydantic import BaseModel, Field

from carmarket.models.enums import CarStatus
from carmarket.schemas.car import CarCreate, CarRead
from carmarket.schemas.forms import CarForm, SellerForm
from carmarket.schemas.seller import SellerCreate
from carmarket.stores import Stores
from carmarket.utils.validators import validate_car_form, validate_seller_form

logger = logging.getLogger(__name__)

WIZARD_KEY = "sellWizard"

SELLER_STEP = 1
CAR_STEP = 2

SELLER_CREATE_FAILED = "Failed to create seller profile"
CAR_CREATE_FAILED = "Failed to create car listing"
BACKEND_FAILURES = (SELLER_CREATE_FAILED, CAR_CREATE_FAILED)


class WizardState(BaseModel):
    step: int = SELLER_STEP
    seller: SellerForm = Field(default_factory=SellerForm)
    car: CarForm = Field(default_factory=CarForm)
    error: Optional[str] = None


class SellWizard:
    """
    Session-backed sell wizard.

    Args:
        session: Mutable browser-session mapping
    """

    def __init__(self, session: MutableMapping[str, Any]):
        self.session = session

    @property
    def state(self) -> WizardState:
        saved = self.session.get(WIZARD_KEY)
        if not saved:
            return WizardState()
        return WizardState.model_validate(saved)

    def _save(self, state: WizardState) -> WizardState:
        self.session[WIZARD_KEY] = state.model_dump(mode="json")
        return state

    def clear(self) -> None:
        self.session.pop(WIZARD_KEY, None)

    def submit_seller(self, form: SellerForm) -> WizardState:
        """Validate step 1 and move on to the car details when it passes."""
        state = self.state
        state.seller = form
        state.error = validate_seller_form(form)
        if state.error is None:
            state.step = CAR_STEP
        return self._save(state)

    def back(self) -> WizardState:
        state = self.state
        state.step = SELLER_STEP
        state.error = None
        return self._save(state)

    async def submit_car(self, form: CarForm, stores: Stores) -> Tuple[WizardState, Optional[CarRead]]:
        """
        Validate step 2 and create the listing.

        Args:
            form: Car details
            stores: Request stores; the seller store is mounted for the email lookup

        Returns:
            The wizard state and the created car, or None when anything failed
        """
        state = self.state
        state.car = form

        seller_error = validate_seller_form(state.seller)
        if seller_error is not None:
            state.step = SELLER_STEP
            state.error = seller_error
            return self._save(state), None

        state.step = CAR_STEP
        state.error = validate_car_form(form)
        if state.error is not None:
            return self._save(state), None

        await stores.mount("sellers")
        seller = stores.sellers.find_by_email(state.seller.email)
        if seller is None:
            seller = await stores.sellers.create(SellerCreate(
                name=state.seller.name,
                email=state.seller.email,
                phone=state.seller.phone,
            ))
            if seller is None:
                logger.warning(f"Seller creation failed: {stores.sellers.error}")
                state.error = SELLER_CREATE_FAILED
                return self._save(state), None
        else:
            logger.info(f"Reusing seller {seller.id} for {seller.email}")

        car = await stores.cars.create(CarCreate(
            make=form.make,
            model=form.model,
            year=form.year,
            price=form.price,
            mileage=form.mileage,
            description=form.description,
            images=form.image_urls(),
            status=CarStatus.AVAILABLE,
            seller_id=seller.id,
        ))
        if car is None:
            logger.warning(f"Car creation failed: {stores.cars.error}")
            state.error = CAR_CREATE_FAILED
            return self._save(state), None

        logger.info(f"Listed car {car.id} for seller {seller.id}")
        self.clear()
        return WizardState(), car
