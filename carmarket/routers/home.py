"""
Home page: featured listings and the seeding banner.
"""

from fastapi import APIRouter, Depends, status

from carmarket.config import settings
from carmarket.schemas.pages import HomePage
from carmarket.services.listing import featured_cars
from carmarket.services.seeding import SeedState
from carmarket.stores import Stores
from carmarket.utils.dependencies import get_seed_state, get_stores

router = APIRouter(tags=["Pages"])


@router.get(
    "/",
    response_model=HomePage,
    status_code=status.HTTP_200_OK,
    summary="Home page",
    description="Featured available cars. Seeds demo data on the first visit of a browser session."
)
async def home(
    seed: SeedState = Depends(get_seed_state),
    stores: Stores = Depends(get_stores)
) -> HomePage:
    await stores.mount("cars")
    cars = stores.cars
    return HomePage(
        featured=featured_cars(cars.items, settings.featured_car_count),
        seed=seed,
        loading=cars.loading,
        error=str(cars.error) if cars.error else None,
    )
