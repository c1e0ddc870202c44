"""
One-time demo data seeding, guarded by a browser-session flag.

The bootstrap runs on the first page request of a browser session. It only
writes when the store holds no cars: sellers are inserted one at a time, then
cars one at a time, each car getting a seller by round-robin over the seller
ids in insertion order. Any failure stops the run, is returned as the state's
error, and leaves the session flag unset so the next visit retries.
"""

from typing import Any, Dict, List, MutableMapping, Optional, Sequence
import logging
import uuid

from pydantic import BaseModel

from carmarket.data.mock_data import MOCK_CARS, MOCK_SELLERS
from carmarket.services.data_client import DataClient
from carmarket.utils.exceptions import BackendError

logger = logging.getLogger(__name__)

SEED_FLAG_KEY = "dbSeeded"


class SessionFlag:
    """
    One-time initialization guard stored in the browser session.

    The flag is only cleared by ``reset`` or by the session itself ending.
    """

    def __init__(self, session: MutableMapping[str, Any], key: str = SEED_FLAG_KEY):
        self.session = session
        self.key = key

    def is_set(self) -> bool:
        return self.session.get(self.key) == "true"

    def set(self) -> None:
        self.session[self.key] = "true"

    def reset(self) -> None:
        self.session.pop(self.key, None)


class SeedState(BaseModel):
    """Outcome of a bootstrap run, shown as the page banner."""

    complete: bool = False
    seeded: bool = False
    sellers_created: int = 0
    cars_created: int = 0
    error: Optional[str] = None


def assign_seller(seller_ids: Sequence[uuid.UUID], car_index: int) -> uuid.UUID:
    """Seller for the car at ``car_index``: ``seller_ids[car_index % len(seller_ids)]``."""
    if not seller_ids:
        raise ValueError("No sellers available to assign cars to")
    return seller_ids[car_index % len(seller_ids)]


class SeedBootstrap:
    """
    Populate an empty store with demonstration data.

    Args:
        client: Data client acting as the seed owner
        flag: Session flag guarding the run
        sellers: Seller payloads, defaults to MOCK_SELLERS
        cars: Car payloads without seller_id, defaults to MOCK_CARS
    """

    def __init__(
        self,
        client: DataClient,
        flag: SessionFlag,
        sellers: Optional[List[Dict[str, Any]]] = None,
        cars: Optional[List[Dict[str, Any]]] = None
    ):
        self.client = client
        self.flag = flag
        self.sellers = MOCK_SELLERS if sellers is None else sellers
        self.cars = MOCK_CARS if cars is None else cars

    async def run(self) -> SeedState:
        """Run the bootstrap. Never raises; failures come back in ``SeedState.error``."""
        if self.flag.is_set():
            logger.debug("Database already seeded in this session")
            return SeedState(complete=True)

        state = SeedState()
        try:
            existing = await self.client.cars.list(limit=1)
            if existing.errors:
                raise BackendError(existing.messages, "Error checking existing cars")

            if existing.data:
                logger.info("Database already has data, skipping seed")
                self.flag.set()
                state.complete = True
                return state

            logger.info("Seeding database with mock data...")

            seller_ids: List[uuid.UUID] = []
            for seller in self.sellers:
                result = await self.client.sellers.create(seller)
                if result.errors:
                    raise BackendError(result.messages, "Error creating seller")
                seller_ids.append(result.data.id)
                state.sellers_created += 1

            for index, car in enumerate(self.cars):
                result = await self.client.cars.create({**car, "seller_id": assign_seller(seller_ids, index)})
                if result.errors:
                    raise BackendError(result.messages, "Error creating car")
                state.cars_created += 1

            logger.info(
                f"Successfully seeded database with {state.cars_created} cars "
                f"and {state.sellers_created} sellers"
            )
            self.flag.set()
            state.complete = True
            state.seeded = True
            return state
        except Exception as e:
            logger.error(f"Error seeding database: {e}", exc_info=True)
            state.error = str(e) or "Unknown error during seeding"
            return state
