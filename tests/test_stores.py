"""
Tests for the entity stores: mounting, optimistic patching after confirmed
writes, and leaving local state untouched on failure.
"""

import pytest
import uuid

from carmarket.models import CarStatus, InquiryStatus
from carmarket.schemas.car import CarUpdate
from carmarket.services.data_client import ClientResult, DataClient
from carmarket.stores import Stores
from carmarket.repositories import InquiryRepository
from carmarket.utils.exceptions import NOT_AUTHORIZED, NOT_FOUND, BackendError


def car_payload(seller_id, make="Toyota") -> dict:
    return {
        "make": make,
        "model": "Yaris",
        "year": 2022,
        "price": 15000,
        "mileage": 1000,
        "status": CarStatus.AVAILABLE,
        "seller_id": seller_id,
    }


class ExplodingClient:
    """ModelClient stand-in whose every call raises."""

    entity = "Car"

    async def list(self, filter=None, limit=None):
        raise ConnectionError("network down")

    async def get(self, id):
        raise ConnectionError("network down")

    async def create(self, fields):
        raise ConnectionError("network down")

    async def update(self, fields):
        raise ConnectionError("network down")

    async def delete(self, id):
        raise ConnectionError("network down")


class TestMount:
    """Test initial listing."""

    @pytest.mark.asyncio
    async def test_mount_lists_records(self, stores: Stores, test_car):
        assert stores.cars.loading is True

        await stores.cars.mount()

        assert stores.cars.loading is False
        assert stores.cars.error is None
        assert [car.id for car in stores.cars.items] == [test_car.id]

    @pytest.mark.asyncio
    async def test_mount_all(self, stores: Stores, test_car):
        await stores.mount()

        assert len(stores.cars.items) == 1
        assert len(stores.sellers.items) == 1
        assert stores.inquiries.items == []

    @pytest.mark.asyncio
    async def test_refresh_failure_keeps_items(self, stores: Stores, test_car):
        await stores.cars.mount()
        items = stores.cars.items

        stores.cars.client = ExplodingClient()
        await stores.cars.refresh()

        assert stores.cars.items is items
        assert isinstance(stores.cars.error, ConnectionError)
        assert stores.cars.loading is False

    @pytest.mark.asyncio
    async def test_invalidate_relists(self, stores: Stores, client: DataClient, test_seller):
        await stores.mount("cars")
        assert stores.cars.items == []

        await client.cars.create(car_payload(test_seller.id))
        await stores.invalidate("cars")

        assert len(stores.cars.items) == 1


class TestCarStore:
    """Test car mutations."""

    @pytest.mark.asyncio
    async def test_create_appends_to_new_list(self, stores: Stores, test_seller):
        await stores.cars.mount()
        before = stores.cars.items

        car = await stores.cars.create(car_payload(test_seller.id))

        assert car is not None
        assert stores.cars.items is not before
        assert stores.cars.items[-1].id == car.id

    @pytest.mark.asyncio
    async def test_create_failure_leaves_list_untouched(self, guest_client: DataClient, test_seller, test_car):
        stores = Stores(guest_client)
        await stores.cars.mount()
        before = stores.cars.items

        result = await stores.cars.create(car_payload(test_seller.id))

        assert result is None
        assert stores.cars.items is before
        assert isinstance(stores.cars.error, BackendError)
        assert "Not authorized to create Car" in str(stores.cars.error)

    @pytest.mark.asyncio
    async def test_update_replaces_matching_record(self, stores: Stores, test_seller):
        first = await stores.cars.create(car_payload(test_seller.id, make="First"))
        second = await stores.cars.create(car_payload(test_seller.id, make="Second"))

        updated = await stores.cars.update(first.id, CarUpdate(status=CarStatus.SOLD))

        assert updated.status == CarStatus.SOLD
        assert [car.id for car in stores.cars.items] == [first.id, second.id]
        assert stores.cars.items[0].status == CarStatus.SOLD
        assert stores.cars.items[1].status == CarStatus.AVAILABLE

    @pytest.mark.asyncio
    async def test_update_failure_leaves_list_untouched(self, stores: Stores, test_car):
        await stores.cars.mount()
        before = stores.cars.items

        result = await stores.cars.update(uuid.uuid4(), {"price": 100.0})

        assert result is None
        assert stores.cars.items is before
        assert "Car not found" in str(stores.cars.error)

    @pytest.mark.asyncio
    async def test_delete_removes_record(self, stores: Stores, test_car):
        await stores.cars.mount()

        assert await stores.cars.delete(test_car.id) is True
        assert stores.cars.items == []

    @pytest.mark.asyncio
    async def test_delete_failure_leaves_list_untouched(self, stores: Stores, test_car):
        await stores.cars.mount()
        before = stores.cars.items
        stores.cars.client = ExplodingClient()

        assert await stores.cars.delete(test_car.id) is False
        assert stores.cars.items is before
        assert len(before) == 1
        assert isinstance(stores.cars.error, ConnectionError)

    @pytest.mark.asyncio
    async def test_returned_errors_count_as_failure(self, stores: Stores, test_car):
        class ErrorClient(ExplodingClient):
            async def update(self, fields):
                return ClientResult.failure("Conflict")

        await stores.cars.mount()
        before = stores.cars.items
        stores.cars.client = ErrorClient()

        assert await stores.cars.update(test_car.id, {"price": 1.0}) is None
        assert stores.cars.items is before
        assert str(stores.cars.error) == "Failed to update Car: Conflict"

    @pytest.mark.asyncio
    async def test_failure_keeps_error_code(self, stores: Stores, test_car):
        missing = await stores.cars.update(uuid.uuid4(), {"price": 1.0})

        assert missing is None
        assert stores.cars.error.code == NOT_FOUND

    @pytest.mark.asyncio
    async def test_get_does_not_touch_items(self, stores: Stores, test_car):
        before = stores.cars.items

        car = await stores.cars.get(test_car.id)

        assert car.id == test_car.id
        assert car.seller.id == test_car.seller_id
        assert stores.cars.items is before
        assert stores.cars.error is None

    @pytest.mark.asyncio
    async def test_get_missing_is_not_an_error(self, stores: Stores):
        assert await stores.cars.get(uuid.uuid4()) is None
        assert stores.cars.error is None

    @pytest.mark.asyncio
    async def test_get_failure_records_error(self, stores: Stores, test_car):
        stores.cars.client = ExplodingClient()

        assert await stores.cars.get(test_car.id) is None
        assert isinstance(stores.cars.error, ConnectionError)


class TestSellerStore:
    """Test seller creation and email lookup."""

    @pytest.mark.asyncio
    async def test_find_by_email_exact(self, stores: Stores, test_seller):
        await stores.sellers.mount()

        assert stores.sellers.find_by_email("jane@example.com").id == test_seller.id
        assert stores.sellers.find_by_email("JANE@example.com") is None

    @pytest.mark.asyncio
    async def test_create(self, stores: Stores):
        await stores.sellers.mount()

        seller = await stores.sellers.create({"name": "A", "email": "a@b.com", "phone": "555"})

        assert stores.sellers.find_by_email("a@b.com") == seller


class TestInquiryStore:
    """Test inquiry creation and status transitions."""

    @pytest.mark.asyncio
    async def test_create_and_update_status(self, stores: Stores, test_car):
        await stores.inquiries.mount()

        inquiry = await stores.inquiries.create({
            "car_id": test_car.id,
            "buyer_name": "Bob",
            "buyer_email": "bob@example.com",
            "message": "Is it still available?",
            "status": InquiryStatus.NEW,
        })
        assert inquiry.status == InquiryStatus.NEW

        responded = await stores.inquiries.update_status(inquiry.id, InquiryStatus.RESPONDED)

        assert responded.status == InquiryStatus.RESPONDED
        assert stores.inquiries.items == [responded]

    @pytest.mark.asyncio
    async def test_update_status_other_owner_denied(self, db_session, other_owner, stores: Stores, test_car):
        inquiry = await stores.inquiries.create({
            "car_id": test_car.id,
            "buyer_name": "Bob",
            "buyer_email": "bob@example.com",
            "message": "Hello",
        })

        other = Stores(DataClient(db_session, other_owner))
        await other.inquiries.mount()
        before = other.inquiries.items

        assert await other.inquiries.update_status(inquiry.id, InquiryStatus.CLOSED) is None
        assert other.inquiries.items is before
        assert "Not authorized" in str(other.inquiries.error)
        assert other.inquiries.error.code == NOT_AUTHORIZED

    @pytest.mark.asyncio
    async def test_deleting_car_removes_its_inquiries(
        self, stores: Stores, inquiry_repository: InquiryRepository, test_car
    ):
        inquiry = await stores.inquiries.create({
            "car_id": test_car.id,
            "buyer_name": "Bob",
            "buyer_email": "bob@example.com",
            "message": "Hello",
        })

        assert await stores.cars.delete(test_car.id)

        assert await inquiry_repository.get_by_id(inquiry.id) is None
        await stores.inquiries.refresh()
        assert stores.inquiries.items == []
