"""
Tests for the data client: the {data, errors} contract, ownership rules and
referential checks.
"""

import pytest
import uuid

from carmarket.models import CarStatus, InquiryStatus
from carmarket.schemas.car import CarCreate
from carmarket.services.data_client import ClientResult, DataClient
from carmarket.utils.auth import Identity
from carmarket.utils.exceptions import (
    BACKEND_ERROR,
    INVALID_INPUT,
    MISSING_REFERENCE,
    NOT_AUTHORIZED,
    NOT_FOUND,
)


def car_fields(seller_id, **overrides) -> dict:
    fields = {
        "make": "Toyota",
        "model": "Yaris",
        "year": 2022,
        "price": 15000,
        "mileage": 1000,
        "seller_id": seller_id,
    }
    fields.update(overrides)
    return fields


class TestClientResult:
    """Test the result envelope."""

    def test_failure(self):
        result = ClientResult.failure("first", "second")

        assert not result.ok
        assert result.data is None
        assert result.messages == ["first", "second"]
        assert result.code == BACKEND_ERROR

    def test_success(self):
        result = ClientResult(data=[1, 2])

        assert result.ok
        assert result.messages == []
        assert result.code is None


class TestModelClient:
    """Test list/get/create/update/delete through DataClient."""

    @pytest.mark.asyncio
    async def test_create_returns_canonical_record(self, client: DataClient):
        seller = await client.sellers.create({"name": "A", "email": "a@b.com", "phone": "555"})
        assert seller.ok
        assert seller.data.owner == "owner-1"

        car = await client.cars.create(car_fields(seller.data.id, status="AVAILABLE"))

        assert car.ok
        assert car.data.id is not None
        assert car.data.status == CarStatus.AVAILABLE
        assert car.data.images is None
        assert car.data.seller.email == "a@b.com"
        assert car.data.created_at is not None

    @pytest.mark.asyncio
    async def test_create_accepts_schema(self, client: DataClient, test_seller):
        result = await client.cars.create(CarCreate(**car_fields(test_seller.id)))

        assert result.ok
        assert result.data.status is None

    @pytest.mark.asyncio
    async def test_create_requires_owner(self, guest_client: DataClient, test_seller):
        result = await guest_client.cars.create(car_fields(test_seller.id))

        assert result.data is None
        assert result.messages == ["Not authorized to create Car"]
        assert result.code == NOT_AUTHORIZED

    @pytest.mark.asyncio
    async def test_create_validation_errors_returned(self, client: DataClient, test_seller):
        result = await client.cars.create(car_fields(test_seller.id, status="BROKEN"))

        assert not result.ok
        assert any(message.startswith("status") for message in result.messages)
        assert result.code == INVALID_INPUT

    @pytest.mark.asyncio
    async def test_create_checks_seller_reference(self, client: DataClient):
        missing = uuid.uuid4()
        result = await client.cars.create(car_fields(missing))

        assert result.messages == [f"Seller {missing} does not exist"]
        assert result.code == MISSING_REFERENCE

    @pytest.mark.asyncio
    async def test_create_inquiry_checks_car_reference(self, client: DataClient):
        missing = uuid.uuid4()
        result = await client.inquiries.create({
            "car_id": missing,
            "buyer_name": "Bob",
            "buyer_email": "bob@example.com",
            "message": "Hi",
            "status": InquiryStatus.NEW,
        })

        assert result.messages == [f"Car {missing} does not exist"]
        assert result.code == MISSING_REFERENCE

    @pytest.mark.asyncio
    async def test_list_in_insertion_order_with_limit(self, client: DataClient, test_seller):
        for make in ["One", "Two", "Three"]:
            await client.cars.create(car_fields(test_seller.id, make=make))

        everything = await client.cars.list()
        assert [car.make for car in everything.data] == ["One", "Two", "Three"]

        first = await client.cars.list(limit=1)
        assert [car.make for car in first.data] == ["One"]

    @pytest.mark.asyncio
    async def test_list_unknown_filter_is_error(self, client: DataClient):
        result = await client.cars.list(filter={"colour": "red"})

        assert not result.ok
        assert "colour" in result.messages[0]

    @pytest.mark.asyncio
    async def test_guest_can_read(self, guest_client: DataClient, test_car):
        listed = await guest_client.cars.list()
        fetched = await guest_client.cars.get(test_car.id)

        assert [car.id for car in listed.data] == [test_car.id]
        assert fetched.data.id == test_car.id

    @pytest.mark.asyncio
    async def test_get_missing_is_empty_not_error(self, client: DataClient):
        result = await client.cars.get(uuid.uuid4())

        assert result.ok
        assert result.data is None

    @pytest.mark.asyncio
    async def test_update_patches_only_given_fields(self, client: DataClient, test_car):
        result = await client.cars.update({"id": test_car.id, "status": "SOLD"})

        assert result.ok
        assert result.data.status == CarStatus.SOLD
        assert result.data.price == test_car.price

    @pytest.mark.asyncio
    async def test_update_other_owners_row_denied(self, db_session, other_owner: Identity, test_car):
        other = DataClient(db_session, other_owner)

        result = await other.cars.update({"id": test_car.id, "price": 1.0})

        assert result.messages == ["Not authorized to update Car"]
        assert result.code == NOT_AUTHORIZED

    @pytest.mark.asyncio
    async def test_update_missing_row(self, client: DataClient):
        result = await client.cars.update({"id": uuid.uuid4(), "price": 10.0})

        assert result.messages == ["Car not found"]
        assert result.code == NOT_FOUND

    @pytest.mark.asyncio
    async def test_update_invalid_price(self, client: DataClient, test_car):
        result = await client.cars.update({"id": test_car.id, "price": 0})

        assert not result.ok

    @pytest.mark.asyncio
    async def test_update_requires_id(self, client: DataClient):
        result = await client.cars.update({"price": 10.0})

        assert result.messages == ["id is required"]

    @pytest.mark.asyncio
    async def test_sellers_do_not_support_update(self, client: DataClient, test_seller):
        result = await client.sellers.update({"id": test_seller.id, "name": "New"})

        assert result.messages == ["Seller does not support updates"]

    @pytest.mark.asyncio
    async def test_delete_returns_deleted_record(self, client: DataClient, test_car):
        result = await client.cars.delete(test_car.id)

        assert result.ok
        assert result.data.id == test_car.id
        assert (await client.cars.get(test_car.id)).data is None

    @pytest.mark.asyncio
    async def test_delete_by_guest_denied(self, guest_client: DataClient, test_car):
        result = await guest_client.cars.delete(test_car.id)

        assert result.messages == ["Not authorized to delete Car"]

