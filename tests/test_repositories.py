"""
Tests for repository classes.
Tests CRUD operations, filtering, ordering and database interactions.
"""

import pytest
import uuid

from carmarket.models import CarStatus
from carmarket.repositories import CarRepository, SellerRepository
from tests.conftest import SellerFactory, CarFactory


class TestBaseRepository:
    """Test base repository functionality through the car and seller repositories."""

    @pytest.mark.asyncio
    async def test_create(self, seller_repository: SellerRepository):
        """Test creating a record assigns id and timestamps."""
        seller = await SellerFactory.create_seller(seller_repository, email="create@example.com")

        assert seller.id is not None
        assert seller.email == "create@example.com"
        assert seller.created_at is not None
        assert seller.updated_at is not None

    @pytest.mark.asyncio
    async def test_get_by_id(self, car_repository: CarRepository, test_car):
        """Test getting a record by ID."""
        car = await car_repository.get_by_id(test_car.id)

        assert car is not None
        assert car.id == test_car.id
        assert car.seller.email == "jane@example.com"

    @pytest.mark.asyncio
    async def test_get_by_id_not_found(self, car_repository: CarRepository):
        """Test getting a non-existent record."""
        assert await car_repository.get_by_id(uuid.uuid4()) is None

    @pytest.mark.asyncio
    async def test_get_multi_insertion_order(self, car_repository: CarRepository, test_seller):
        """Test records come back oldest first."""
        makes = ["Toyota", "Honda", "Ford", "Tesla"]
        for make in makes:
            await CarFactory.create_car(car_repository, test_seller.id, make=make)

        cars = await car_repository.get_multi()

        assert [car.make for car in cars] == makes

    @pytest.mark.asyncio
    async def test_get_multi_filters_and_limit(self, car_repository: CarRepository, test_seller):
        """Test exact-match filters and limit."""
        await CarFactory.create_car(car_repository, test_seller.id, make="A", status=CarStatus.SOLD)
        await CarFactory.create_car(car_repository, test_seller.id, make="B", status=CarStatus.AVAILABLE)
        await CarFactory.create_car(car_repository, test_seller.id, make="C", status=CarStatus.AVAILABLE)

        available = await car_repository.get_multi(filters={"status": CarStatus.AVAILABLE})
        assert [car.make for car in available] == ["B", "C"]

        first = await car_repository.get_multi(limit=1)
        assert [car.make for car in first] == ["A"]

    @pytest.mark.asyncio
    async def test_get_multi_unknown_filter(self, car_repository: CarRepository):
        """Test filtering on a field the model does not have."""
        with pytest.raises(ValueError):
            await car_repository.get_multi(filters={"colour": "red"})

    @pytest.mark.asyncio
    async def test_update(self, car_repository: CarRepository, test_car):
        """Test updating only the given fields."""
        updated = await car_repository.update(test_car.id, {"price": 15500.0, "status": CarStatus.SOLD})

        assert updated is not None
        assert updated.price == 15500.0
        assert updated.status == CarStatus.SOLD
        assert updated.make == test_car.make

        reloaded = await car_repository.get_by_id(test_car.id)
        assert reloaded.price == 15500.0

    @pytest.mark.asyncio
    async def test_update_not_found(self, car_repository: CarRepository):
        """Test updating a non-existent record."""
        assert await car_repository.update(uuid.uuid4(), {"price": 1.0}) is None

    @pytest.mark.asyncio
    async def test_delete(self, car_repository: CarRepository, test_car):
        """Test deleting a record."""
        assert await car_repository.delete(test_car.id) is True
        assert await car_repository.get_by_id(test_car.id) is None
        assert await car_repository.delete(test_car.id) is False

    @pytest.mark.asyncio
    async def test_count_and_exists(self, car_repository: CarRepository, test_seller):
        """Test counting and existence checks."""
        car = await CarFactory.create_car(car_repository, test_seller.id, status=CarStatus.PENDING)
        await CarFactory.create_car(car_repository, test_seller.id)

        assert await car_repository.count() == 2
        assert await car_repository.count(filters={"status": CarStatus.PENDING}) == 1
        assert await car_repository.exists(car.id) is True
        assert await car_repository.exists(uuid.uuid4()) is False
