"""
Test configuration and fixtures for the car marketplace.
Provides database fixtures, test data factories, tokens and an HTTP client.
"""

import os

# Settings are read at import time; point them at an in-memory database first
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
import uuid
from typing import AsyncGenerator, Dict, Optional
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool
from httpx import AsyncClient, ASGITransport

from carmarket.main import app
from carmarket.config import settings
from carmarket.database import Base, enable_sqlite_foreign_keys, get_db
from carmarket.models import Car, Seller, CarStatus
from carmarket.repositories import CarRepository, SellerRepository, InquiryRepository
from carmarket.services.data_client import DataClient
from carmarket.stores import Stores
from carmarket.utils.auth import Identity, create_access_token, create_api_key


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

OWNER_SUBJECT = "owner-1"
OTHER_SUBJECT = "owner-2"


@pytest.fixture
async def test_engine():
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False}
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    session_factory = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False
    )
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()
            await session.close()


@pytest.fixture
async def async_client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client with database session override."""
    def override_get_db():
        return db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def no_seeding(monkeypatch):
    """Disable the first-visit seeding bootstrap."""
    monkeypatch.setattr(settings, "seed_on_first_visit", False)


# Identities and clients
@pytest.fixture
def owner() -> Identity:
    return Identity.owner(OWNER_SUBJECT, "owner@example.com")


@pytest.fixture
def other_owner() -> Identity:
    return Identity.owner(OTHER_SUBJECT, "other@example.com")


@pytest.fixture
def client(db_session: AsyncSession, owner: Identity) -> DataClient:
    """Data client acting as the default owner."""
    return DataClient(db_session, owner)


@pytest.fixture
def guest_client(db_session: AsyncSession) -> DataClient:
    return DataClient(db_session, Identity.guest())


@pytest.fixture
def stores(client: DataClient) -> Stores:
    return Stores(client)


# Repository fixtures
@pytest.fixture
def car_repository(db_session: AsyncSession) -> CarRepository:
    return CarRepository(db_session)


@pytest.fixture
def seller_repository(db_session: AsyncSession) -> SellerRepository:
    return SellerRepository(db_session)


@pytest.fixture
def inquiry_repository(db_session: AsyncSession) -> InquiryRepository:
    return InquiryRepository(db_session)


# Auth headers
@pytest.fixture
def owner_headers() -> Dict[str, str]:
    token = create_access_token(OWNER_SUBJECT, email="owner@example.com")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def other_owner_headers() -> Dict[str, str]:
    token = create_access_token(OTHER_SUBJECT, email="other@example.com")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def api_key_headers() -> Dict[str, str]:
    return {"X-API-Key": create_api_key()}


# Test data factories
class SellerFactory:
    """Factory for creating test sellers."""

    @staticmethod
    def create_seller_data(
        name: str = "Test Seller",
        email: Optional[str] = None,
        phone: str = "555-0100"
    ) -> dict:
        return {
            "name": name,
            "email": email or f"seller{uuid.uuid4().hex[:8]}@example.com",
            "phone": phone,
        }

    @staticmethod
    async def create_seller(
        seller_repo: SellerRepository,
        owner: str = OWNER_SUBJECT,
        **overrides
    ) -> Seller:
        """Create a test seller in the database."""
        data = SellerFactory.create_seller_data(**overrides)
        data["owner"] = owner
        return await seller_repo.create(data)


class CarFactory:
    """Factory for creating test cars."""

    @staticmethod
    def create_car_data(
        seller_id: uuid.UUID,
        make: str = "Toyota",
        model: str = "Corolla",
        year: int = 2021,
        price: float = 18000,
        mileage: int = 12000,
        status: Optional[CarStatus] = CarStatus.AVAILABLE,
        images: Optional[list] = None,
        description: Optional[str] = "Test car"
    ) -> dict:
        return {
            "seller_id": seller_id,
            "make": make,
            "model": model,
            "year": year,
            "price": price,
            "mileage": mileage,
            "status": status,
            "images": images,
            "description": description,
        }

    @staticmethod
    async def create_car(
        car_repo: CarRepository,
        seller_id: uuid.UUID,
        owner: str = OWNER_SUBJECT,
        **overrides
    ) -> Car:
        """Create a test car in the database."""
        data = CarFactory.create_car_data(seller_id, **overrides)
        data["owner"] = owner
        return await car_repo.create(data)


@pytest.fixture
async def test_seller(seller_repository: SellerRepository) -> Seller:
    return await SellerFactory.create_seller(seller_repository, name="Jane Seller", email="jane@example.com")


@pytest.fixture
async def test_car(car_repository: CarRepository, test_seller: Seller) -> Car:
    return await CarFactory.create_car(
        car_repository,
        test_seller.id,
        images=["https://img.example.com/1.jpg", "https://img.example.com/2.jpg"]
    )
