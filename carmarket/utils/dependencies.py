"""
FastAPI dependency injection utilities.
Resolves the caller identity, builds the per-request data client and stores,
and runs the first-visit seeding bootstrap.
"""

from typing import Optional
from fastapi import Depends, Header, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from jose import JWTError
from jose.exceptions import ExpiredSignatureError
import logging

from carmarket.config import settings
from carmarket.database import get_db
from carmarket.services.data_client import DataClient
from carmarket.services.seeding import SeedBootstrap, SeedState, SessionFlag
from carmarket.stores import Stores
from carmarket.utils.auth import Identity, API_KEY_TYPE, ACCESS_TOKEN_TYPE, verify_token
from carmarket.utils.exceptions import (
    UnauthorizedError,
    InvalidTokenError,
    TokenExpiredError
)

logger = logging.getLogger(__name__)

# HTTP Bearer token security scheme
security = HTTPBearer(auto_error=False)


def _decode(token: str, token_type: str) -> Identity:
    try:
        return Identity.from_payload(verify_token(token, token_type))
    except ExpiredSignatureError:
        if token_type == API_KEY_TYPE:
            raise TokenExpiredError("API key has expired")
        raise TokenExpiredError()
    except JWTError as e:
        logger.debug(f"Rejected {token_type} token: {e}")
        if token_type == API_KEY_TYPE:
            raise InvalidTokenError("Invalid API key")
        raise InvalidTokenError()


async def get_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    x_api_key: Optional[str] = Header(None, alias="X-API-Key")
) -> Identity:
    """
    Resolve the caller.

    A bearer access token identifies an owner; otherwise an API key admits a
    guest reader. Without either, guests are admitted only when
    ``require_api_key`` is off.

    Raises:
        UnauthorizedError: If no credentials are given and an API key is required
        TokenExpiredError: If the token or API key has expired
        InvalidTokenError: If the token or API key does not verify
    """
    if credentials:
        return _decode(credentials.credentials, ACCESS_TOKEN_TYPE)
    if x_api_key:
        return _decode(x_api_key, API_KEY_TYPE)
    if settings.require_api_key:
        raise UnauthorizedError("API key or access token required")
    return Identity.guest()


async def get_current_owner(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> Identity:
    """
    Require a signed-in owner.

    Raises:
        UnauthorizedError: If no bearer token is given
    """
    if not credentials:
        raise UnauthorizedError("Sign in required")
    return _decode(credentials.credentials, ACCESS_TOKEN_TYPE)


async def get_data_client(
    db: AsyncSession = Depends(get_db),
    identity: Identity = Depends(get_identity)
) -> DataClient:
    return DataClient(db, identity)


async def get_owner_client(
    db: AsyncSession = Depends(get_db),
    identity: Identity = Depends(get_current_owner)
) -> DataClient:
    return DataClient(db, identity)


async def get_stores(client: DataClient = Depends(get_data_client)) -> Stores:
    """Unmounted stores; views mount the ones they render."""
    return Stores(client)


async def get_owner_stores(client: DataClient = Depends(get_owner_client)) -> Stores:
    return Stores(client)


async def get_seed_state(
    request: Request,
    db: AsyncSession = Depends(get_db),
    identity: Identity = Depends(get_identity)
) -> SeedState:
    """
    Run the first-visit seeding bootstrap for this browser session.

    Seed rows are written as the configured seed owner, independent of the
    caller; the caller only has to be admitted to read pages.
    """
    if not settings.seed_on_first_visit:
        return SeedState(complete=True)
    client = DataClient(db, Identity.owner(settings.seed_owner))
    return await SeedBootstrap(client, SessionFlag(request.session)).run()
