"""
Utility modules for the car marketplace.
"""

from .auth import (
    Identity,
    create_access_token,
    create_api_key,
    verify_token,
)

from .exceptions import (
    APIException,
    ValidationError,
    NotFoundError,
    UnauthorizedError,
    ForbiddenError,
    BadRequestError,
    TokenExpiredError,
    InvalidTokenError,
    CarNotFoundError,
    BackendError,
)

# Dependencies are imported directly where needed to avoid circular imports

__all__ = [
    "Identity",
    "create_access_token",
    "create_api_key",
    "verify_token",
    "APIException",
    "ValidationError",
    "NotFoundError",
    "UnauthorizedError",
    "ForbiddenError",
    "BadRequestError",
    "TokenExpiredError",
    "InvalidTokenError",
    "CarNotFoundError",
    "BackendError",
]
