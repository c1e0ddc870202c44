"""
Service layer: data client, seeding bootstrap and error handling.
"""

from .data_client import ClientError, ClientResult, ModelClient, DataClient
from .seeding import SeedBootstrap, SeedState, SessionFlag
from .error_handler import ErrorHandlerService

# The sell wizard depends on carmarket.stores and is imported directly to avoid circular imports

__all__ = [
    "ClientError",
    "ClientResult",
    "ModelClient",
    "DataClient",
    "SeedBootstrap",
    "SeedState",
    "SessionFlag",
    "ErrorHandlerService",
]
