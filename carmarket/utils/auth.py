"""
Token utilities for the authorization contract.
Owners authenticate with bearer access tokens; guests read with time-limited API keys.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
from jose import JWTError, jwt
from carmarket.config import settings

ACCESS_TOKEN_TYPE = "access"
API_KEY_TYPE = "api_key"
GUEST_SUBJECT = "guest"


class Identity:
    """Caller identity resolved from a bearer token or an API key."""

    def __init__(self, subject: str, email: Optional[str] = None, is_owner: bool = False):
        self.subject = subject
        self.email = email
        self.is_owner = is_owner

    @classmethod
    def guest(cls) -> "Identity":
        return cls(subject=GUEST_SUBJECT)

    @classmethod
    def owner(cls, subject: str, email: Optional[str] = None) -> "Identity":
        return cls(subject=subject, email=email, is_owner=True)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "Identity":
        """Create an identity from a decoded token payload."""
        if payload.get("type") == API_KEY_TYPE:
            return cls.guest()
        return cls.owner(payload["sub"], payload.get("email"))

    def __repr__(self) -> str:
        return f"<Identity(subject={self.subject}, owner={self.is_owner})>"


def _encode(claims: Dict[str, Any], expire: datetime) -> str:
    to_encode = dict(claims)
    to_encode.update({
        "exp": expire,
        "iat": datetime.now(timezone.utc),
    })
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def create_access_token(
    subject: str,
    email: Optional[str] = None,
    expires_delta: Optional[timedelta] = None
) -> str:
    """
    Create an owner access token.

    Args:
        subject: Stable identifier of the authenticated user
        email: Optional email claim
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT token string
    """
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    claims = {"sub": subject, "type": ACCESS_TOKEN_TYPE}
    if email:
        claims["email"] = email
    return _encode(claims, expire)


def create_api_key(expires_days: Optional[int] = None) -> str:
    """
    Create a guest API key.

    Args:
        expires_days: Lifetime in days, defaults to settings.api_key_expire_days

    Returns:
        Encoded API key string
    """
    days = settings.api_key_expire_days if expires_days is None else expires_days
    expire = datetime.now(timezone.utc) + timedelta(days=days)
    return _encode({"sub": GUEST_SUBJECT, "type": API_KEY_TYPE}, expire)


def verify_token(token: str, token_type: str = ACCESS_TOKEN_TYPE) -> Dict[str, Any]:
    """
    Verify and decode a token of the expected type.

    Args:
        token: Encoded token
        token_type: Expected "type" claim

    Returns:
        Decoded payload

    Raises:
        JWTError: If the token is malformed, expired or of the wrong type
    """
    payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])

    if payload.get("type") != token_type:
        raise JWTError(f"Invalid token type. Expected {token_type}")

    if not payload.get("sub"):
        raise JWTError("Invalid token payload")

    return payload

