"""
Custom exception classes for the car marketplace.
HTTP-facing exceptions carry status codes; BackendError wraps errors returned by the data client.
"""

from typing import Any, Dict, Optional, List
from fastapi import HTTPException, status

# Data client error codes
NOT_AUTHORIZED = "NOT_AUTHORIZED"
NOT_FOUND = "NOT_FOUND"
MISSING_REFERENCE = "MISSING_REFERENCE"
INVALID_INPUT = "INVALID_INPUT"
BACKEND_ERROR = "BACKEND_ERROR"


class APIException(HTTPException):
    """Base API exception class."""

    def __init__(
        self,
        status_code: int,
        detail: str,
        error_code: Optional[str] = None,
        headers: Optional[Dict[str, Any]] = None
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.error_code = error_code


class ValidationError(APIException):
    """Validation error exception with optional field-level messages."""

    def __init__(
        self,
        detail: str,
        field_errors: Optional[List[Dict[str, str]]] = None
    ):
        super().__init__(
            status_code=422,
            detail=detail,
            error_code="VALIDATION_ERROR"
        )
        self.field_errors = field_errors or []


class NotFoundError(APIException):
    """Resource not found exception."""

    def __init__(self, resource: str, resource_id: Optional[str] = None):
        detail = f"{resource} not found"
        if resource_id:
            detail += f" with ID: {resource_id}"

        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
            error_code="NOT_FOUND"
        )


class UnauthorizedError(APIException):
    """Authentication required exception."""

    def __init__(self, detail: str = "Authentication required"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            error_code="UNAUTHORIZED",
            headers={"WWW-Authenticate": "Bearer"}
        )


class ForbiddenError(APIException):
    """Access forbidden exception."""

    def __init__(self, detail: str = "Access forbidden"):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail,
            error_code="FORBIDDEN"
        )


class BadRequestError(APIException):
    """Bad request exception."""

    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            error_code="BAD_REQUEST"
        )


class TokenExpiredError(UnauthorizedError):
    """JWT token or API key expired exception."""

    def __init__(self, detail: str = "Token has expired"):
        super().__init__(detail)


class InvalidTokenError(UnauthorizedError):
    """Invalid JWT token or API key exception."""

    def __init__(self, detail: str = "Invalid token"):
        super().__init__(detail)


class CarNotFoundError(NotFoundError):
    """Car not found exception."""

    def __init__(self, car_id: Optional[str] = None):
        super().__init__("Car", car_id)


class BackendError(Exception):
    """
    Application errors returned by the data client.

    The backend reports failures as a list of messages instead of raising;
    stores and the seeding bootstrap wrap them in this exception so they can
    be held as a single error value.
    """

    def __init__(
        self,
        messages: List[str],
        context: Optional[str] = None,
        code: str = BACKEND_ERROR
    ):
        self.messages = list(messages) or ["Unknown backend error"]
        self.context = context
        self.code = code
        message = self.messages[0]
        if context:
            message = f"{context}: {message}"
        super().__init__(message)


def store_failure(entity: str, error: Optional[Exception]) -> APIException:
    """
    HTTP exception for a failed store mutation.

    Ownership refusals map to 403, missing rows to 404, everything else to 400.
    """
    message = str(error) if error else f"{entity} operation failed"
    code = getattr(error, "code", None)
    if code == NOT_AUTHORIZED:
        return ForbiddenError(message)
    if code == NOT_FOUND:
        return NotFoundError(entity)
    return BadRequestError(message)
