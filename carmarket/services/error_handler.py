"""
Error handling service for consistent error response formatting and logging.
Every error leaving the API has the shape {"error": {code, message, timestamp, request_id, details?}}.
"""

from typing import Dict, Any, Optional, List, Union
from datetime import datetime, timezone
from fastapi import Request, HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError, IntegrityError
from pydantic import ValidationError as PydanticValidationError
from carmarket.utils.exceptions import APIException, ValidationError
import logging
import uuid

logger = logging.getLogger(__name__)


class ErrorHandlerService:
    """
    Formats and logs errors consistently across the application.
    """

    @staticmethod
    def format_error_response(
        error_code: str,
        message: str,
        details: Optional[List[Dict[str, Any]]] = None,
        request_id: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Format error response in a consistent structure.

        Args:
            error_code: Error code identifier
            message: Human-readable error message
            details: Optional list of detailed error information
            request_id: Optional request identifier for tracking

        Returns:
            Formatted error response dictionary
        """
        response = {
            "error": {
                "code": error_code,
                "message": message,
                "timestamp": ErrorHandlerService._get_current_timestamp(),
            }
        }

        if details:
            response["error"]["details"] = details

        if request_id:
            response["error"]["request_id"] = request_id

        return response

    @staticmethod
    def handle_api_exception(
        exception: APIException,
        request: Optional[Request] = None
    ) -> JSONResponse:
        """Handle custom API exceptions with structured response."""
        request_id = ErrorHandlerService._request_id(request)

        logger.warning(
            f"API Exception [{request_id}]: {exception.error_code} - {exception.detail}",
            extra={
                "error_code": exception.error_code,
                "status_code": exception.status_code,
                "request_id": request_id,
                "path": request.url.path if request else None
            }
        )

        details = exception.field_errors if isinstance(exception, ValidationError) else None
        error_response = ErrorHandlerService.format_error_response(
            error_code=exception.error_code or "API_ERROR",
            message=exception.detail,
            details=details,
            request_id=request_id
        )

        return JSONResponse(
            status_code=exception.status_code,
            content=error_response,
            headers=exception.headers
        )

    @staticmethod
    def handle_validation_error(
        exception: Union[RequestValidationError, PydanticValidationError],
        request: Optional[Request] = None
    ) -> JSONResponse:
        """Handle request/pydantic validation errors with field information."""
        request_id = ErrorHandlerService._request_id(request)

        validation_details = []
        for error in exception.errors():
            validation_details.append({
                "field": " -> ".join(str(loc) for loc in error["loc"]),
                "message": error["msg"],
                "type": error["type"],
            })

        logger.warning(
            f"Validation Error [{request_id}]: {len(validation_details)} field errors",
            extra={
                "error_count": len(validation_details),
                "request_id": request_id,
                "path": request.url.path if request else None,
            }
        )

        error_response = ErrorHandlerService.format_error_response(
            error_code="VALIDATION_ERROR",
            message="Request validation failed",
            details=validation_details,
            request_id=request_id
        )

        return JSONResponse(status_code=422, content=jsonable_encoder(error_response))

    @staticmethod
    def handle_database_error(
        exception: SQLAlchemyError,
        request: Optional[Request] = None
    ) -> JSONResponse:
        """Handle database errors that escaped the data client."""
        request_id = ErrorHandlerService._request_id(request)

        if isinstance(exception, IntegrityError):
            error_code = "INTEGRITY_ERROR"
            message = "Data integrity constraint violation"
            status_code = 409
        else:
            error_code = "DATABASE_ERROR"
            message = "Database operation failed"
            status_code = 500

        logger.error(
            f"Database Error [{request_id}]: {error_code} - {str(exception)}",
            extra={
                "error_code": error_code,
                "request_id": request_id,
                "path": request.url.path if request else None,
                "exception_type": type(exception).__name__
            },
            exc_info=True
        )

        return JSONResponse(
            status_code=status_code,
            content=ErrorHandlerService.format_error_response(
                error_code=error_code,
                message=message,
                request_id=request_id
            )
        )

    @staticmethod
    def handle_http_exception(
        exception: HTTPException,
        request: Optional[Request] = None
    ) -> JSONResponse:
        """Handle framework HTTP exceptions (404 routes, 405 methods, ...)."""
        request_id = ErrorHandlerService._request_id(request)

        logger.warning(
            f"HTTP Exception [{request_id}]: {exception.status_code} - {exception.detail}",
            extra={
                "status_code": exception.status_code,
                "request_id": request_id,
                "path": request.url.path if request else None
            }
        )

        return JSONResponse(
            status_code=exception.status_code,
            content=ErrorHandlerService.format_error_response(
                error_code=f"HTTP_{exception.status_code}",
                message=str(exception.detail),
                request_id=request_id
            ),
            headers=getattr(exception, "headers", None)
        )

    @staticmethod
    def handle_unexpected_error(
        exception: Exception,
        request: Optional[Request] = None
    ) -> JSONResponse:
        """Handle unexpected errors without exposing internals."""
        request_id = ErrorHandlerService._request_id(request)

        logger.error(
            f"Unexpected Error [{request_id}]: {type(exception).__name__} - {str(exception)}",
            extra={
                "request_id": request_id,
                "path": request.url.path if request else None,
                "exception_type": type(exception).__name__,
            },
            exc_info=True
        )

        return JSONResponse(
            status_code=500,
            content=ErrorHandlerService.format_error_response(
                error_code="INTERNAL_SERVER_ERROR",
                message="An unexpected error occurred. Please try again later.",
                request_id=request_id
            )
        )

    @staticmethod
    def _request_id(request: Optional[Request]) -> str:
        """Request ID assigned by the request logging middleware, or a fresh one."""
        if request is not None:
            request_id = getattr(request.state, "request_id", None)
            if request_id:
                return request_id
        return str(uuid.uuid4())[:8]

    @staticmethod
    def _get_current_timestamp() -> str:
        return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
