"""
FastAPI application entry point.
Main application setup and configuration.
"""

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware
from contextlib import asynccontextmanager
from sqlalchemy.exc import SQLAlchemyError
from pydantic import ValidationError as PydanticValidationError
import logging

from carmarket.config import settings
from carmarket.database import create_tables, test_database_connection, close_db_connection
from carmarket.routers import home_router, cars_router, inquiries_router, sell_router
from carmarket.utils.exceptions import APIException
from carmarket.services.error_handler import ErrorHandlerService
from carmarket.middleware import RequestLoggingMiddleware

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.environment}")

    db_connected = await test_database_connection()
    if db_connected:
        await create_tables()
    else:
        logger.error("Failed to connect to database on startup")

    yield

    logger.info("Shutting down application")
    await close_db_connection()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    A car marketplace: browse listings, send inquiries to sellers and list a car for sale.

    ## Authentication

    Reading pages requires an `X-API-Key` header carrying a guest API key.
    Sending inquiries, the sell wizard and owner edits require an access token
    in the Authorization header as `Bearer <token>`.
    Both are issued with `python manage.py issue-api-key` / `issue-token`.
    """,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=[
        {"name": "Pages", "description": "Home page"},
        {"name": "Cars", "description": "Car listings, details and inquiries"},
        {"name": "Inquiries", "description": "Buyer inquiries for owners"},
        {"name": "Sell", "description": "Two-step sell wizard"},
        {"name": "Health", "description": "Service health"},
    ],
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID", "X-Processing-Time"],
)

# No max_age: the cookie, and the seeding flag in it, ends with the browser session
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.session_secret_key,
    session_cookie=settings.session_cookie_name,
    max_age=None,
    same_site="lax",
    https_only=settings.is_production,
)

app.add_middleware(
    RequestLoggingMiddleware,
    enable_request_logging=settings.debug,
    slow_request_threshold=2.0,
)

app.include_router(home_router)
app.include_router(cars_router)
app.include_router(inquiries_router)
app.include_router(sell_router)


# Global exception handlers using ErrorHandlerService
@app.exception_handler(APIException)
async def api_exception_handler(request: Request, exc: APIException):
    """Handle custom API exceptions with structured error responses."""
    return ErrorHandlerService.handle_api_exception(exc, request)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle FastAPI request validation errors with detailed field information."""
    return ErrorHandlerService.handle_validation_error(exc, request)


@app.exception_handler(PydanticValidationError)
async def pydantic_validation_exception_handler(request: Request, exc: PydanticValidationError):
    """Handle Pydantic validation errors with detailed field information."""
    return ErrorHandlerService.handle_validation_error(exc, request)


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    """Handle database errors with appropriate error responses."""
    return ErrorHandlerService.handle_database_error(exc, request)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions (unknown routes, wrong methods) with structured error responses."""
    return ErrorHandlerService.handle_http_exception(exc, request)


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions with secure error responses."""
    return ErrorHandlerService.handle_unexpected_error(exc, request)


@app.get("/health", tags=["Health"])
async def health_check():
    """
    Health check endpoint with database connectivity test.
    Used by Docker health checks and load balancers.
    """
    db_healthy = await test_database_connection()
    if not db_healthy:
        raise HTTPException(status_code=503, detail="Database connection failed")

    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
        "database": "connected"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "carmarket.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
