"""
GoRestaurant Food Details API
Main entry point: screen sessions over the order composition engine
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager

import httpx

from api.routes import food_details, health
from adapters import CatalogClient, FavoriteRegistryClient, OrderSubmissionClient
from adapters.http_adapter import create_client

# Import configuration
from app.config import settings

# Import middleware
from api.middleware import (
    RequestLoggingMiddleware,
    validation_exception_handler,
    http_exception_handler,
    app_error_handler,
    general_exception_handler,
)
from app.exceptions import AppError
from services.order_composition_service import OrderCompositionService
from services.screen_registry import ScreenRegistry

# Setup logging with configured level and format
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()), format=settings.log_format
)
_logger = logging.getLogger("gorestaurant.main")


def create_screen_registry(http_client: httpx.AsyncClient) -> ScreenRegistry:
    """Wire the adapters shared by every screen into a registry."""
    catalog = CatalogClient(http_client)
    favorites = FavoriteRegistryClient(http_client)
    orders = OrderSubmissionClient(http_client) if settings.order_submission_enabled else None

    def engine_factory() -> OrderCompositionService:
        return OrderCompositionService(
            catalog=catalog,
            favorites=favorites,
            orders=orders,
            favorite_policy=settings.favorite_toggle_policy,
        )

    return ScreenRegistry(engine_factory)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for application startup and shutdown.
    Opens the catalog HTTP client and closes it on shutdown.
    """
    _logger.info(f"Starting {settings.app_name} in {settings.environment.value} mode")

    http_client = create_client()
    app.state.http_client = http_client
    app.state.screens = create_screen_registry(http_client)
    _logger.info(
        "Catalog API %s, favorite policy %s, order submission %s",
        settings.catalog_api_url,
        settings.favorite_toggle_policy.value,
        "enabled" if settings.order_submission_enabled else "disabled",
    )

    try:
        yield
    finally:
        _logger.info(f"Shutting down {settings.app_name}")
        try:
            await http_client.aclose()
            _logger.info("HTTP client closed")
        except Exception as e:
            _logger.exception("Error closing HTTP client during shutdown: %s", e)


# Create FastAPI application with enhanced configuration
app = FastAPI(
    title=settings.api_title,
    version=settings.app_version,
    description=settings.api_description,
    lifespan=lifespan,
    debug=settings.debug,
    openapi_url=(
        f"{settings.api_prefix}/openapi.json" if not settings.is_production() else None
    ),
    docs_url=f"{settings.api_prefix}/docs" if not settings.is_production() else None,
    redoc_url=f"{settings.api_prefix}/redoc" if not settings.is_production() else None,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add request logging middleware
app.add_middleware(RequestLoggingMiddleware)

# Register exception handlers
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(AppError, app_error_handler)
app.add_exception_handler(Exception, general_exception_handler)

# Include routers
app.include_router(health.router, prefix=settings.api_prefix)
app.include_router(food_details.router, prefix=settings.api_prefix)


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )
