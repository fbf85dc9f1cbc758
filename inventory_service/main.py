"""FastAPI application entry point"""
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from inventory_service.domain.exceptions import (
    InventoryError,
    ItemNotFoundError,
    MethodNotAllowedError,
    ValidationError,
)
from inventory_service.infrastructure.config.settings import Settings, settings as default_settings
from inventory_service.infrastructure.logging_config import RequestLoggingMiddleware, get_logger
from inventory_service.infrastructure.repositories.inventory_repository_json import JsonInventoryRepository
from inventory_service.infrastructure.storage import ensure_cache_dir
from inventory_service.presentation.api.routers import forms, inventory

logger = get_logger(__name__)

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

ERROR_STATUS = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    ItemNotFoundError: status.HTTP_404_NOT_FOUND,
    MethodNotAllowedError: status.HTTP_405_METHOD_NOT_ALLOWED,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events"""
    app_settings: Settings = app.state.settings
    logger.info(f"Starting {app_settings.APP_NAME} {app_settings.APP_VERSION}")
    logger.info(f"Cache directory: {app_settings.cache_path.resolve()}")
    try:
        yield
    finally:
        logger.info("Shutting down application")


async def inventory_error_handler(request: Request, exc: InventoryError) -> JSONResponse:
    """Translate domain errors into JSON error bodies"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    for exc_type, code in ERROR_STATUS.items():
        if isinstance(exc, exc_type):
            status_code = code
            break
    return JSONResponse(status_code=status_code, content={"error": exc.message})


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies are client errors like any missing field"""
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application around a JSON-backed inventory store

    The cache directory is created and the store loaded before the app is
    returned, so an unusable cache directory fails here with OSError.
    """
    app_settings = app_settings or default_settings

    ensure_cache_dir(app_settings.cache_path)
    repository = JsonInventoryRepository(app_settings.inventory_path)
    repository.load()

    app = FastAPI(
        title=app_settings.APP_NAME,
        description=app_settings.DESCRIPTION,
        version=app_settings.APP_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.inventory_repository = repository

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    app.add_exception_handler(InventoryError, inventory_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    app.include_router(inventory.router)
    app.include_router(forms.router)

    # Must stay last: anything the routers above did not match
    @app.api_route("/{path:path}", methods=ALL_METHODS, include_in_schema=False)
    async def method_not_allowed(path: str):
        raise MethodNotAllowedError()

    return app
