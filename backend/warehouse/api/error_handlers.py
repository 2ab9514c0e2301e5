"""Error Handlers — global exception handlers for the inventory API.

Invariants:
    - InventoryError → Err envelope with the error's own http status
    - RequestValidationError → 400 Err envelope with field-level validationErrors
    - HTTPException (unknown route, wrong method) → Err envelope, same status
    - Exception (catch-all) → opaque 500, never leaks internal details

Design Decisions:
    - Four-layer handler: domain, request parsing, routing, catch-all
    - Handlers live here, registration is one call from main.py
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from warehouse.core.envelope import Err
from warehouse.core.errors import InventoryError, INTERNAL_ERROR_MESSAGE

logger = logging.getLogger(__name__)

_LOCATION_PREFIXES = ("body", "query", "path", "header")


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_inventory_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_inventory_error_handler(app: FastAPI) -> None:
    """Register inventory domain/store error handler."""

    @app.exception_handler(InventoryError)
    async def inventory_error_handler(request: Request, exc: InventoryError):
        """Handle all inventory domain/store errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"InventoryError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "item_id": exc.context.item_id,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register request parsing error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle malformed bodies and wrongly-typed parameters."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing error handler (404 unknown route, 405 wrong method)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            message = f"Route {request.url.path} not found"
        else:
            message = str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content=Err(error=message).to_response(),
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "error_code": "INTERNAL_ERROR"},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=Err(error=INTERNAL_ERROR_MESSAGE).to_response(),
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build the 400 envelope, one message per offending field."""
    errors: dict[str, str] = {}
    for e in exc.errors():
        loc = [str(part) for part in e["loc"]]
        field = ".".join(p for p in loc if p not in _LOCATION_PREFIXES) or ".".join(loc)
        errors.setdefault(field, e["msg"])
    return Err(
        error="Invalid request data", validation_errors=errors,
    ).to_response()
