"""Error Handlers — global exception handlers for the catalog API.

Invariants:
    - CynovaError → its own http_status and {error, message?, details?} body
      (store errors included: StoreErrorKind decides the status)
    - RequestValidationError → 400 {"error": "Données invalides", "details": [...]}
    - HTTPException (unknown route, wrong method) → {error, message}
    - Exception (catch-all) → 500; the exception message is only echoed
      outside production

Design Decisions:
    - Four-layer handler: domain (CynovaError), validation (pydantic),
      routing (HTTPException), catch-all (Exception)
    - Registered from create_app() so test apps get identical behaviour
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from cynova.config import get_settings
from cynova.core.errors import CynovaError, ErrorSeverity, InvalidPayloadError
from cynova.core.validation_messages import format_errors

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register catalog domain/store error handler."""

    @app.exception_handler(CynovaError)
    async def cynova_error_handler(request: Request, exc: CynovaError):
        log = logger.error if exc.severity is ErrorSeverity.CRITICAL else logger.warning
        log(
            f"{type(exc).__name__}: {exc.error}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "resource": exc.context.resource,
                "record_id": exc.context.record_id,
            },
        )
        return JSONResponse(
            status_code=exc.http_status,
            content=exc.to_response(),
            headers=exc.headers(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        error = InvalidPayloadError(format_errors(list(exc.errors())))
        logger.warning(
            f"Validation error on {request.url.path}: {error.details}",
            extra={"error_code": error.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error.to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing-level HTTP error handler."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            content = {
                "error": "Route non trouvée",
                "message": f"La route {request.url.path} n'existe pas",
            }
        else:
            content = {"error": str(exc.detail)}
        return JSONResponse(
            status_code=exc.status_code,
            content=content,
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=build_server_error_body(exc),
        )


def build_server_error_body(exc: Exception) -> dict:
    """500 body — detail only when not in production."""
    body = {"error": "Erreur serveur"}
    if get_settings().is_production:
        body["message"] = "Une erreur est survenue"
    else:
        body["message"] = str(exc) or type(exc).__name__
    return body
