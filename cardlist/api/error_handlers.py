"""Error Handlers: global exception handlers for the Cardlist API.

Invariants:
    - Any uncaught Exception → 500 JSON; detail gated by runtime mode
    - Production never leaks internals: {"error": {"message": "server error"}}
    - Development returns {"message": ..., "error": {"type": ..., "args": [...]}}
      and logs the traceback
    - Unparseable JSON bodies are faults (500); well-formed bodies of the wrong
      shape are validation failures (400 plain text "Invalid data")
    - Route faults are answered by FaultMiddleware inside the header and CORS
      layers, so 500s carry the same headers as any other response

Design Decisions:
    - Two-layer handler: validation (Pydantic), catch-all (Exception)
    - The Exception handler is a backstop for faults raised outside FaultMiddleware
    - Not-found and missing-field cases never reach here: routes answer them directly
"""

import logging
from typing import Callable

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware

from cardlist.config import Settings

logger = logging.getLogger(__name__)

INVALID_DATA = "Invalid data"
SANITIZED_FAULT = {"error": {"message": "server error"}}


class MalformedBodyError(ValueError):
    """Request body could not be parsed as JSON."""


def register_error_handlers(app: FastAPI, settings: Settings) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_validation_error_handler(app, settings)
    _register_generic_error_handler(app, settings)


def _register_validation_error_handler(app: FastAPI, settings: Settings) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        fault = _malformed_body(exc)
        if fault is not None:
            return build_fault_response(fault, settings, request)
        logger.error(
            f"Invalid data on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path},
        )
        return PlainTextResponse(
            INVALID_DATA, status_code=status.HTTP_400_BAD_REQUEST,
        )


def _register_generic_error_handler(app: FastAPI, settings: Settings) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        return build_fault_response(exc, settings, request)


def _malformed_body(exc: RequestValidationError) -> MalformedBodyError | None:
    for error in exc.errors():
        if error.get("type") == "json_invalid":
            detail = (error.get("ctx") or {}).get("error")
            message = error.get("msg", "JSON decode error")
            return MalformedBodyError(f"{message}: {detail}" if detail else message)
    return None


def describe_error(exc: Exception) -> dict:
    """Serializable description of an exception for development responses."""
    return {
        "type": type(exc).__name__,
        "args": [str(arg) for arg in exc.args],
    }


def build_fault_response(
    exc: Exception, settings: Settings, request: Request | None = None,
) -> JSONResponse:
    """500 response for an unexpected fault."""
    path = request.url.path if request is not None else None
    if settings.is_production:
        logger.error(
            f"Unhandled exception on {path}: {exc}",
            extra={"path": path, "error_type": type(exc).__name__},
        )
        content = SANITIZED_FAULT
    else:
        logger.error(
            f"Unhandled exception on {path}: {exc}",
            exc_info=exc,
            extra={"path": path, "error_type": type(exc).__name__},
        )
        content = {"message": str(exc), "error": describe_error(exc)}
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content,
    )


class FaultMiddleware(BaseHTTPMiddleware):
    """Turn exceptions escaping route handlers into the 500 fault response."""

    def __init__(self, app, settings: Settings):
        super().__init__(app)
        self.settings = settings

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return build_fault_response(exc, self.settings, request)
