"""HTTP Middleware: access logging, security headers, bearer-token gate.

Invariants:
    - BearerTokenMiddleware runs before route dispatch for every path
    - A missing header, a malformed header or a wrong token all answer 401
      {"error": "Unauthorized request"}; only failures are logged
    - An empty configured token authorizes nothing
    - SecurityHeadersMiddleware never overwrites a header the handler already set
    - RequestLoggingMiddleware emits exactly one access record per request,
      "tiny" in production and "common" otherwise

Design Decisions:
    - Starlette BaseHTTPMiddleware for all three: each is a plain request → response wrapper
    - Registration order lives in main.create_app()
"""

import hmac
import logging
import time
from datetime import datetime, timezone
from typing import Callable

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)
access_logger = logging.getLogger("cardlist.access")

ACCESS_FORMAT_TINY = "tiny"
ACCESS_FORMAT_COMMON = "common"

SECURITY_HEADERS = {
    "Content-Security-Policy": (
        "default-src 'self';base-uri 'self';font-src 'self' https: data:;"
        "form-action 'self';frame-ancestors 'self';img-src 'self' data:;"
        "object-src 'none';script-src 'self';script-src-attr 'none';"
        "style-src 'self' https: 'unsafe-inline';upgrade-insecure-requests"
    ),
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Origin-Agent-Cluster": "?1",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Frame-Options": "SAMEORIGIN",
    "X-Permitted-Cross-Domain-Policies": "none",
    "X-XSS-Protection": "0",
}


def extract_bearer_token(authorization: str | None) -> str | None:
    """Second whitespace-separated token of the Authorization header, if any."""
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) < 2:
        return None
    return parts[1]


def is_authorized(authorization: str | None, api_token: str) -> bool:
    token = extract_bearer_token(authorization)
    if token is None or not api_token:
        return False
    return hmac.compare_digest(token.encode(), api_token.encode())


class BearerTokenMiddleware(BaseHTTPMiddleware):
    """Reject requests whose bearer token does not match the configured secret."""

    def __init__(self, app, api_token: str):
        super().__init__(app)
        self.api_token = api_token

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if not is_authorized(request.headers.get("authorization"), self.api_token):
            logger.error(
                f"Unauthorized request to path: {request.url.path}",
                extra={"path": request.url.path, "method": request.method},
            )
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"error": "Unauthorized request"},
            )
        return await call_next(request)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add hardening headers to every response."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response


def _client_ip(request: Request) -> str:
    # Peer address only; X-Forwarded-For is client-controlled
    return request.client.host if request.client else "-"


def _target(request: Request) -> str:
    query = request.url.query
    return f"{request.url.path}?{query}" if query else request.url.path


def format_tiny(request: Request, status_code: int, length: str, duration_ms: float) -> str:
    return f"{request.method} {_target(request)} {status_code} {length} - {duration_ms:.3f} ms"


def format_common(
    request: Request, status_code: int, length: str, when: datetime | None = None,
) -> str:
    when = when or datetime.now(timezone.utc)
    stamp = when.strftime("%d/%b/%Y:%H:%M:%S %z")
    version = request.scope.get("http_version", "1.1")
    return (
        f'{_client_ip(request)} - - [{stamp}] '
        f'"{request.method} {_target(request)} HTTP/{version}" {status_code} {length}'
    )


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Write one access-log record per request."""

    def __init__(self, app, log_format: str = ACCESS_FORMAT_COMMON):
        super().__init__(app)
        self.log_format = log_format

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            access_logger.error(
                self._line(request, 500, "-", start),
                extra={"path": request.url.path, "method": request.method, "status_code": 500},
            )
            raise
        access_logger.info(
            self._line(request, response.status_code, response.headers.get("content-length", "-"), start),
            extra={
                "path": request.url.path,
                "method": request.method,
                "status_code": response.status_code,
            },
        )
        return response

    def _line(self, request: Request, status_code: int, length: str, start: float) -> str:
        if self.log_format == ACCESS_FORMAT_TINY:
            duration_ms = (time.perf_counter() - start) * 1000.0
            return format_tiny(request, status_code, length, duration_ms)
        return format_common(request, status_code, length)
